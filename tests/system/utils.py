def file_read(file_path):
    with open(file_path) as file:
        return file.read()


def file_write(file_path, data):
    with open(file_path, 'w') as file:
        file.write(data)


def write_config(file_path, sections):
    lines = []
    for section, settings in sections.items():
        lines.append(f'[{section}]')
        lines.extend(f'{key} = {value}' for key, value in settings.items())
        lines.append('')
    file_write(file_path, '\n'.join(lines))
