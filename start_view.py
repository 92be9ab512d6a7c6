import sys, asyncio
from collections import defaultdict

from configparser import ConfigParser

from transferview.configs import parse_output, parse_view_config
from transferview.utils import Logger
from transferview.view import TransferView


def parse_args_config(args):
    # view.endpoint_url=http://... -> {'view': {'endpoint_url': 'http://...'}}
    config = defaultdict(dict)
    for arg in args:
        setting_path, value = arg.split('=', 1)
        section, key = setting_path.split('.', 1)
        config[section][key] = value
    return config


def write_page(page, output):
    if output:
        with open(output, 'w') as page_file:
            page_file.write(page)
    else:
        sys.stdout.write(page)
        sys.stdout.flush()


async def run(view):
    task = view.mount()
    try:
        await task
    finally:
        view.unmount()
    return view.render_page()


def main(argv=None):
    argv = sys.argv if argv is None else argv

    # Parse command line input
    if len(argv) <= 1:
        print("ERROR: Provide a *.cfg config file to initialize the transfer view.", file=sys.stderr)
        sys.exit(1)
    parser = ConfigParser()
    parser.read(argv[1])

    args_config = parse_args_config(argv[2:])
    for key, value in args_config.get('service', {}).items():
        if not parser.has_section('service'):
            parser.add_section('service')
        parser.set('service', key, value)

    view_cfg = parse_view_config(parser, args_config['view'])
    output = parse_output(parser)

    # keep stdout for the page when no output file is given
    Logger.init(view_cfg.view_id, stream=None if output else sys.stderr)

    view = TransferView(view_cfg)
    page = asyncio.run(run(view))
    write_page(page, output)
    return view


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("-- Interrupted by keyword --", file=sys.stderr)
