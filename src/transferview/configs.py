from dataclasses import dataclass


DEFAULT_ENDPOINT_URL = 'http://127.0.0.1:29987/api/graph/fuel_examples'
DEFAULT_QUERY = 'query { transfer { id contract_id receiver amount asset_id }}'
DEFAULT_PARAMS = 'b'

ID_ORDERS = ('auto', 'numeric', 'lexicographic')


@dataclass
class ViewConfig:
    # graph API endpoint and the request sent to it
    endpoint_url: str = DEFAULT_ENDPOINT_URL
    query: str = DEFAULT_QUERY
    params: str = DEFAULT_PARAMS
    timeout: float = 10.0

    # page and table layout
    container_id: str = 'transfer-list'
    caption: str = 'List of transfers'
    id_length: int = 6
    asset_length: int = 2

    # how transfer ids are compared when sorting, one of ID_ORDERS
    id_order: str = 'auto'

    # prefix of the diagnostic log lines
    view_id: str = 'transfer-view'

    def validate(self) -> None:
        if not self.endpoint_url:
            raise ValueError('endpoint_url must be provided')
        if self.timeout <= 0:
            raise ValueError(f'timeout must be positive (got {self.timeout})')
        if self.id_length <= 0 or self.asset_length <= 0:
            raise ValueError('id_length and asset_length must be positive')
        if self.id_order not in ID_ORDERS:
            raise ValueError(
                f'id_order must be one of {", ".join(ID_ORDERS)} (got {self.id_order!r})'
            )


def parse_view_config(parser, args_config={}):
    # values given on the command line win over the config file
    section = 'view'
    if not parser.has_section(section):
        parser.add_section(section)
    for key, value in args_config.items():
        parser.set(section, key, value)
    cfg = parser[section]

    config = ViewConfig(
        endpoint_url = cfg.get('endpoint_url', fallback=DEFAULT_ENDPOINT_URL),
        query = cfg.get('query', fallback=DEFAULT_QUERY),
        params = cfg.get('params', fallback=DEFAULT_PARAMS),
        timeout = cfg.getfloat('timeout', fallback=10.0),

        container_id = cfg.get('container_id', fallback='transfer-list'),
        caption = cfg.get('caption', fallback='List of transfers'),
        id_length = cfg.getint('id_length', fallback=6),
        asset_length = cfg.getint('asset_length', fallback=2),

        id_order = cfg.get('id_order', fallback='auto'),
        view_id = cfg.get('view_id', fallback='transfer-view'),
    )
    config.validate()
    return config


def parse_output(parser):
    """Return the page output path of the [service] section, None for stdout.
    """
    return parser.get('service', 'output', fallback=None) or None
