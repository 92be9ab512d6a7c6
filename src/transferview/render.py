from html import escape
from typing import Iterable

from .configs import ViewConfig
from .transfer import Transfer


COLUMNS = ('ID', 'Asset', 'Amount')

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
<div id="{container_id}">{content}</div>
</body>
</html>
"""


def format_amount(amount) -> str:
    # integral floats print like JSON numbers do in the browser, which switches
    # to exponent notation from 1e21 on
    if isinstance(amount, float) and amount.is_integer() and abs(amount) < 1e21:
        return str(int(amount))
    return str(amount)


def _label_row() -> str:
    cells = ''.join(f'<th>{label}</th>' for label in COLUMNS)
    return f'<tr>{cells}</tr>'


def render_row(transfer: Transfer, config: ViewConfig) -> str:
    return (
        '<tr>'
        f'<th>{escape(transfer.short_id(config.id_length))}</th>'
        f'<td>{escape(transfer.short_asset_id(config.asset_length))}</td>'
        f'<td>{escape(format_amount(transfer.amount))}</td>'
        '</tr>'
    )


def render_transfer_list(transfers: Iterable[Transfer], config: ViewConfig) -> str:
    """Render the transfer table with its caption.

    Header and footer carry the same labels; there is one body row per transfer.
    """
    header = f'<thead>{_label_row()}</thead>'
    footer = f'<tfoot>{_label_row()}</tfoot>'
    body = '<tbody>{}</tbody>'.format(''.join(render_row(t, config) for t in transfers))
    return (
        f'<div><div>{escape(config.caption)}</div>'
        f'<table>{header}{footer}{body}</table></div>'
    )


def render_page(content: str, config: ViewConfig) -> str:
    """Mount rendered markup as the sole content of the page container.
    """
    return PAGE_TEMPLATE.format(
        title=escape(config.caption),
        container_id=escape(config.container_id),
        content=content,
    )
