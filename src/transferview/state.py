import re

from collections import Counter
from dataclasses import dataclass, replace
from typing import (
    Dict,
    Iterable,
    List,
    Tuple,
)

from .transfer import Transfer


DECIMAL_ID = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class ViewState:
    is_fetching: bool = False
    transfers: Tuple[Transfer, ...] = ()


# State transitions. Each one returns a new state and only touches its own fields.

def fetch_started(state: ViewState) -> ViewState:
    return replace(state, is_fetching=True)


def fetch_succeeded(state: ViewState, transfers: Iterable[Transfer]) -> ViewState:
    return replace(state, transfers=tuple(transfers), is_fetching=False)


def fetch_failed(state: ViewState) -> ViewState:
    return replace(state, is_fetching=False)


def fetch_cancelled(state: ViewState) -> ViewState:
    return replace(state, is_fetching=False)


def tally_assets(transfers: Iterable[Transfer]) -> Dict[str, int]:
    """Number of transfers per asset id.
    """
    return dict(Counter(t.asset_id for t in transfers))


def _parse_int(value: str):
    # plain decimal digits with an optional minus sign, no "+", blanks or "_"
    if not DECIMAL_ID.fullmatch(value):
        return None
    return int(value)


def id_sort_key(order: str, ids: List[str]):
    """Resolve the sort key for transfer ids.

    'lexicographic' compares ids as strings. 'numeric' compares ids as base-10
    integers, ids that do not parse go after all numeric ones in string order.
    'auto' is numeric when every id parses and lexicographic otherwise.
    """
    if order == 'auto':
        order = 'numeric' if all(_parse_int(i) is not None for i in ids) else 'lexicographic'

    if order == 'lexicographic':
        return lambda transfer: transfer.id
    if order == 'numeric':
        def numeric_key(transfer):
            number = _parse_int(transfer.id)
            if number is None:
                return (1, 0, transfer.id)
            return (0, number, '')
        return numeric_key
    raise ValueError(f'unknown id order: {order!r}')


def sort_transfers(transfers: Iterable[Transfer], order: str = 'auto') -> List[Transfer]:
    transfers = list(transfers)
    key = id_sort_key(order, [t.id for t in transfers])
    return sorted(transfers, key=key)
