from dataclasses import (
    dataclass,
    fields,
)
from typing import Union

from .errors import DecodeError


Amount = Union[int, float]


@dataclass(frozen=True)
class Transfer:
    id: str
    contract_id: str
    receiver: str
    amount: Amount
    asset_id: str

    @classmethod
    def from_dict(cls, obj: dict) -> 'Transfer':
        if not isinstance(obj, dict):
            raise DecodeError(f'transfer must be an object, got {type(obj).__name__}')
        values = {}
        for field in fields(cls):
            if field.name not in obj:
                raise DecodeError(f'transfer is missing field "{field.name}"')
            value = obj[field.name]
            if field.name == 'amount':
                # bool is an int subclass
                valid = isinstance(value, (int, float)) and not isinstance(value, bool)
            else:
                valid = isinstance(value, str)
            if not valid:
                raise DecodeError(
                    f'transfer field "{field.name}" has invalid value {value!r}'
                )
            values[field.name] = value
        return cls(**values)

    def short_id(self, length: int = 6) -> str:
        return self.id[:length]

    def short_asset_id(self, length: int = 2) -> str:
        return self.asset_id[:length]
