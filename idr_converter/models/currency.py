from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .constants import CURRENCY_DEFINITIONS


@dataclass(frozen=True)
class Currency:
    code: str
    rate: float
    symbol: str = field(default="")

    def __post_init__(self) -> None:
        if not self.code or not self.code.strip():
            raise ValueError("currency code cannot be empty")
        if not math.isfinite(self.rate) or self.rate <= 0:
            raise ValueError(f"rate must be positive, got {self.rate} for {self.code}")
        if not self.symbol:
            object.__setattr__(self, "symbol", self.code)

    @property
    def label(self) -> str:
        return f"{self.code} ({self.symbol})"


class CurrencyTable:
    """Read-only ordered table of currencies keyed by code.

    Built once from a sequence of currencies; duplicate codes are rejected so
    lookup by code is unambiguous. Codes are stored and looked up upper case.
    """

    def __init__(self, currencies: Iterable[Currency]):
        entries: Dict[str, Currency] = {}
        for currency in currencies:
            key = currency.code.upper()
            if key in entries:
                raise ValueError(f"duplicate currency code '{key}'")
            entries[key] = currency
        if not entries:
            raise ValueError("currency table cannot be empty")
        self._entries = entries

    @classmethod
    def from_definitions(
        cls, definitions: Iterable[Tuple[str, float, str]]
    ) -> "CurrencyTable":
        return cls(Currency(code, rate, symbol) for code, rate, symbol in definitions)

    def list_all(self) -> List[Currency]:
        return list(self._entries.values())

    def find_by_code(self, code: str) -> Optional[Currency]:
        if not code:
            return None
        return self._entries.get(code.strip().upper())

    def codes(self) -> List[str]:
        return list(self._entries)

    def default(self) -> Currency:
        return next(iter(self._entries.values()))

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.find_by_code(code) is not None

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


CURRENCY_TABLE = CurrencyTable.from_definitions(CURRENCY_DEFINITIONS)


def get_currency_table() -> CurrencyTable:
    return CURRENCY_TABLE
