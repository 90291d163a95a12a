"""Domain models for the IDR currency converter."""

from .constants import CURRENCY_DEFINITIONS  # re-export
from .currency import Currency, CurrencyTable, CURRENCY_TABLE, get_currency_table
from .conversion import (
    ConversionOut,
    ConversionRequest,
    ConversionResult,
    CurrencyOut,
    Invalid,
    Valid,
    ValidationErrorKind,
    ValidationOutcome,
)

__all__ = [
    "CURRENCY_DEFINITIONS",
    "Currency",
    "CurrencyTable",
    "CURRENCY_TABLE",
    "get_currency_table",
    "ConversionOut",
    "ConversionRequest",
    "ConversionResult",
    "CurrencyOut",
    "Invalid",
    "Valid",
    "ValidationErrorKind",
    "ValidationOutcome",
]
