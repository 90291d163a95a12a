from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from .currency import Currency


class ValidationErrorKind(str, Enum):
    EMPTY_INPUT = "empty_input"
    MALFORMED_NUMBER = "malformed_number"
    NON_POSITIVE_AMOUNT = "non_positive_amount"


@dataclass(frozen=True)
class Valid:
    amount: float


@dataclass(frozen=True)
class Invalid:
    reason: str
    kind: ValidationErrorKind


ValidationOutcome = Union[Valid, Invalid]


@dataclass(frozen=True)
class ConversionRequest:
    amount: float
    target: Currency

    def __post_init__(self) -> None:
        if self.amount <= 0:
            raise ValueError("amount must be greater than 0")


@dataclass(frozen=True)
class ConversionResult:
    amount: float
    currency: Currency
    value: float
    display_text: str


class CurrencyOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: str
    rate: float = Field(..., gt=0, description="IDR per 1 unit of currency")
    symbol: str
    label: str


class ConversionOut(BaseModel):
    amount: float = Field(..., gt=0, description="IDR amount converted")
    currency: str
    rate: float
    value: float
    display_text: str

    @classmethod
    def from_result(cls, result: ConversionResult) -> "ConversionOut":
        return cls(
            amount=result.amount,
            currency=result.currency.code,
            rate=result.currency.rate,
            value=result.value,
            display_text=result.display_text,
        )
