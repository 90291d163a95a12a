from __future__ import annotations

import logging

from idr_converter.models.conversion import (
    ConversionRequest,
    ConversionResult,
    Invalid,
    ValidationOutcome,
)
from idr_converter.models.currency import Currency
from idr_converter.services.money import format2
from idr_converter.services.validation import validate

"""IDR -> foreign currency conversion.

Responsibilities:
    - Divide an IDR amount by the target's rate (IDR per unit), no rounding.
    - Format for display with the shared money helpers (2 dp, half up, '.').
    - Provide a single validate-convert-format entry point for the API.
"""

logger = logging.getLogger("idr_converter.conversion")


class InvalidAmountError(ValueError):
    """Raised when raw amount input fails validation."""

    def __init__(self, outcome: Invalid):
        super().__init__(outcome.reason)
        self.outcome = outcome

    @property
    def reason(self) -> str:
        return self.outcome.reason

    @property
    def kind(self) -> str:
        return self.outcome.kind.value


def convert(amount_idr: float, target: Currency) -> float:
    return amount_idr / target.rate


def format_amount(value: float, currency: Currency) -> str:
    return f"{format2(value)} {currency.code}"


def convert_request(request: ConversionRequest) -> ConversionResult:
    value = convert(request.amount, request.target)
    display = format_amount(value, request.target)
    logger.debug(
        "converted %s IDR to %s: %s", request.amount, request.target.code, display
    )
    return ConversionResult(
        amount=request.amount,
        currency=request.target,
        value=value,
        display_text=display,
    )


def convert_from_idr(raw_input: str, target: Currency) -> ConversionResult:
    outcome: ValidationOutcome = validate(raw_input)
    if isinstance(outcome, Invalid):
        raise InvalidAmountError(outcome)
    return convert_request(ConversionRequest(amount=outcome.amount, target=target))
