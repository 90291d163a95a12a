"""Amount input validation.

`validate` maps raw text to a `ValidationOutcome` and never raises; rules are
applied in order and the first match wins:

1. blank input            -> Invalid(EMPTY_INPUT)
2. not a finite decimal   -> Invalid(MALFORMED_NUMBER)
3. value <= 0             -> Invalid(NON_POSITIVE_AMOUNT)
4. otherwise              -> Valid(amount)

A decimal here is an optional sign, digits with at most one '.' separator and
an optional exponent. Underscore grouping, ',' separators, nan and inf are
rejected even though `float()` would take some of them.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Optional

from idr_converter.models.constants import (
    KEYSTROKE_PATTERN,
    MSG_EMPTY_INPUT,
    MSG_MALFORMED_NUMBER,
    MSG_NON_POSITIVE_AMOUNT,
)
from idr_converter.models.conversion import (
    Invalid,
    Valid,
    ValidationErrorKind,
    ValidationOutcome,
)

logger = logging.getLogger("idr_converter.validation")

_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)
_KEYSTROKE_RE = re.compile(KEYSTROKE_PATTERN, re.ASCII)


def parse_amount(raw_input: str) -> Optional[float]:
    """Parse a decimal string into a finite float, or None if it is not one."""
    text = raw_input.strip()
    if not _DECIMAL_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def validate(raw_input: Optional[str]) -> ValidationOutcome:
    if raw_input is None or not raw_input.strip():
        outcome: ValidationOutcome = Invalid(MSG_EMPTY_INPUT, ValidationErrorKind.EMPTY_INPUT)
    else:
        amount = parse_amount(raw_input)
        if amount is None:
            outcome = Invalid(MSG_MALFORMED_NUMBER, ValidationErrorKind.MALFORMED_NUMBER)
        elif amount <= 0:
            outcome = Invalid(
                MSG_NON_POSITIVE_AMOUNT, ValidationErrorKind.NON_POSITIVE_AMOUNT
            )
        else:
            return Valid(amount)
    logger.info("rejected amount input: %s", outcome.kind.value)
    return outcome


def accepts_keystroke_text(text: str) -> bool:
    """Whether the amount field takes this edit (digits and a single dot)."""
    return bool(_KEYSTROKE_RE.fullmatch(text))
