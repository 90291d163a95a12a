"""Fixed currency data for the converter.

Rates are IDR per 1 unit of the foreign currency. The table is compiled in;
there is no refresh and no external source.
"""

from typing import List, Tuple

# (code, IDR per unit, display symbol); order is the display order
CURRENCY_DEFINITIONS: List[Tuple[str, float, str]] = [
    ("USD", 16789.0, "$"),
    ("EUR", 19071.0, "€"),
    ("JPY", 117.1, "¥"),
    ("GBP", 22114.70, "£"),
    ("AUD", 10640.0, "A$"),
    ("CAD", 12080.0, "C$"),
    ("SGD", 12750.0, "S$"),
    ("MYR", 3812.0, "RM"),
    ("THB", 500.3, "฿"),
    ("CNY", 2294.0, "¥"),
]

# Accepted by the amount field while typing: digits and at most one dot
KEYSTROKE_PATTERN: str = r"^\d*\.?\d*$"

MSG_EMPTY_INPUT: str = "enter an amount"
MSG_MALFORMED_NUMBER: str = "invalid number format"
MSG_NON_POSITIVE_AMOUNT: str = "amount must be greater than 0"
