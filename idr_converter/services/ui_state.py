"""Converter screen state and its reducer.

The screen holds one immutable `ConverterState`; every user action is an
event folded through `reduce`, which returns a new snapshot. Nothing here
knows about HTML or HTTP, so the page router and the tests drive the exact
same transitions.

Transitions:
    AmountEdited      -> new amount if the keystroke filter accepts it,
                         result and error cleared; otherwise unchanged
    DropdownToggled   -> expanded flag set
    CurrencySelected  -> selection changed, dropdown closed, result cleared
    ConvertPressed    -> result on valid input, error message otherwise
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Union

from idr_converter.models.conversion import Invalid
from idr_converter.models.currency import Currency, CurrencyTable, get_currency_table
from idr_converter.services.conversion import convert, format_amount
from idr_converter.services.validation import accepts_keystroke_text, validate


def _default_currency() -> Currency:
    return get_currency_table().default()


@dataclass(frozen=True)
class ConverterState:
    idr_amount: str = ""
    selected_currency: Currency = field(default_factory=_default_currency)
    conversion_result: Optional[str] = None
    is_dropdown_expanded: bool = False
    error_message: Optional[str] = None


@dataclass(frozen=True)
class AmountEdited:
    text: str


@dataclass(frozen=True)
class DropdownToggled:
    expanded: bool


@dataclass(frozen=True)
class CurrencySelected:
    code: str


@dataclass(frozen=True)
class ConvertPressed:
    pass


ConverterEvent = Union[AmountEdited, DropdownToggled, CurrencySelected, ConvertPressed]


def initial_state(
    table: Optional[CurrencyTable] = None, currency_code: Optional[str] = None
) -> ConverterState:
    table = table or get_currency_table()
    selected = table.find_by_code(currency_code) if currency_code else None
    return ConverterState(selected_currency=selected or table.default())


def reduce(
    state: ConverterState,
    event: ConverterEvent,
    table: Optional[CurrencyTable] = None,
) -> ConverterState:
    if isinstance(event, AmountEdited):
        if not accepts_keystroke_text(event.text):
            return state
        return replace(
            state, idr_amount=event.text, conversion_result=None, error_message=None
        )

    if isinstance(event, DropdownToggled):
        return replace(state, is_dropdown_expanded=event.expanded)

    if isinstance(event, CurrencySelected):
        currency = (table or get_currency_table()).find_by_code(event.code)
        if currency is None:
            return state
        return replace(
            state,
            selected_currency=currency,
            is_dropdown_expanded=False,
            conversion_result=None,
        )

    if isinstance(event, ConvertPressed):
        outcome = validate(state.idr_amount)
        if isinstance(outcome, Invalid):
            return replace(state, error_message=outcome.reason, conversion_result=None)
        value = convert(outcome.amount, state.selected_currency)
        return replace(
            state,
            conversion_result=format_amount(value, state.selected_currency),
            error_message=None,
        )

    raise TypeError(f"unsupported event {event!r}")


def reduce_all(
    state: ConverterState,
    events: Iterable[ConverterEvent],
    table: Optional[CurrencyTable] = None,
) -> ConverterState:
    for event in events:
        state = reduce(state, event, table=table)
    return state


def render_status(state: ConverterState) -> Optional[str]:
    if state.error_message is not None:
        return f"Error: {state.error_message}"
    if state.conversion_result is not None:
        return f"Hasil: {state.conversion_result}"
    return None
