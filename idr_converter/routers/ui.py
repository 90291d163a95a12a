from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from idr_converter.core.config import Settings, get_settings
from idr_converter.models.currency import CurrencyTable, get_currency_table
from idr_converter.services.ui_state import (
    AmountEdited,
    ConvertPressed,
    ConverterState,
    CurrencySelected,
    initial_state,
    reduce_all,
    render_status,
)

router = APIRouter(tags=["ui"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def _page_context(
    state: ConverterState, settings: Settings, table: CurrencyTable
) -> Dict[str, Any]:
    return {
        "version": settings.version,
        "state": state,
        "currencies": table.list_all(),
        "status": render_status(state),
        "has_error": state.error_message is not None,
    }


@router.get("/ui", response_class=HTMLResponse)
async def ui_converter(
    request: Request,
    currency: Optional[str] = None,
    settings: Settings = Depends(get_settings),
    table: CurrencyTable = Depends(get_currency_table),
):
    """Blank converter screen; `?currency=` preselects a target."""
    state = initial_state(table, currency or settings.default_currency)
    return templates.TemplateResponse(
        request, "converter.html", _page_context(state, settings, table)
    )


@router.post("/ui", response_class=HTMLResponse)
async def ui_converter_submit(
    request: Request,
    amount: str = Form(""),
    currency: str = Form(""),
    settings: Settings = Depends(get_settings),
    table: CurrencyTable = Depends(get_currency_table),
):
    """Replay the submitted form as screen events and render the outcome.

    The page is stateless, so each submit starts from a fresh screen and
    folds the same events the interactive screen would see: pick the
    currency, type the amount, press convert. Amount text the keystroke
    filter would have refused never reaches the state.
    """
    state = reduce_all(
        initial_state(table, settings.default_currency),
        [CurrencySelected(currency), AmountEdited(amount.strip()), ConvertPressed()],
        table=table,
    )
    return templates.TemplateResponse(
        request, "converter.html", _page_context(state, settings, table)
    )
