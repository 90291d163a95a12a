from typing import Optional

from fastapi import APIRouter, Depends, Query

from idr_converter.core.config import Settings, get_settings
from idr_converter.core.errors import UnknownCurrencyError
from idr_converter.models.conversion import ConversionOut
from idr_converter.models.currency import CurrencyTable, get_currency_table
from idr_converter.services.conversion import convert_from_idr

router = APIRouter(prefix="/convert", tags=["convert"])


@router.get("", response_model=ConversionOut, summary="Convert an IDR amount")
async def convert_amount(
    amount: str = Query("", description="IDR amount as typed (e.g. 100000)"),
    currency: Optional[str] = Query(
        None, description="Target currency code (defaults to the configured default)"
    ),
    settings: Settings = Depends(get_settings),
    table: CurrencyTable = Depends(get_currency_table),
):
    """Validate the raw amount, then convert it to the target currency.

    The amount is taken as a string on purpose: blank, malformed and
    non-positive input are reported by the converter's own validator as a
    400 with the matching reason, not by request parsing.
    """
    code = currency or settings.default_currency
    target = table.find_by_code(code)
    if target is None:
        raise UnknownCurrencyError(code.strip().upper())
    result = convert_from_idr(amount, target)
    return ConversionOut.from_result(result)
