from __future__ import annotations

from fastapi import APIRouter, Depends

from idr_converter.core.errors import UnknownCurrencyError
from idr_converter.models.conversion import CurrencyOut
from idr_converter.models.currency import CurrencyTable, get_currency_table

"""Currencies router: read-only view of the fixed rate table.

Endpoints:
    - GET /currencies         -> all currencies in display order
    - GET /currencies/{code}  -> single currency (404 if not in the table)
"""

router = APIRouter(prefix="/currencies", tags=["currencies"])


@router.get("", response_model=list[CurrencyOut], summary="List supported currencies")
async def list_currencies(table: CurrencyTable = Depends(get_currency_table)):
    return [CurrencyOut.model_validate(c) for c in table.list_all()]


@router.get("/{code}", response_model=CurrencyOut, summary="Get one currency by code")
async def get_currency(code: str, table: CurrencyTable = Depends(get_currency_table)):
    currency = table.find_by_code(code)
    if currency is None:
        raise UnknownCurrencyError(code.upper())
    return CurrencyOut.model_validate(currency)
