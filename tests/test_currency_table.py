import pytest

from idr_converter.models.constants import CURRENCY_DEFINITIONS
from idr_converter.models.currency import Currency, CurrencyTable


class TestCurrency:
    """Tests for the Currency value object."""

    def test_symbol_defaults_to_code(self):
        """
        Test that a currency built without a symbol displays its code.
        """
        currency = Currency("XYZ", 10.0)

        assert currency.symbol == "XYZ"
        assert currency.label == "XYZ (XYZ)"

    def test_label_includes_symbol(self):
        assert Currency("USD", 16789.0, "$").label == "USD ($)"

    @pytest.mark.parametrize("rate", [0.0, -1.0, float("inf"), float("nan")])
    def test_rejects_non_positive_or_non_finite_rate(self, rate):
        """
        Test that the rate-positivity invariant is enforced at construction.
        """
        with pytest.raises(ValueError):
            Currency("BAD", rate)

    def test_rejects_blank_code(self):
        with pytest.raises(ValueError):
            Currency("  ", 1.0)

    def test_is_immutable(self):
        currency = Currency("USD", 16789.0, "$")

        with pytest.raises(AttributeError):
            currency.rate = 1.0  # type: ignore[misc]


class TestCurrencyTable:
    """Tests for the fixed currency table."""

    def test_lists_ten_currencies_in_order(self, table):
        """
        Test that list_all returns the compiled-in table in display order.
        """
        currencies = table.list_all()

        assert len(currencies) == 10
        assert [c.code for c in currencies] == [
            "USD", "EUR", "JPY", "GBP", "AUD", "CAD", "SGD", "MYR", "THB", "CNY"
        ]

    def test_rates_and_symbols_match_definitions(self, table):
        for currency, (code, rate, symbol) in zip(table, CURRENCY_DEFINITIONS):
            assert currency.code == code
            assert currency.rate == rate
            assert currency.symbol == symbol

    def test_all_rates_positive_and_codes_unique(self, table):
        codes = table.codes()

        assert len(set(codes)) == len(codes)
        assert all(c.rate > 0 for c in table)

    def test_find_by_code(self, table):
        jpy = table.find_by_code("JPY")

        assert jpy is not None
        assert jpy.rate == 117.1
        assert jpy.symbol == "¥"

    def test_find_by_code_normalizes_case_and_whitespace(self, table):
        assert table.find_by_code(" gbp ") is table.find_by_code("GBP")

    @pytest.mark.parametrize("code", ["IDR", "XXX", "", "US"])
    def test_find_by_code_absent(self, table, code):
        assert table.find_by_code(code) is None

    def test_default_is_first_entry(self, table):
        assert table.default().code == "USD"

    def test_contains(self, table):
        assert "myr" in table
        assert "IDR" not in table
        assert 123 not in table

    def test_list_all_returns_a_copy(self, table):
        """
        Test that mutating the returned list does not touch the table.
        """
        currencies = table.list_all()
        currencies.clear()

        assert len(table) == 10

    def test_duplicate_codes_rejected(self):
        with pytest.raises(ValueError, match="duplicate"):
            CurrencyTable([Currency("USD", 1.0), Currency("usd", 2.0)])

    def test_empty_table_rejected(self):
        with pytest.raises(ValueError):
            CurrencyTable([])

    def test_from_definitions_rejects_bad_rate(self):
        with pytest.raises(ValueError):
            CurrencyTable.from_definitions([("USD", 16789.0, "$"), ("ZZZ", 0.0, "Z")])
