import pytest
from decimal import Decimal

from idr_converter.services.money import format2, quantize2


class TestRounding:
    """Tests for the shared half-up rounding helpers."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1.005, "1.01"),
            (2.675, "2.68"),
            (0.125, "0.13"),
            (0.004, "0.00"),
            (853.9709649871904, "853.97"),
            (1.0, "1.00"),
        ],
    )
    def test_format2_rounds_half_up(self, value, expected):
        assert format2(value) == expected

    def test_quantize2_returns_two_places(self):
        assert quantize2(3.14159) == Decimal("3.14")

    def test_quantize2_rounds_tie_up(self):
        assert quantize2(2.675) == Decimal("2.68")

    def test_large_values_are_written_out_in_full(self):
        assert format2(1e16) == "10000000000000000.00"

    def test_huge_values_do_not_overflow_context(self):
        assert format2(1e300).endswith(".00")
        assert "E" not in format2(1e300)
