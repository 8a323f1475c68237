"""Tests for the format()-aware value types."""

import pytest

from quantity.core.types import BPS, Amount, Bytes, Duration


class TestAmount:
    def test_default_format(self):
        assert f"{Amount(5001)}" == "5.00k"
        assert str(Amount(5000)) == " 5000"

    def test_width_from_format_spec(self):
        assert f"{Amount(42):6}" == "   42 "
        assert format(Amount(1000), "3") == " 1k"

    def test_repr_keeps_value(self):
        assert repr(Amount(7)) == "Amount(7)"

    def test_still_an_int(self):
        assert Amount(5) + 1 == 6
        assert Amount(5) == 5

    def test_rejects_non_width_spec(self):
        with pytest.raises(ValueError):
            f"{Amount(1):x}"


class TestBytes:
    def test_default_format(self):
        assert f"{Bytes(512)}" == "  512B"

    def test_width_from_format_spec(self):
        assert f"{Bytes(5001):6}" == "5.00kB"

    def test_is_amount(self):
        assert isinstance(Bytes(1), Amount)
        assert repr(Bytes(1)) == "Bytes(1)"


class TestDuration:
    def test_default_format(self):
        assert f"{Duration(65)}" == "1m05s"
        assert str(Duration(0.5)) == "500ms"

    def test_spec_aligns_text(self):
        assert f"{Duration(65):>7}" == "  1m05s"


class TestBPS:
    def test_default_format(self):
        assert f"{BPS(1_000_000, 2.0)}" == " 500kB/s"

    def test_width_from_format_spec(self):
        assert f"{BPS(Bytes(3000), Duration(1.5)):8}" == " 2000B/s"

    def test_is_immutable(self):
        rate = BPS(1, 1.0)
        with pytest.raises(AttributeError):
            rate.amount = 2

    def test_keyword_fields(self):
        rate = BPS(amount=3000, seconds=1.5)

        assert (rate.amount, rate.seconds) == (3000, 1.5)
        assert f"{rate:8}" == " 2000B/s"
