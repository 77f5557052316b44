from decimal import Decimal
import pytest
from btcpos.utils.currency import (
    btc_to_sbtc,
    sbtc_to_btc,
    format_btc,
    format_sbtc,
    balance_payload,
    quantize_btc,
)


class TestCurrency:
    @pytest.mark.parametrize(
        "btc, sbtc",
        [
            ("1", "10000000"),
            ("0.00015", "1500"),
            ("0.00000001", "0.1"),
            ("0", "0"),
        ],
    )
    def test_sbtc_is_btc_times_ten_million(self, btc, sbtc):
        assert btc_to_sbtc(Decimal(btc)) == Decimal(sbtc)
        assert sbtc_to_btc(Decimal(sbtc)) == Decimal(btc)

    def test_accepts_floats(self):
        assert btc_to_sbtc(0.5) == Decimal("5000000")

    def test_format_btc_uses_eight_places(self):
        assert format_btc(Decimal("0.1")) == "0.10000000"
        assert format_btc(Decimal("0.123456789")) == "0.12345679"

    def test_format_sbtc_uses_two_places(self):
        assert format_sbtc(Decimal("1500")) == "1500.00"
        assert format_sbtc(Decimal("0.125")) == "0.13"

    def test_quantize_btc(self):
        assert quantize_btc(Decimal("100") * Decimal("0.00002")) == Decimal("0.00200000")

    def test_balance_payload(self):
        assert balance_payload(Decimal("0.25")) == {
            "btc": 0.25,
            "sbtc": 2500000.0,
            "btcFormatted": "0.25000000",
            "sbtcFormatted": "2500000.00",
        }

    def test_balance_payload_of_none(self):
        assert balance_payload(None)["btcFormatted"] == "0.00000000"

    @pytest.mark.parametrize(
        "btc, expected",
        [
            ("0", "0.00000000"),
            ("0.0000001", "0.00000010"),
            ("0.00000001", "0.00000001"),
        ],
    )
    def test_format_btc_never_uses_exponent(self, btc, expected):
        assert format_btc(Decimal(btc)) == expected

    def test_format_sbtc_of_zero(self):
        assert format_sbtc(Decimal("0E-8")) == "0.00"
