"""BTC / sBTC conversion helpers.

sBTC is a display unit of the same balance: 1 BTC = 10,000,000 sBTC.
Balances are stored in BTC only and sBTC is derived on output.
"""
from decimal import Decimal, ROUND_HALF_UP

BTC_TO_SBTC_RATIO = Decimal("10000000")
SBTC_TO_BTC_RATIO = Decimal("0.0000001")

BTC_QUANTUM = Decimal("0.00000001")
SBTC_QUANTUM = Decimal("0.01")


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize_btc(btc) -> Decimal:
    return _to_decimal(btc).quantize(BTC_QUANTUM, rounding=ROUND_HALF_UP)


def btc_to_sbtc(btc) -> Decimal:
    return _to_decimal(btc) * BTC_TO_SBTC_RATIO


def sbtc_to_btc(sbtc) -> Decimal:
    return _to_decimal(sbtc) * SBTC_TO_BTC_RATIO


def format_btc(btc) -> str:
    return f"{quantize_btc(btc):.8f}"


def format_sbtc(sbtc) -> str:
    return f"{_to_decimal(sbtc).quantize(SBTC_QUANTUM, rounding=ROUND_HALF_UP):.2f}"


def balance_payload(btc) -> dict:
    """Render a BTC amount in both units, as numbers and as fixed strings."""
    btc = _to_decimal(btc or 0)
    sbtc = btc_to_sbtc(btc)
    return {
        "btc": float(format_btc(btc)),
        "sbtc": float(format_sbtc(sbtc)),
        "btcFormatted": format_btc(btc),
        "sbtcFormatted": format_sbtc(sbtc),
    }
