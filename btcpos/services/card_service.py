from decimal import Decimal

from flask import current_app

from btcpos.exceptions import PaymentError
from btcpos.utils.currency import quantize_btc

DEMO_CARD_PREFIX = "4242"


class CardService:
    """Demo card processor: cards starting with 4242 always succeed."""

    @staticmethod
    def charge(card_number: str, amount_usd: Decimal) -> Decimal:
        """Charge the card and return the BTC amount it buys"""
        if not card_number.startswith(DEMO_CARD_PREFIX):
            raise PaymentError(
                "Payment failed. Please use a card starting with 4242 for demo."
            )

        rate = Decimal(str(current_app.config["CARD_USD_TO_BTC_RATE"]))
        btc_amount = quantize_btc(amount_usd * rate)
        if btc_amount <= 0:
            raise PaymentError("Amount is too small to add funds")
        return btc_amount
