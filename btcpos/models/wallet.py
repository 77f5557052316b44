from btcpos.models.base import BaseModel
from btcpos.extensions import db
from btcpos.utils.currency import btc_to_sbtc, balance_payload
from decimal import Decimal


class Wallet(BaseModel):
    """Wallet model. The BTC balance is the only ledger; sBTC is derived."""

    __tablename__ = "wallets"

    user_id = db.Column(
        db.String(36),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    btc_balance = db.Column(db.Numeric(20, 8), default=Decimal("0"), nullable=False)

    @property
    def sbtc_balance(self) -> Decimal:
        return btc_to_sbtc(self.btc_balance)

    def can_deduct(self, amount: Decimal) -> bool:
        """Check if wallet has sufficient balance"""
        return self.btc_balance >= amount

    def add_balance(self, amount: Decimal):
        """Add balance to wallet"""
        self.btc_balance += amount
        return self

    def deduct_balance(self, amount: Decimal):
        """Deduct balance from wallet"""
        if not self.can_deduct(amount):
            raise ValueError("Insufficient balance")
        self.btc_balance -= amount
        return self

    def balance(self):
        return balance_payload(self.btc_balance)

    def to_dict(self):
        data = super().to_dict()
        data["sbtcBalance"] = float(self.sbtc_balance)
        return data
