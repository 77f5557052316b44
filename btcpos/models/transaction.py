from btcpos.models.base import BaseModel
from btcpos.extensions import db
from btcpos.enums import TransactionType, TransactionStatus
from btcpos.utils.currency import btc_to_sbtc


class Transaction(BaseModel):
    """Immutable record of a balance movement between two users.

    Card top-ups are recorded with the same user as sender and receiver.
    """

    __tablename__ = "transactions"

    sender_id = db.Column(
        db.String(36), db.ForeignKey("users.id"), nullable=False, index=True
    )
    receiver_id = db.Column(
        db.String(36), db.ForeignKey("users.id"), nullable=False, index=True
    )
    amount_btc = db.Column(db.Numeric(20, 8), nullable=False)
    type = db.Column(db.Enum(TransactionType, name="transaction_types"), nullable=False)
    status = db.Column(
        db.Enum(TransactionStatus, name="transaction_statuses"),
        default=TransactionStatus.PENDING,
        nullable=False,
    )
    order_id = db.Column(
        db.String(36),
        db.ForeignKey("orders.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    description = db.Column(db.Text)

    sender = db.relationship("User", foreign_keys=[sender_id])
    receiver = db.relationship("User", foreign_keys=[receiver_id])

    @property
    def amount_sbtc(self):
        return btc_to_sbtc(self.amount_btc)

    def to_dict(self, include_parties=False, include_order=False):
        data = super().to_dict()
        data["amountSbtc"] = float(self.amount_sbtc)
        if include_parties:
            data["sender"] = self.sender.to_summary() if self.sender else None
            data["receiver"] = self.receiver.to_summary() if self.receiver else None
        if include_order:
            data["order"] = (
                self.order.to_dict(include_items=True, include_products=True)
                if self.order
                else None
            )
        return data
