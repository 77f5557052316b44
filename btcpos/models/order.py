from btcpos.models.base import BaseModel
from btcpos.extensions import db
from btcpos.enums import OrderStatus
from btcpos.utils.currency import btc_to_sbtc, quantize_btc
from decimal import Decimal


class Order(BaseModel):
    __tablename__ = "orders"

    vendor_id = db.Column(
        db.String(36), db.ForeignKey("users.id"), nullable=False, index=True
    )
    customer_id = db.Column(
        db.String(36), db.ForeignKey("users.id"), nullable=True, index=True
    )
    total_btc = db.Column(db.Numeric(20, 8), nullable=False)
    status = db.Column(
        db.Enum(OrderStatus, name="order_statuses"),
        default=OrderStatus.PENDING,
        nullable=False,
    )
    qr_code_data = db.Column(db.String(64), unique=True, nullable=True)

    # Relationships
    items = db.relationship(
        "OrderItem", backref="order", cascade="all, delete-orphan"
    )
    transactions = db.relationship("Transaction", backref="order")

    @property
    def total_sbtc(self):
        return btc_to_sbtc(self.total_btc)

    def calculate_total(self):
        total = sum((item.subtotal for item in self.items), Decimal("0"))
        self.total_btc = quantize_btc(total)
        return self.total_btc

    def is_paid(self) -> bool:
        return self.status == OrderStatus.COMPLETED

    def to_dict(self, include_items=False, include_products=False):
        data = super().to_dict()
        data["totalSbtc"] = float(self.total_sbtc)
        if include_items:
            data["items"] = [
                item.to_dict(include_product=include_products) for item in self.items
            ]
        return data


class OrderItem(BaseModel):
    __tablename__ = "order_items"

    order_id = db.Column(
        db.String(36),
        db.ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    product_id = db.Column(
        db.String(36),
        db.ForeignKey("products.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    quantity = db.Column(db.Integer, nullable=False)
    price_btc = db.Column(db.Numeric(20, 8), nullable=False)

    @property
    def price_sbtc(self):
        return btc_to_sbtc(self.price_btc)

    @property
    def subtotal(self):
        return self.price_btc * self.quantity

    def to_dict(self, include_product=False):
        data = super().to_dict()
        data["priceSbtc"] = float(self.price_sbtc)
        if include_product:
            data["product"] = self.product.to_dict() if self.product else None
        return data
