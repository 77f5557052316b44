from btcpos.models.base import BaseModel
from btcpos.extensions import db
from btcpos.utils.currency import btc_to_sbtc


class Product(BaseModel):
    __tablename__ = "products"

    vendor_id = db.Column(
        db.String(36),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    price_btc = db.Column(db.Numeric(20, 8), nullable=False)
    image_url = db.Column(db.String(500))

    # Relationships
    order_items = db.relationship("OrderItem", backref="product", passive_deletes=True)

    @property
    def price_sbtc(self):
        return btc_to_sbtc(self.price_btc)

    def to_dict(self):
        data = super().to_dict()
        data["priceSbtc"] = float(self.price_sbtc)
        return data
