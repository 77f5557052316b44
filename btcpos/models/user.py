from btcpos.models.base import BaseModel
from btcpos.extensions import db
from btcpos.enums import UserRole
import bcrypt

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class User(BaseModel):
    __tablename__ = "users"

    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(255), nullable=False)
    role = db.Column(db.Enum(UserRole, name="user_roles"), nullable=False)

    # Relationships
    wallet = db.relationship(
        "Wallet", backref="user", uselist=False, cascade="all, delete-orphan"
    )
    products = db.relationship(
        "Product",
        backref="vendor",
        lazy="dynamic",
        foreign_keys="Product.vendor_id",
        cascade="all, delete-orphan",
    )
    vendor_orders = db.relationship(
        "Order", backref="vendor", lazy="dynamic", foreign_keys="Order.vendor_id"
    )
    customer_orders = db.relationship(
        "Order", backref="customer", lazy="dynamic", foreign_keys="Order.customer_id"
    )

    def set_password(self, password: str):
        self.password_hash = bcrypt.hashpw(
            _password_bytes(password), bcrypt.gensalt(rounds=10)
        ).decode("utf-8")

    def check_password(self, password: str) -> bool:
        return bcrypt.checkpw(
            _password_bytes(password), self.password_hash.encode("utf-8")
        )

    def has_role(self, role: str) -> bool:
        return self.role == role

    def to_summary(self):
        """Public identity shown on the other side of a transaction"""
        return {"id": self.id, "name": self.name, "email": self.email}

    def to_dict(self, include_sensitive=False, include_wallet=False):
        data = super().to_dict()
        if not include_sensitive:
            data.pop("passwordHash", None)
        if include_wallet:
            data["wallet"] = self.wallet.to_dict() if self.wallet else None
        return data
