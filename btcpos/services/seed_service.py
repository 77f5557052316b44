"""Demo accounts and catalogue for local development."""
import logging

from btcpos.models.product import Product
from btcpos.models.user import User
from btcpos.models.wallet import Wallet
from btcpos.extensions import db
from btcpos.enums import UserRole
from decimal import Decimal

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"

DEMO_PRODUCTS = [
    ("Blueberries", "Fresh organic blueberries", Decimal("0.00015")),
    ("Coffee", "Premium roast coffee", Decimal("0.00008")),
    ("Sandwich", "Delicious sandwich", Decimal("0.00012")),
]


def _get_or_create_user(email, name, role, btc_balance):
    user = User.query.filter_by(email=email).first()
    if user:
        return user, False

    user = User(email=email, name=name, role=role)
    user.set_password(DEMO_PASSWORD)
    db.session.add(user)
    db.session.flush()
    db.session.add(Wallet(user_id=user.id, btc_balance=btc_balance))
    return user, True


def seed_demo_data():
    """Create the demo vendor, its products and a demo customer.

    Safe to run repeatedly: existing accounts and products are left alone.
    """
    vendor, created = _get_or_create_user(
        "vendor@example.com", "Demo Vendor", UserRole.VENDOR, Decimal("0.5")
    )
    if created:
        logger.info("Created demo vendor")

    for name, description, price_btc in DEMO_PRODUCTS:
        if not Product.query.filter_by(vendor_id=vendor.id, name=name).first():
            db.session.add(
                Product(
                    vendor_id=vendor.id,
                    name=name,
                    description=description,
                    price_btc=price_btc,
                )
            )

    customer, created = _get_or_create_user(
        "customer@example.com", "Demo Customer", UserRole.CUSTOMER, Decimal("0.1")
    )
    if created:
        logger.info("Created demo customer")

    db.session.commit()
    return vendor, customer
