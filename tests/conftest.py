import pytest
from btcpos import create_app, db
from btcpos.config import TestingConfig
from btcpos.enums import UserRole
from btcpos.models.user import User
from btcpos.models.wallet import Wallet
from btcpos.models.product import Product
from decimal import Decimal


@pytest.fixture(scope="function")
def app():
    """Create application for testing"""
    app = create_app(TestingConfig)

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Test client"""
    return app.test_client()


def _create_user(email, name, role, btc_balance):
    user = User(email=email, name=name, role=role)
    user.set_password("password123")
    db.session.add(user)
    db.session.flush()  # Flush to get user.id

    wallet = Wallet(user_id=user.id, btc_balance=Decimal(btc_balance))
    db.session.add(wallet)

    db.session.commit()
    return user


def _login(client, email):
    response = client.post(
        "/api/auth/login", json={"email": email, "password": "password123"}
    )
    assert response.status_code == 200, f"Login failed: {response.json}"
    return response.json["token"]


# User fixtures
@pytest.fixture
def customer_user(app):
    """Create a customer with 0.1 BTC"""
    return _create_user("customer@test.com", "Test Customer", UserRole.CUSTOMER, "0.1")


@pytest.fixture
def vendor_user(app):
    """Create a vendor with 0.5 BTC"""
    return _create_user("vendor@test.com", "Test Vendor", UserRole.VENDOR, "0.5")


@pytest.fixture
def other_vendor_user(app):
    """A second vendor, to check ownership rules"""
    return _create_user("other@test.com", "Other Vendor", UserRole.VENDOR, "0")


# Auth header fixtures
@pytest.fixture
def customer_headers(client, customer_user):
    return {"Authorization": f"Bearer {_login(client, 'customer@test.com')}"}


@pytest.fixture
def vendor_headers(client, vendor_user):
    return {"Authorization": f"Bearer {_login(client, 'vendor@test.com')}"}


@pytest.fixture
def other_vendor_headers(client, other_vendor_user):
    return {"Authorization": f"Bearer {_login(client, 'other@test.com')}"}


# Data fixtures
@pytest.fixture
def product(app, vendor_user):
    """Coffee at 0.00008 BTC"""
    product = Product(
        vendor_id=vendor_user.id,
        name="Coffee",
        description="Premium roast coffee",
        price_btc=Decimal("0.00008"),
    )
    db.session.add(product)
    db.session.commit()
    return product


@pytest.fixture
def second_product(app, vendor_user):
    """Sandwich at 0.00012 BTC"""
    product = Product(
        vendor_id=vendor_user.id,
        name="Sandwich",
        description="Delicious sandwich",
        price_btc=Decimal("0.00012"),
    )
    db.session.add(product)
    db.session.commit()
    return product


@pytest.fixture
def cart(product, second_product):
    """Two coffees and a sandwich: 0.00028 BTC"""
    return [
        {
            "productId": product.id,
            "quantity": 2,
            "priceBtc": 0.00008,
            "priceSbtc": 800,
        },
        {
            "productId": second_product.id,
            "quantity": 1,
            "priceBtc": 0.00012,
            "priceSbtc": 1200,
        },
    ]
