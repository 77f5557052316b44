from decimal import Decimal
import pytest
from btcpos.extensions import db
from btcpos.enums import UserRole, OrderStatus, TransactionType, TransactionStatus
from btcpos.models.order import Order, OrderItem
from btcpos.models.transaction import Transaction
from btcpos.models.wallet import Wallet


class TestUserModel:
    def test_password_hashing(self, customer_user):
        assert customer_user.password_hash != "password123"
        assert customer_user.check_password("password123")
        assert not customer_user.check_password("wrong")

    def test_to_dict_hides_password(self, customer_user):
        data = customer_user.to_dict()

        assert data["role"] == "CUSTOMER"
        assert "passwordHash" not in data
        assert "createdAt" in data

    def test_has_role(self, vendor_user):
        assert vendor_user.has_role(UserRole.VENDOR)
        assert not vendor_user.has_role(UserRole.CUSTOMER)


class TestWalletModel:
    def test_sbtc_balance_is_derived(self, customer_user):
        wallet = customer_user.wallet

        assert wallet.sbtc_balance == Decimal("1000000")
        assert wallet.to_dict()["sbtcBalance"] == 1000000.0

    def test_deduct_balance(self, customer_user):
        wallet = customer_user.wallet
        wallet.deduct_balance(Decimal("0.04"))

        assert wallet.btc_balance == Decimal("0.06")

    def test_deduct_more_than_balance(self, customer_user):
        with pytest.raises(ValueError, match="Insufficient balance"):
            customer_user.wallet.deduct_balance(Decimal("0.2"))

        assert customer_user.wallet.btc_balance == Decimal("0.1")


class TestOrderModel:
    def test_calculate_total(self, vendor_user, product, second_product):
        order = Order(vendor_id=vendor_user.id, total_btc=0, status=OrderStatus.PENDING)
        order.items.append(OrderItem(product_id=product.id, quantity=3, price_btc=Decimal("0.00008")))
        order.items.append(OrderItem(product_id=second_product.id, quantity=1, price_btc=Decimal("0.00012")))
        db.session.add(order)
        db.session.commit()

        assert order.calculate_total() == Decimal("0.00036")
        assert order.total_sbtc == Decimal("3600")
        assert not order.is_paid()

    def test_to_dict_with_items(self, vendor_user, product):
        order = Order(vendor_id=vendor_user.id, total_btc=Decimal("0.00008"), status=OrderStatus.COMPLETED)
        order.items.append(OrderItem(product_id=product.id, quantity=1, price_btc=Decimal("0.00008")))
        db.session.add(order)
        db.session.commit()

        data = order.to_dict(include_items=True, include_products=True)

        assert data["status"] == "completed"
        assert data["totalSbtc"] == 800.0
        assert data["items"][0]["priceSbtc"] == 800.0
        assert data["items"][0]["product"]["name"] == "Coffee"
        assert order.is_paid()


class TestTransactionModel:
    def test_to_dict_with_parties(self, customer_user, vendor_user):
        transaction = Transaction(
            sender_id=customer_user.id,
            receiver_id=vendor_user.id,
            amount_btc=Decimal("0.001"),
            type=TransactionType.PAYMENT,
            status=TransactionStatus.COMPLETED,
        )
        db.session.add(transaction)
        db.session.commit()

        data = transaction.to_dict(include_parties=True, include_order=True)

        assert data["amountSbtc"] == 10000.0
        assert data["type"] == "PAYMENT"
        assert data["sender"]["email"] == "customer@test.com"
        assert data["receiver"]["email"] == "vendor@test.com"
        assert data["order"] is None
