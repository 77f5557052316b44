import logging

from btcpos.models.order import Order
from btcpos.models.transaction import Transaction
from btcpos.models.user import User
from btcpos.models.wallet import Wallet
from btcpos.extensions import db
from btcpos.enums import UserRole, OrderStatus, TransactionType, TransactionStatus
from btcpos.exceptions import ConflictError, NotFoundError, PaymentError
from btcpos.services.order_service import OrderService
from btcpos.services.wallet_service import WalletService
from decimal import Decimal

logger = logging.getLogger(__name__)


class PaymentService:
    @staticmethod
    def _get_vendor_wallet(vendor_id: str) -> Wallet:
        wallet = (
            Wallet.query.join(User, Wallet.user_id == User.id)
            .filter(Wallet.user_id == vendor_id, User.role == UserRole.VENDOR)
            .first()
        )
        if not wallet:
            raise NotFoundError("Vendor wallet not found")
        return wallet

    @staticmethod
    def _complete_existing_order(order_id, vendor_id, customer_id, total_btc) -> Order:
        order = (
            db.session.query(Order)
            .filter_by(id=order_id)
            .with_for_update()
            .populate_existing()
            .first()
        )
        if not order:
            raise NotFoundError("Order not found")
        if order.vendor_id != vendor_id:
            raise PaymentError("Order does not belong to this vendor")
        if order.is_paid():
            raise ConflictError("Order already paid")
        if order.total_btc != total_btc:
            raise PaymentError("Payment total does not match order total")

        order.customer_id = customer_id
        order.status = OrderStatus.COMPLETED
        return order

    @staticmethod
    def pay_vendor(customer_id: str, vendor_id: str, cart_items, total_btc: Decimal, order_id: str = None) -> dict:
        """Move total_btc from the customer to the vendor and record the sale.

        The balance updates, the order upsert and the ledger row share one
        database transaction; any failure rolls all of them back.
        """
        customer_wallet = WalletService.get_wallet_by_user_id(customer_id)
        if not customer_wallet.can_deduct(total_btc):
            raise PaymentError("Insufficient balance")

        PaymentService._get_vendor_wallet(vendor_id)

        if not order_id:
            OrderService.validate_cart(vendor_id, cart_items)

        try:
            customer_wallet = WalletService.lock_wallet(customer_id)
            vendor_wallet = WalletService.lock_wallet(vendor_id)

            # Balance may have moved since the first check
            if not customer_wallet.can_deduct(total_btc):
                raise PaymentError("Insufficient balance")

            customer_wallet.deduct_balance(total_btc)
            vendor_wallet.add_balance(total_btc)

            if order_id:
                order = PaymentService._complete_existing_order(
                    order_id, vendor_id, customer_id, total_btc
                )
            else:
                order = OrderService.create_completed_order(
                    vendor_id, customer_id, total_btc, cart_items
                )

            transaction = Transaction(
                sender_id=customer_id,
                receiver_id=vendor_id,
                amount_btc=total_btc,
                type=TransactionType.PAYMENT,
                status=TransactionStatus.COMPLETED,
                order_id=order.id,
                description="Payment to vendor",
            )
            db.session.add(transaction)
            db.session.commit()

        except Exception:
            db.session.rollback()
            raise

        logger.info(
            f"Customer {customer_id} paid {total_btc} BTC to vendor {vendor_id} for order {order.id}"
        )
        return {
            "success": True,
            "order": order.to_dict(include_items=True),
            "transaction": transaction.to_dict(),
            "newBalance": customer_wallet.balance(),
        }
