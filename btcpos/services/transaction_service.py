from btcpos.models.transaction import Transaction
from btcpos.extensions import db
from btcpos.enums import TransactionType, TransactionStatus
from btcpos.services.product_service import ProductService
from btcpos.utils.currency import balance_payload
from btcpos.models.wallet import Wallet
from sqlalchemy import func, or_

CUSTOMER_HISTORY_LIMIT = 50
VENDOR_HISTORY_LIMIT = 100


class TransactionService:
    @staticmethod
    def get_user_transactions(user_id: str, limit: int = CUSTOMER_HISTORY_LIMIT):
        """Transactions the user sent or received, newest first"""
        return (
            Transaction.query.filter(
                or_(Transaction.sender_id == user_id, Transaction.receiver_id == user_id)
            )
            .order_by(Transaction.created_at.desc())
            .limit(limit)
            .all()
        )

    @staticmethod
    def get_received_transactions(user_id: str, limit: int = VENDOR_HISTORY_LIMIT):
        return (
            Transaction.query.filter_by(receiver_id=user_id)
            .order_by(Transaction.created_at.desc())
            .limit(limit)
            .all()
        )

    @staticmethod
    def get_vendor_stats(vendor_id: str) -> dict:
        wallet = Wallet.query.filter_by(user_id=vendor_id).first()

        total_transactions = Transaction.query.filter_by(
            receiver_id=vendor_id, status=TransactionStatus.COMPLETED
        ).count()

        total_revenue = (
            db.session.query(func.sum(Transaction.amount_btc))
            .filter(
                Transaction.receiver_id == vendor_id,
                Transaction.status == TransactionStatus.COMPLETED,
                Transaction.type == TransactionType.PAYMENT,
            )
            .scalar()
            or 0
        )

        return {
            "wallet": wallet.balance() if wallet else None,
            "totalTransactions": total_transactions,
            "totalRevenue": balance_payload(total_revenue),
            "totalProducts": ProductService.count_vendor_products(vendor_id),
        }
