import logging

from btcpos.models.wallet import Wallet
from btcpos.models.transaction import Transaction
from btcpos.extensions import db
from btcpos.enums import TransactionType, TransactionStatus
from btcpos.exceptions import NotFoundError
from btcpos.services.card_service import CardService
from decimal import Decimal
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class WalletService:
    @staticmethod
    def get_wallet_by_user_id(user_id: str) -> Wallet:
        wallet = Wallet.query.filter_by(user_id=user_id).first()
        if not wallet:
            raise NotFoundError("Wallet not found")
        return wallet

    @staticmethod
    def lock_wallet(user_id: str) -> Wallet:
        wallet = (
            db.session.query(Wallet)
            .filter_by(user_id=user_id)
            .with_for_update()
            .populate_existing()
            .first()
        )
        if not wallet:
            raise NotFoundError("Wallet not found")
        return wallet

    @staticmethod
    def add_funds_by_card(user_id: str, card_number: str, amount: Decimal) -> tuple[Wallet, Transaction, Decimal]:
        """Charge a demo card and credit the BTC it buys to the user's wallet"""
        WalletService.get_wallet_by_user_id(user_id)
        btc_amount = CardService.charge(card_number, amount)

        try:
            wallet = WalletService.lock_wallet(user_id)
            wallet.add_balance(btc_amount)

            transaction = Transaction(
                sender_id=user_id,
                receiver_id=user_id,
                amount_btc=btc_amount,
                type=TransactionType.ADD_FUNDS,
                status=TransactionStatus.COMPLETED,
                description=f"Added funds via card: ${amount}",
            )
            db.session.add(transaction)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise

        logger.info(f"Credited {btc_amount} BTC to wallet {wallet.id} via card")
        return wallet, transaction, btc_amount
