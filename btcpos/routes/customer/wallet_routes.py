from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required
from btcpos.services.wallet_service import WalletService
from btcpos.utils.decorators import role_required
from btcpos.utils.validators import validate_schema
from btcpos.schemas import AddFundsCardSchema
from btcpos.enums import UserRole

wallet_bp = Blueprint("wallet", __name__)


@wallet_bp.route("/balance", methods=["GET"])
@jwt_required()
@role_required(UserRole.CUSTOMER)
def get_balance(current_user):
    wallet = WalletService.get_wallet_by_user_id(current_user.id)
    return jsonify(wallet.balance()), 200


@wallet_bp.route("/add-funds-card", methods=["POST"])
@jwt_required()
@role_required(UserRole.CUSTOMER)
@validate_schema(AddFundsCardSchema)
def add_funds_card(current_user):
    """Top up the wallet with the demo card processor"""
    data = request.validated_data
    wallet, transaction, btc_amount = WalletService.add_funds_by_card(
        current_user.id, data["card_number"], data["amount"]
    )

    return (
        jsonify(
            {
                "success": True,
                "balance": wallet.balance(),
                "added": {
                    "btc": float(btc_amount),
                    "sbtc": float(transaction.amount_sbtc),
                },
            }
        ),
        200,
    )
