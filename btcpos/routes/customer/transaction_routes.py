from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required
from btcpos.services.transaction_service import TransactionService
from btcpos.utils.decorators import role_required
from btcpos.enums import UserRole

transaction_bp = Blueprint("transactions", __name__)


@transaction_bp.route("/transactions", methods=["GET"])
@jwt_required()
@role_required(UserRole.CUSTOMER)
def get_transactions(current_user):
    transactions = TransactionService.get_user_transactions(current_user.id)
    return (
        jsonify(
            [
                t.to_dict(include_parties=True, include_order=True)
                for t in transactions
            ]
        ),
        200,
    )
