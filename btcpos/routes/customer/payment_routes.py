from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required
from btcpos.services.payment_service import PaymentService
from btcpos.utils.decorators import role_required
from btcpos.utils.validators import validate_schema
from btcpos.schemas import PaySchema
from btcpos.enums import UserRole

payment_bp = Blueprint("payments", __name__)


@payment_bp.route("/pay", methods=["POST"])
@jwt_required()
@role_required(UserRole.CUSTOMER)
@validate_schema(PaySchema)
def pay(current_user):
    """Pay a vendor from a scanned QR code"""
    data = request.validated_data
    result = PaymentService.pay_vendor(
        customer_id=current_user.id,
        vendor_id=str(data["vendor_id"]),
        cart_items=data["cart_items"],
        total_btc=data["total_btc"],
        order_id=data.get("order_id"),
    )
    return jsonify(result), 200
