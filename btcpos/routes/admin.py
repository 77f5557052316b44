from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required
from btcpos.models.user import User
from btcpos.utils.decorators import role_required

admin_bp = Blueprint("admin", __name__)


@admin_bp.route("/list-users", methods=["GET"])
@jwt_required()
@role_required()
def list_users(current_user):
    """List every account with its wallet balance (debugging aid)"""
    users = User.query.order_by(User.created_at.desc()).all()
    return jsonify([u.to_dict(include_wallet=True) for u in users]), 200
