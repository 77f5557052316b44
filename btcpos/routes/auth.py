from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity
from btcpos.services.auth_service import AuthService
from btcpos.schemas import SignupSchema, LoginSchema
from btcpos.utils.validators import validate_schema

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/signup", methods=["POST"])
@validate_schema(SignupSchema)
def signup():
    """Register a customer or vendor account with an empty wallet"""
    result = AuthService.signup(**request.validated_data)
    return jsonify(result), 201


@auth_bp.route("/login", methods=["POST"])
@validate_schema(LoginSchema)
def login():
    result = AuthService.login(**request.validated_data)
    return jsonify(result), 200


@auth_bp.route("/me", methods=["GET"])
@jwt_required()
def get_me():
    """Get current user info"""
    user = AuthService.get_user_by_id(get_jwt_identity())
    return jsonify({"user": user.to_dict()}), 200
