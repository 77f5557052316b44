from flask import Blueprint
from .wallet_routes import wallet_bp
from .payment_routes import payment_bp
from .transaction_routes import transaction_bp

customer_bp = Blueprint("customer", __name__)

customer_bp.register_blueprint(wallet_bp)
customer_bp.register_blueprint(payment_bp)
customer_bp.register_blueprint(transaction_bp)
