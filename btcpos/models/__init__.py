from .user import User
from .wallet import Wallet
from .product import Product
from .order import Order, OrderItem
from .transaction import Transaction

__all__ = [
    "User",
    "Wallet",
    "Product",
    "Order",
    "OrderItem",
    "Transaction",
]
