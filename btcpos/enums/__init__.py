from enum import Enum


class UserRole(str, Enum):
    CUSTOMER = "CUSTOMER"
    VENDOR = "VENDOR"


class OrderStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"


class TransactionType(str, Enum):
    PAYMENT = "PAYMENT"
    ADD_FUNDS = "ADD_FUNDS"
    REFUND = "REFUND"


class TransactionStatus(str, Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
