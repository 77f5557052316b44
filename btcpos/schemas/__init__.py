from .auth_schema import SignupSchema, LoginSchema
from .product_schema import ProductCreateSchema, ProductUpdateSchema
from .payment_schema import (
    CartItemSchema,
    QROrderCreateSchema,
    PaySchema,
    AddFundsCardSchema,
    ChargeCardSchema,
)

__all__ = [
    "SignupSchema",
    "LoginSchema",
    "ProductCreateSchema",
    "ProductUpdateSchema",
    "CartItemSchema",
    "QROrderCreateSchema",
    "PaySchema",
    "AddFundsCardSchema",
    "ChargeCardSchema",
]
