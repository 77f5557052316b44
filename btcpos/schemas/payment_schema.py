from marshmallow import fields, validate
from btcpos.schemas.base import RequestSchema, Amount

positive = validate.Range(min=0, min_inclusive=False)


class CartItemSchema(RequestSchema):
    product_id = fields.UUID(required=True, data_key="productId")
    quantity = fields.Int(required=True, strict=True, validate=validate.Range(min=1))
    price_btc = Amount(
        required=True, places=8, validate=positive, data_key="priceBtc"
    )
    price_sbtc = Amount(
        required=True, places=2, validate=positive, data_key="priceSbtc"
    )


class QROrderCreateSchema(RequestSchema):
    cart_items = fields.List(
        fields.Nested(CartItemSchema),
        required=True,
        validate=validate.Length(min=1),
        data_key="cartItems",
    )


class PaySchema(RequestSchema):
    vendor_id = fields.UUID(required=True, data_key="vendorId")
    cart_items = fields.List(
        fields.Nested(CartItemSchema), required=True, data_key="cartItems"
    )
    total_btc = Amount(
        required=True, places=8, validate=positive, data_key="totalBTC"
    )
    total_sbtc = Amount(
        required=True, places=2, validate=positive, data_key="totalSbtc"
    )
    order_id = fields.Str(allow_none=True, data_key="orderId")


class ChargeCardSchema(RequestSchema):
    card_number = fields.Str(
        required=True, validate=validate.Length(min=13, max=19), data_key="cardNumber"
    )
    amount = Amount(required=True, validate=positive)


class AddFundsCardSchema(ChargeCardSchema):
    card_holder_name = fields.Str(
        required=True, validate=validate.Length(min=1), data_key="cardHolderName"
    )
    expiry_date = fields.Str(required=True, data_key="expiryDate")
    cvv = fields.Str(required=True, validate=validate.Length(min=3, max=4))
