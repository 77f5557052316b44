from marshmallow import fields, validate
from btcpos.enums import UserRole
from btcpos.schemas.base import RequestSchema


class SignupSchema(RequestSchema):
    email = fields.Email(required=True)
    password = fields.Str(required=True, validate=validate.Length(min=6))
    name = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    role = fields.Str(
        required=True,
        validate=validate.OneOf([UserRole.CUSTOMER.value, UserRole.VENDOR.value]),
    )


class LoginSchema(RequestSchema):
    email = fields.Email(required=True)
    password = fields.Str(required=True, validate=validate.Length(min=1))
