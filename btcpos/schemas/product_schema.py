from marshmallow import fields, validate, validates, ValidationError
from btcpos.schemas.base import RequestSchema, Amount

positive = validate.Range(min=0, min_inclusive=False)


class ProductCreateSchema(RequestSchema):
    name = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    description = fields.Str(allow_none=True)
    price_btc = Amount(
        required=True, places=8, validate=positive, data_key="priceBtc"
    )
    image_url = fields.Str(
        allow_none=True, validate=validate.Length(max=500), data_key="imageUrl"
    )

    @validates("image_url")
    def validate_image_url(self, value, **kwargs):
        # An empty string clears the image
        if value:
            try:
                validate.URL()(value)
            except ValidationError:
                raise ValidationError("Not a valid URL.")


class ProductUpdateSchema(ProductCreateSchema):
    name = fields.Str(validate=validate.Length(min=1, max=255))
    price_btc = Amount(places=8, validate=positive, data_key="priceBtc")
