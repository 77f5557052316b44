from marshmallow import Schema, EXCLUDE, fields


class RequestSchema(Schema):
    """Request bodies ignore keys they do not declare"""

    class Meta:
        unknown = EXCLUDE


class Amount(fields.Decimal):
    """Decimal loaded only from a JSON number, never from a string"""

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise self.make_error("invalid")
        return super()._deserialize(value, attr, data, **kwargs)
