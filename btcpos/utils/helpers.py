import uuid


def camelize(name: str) -> str:
    """Turn a column name into the camelCase key used in API payloads"""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def generate_qr_code_data() -> str:
    """Generate the opaque reference stored on a QR order"""
    return str(uuid.uuid4())
