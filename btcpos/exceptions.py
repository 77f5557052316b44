"""Errors raised by the service layer.

Each error carries the HTTP status the API answers with, so routes can let
them propagate to the handlers registered in ``utils.error_handlers``.
"""


class ServiceError(ValueError):
    status_code = 400


class NotFoundError(ServiceError):
    status_code = 404


class ForbiddenError(ServiceError):
    status_code = 403


class AuthenticationError(ServiceError):
    status_code = 401


class ConflictError(ServiceError):
    status_code = 400


class PaymentError(ServiceError):
    status_code = 400
