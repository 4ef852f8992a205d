"""Failures raised by the service layer.

Routes translate these into HTTP statuses. Anything else coming out of a
service (e.g. a lost database connection) is an infrastructure error and is
left to propagate.
"""


class ServiceError(Exception):
    """Base class for expected, caller-facing failures"""

    pass


class InvalidInputError(ServiceError):
    """Raised when a required field is missing or malformed"""

    pass


class DuplicateEmailError(ServiceError):
    """Raised when a member with the same email is already registered"""

    pass


class DuplicateTransactionError(ServiceError):
    """Raised when a donation with the same transaction id already exists"""

    pass


class NotFoundError(ServiceError):
    """Raised when a referenced id has no matching row"""

    pass


class ImageTooLargeError(ServiceError):
    """Raised when an uploaded image exceeds the size limit"""

    pass


class UnprocessableImageError(ServiceError):
    """Raised when uploaded bytes cannot be decoded as an image"""

    pass
