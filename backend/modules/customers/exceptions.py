"""
Customers module exceptions.
"""

from shared.exceptions import ConflictError, ResourceNotFoundError


class CustomerNotFoundError(ResourceNotFoundError):
    """Raised when a customer is not found."""

    def __init__(self, customer_id: int):
        super().__init__("Customer", customer_id)


class EmailAlreadyExistsError(ConflictError):
    """
    Raised when an email is already registered.

    The email itself is kept out of the message.
    """

    def __init__(self, email: str):
        super().__init__(
            "Email already exists",
            code="EMAIL_ALREADY_EXISTS",
            details={"email": email},
        )
