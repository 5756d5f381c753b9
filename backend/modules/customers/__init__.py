"""
Customers module.

Customer accounts double as the credential store for authentication.

Public API:
- ICustomerService: Interface for customer operations
- Customer: Public customer view (never carries the password hash)
- CustomerRecord: Internal record including the password hash
- Customer exceptions: CustomerNotFoundError, EmailAlreadyExistsError
"""

from .interfaces import ICustomerService
from .models import Customer, CustomerRecord, UpdateCustomerRequest
from .exceptions import CustomerNotFoundError, EmailAlreadyExistsError

__all__ = [
    # Interface
    "ICustomerService",
    # Models
    "Customer",
    "CustomerRecord",
    "UpdateCustomerRequest",
    # Exceptions
    "CustomerNotFoundError",
    "EmailAlreadyExistsError",
]
