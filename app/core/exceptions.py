"""
Domain exceptions for the invoice/payment core.
The API layer translates these into HTTP responses.
"""


class PaymentSystemError(Exception):
    """Base class for all domain errors."""


class ConstructionError(PaymentSystemError, TypeError):
    """Raised when the abstract Payment type is instantiated directly."""


class DuplicateIDError(PaymentSystemError):
    """Raised when an invoice is created with an id that is already taken."""

    def __init__(self, invoice_id: int):
        self.invoice_id = invoice_id
        super().__init__(f"Invoice ID {invoice_id} already exists")


class NotFoundError(PaymentSystemError, LookupError):
    """Raised when a registry operation targets an unknown invoice."""

    def __init__(self, invoice_id: int):
        self.invoice_id = invoice_id
        super().__init__(f"Invoice {invoice_id} not found")


class ValidationError(PaymentSystemError, ValueError):
    """Raised when field content reaching the model is invalid."""
