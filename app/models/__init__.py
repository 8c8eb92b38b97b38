"""
Domain models module.
All models are exported from here for easy imports.
"""

from app.models.payment import (
    AnyPayment,
    CardMethod,
    ChequeMethod,
    Payment,
    PaymentType,
)
from app.models.invoice import Invoice


__all__ = [
    "AnyPayment",
    "CardMethod",
    "ChequeMethod",
    "Invoice",
    "Payment",
    "PaymentType",
]
