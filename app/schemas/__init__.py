"""
Pydantic schemas for request/response validation.
"""

from app.schemas.base import (
    MessageResponse,
    Money,
)
from app.schemas.invoice import (
    InvoiceCreate,
    InvoiceCreatedResponse,
    InvoiceResponse,
    InvoiceSummary,
)
from app.schemas.payment import (
    CardDetails,
    CardPaymentCreate,
    ChequeDetails,
    ChequePaymentCreate,
    NextPaymentIDResponse,
    PaymentCreatedResponse,
    PaymentResponse,
)

__all__ = [
    # Base
    "MessageResponse",
    "Money",
    # Invoice
    "InvoiceCreate",
    "InvoiceCreatedResponse",
    "InvoiceResponse",
    "InvoiceSummary",
    # Payment
    "CardDetails",
    "CardPaymentCreate",
    "ChequeDetails",
    "ChequePaymentCreate",
    "NextPaymentIDResponse",
    "PaymentCreatedResponse",
    "PaymentResponse",
]
