"""
Invoice schemas for request/response validation.
"""

from pydantic import Field

from app.schemas.base import BaseSchema, Money
from app.schemas.payment import PaymentResponse
from app.models.invoice import Invoice


class InvoiceCreate(BaseSchema):
    """Schema for creating an invoice."""

    invoice_id: int | None = Field(None, alias="invoiceID", gt=0)
    customer_name: str = Field(..., alias="customerName", min_length=1)


class InvoiceCreatedResponse(BaseSchema):
    """Response after an invoice was created."""

    invoice_id: int = Field(..., alias="invoiceID")
    customer_name: str = Field(..., alias="customerName")
    total_amount: Money = Field(..., alias="totalAmount")
    message: str = "Invoice created successfully"


class InvoiceSummary(BaseSchema):
    """Invoice summary for list views."""

    invoice_id: int = Field(..., alias="invoiceID")
    customer_name: str = Field(..., alias="customerName")
    total_amount: Money = Field(..., alias="totalAmount")
    payment_count: int = Field(..., alias="paymentCount")

    @classmethod
    def from_invoice(cls, invoice: Invoice) -> "InvoiceSummary":
        return cls(
            invoice_id=invoice.invoice_id,
            customer_name=invoice.customer_name,
            total_amount=invoice.total_amount,
            payment_count=invoice.payment_count,
        )


class InvoiceResponse(BaseSchema):
    """Invoice with all of its payments."""

    invoice_id: int = Field(..., alias="invoiceID")
    customer_name: str = Field(..., alias="customerName")
    total_amount: Money = Field(..., alias="totalAmount")
    payments: list[PaymentResponse]

    @classmethod
    def from_invoice(cls, invoice: Invoice) -> "InvoiceResponse":
        return cls(
            invoice_id=invoice.invoice_id,
            customer_name=invoice.customer_name,
            total_amount=invoice.total_amount,
            payments=[PaymentResponse.from_payment(p) for p in invoice.payments],
        )
