"""
Invoice management endpoints.
Create, list, inspect and delete invoices.
"""

from fastapi import APIRouter, status

from app.api.deps import Registry
from app.schemas.invoice import (
    InvoiceCreate,
    InvoiceCreatedResponse,
    InvoiceResponse,
    InvoiceSummary,
)
from app.schemas.base import MessageResponse
from app.services.invoice import InvoiceService


router = APIRouter()


@router.get(
    "",
    response_model=list[InvoiceSummary],
    summary="List invoices",
    description="Get a summary of every invoice",
)
async def list_invoices(registry: Registry) -> list[InvoiceSummary]:
    """List all invoices."""
    service = InvoiceService(registry)
    return [InvoiceSummary.from_invoice(i) for i in service.list()]


@router.post(
    "",
    response_model=InvoiceCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an invoice",
    description="Create an invoice with a chosen or generated ID",
)
async def create_invoice(
    data: InvoiceCreate,
    registry: Registry,
) -> InvoiceCreatedResponse:
    """Create a new invoice."""
    service = InvoiceService(registry)
    invoice = service.create(data)
    return InvoiceCreatedResponse(
        invoice_id=invoice.invoice_id,
        customer_name=invoice.customer_name,
        total_amount=invoice.total_amount,
    )


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponse,
    summary="Invoice details",
    description="Get an invoice with all of its payments",
)
async def get_invoice(
    invoice_id: int,
    registry: Registry,
) -> InvoiceResponse:
    """Get invoice by ID."""
    service = InvoiceService(registry)
    invoice = service.get_or_404(invoice_id)
    return InvoiceResponse.from_invoice(invoice)


@router.delete(
    "/{invoice_id}",
    response_model=MessageResponse,
    summary="Delete an invoice",
    description="Delete an invoice and its payments",
)
async def delete_invoice(
    invoice_id: int,
    registry: Registry,
) -> MessageResponse:
    """Delete an invoice."""
    service = InvoiceService(registry)
    service.delete(invoice_id)
    return MessageResponse(message="Invoice deleted successfully")
