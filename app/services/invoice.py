"""
Invoice service.
Handles invoice creation, lookup, listing and deletion.
"""

import logging
from fastapi import HTTPException, status

from app.core.exceptions import DuplicateIDError
from app.core.registry import InvoiceRegistry
from app.models.invoice import Invoice
from app.schemas.invoice import InvoiceCreate

logger = logging.getLogger(__name__)


class InvoiceService:
    """Service for invoice operations."""

    def __init__(self, registry: InvoiceRegistry):
        self.registry = registry

    def create(self, data: InvoiceCreate) -> Invoice:
        """
        Create a new invoice.

        Args:
            data: Invoice data, with an optional explicit id

        Returns:
            Created invoice
        """
        try:
            return self.registry.create_invoice(
                data.customer_name,
                invoice_id=data.invoice_id,
            )
        except DuplicateIDError as e:
            logger.warning(str(e))
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Invoice ID already exists",
            )

    def get_by_id(self, invoice_id: int) -> Invoice | None:
        """Get invoice by ID."""
        return self.registry.get_invoice(invoice_id)

    def get_or_404(self, invoice_id: int) -> Invoice:
        """Get invoice by ID or raise 404."""
        invoice = self.get_by_id(invoice_id)
        if not invoice:
            logger.warning(f"Invoice {invoice_id} not found")
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Invoice not found",
            )
        return invoice

    def list(self) -> list[Invoice]:
        """List all invoices."""
        return self.registry.list_invoices()

    def delete(self, invoice_id: int) -> None:
        """Delete an invoice or raise 404."""
        if not self.registry.delete_invoice(invoice_id):
            logger.warning(f"Cannot delete invoice {invoice_id}: not found")
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Invoice not found",
            )
