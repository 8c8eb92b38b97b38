"""
Payment service.
Adds card and cheque payments to invoices and removes them.
"""

import logging
from typing import Any
from fastapi import HTTPException, status

from app.core.exceptions import NotFoundError, ValidationError
from app.core.registry import InvoiceRegistry
from app.models.payment import AnyPayment, CardMethod, ChequeMethod
from app.schemas.payment import CardPaymentCreate, ChequePaymentCreate

logger = logging.getLogger(__name__)


class PaymentService:
    """Service for payment operations."""

    def __init__(self, registry: InvoiceRegistry):
        self.registry = registry

    def add_card_payment(self, invoice_id: int, data: CardPaymentCreate) -> AnyPayment:
        """Add a card payment to an invoice."""
        return self._add(invoice_id, CardMethod, data.model_dump())

    def add_cheque_payment(self, invoice_id: int, data: ChequePaymentCreate) -> AnyPayment:
        """Add a cheque payment to an invoice."""
        return self._add(invoice_id, ChequeMethod, data.model_dump())

    def _add(
        self,
        invoice_id: int,
        variant: type[CardMethod] | type[ChequeMethod],
        fields: dict[str, Any],
    ) -> AnyPayment:
        try:
            return self.registry.add_payment(invoice_id, variant, **fields)
        except NotFoundError as e:
            logger.warning(str(e))
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Invoice not found",
            )
        except ValidationError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e),
            )

    def remove(self, invoice_id: int, payment_id: int) -> None:
        """
        Remove a payment from an invoice.

        Raises:
            HTTPException: 404 if either the invoice or the payment is missing
        """
        try:
            removed = self.registry.remove_payment(invoice_id, payment_id)
        except NotFoundError as e:
            logger.warning(str(e))
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Invoice not found",
            )

        if not removed:
            logger.warning(f"Payment {payment_id} not found on invoice {invoice_id}")
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Payment not found",
            )

    def next_payment_id(self) -> int:
        """Get the ID the next payment will receive."""
        return self.registry.next_payment_id
