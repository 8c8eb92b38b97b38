"""
In-memory invoice registry.
Keyed invoice store plus the id counters for invoices and payments.
"""

import logging
from typing import Any

from fastapi import Request

from app.core.exceptions import DuplicateIDError, NotFoundError
from app.models.invoice import Invoice
from app.models.payment import AnyPayment, CardMethod, ChequeMethod


logger = logging.getLogger(__name__)


class InvoiceRegistry:
    """
    Volatile store of invoices.

    The payment id counter is global across all invoices and only moves
    forward, so removed payment ids are never handed out again.
    """

    def __init__(self, first_invoice_id: int = 1001, first_payment_id: int = 1001):
        self._invoices: dict[int, Invoice] = {}
        self._next_invoice_id = first_invoice_id
        self._next_payment_id = first_payment_id

    @property
    def next_invoice_id(self) -> int:
        return self._next_invoice_id

    @property
    def next_payment_id(self) -> int:
        return self._next_payment_id

    def create_invoice(self, customer_name: str, invoice_id: int | None = None) -> Invoice:
        """
        Create and store a new invoice.

        Args:
            customer_name: Customer the invoice is issued to
            invoice_id: Explicit id, or None to use the next generated one

        Returns:
            Created invoice

        Raises:
            DuplicateIDError: If the id is already in use
        """
        if invoice_id is None:
            invoice_id = self._next_invoice_id

        if invoice_id in self._invoices:
            raise DuplicateIDError(invoice_id)

        invoice = Invoice(invoice_id, customer_name)
        self._invoices[invoice_id] = invoice

        # Keep generated ids clear of manually chosen ones
        if invoice_id >= self._next_invoice_id:
            self._next_invoice_id = invoice_id + 1

        logger.info(f"Invoice {invoice_id} created for {customer_name}")
        return invoice

    def get_invoice(self, invoice_id: int) -> Invoice | None:
        return self._invoices.get(invoice_id)

    def list_invoices(self) -> list[Invoice]:
        return list(self._invoices.values())

    def delete_invoice(self, invoice_id: int) -> bool:
        """Delete an invoice. Returns False if it did not exist."""
        if self._invoices.pop(invoice_id, None) is None:
            return False
        logger.info(f"Invoice {invoice_id} deleted")
        return True

    def add_payment(
        self,
        invoice_id: int,
        variant: type[CardMethod] | type[ChequeMethod],
        **fields: Any,
    ) -> AnyPayment:
        """
        Build a payment with the next payment id and attach it to an invoice.

        The counter only advances once the payment has been added.

        Raises:
            NotFoundError: If the invoice does not exist
        """
        invoice = self._invoices.get(invoice_id)
        if invoice is None:
            raise NotFoundError(invoice_id)

        payment = variant(payment_id=self._next_payment_id, **fields)
        invoice.add_payment(payment)
        self._next_payment_id += 1

        logger.info(
            f"{payment.payment_type.value} payment {payment.payment_id} "
            f"of {payment.amount} added to invoice {invoice_id}"
        )
        return payment

    def remove_payment(self, invoice_id: int, payment_id: int) -> bool:
        """
        Remove a payment from an invoice.

        Returns:
            False if the invoice has no payment with that id

        Raises:
            NotFoundError: If the invoice does not exist
        """
        invoice = self._invoices.get(invoice_id)
        if invoice is None:
            raise NotFoundError(invoice_id)

        removed = invoice.remove_payment(payment_id)
        if removed:
            logger.info(f"Payment {payment_id} removed from invoice {invoice_id}")
        return removed

    def seed_default_invoice(self, customer_name: str = "Default Customer") -> Invoice:
        """Create the starter invoice at the next invoice id."""
        return self.create_invoice(customer_name)


def get_registry(request: Request) -> InvoiceRegistry:
    """
    Dependency that returns the application's registry.
    The registry is created in the application lifespan.
    """
    return request.app.state.registry
