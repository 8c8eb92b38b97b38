"""
Invoice aggregate.
Owns an ordered list of payments and keeps a running total.
"""

from decimal import Decimal

from app.models.payment import AnyPayment


class Invoice:
    """
    Invoice model.

    Attributes:
        invoice_id: Unique invoice identifier
        customer_name: Customer the invoice is issued to
        payments: Payments in insertion order (read-only)
        total_amount: Sum of all payment amounts
    """

    def __init__(self, invoice_id: int, customer_name: str):
        self.invoice_id = invoice_id
        self.customer_name = customer_name
        self._payments: list[AnyPayment] = []
        self._total_amount = Decimal("0.00")

    @property
    def payments(self) -> tuple[AnyPayment, ...]:
        return tuple(self._payments)

    @property
    def total_amount(self) -> Decimal:
        return self._total_amount

    @property
    def payment_count(self) -> int:
        return len(self._payments)

    def add_payment(self, payment: AnyPayment) -> None:
        """
        Append a payment and add its amount to the total.

        Payment id uniqueness is not checked here; ids come from the
        registry's global counter.
        """
        self._payments.append(payment)
        self._total_amount += payment.amount

    def remove_payment(self, payment_id: int) -> bool:
        """
        Remove the first payment with the given id.

        Returns:
            True if a payment was removed, False if none matched
        """
        for index, payment in enumerate(self._payments):
            if payment.payment_id == payment_id:
                del self._payments[index]
                self._total_amount -= payment.amount
                return True
        return False

    def find_payment(self, payment_id: int) -> AnyPayment | None:
        """Return the first payment with the given id, if any."""
        for payment in self._payments:
            if payment.payment_id == payment_id:
                return payment
        return None

    def calculate_total(self) -> Decimal:
        """Recalculate the total from the payments."""
        return sum((p.amount for p in self._payments), Decimal("0.00"))

    def __repr__(self) -> str:
        return (
            f"<Invoice(id={self.invoice_id}, customer='{self.customer_name}', "
            f"total={self.total_amount})>"
        )
