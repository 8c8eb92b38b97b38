"""
Payment models.
A payment is one of a closed set of instruments: card or cheque.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Union

from app.core.exceptions import ConstructionError, ValidationError


class PaymentType(str, Enum):
    """Payment instrument enumeration."""
    CARD = "Card"
    CHEQUE = "Cheque"


@dataclass(frozen=True, kw_only=True)
class Payment:
    """
    Abstract payment.

    Only the concrete variants below can be instantiated; each one pins
    its ``payment_type`` at class level.

    Attributes:
        payment_id: Identifier assigned by the registry
        amount: Non-negative payment amount
    """

    payment_type: ClassVar[PaymentType]

    payment_id: int
    amount: Decimal

    def __post_init__(self) -> None:
        if type(self) is Payment:
            raise ConstructionError(
                "Cannot instantiate abstract class Payment directly"
            )
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValidationError(f"Payment amount must be non-negative, got {self.amount}")


@dataclass(frozen=True, kw_only=True)
class CardMethod(Payment):
    """
    Card payment.

    Attributes:
        card_number: Card number as a digit string (up to 16 digits)
        card_holder_name: Name printed on the card
        expiry_date: Expiry in MM/YY form
        cvv: Card verification value
    """

    payment_type: ClassVar[PaymentType] = PaymentType.CARD

    card_number: str
    card_holder_name: str
    expiry_date: str
    cvv: int

    def __repr__(self) -> str:
        return f"<CardMethod(id={self.payment_id}, amount={self.amount})>"


@dataclass(frozen=True, kw_only=True)
class ChequeMethod(Payment):
    """
    Cheque payment.

    Attributes:
        cheque_number: Cheque number
        bank_name: Issuing bank
        account_holder_name: Name of the account holder
    """

    payment_type: ClassVar[PaymentType] = PaymentType.CHEQUE

    cheque_number: int
    bank_name: str
    account_holder_name: str

    def __repr__(self) -> str:
        return f"<ChequeMethod(id={self.payment_id}, amount={self.amount})>"


# Every concrete payment an invoice can hold
AnyPayment = Union[CardMethod, ChequeMethod]
