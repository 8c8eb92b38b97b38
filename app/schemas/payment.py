"""
Payment schemas for request/response validation.
"""

from decimal import Decimal
from pydantic import Field, field_validator

from app.schemas.base import BaseSchema, Money
from app.models.payment import AnyPayment, CardMethod, ChequeMethod, PaymentType


class CardPaymentCreate(BaseSchema):
    """Schema for adding a card payment to an invoice."""

    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    card_number: str = Field(..., alias="cardNumber", pattern=r"^[0-9]{1,16}$")
    card_holder_name: str = Field(..., alias="cardHolder", min_length=1)
    expiry_date: str = Field(..., alias="expiry", pattern=r"^[0-9]{2}/[0-9]{2}$")
    cvv: int = Field(..., ge=100, le=9999)

    @field_validator("card_number", mode="before")
    @classmethod
    def coerce_card_number(cls, value):
        # Front-ends may send the number as a JSON number
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class ChequePaymentCreate(BaseSchema):
    """Schema for adding a cheque payment to an invoice."""

    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    cheque_number: int = Field(..., alias="chequeNumber", gt=0)
    bank_name: str = Field(..., alias="bankName", min_length=1)
    account_holder_name: str = Field(..., alias="accountHolder", min_length=1)


class CardDetails(BaseSchema):
    """Card-specific payment details."""

    card_number: str = Field(..., alias="cardNumber")
    card_holder_name: str = Field(..., alias="cardHolder")
    expiry_date: str = Field(..., alias="expiry")
    cvv: int


class ChequeDetails(BaseSchema):
    """Cheque-specific payment details."""

    cheque_number: int = Field(..., alias="chequeNumber")
    bank_name: str = Field(..., alias="bankName")
    account_holder_name: str = Field(..., alias="accountHolder")


class PaymentResponse(BaseSchema):
    """Payment with its variant-specific details."""

    payment_id: int = Field(..., alias="paymentID")
    type: PaymentType
    amount: Money
    details: CardDetails | ChequeDetails

    @classmethod
    def from_payment(cls, payment: AnyPayment) -> "PaymentResponse":
        match payment:
            case CardMethod():
                details = CardDetails(
                    card_number=payment.card_number,
                    card_holder_name=payment.card_holder_name,
                    expiry_date=payment.expiry_date,
                    cvv=payment.cvv,
                )
            case ChequeMethod():
                details = ChequeDetails(
                    cheque_number=payment.cheque_number,
                    bank_name=payment.bank_name,
                    account_holder_name=payment.account_holder_name,
                )
            case _:
                raise TypeError(f"Unsupported payment variant: {type(payment).__name__}")

        return cls(
            payment_id=payment.payment_id,
            type=payment.payment_type,
            amount=payment.amount,
            details=details,
        )


class PaymentCreatedResponse(BaseSchema):
    """Response after a payment was added to an invoice."""

    payment_id: int = Field(..., alias="paymentID")
    type: PaymentType
    amount: Money
    message: str
    next_payment_id: int = Field(..., alias="nextPaymentID")


class NextPaymentIDResponse(BaseSchema):
    """Next payment id the registry will assign."""

    next_payment_id: int = Field(..., alias="nextPaymentID")
