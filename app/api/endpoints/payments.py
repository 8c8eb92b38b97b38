"""
Payment management endpoints.
Add card and cheque payments to an invoice, remove them, and peek at the
next payment ID.
"""

from fastapi import APIRouter

from app.api.deps import Registry
from app.schemas.payment import (
    CardPaymentCreate,
    ChequePaymentCreate,
    NextPaymentIDResponse,
    PaymentCreatedResponse,
)
from app.schemas.base import MessageResponse
from app.services.payment import PaymentService


router = APIRouter()


@router.post(
    "/invoices/{invoice_id}/card-payment",
    response_model=PaymentCreatedResponse,
    summary="Add a card payment",
    description="Pay part of an invoice by card",
)
async def add_card_payment(
    invoice_id: int,
    data: CardPaymentCreate,
    registry: Registry,
) -> PaymentCreatedResponse:
    """Add a card payment to an invoice."""
    service = PaymentService(registry)
    payment = service.add_card_payment(invoice_id, data)
    return PaymentCreatedResponse(
        payment_id=payment.payment_id,
        type=payment.payment_type,
        amount=payment.amount,
        message="Card payment added successfully",
        next_payment_id=service.next_payment_id(),
    )


@router.post(
    "/invoices/{invoice_id}/cheque-payment",
    response_model=PaymentCreatedResponse,
    summary="Add a cheque payment",
    description="Pay part of an invoice by cheque",
)
async def add_cheque_payment(
    invoice_id: int,
    data: ChequePaymentCreate,
    registry: Registry,
) -> PaymentCreatedResponse:
    """Add a cheque payment to an invoice."""
    service = PaymentService(registry)
    payment = service.add_cheque_payment(invoice_id, data)
    return PaymentCreatedResponse(
        payment_id=payment.payment_id,
        type=payment.payment_type,
        amount=payment.amount,
        message="Cheque payment added successfully",
        next_payment_id=service.next_payment_id(),
    )


@router.delete(
    "/invoices/{invoice_id}/payments/{payment_id}",
    response_model=MessageResponse,
    summary="Remove a payment",
    description="Remove a payment from an invoice (updates the invoice total)",
)
async def remove_payment(
    invoice_id: int,
    payment_id: int,
    registry: Registry,
) -> MessageResponse:
    """Remove a payment."""
    service = PaymentService(registry)
    service.remove(invoice_id, payment_id)
    return MessageResponse(message="Payment removed successfully")


@router.get(
    "/next-payment-id",
    response_model=NextPaymentIDResponse,
    summary="Next payment ID",
    description="Get the ID the next payment will receive",
)
async def get_next_payment_id(registry: Registry) -> NextPaymentIDResponse:
    """Get the next payment ID."""
    service = PaymentService(registry)
    return NextPaymentIDResponse(next_payment_id=service.next_payment_id())
