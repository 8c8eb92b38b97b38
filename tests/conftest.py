"""
Pytest configuration and fixtures.
"""

from typing import AsyncGenerator
import pytest
from httpx import AsyncClient, ASGITransport

from app.core.registry import InvoiceRegistry, get_registry
from app.main import app


@pytest.fixture
def registry() -> InvoiceRegistry:
    """Create an isolated registry seeded with the default invoice."""
    registry = InvoiceRegistry(first_invoice_id=1001, first_payment_id=1001)
    registry.seed_default_invoice("Default Customer")
    return registry


@pytest.fixture
async def client(registry: InvoiceRegistry) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with registry override."""
    app.dependency_overrides[get_registry] = lambda: registry

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def card_payload() -> dict:
    return {
        "amount": 100.00,
        "cardNumber": "1234567890123456",
        "cardHolder": "John Doe",
        "expiry": "12/25",
        "cvv": 123,
    }


@pytest.fixture
def cheque_payload() -> dict:
    return {
        "amount": 50.00,
        "chequeNumber": 123456,
        "bankName": "Bank A",
        "accountHolder": "Jane Doe",
    }
