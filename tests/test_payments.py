"""
Payment endpoint tests.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_add_card_payment(client: AsyncClient, card_payload: dict):
    response = await client.post("/api/invoices/1001/card-payment", json=card_payload)

    assert response.status_code == 200
    assert response.json() == {
        "paymentID": 1001,
        "type": "Card",
        "amount": 100.0,
        "message": "Card payment added successfully",
        "nextPaymentID": 1002,
    }


@pytest.mark.asyncio
async def test_add_cheque_payment(client: AsyncClient, cheque_payload: dict):
    response = await client.post("/api/invoices/1001/cheque-payment", json=cheque_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["type"] == "Cheque"
    assert data["amount"] == 50.0
    assert data["message"] == "Cheque payment added successfully"


@pytest.mark.asyncio
async def test_payment_scenario(
    client: AsyncClient,
    card_payload: dict,
    cheque_payload: dict,
):
    """Test card + cheque on the default invoice, then removing the card."""
    card = (await client.post("/api/invoices/1001/card-payment", json=card_payload)).json()

    invoice = (await client.get("/api/invoices/1001")).json()
    assert invoice["totalAmount"] == 100.0
    assert len(invoice["payments"]) == 1
    assert invoice["payments"][0]["type"] == "Card"
    assert invoice["payments"][0]["details"] == {
        "cardNumber": "1234567890123456",
        "cardHolder": "John Doe",
        "expiry": "12/25",
        "cvv": 123,
    }

    await client.post("/api/invoices/1001/cheque-payment", json=cheque_payload)
    invoice = (await client.get("/api/invoices/1001")).json()
    assert invoice["totalAmount"] == 150.0
    assert len(invoice["payments"]) == 2
    assert invoice["payments"][1]["details"] == {
        "chequeNumber": 123456,
        "bankName": "Bank A",
        "accountHolder": "Jane Doe",
    }

    response = await client.delete(f"/api/invoices/1001/payments/{card['paymentID']}")
    assert response.status_code == 200
    assert response.json()["message"] == "Payment removed successfully"

    invoice = (await client.get("/api/invoices/1001")).json()
    assert invoice["totalAmount"] == 50.0
    assert [p["type"] for p in invoice["payments"]] == ["Cheque"]

    summary = (await client.get("/api/invoices")).json()[0]
    assert summary["paymentCount"] == 1
    assert summary["totalAmount"] == 50.0


@pytest.mark.asyncio
async def test_payment_on_missing_invoice(client: AsyncClient, card_payload: dict):
    response = await client.post("/api/invoices/9999/card-payment", json=card_payload)

    assert response.status_code == 404
    assert response.json()["detail"] == "Invoice not found"

    response = await client.get("/api/next-payment-id")
    assert response.json() == {"nextPaymentID": 1001}


@pytest.mark.asyncio
async def test_card_payment_missing_field(client: AsyncClient, card_payload: dict):
    del card_payload["cvv"]
    response = await client.post("/api/invoices/1001/card-payment", json=card_payload)

    assert response.status_code == 400
    assert any("cvv" in e["field"] for e in response.json()["errors"])


@pytest.mark.asyncio
async def test_card_number_as_number(client: AsyncClient, card_payload: dict):
    card_payload["cardNumber"] = 4111111111111111
    response = await client.post("/api/invoices/1001/card-payment", json=card_payload)
    assert response.status_code == 200

    invoice = (await client.get("/api/invoices/1001")).json()
    assert invoice["payments"][0]["details"]["cardNumber"] == "4111111111111111"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "field, value",
    [
        ("cardNumber", "12345678901234567"),
        ("cardNumber", "1234-5678"),
        ("cardNumber", "١٢٣٤٥٦٧٨"),
        ("expiry", "1225"),
        ("expiry", "١٢/٢٥"),
        ("cvv", 99),
        ("amount", 0),
        ("amount", -10),
        ("amount", "1e400"),
        ("amount", "10.001"),
        ("amount", "Infinity"),
    ],
)
async def test_card_payment_rejects_bad_shapes(
    client: AsyncClient,
    card_payload: dict,
    field: str,
    value,
):
    card_payload[field] = value
    response = await client.post("/api/invoices/1001/card-payment", json=card_payload)

    assert response.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize("amount", ["1e400", "10.001", "1234567890123.00"])
async def test_cheque_payment_rejects_out_of_range_amount(
    client: AsyncClient,
    cheque_payload: dict,
    amount: str,
):
    cheque_payload["amount"] = amount
    response = await client.post("/api/invoices/1001/cheque-payment", json=cheque_payload)

    assert response.status_code == 400

    invoice = (await client.get("/api/invoices/1001")).json()
    assert invoice["totalAmount"] == 0.0
    assert invoice["payments"] == []


@pytest.mark.asyncio
async def test_remove_missing_payment(client: AsyncClient, cheque_payload: dict):
    await client.post("/api/invoices/1001/cheque-payment", json=cheque_payload)

    response = await client.delete("/api/invoices/1001/payments/4242")
    assert response.status_code == 404
    assert response.json()["detail"] == "Payment not found"

    invoice = (await client.get("/api/invoices/1001")).json()
    assert invoice["totalAmount"] == 50.0


@pytest.mark.asyncio
async def test_remove_payment_from_missing_invoice(client: AsyncClient):
    response = await client.delete("/api/invoices/9999/payments/1001")

    assert response.status_code == 404
    assert response.json()["detail"] == "Invoice not found"


@pytest.mark.asyncio
async def test_next_payment_id_never_reused(
    client: AsyncClient,
    card_payload: dict,
    cheque_payload: dict,
):
    first = (await client.post("/api/invoices/1001/card-payment", json=card_payload)).json()
    await client.delete(f"/api/invoices/1001/payments/{first['paymentID']}")

    second = (await client.post("/api/invoices/1001/cheque-payment", json=cheque_payload)).json()

    assert second["paymentID"] == first["paymentID"] + 1
    response = await client.get("/api/next-payment-id")
    assert response.json() == {"nextPaymentID": second["paymentID"] + 1}
