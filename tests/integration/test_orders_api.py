"""Integration tests for the seller order endpoints."""

from decimal import Decimal

import pytest
from httpx import AsyncClient


def order_payload(order_id: str, minute: int = 0, **overrides) -> dict:
    payload = {
        "order_id": order_id,
        "buyer_id": "buyer-1",
        "seller_id": "seller-1",
        "listing_id": "listing-1",
        "quantity": "25",
        "unit": "kg",
        "total_amount": "1250.00",
        "currency": "INR",
        "created_at": f"2025-03-01T09:{minute:02d}:00+00:00",
    }
    payload.update(overrides)
    return payload


async def place(client: AsyncClient, *payloads: dict) -> None:
    for payload in payloads:
        response = await client.post("/api/v1/orders", json=payload)
        assert response.status_code == 201, response.text


async def act(client: AsyncClient, order_id: str, action: str, seller_id: str = "seller-1"):
    return await client.post(
        f"/api/v1/sellers/{seller_id}/orders/{order_id}/transitions",
        json={"action": action},
    )


@pytest.mark.asyncio
async def test_health(test_client: AsyncClient):
    response = await test_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["service"] == "agrimarket-orders"


@pytest.mark.asyncio
async def test_create_order(test_client: AsyncClient):
    response = await test_client.post(
        "/api/v1/orders", json=order_payload("o1", delivery_address="Gate 4, APMC Yard")
    )

    assert response.status_code == 201, f"Expected 201, got {response.status_code}: {response.text}"
    data = response.json()
    assert data["id"] == "o1"
    assert data["status"] == "pending"
    assert data["payment_status"] == "pending"
    assert Decimal(data["total_amount"]) == Decimal("1250.00")
    assert data["delivery_address"] == "Gate 4, APMC Yard"


@pytest.mark.asyncio
async def test_create_duplicate_order(test_client: AsyncClient):
    await place(test_client, order_payload("o1"))

    response = await test_client.post("/api/v1/orders", json=order_payload("o1"))

    assert response.status_code == 400
    assert "o1" in response.json()["detail"]


@pytest.mark.asyncio
async def test_create_order_rejects_bad_quantity(test_client: AsyncClient):
    response = await test_client.post("/api/v1/orders", json=order_payload("o1", quantity="0"))

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_orders_enriched_newest_first(test_client: AsyncClient):
    await place(
        test_client,
        order_payload("o1", minute=1),
        order_payload("o2", minute=2, buyer_id="ghost", listing_id="listing-2"),
        order_payload("x1", minute=3, seller_id="seller-2"),
    )

    response = await test_client.get("/api/v1/sellers/seller-1/orders")

    assert response.status_code == 200
    orders = response.json()
    assert [o["id"] for o in orders] == ["o2", "o1"]
    assert orders[0]["buyer_name"] == "Unknown Buyer"
    assert orders[0]["listing_name"] == "Basmati Rice"
    assert orders[1]["buyer_name"] == "Asha Patil"
    assert orders[1]["buyer_phone"] == "+91-98200-00001"


@pytest.mark.asyncio
async def test_summary_widget(test_client: AsyncClient):
    await place(test_client, *(order_payload(f"o{i}", minute=i) for i in range(1, 8)))
    await act(test_client, "o7", "confirm")

    response = await test_client.get("/api/v1/sellers/seller-1/orders/summary")

    assert response.status_code == 200
    data = response.json()
    assert [o["id"] for o in data["orders"]] == ["o7", "o6", "o5", "o4", "o3"]
    assert data["orders"][0]["status"] == "confirmed"
    assert data["pending_count"] == 6


@pytest.mark.asyncio
async def test_board_tabs(test_client: AsyncClient):
    await place(test_client, *(order_payload(f"o{i}", minute=i) for i in range(1, 5)))
    await act(test_client, "o1", "cancel")
    await act(test_client, "o2", "confirm")

    board = (await test_client.get("/api/v1/sellers/seller-1/orders/board?tab=all")).json()
    pending = (await test_client.get("/api/v1/sellers/seller-1/orders/board")).json()

    assert [o["id"] for o in board["orders"]] == ["o4", "o3", "o2"]
    assert board["tab_counts"] == {"pending": 2, "confirmed": 1, "shipped": 0, "all": 3}
    assert board["total_orders"] == 4
    assert pending["tab"] == "pending"
    assert [o["id"] for o in pending["orders"]] == ["o4", "o3"]


@pytest.mark.asyncio
async def test_board_rejects_unknown_tab(test_client: AsyncClient):
    response = await test_client.get("/api/v1/sellers/seller-1/orders/board?tab=cancelled")

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_pending_count(test_client: AsyncClient):
    await place(test_client, order_payload("o1"), order_payload("o2", minute=1))
    await act(test_client, "o1", "confirm")

    response = await test_client.get("/api/v1/sellers/seller-1/orders/pending-count")

    assert response.json() == {"seller_id": "seller-1", "pending_count": 1}


@pytest.mark.asyncio
async def test_order_detail(test_client: AsyncClient):
    await place(test_client, order_payload("o1"))

    response = await test_client.get("/api/v1/sellers/seller-1/orders/o1")

    assert response.status_code == 200
    data = response.json()
    assert data["order"]["id"] == "o1"
    assert data["actions"] == ["confirm", "cancel"]
    assert data["display_address"] == "12 Market Road, Nashik"


@pytest.mark.asyncio
async def test_detail_of_other_sellers_order_is_404(test_client: AsyncClient):
    await place(test_client, order_payload("o1", seller_id="seller-2"))

    response = await test_client.get("/api/v1/sellers/seller-1/orders/o1")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_full_lifecycle_retains_delivered_order(test_client: AsyncClient):
    await place(test_client, order_payload("o1"))

    for action, expected in (("confirm", "confirmed"), ("ship", "shipped"), ("deliver", "delivered")):
        response = await act(test_client, "o1", action)
        assert response.status_code == 200, response.text
        assert response.json()["new_status"] == expected

    data = response.json()
    assert data["previous_status"] == "shipped"
    assert data["removed"] is False
    assert data["order"]["status"] == "delivered"

    detail = (await test_client.get("/api/v1/sellers/seller-1/orders/o1")).json()
    assert detail["actions"] == []


@pytest.mark.asyncio
async def test_invalid_transition_is_409(test_client: AsyncClient):
    await place(test_client, order_payload("o1"))
    await act(test_client, "o1", "confirm")
    await act(test_client, "o1", "ship")

    response = await act(test_client, "o1", "confirm")

    assert response.status_code == 409
    data = response.json()
    assert data["error"] == "invalid_transition"
    assert data["current_status"] == "shipped"
    assert data["requested_status"] == "confirmed"

    detail = (await test_client.get("/api/v1/sellers/seller-1/orders/o1")).json()
    assert detail["order"]["status"] == "shipped"


@pytest.mark.asyncio
async def test_transition_of_unknown_order_is_404(test_client: AsyncClient):
    response = await act(test_client, "missing", "confirm")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_unknown_action_is_422(test_client: AsyncClient):
    await place(test_client, order_payload("o1"))

    response = await act(test_client, "o1", "refund")

    assert response.status_code == 422
