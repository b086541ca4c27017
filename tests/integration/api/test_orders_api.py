"""Integration tests for Order API endpoints"""

import hashlib
import pytest
from decimal import Decimal
from httpx import AsyncClient
from sqlmodel import select

from src.domain.order import Order, OrderStatus


def md5_upper(value: str) -> str:
    return hashlib.md5(value.encode()).hexdigest().upper()


class TestCreateOrderAPI:
    """POST /api/orders"""

    @pytest.mark.asyncio
    async def test_create_order_success(self, client: AsyncClient, db_session, pro_plan, company, payhere_config):
        """Pending order is stored and the signed checkout payload returned"""
        # Arrange
        plan_id, company_id = pro_plan.id, company.id

        # Act
        response = await client.post(
            "/api/orders", json={"subscriptionId": plan_id, "companyId": company_id}
        )

        # Assert
        assert response.status_code == 200
        data = response.json()["payhereData"]
        assert data["amount"] == "2500.00"
        assert data["currency"] == "LKR"
        assert data["merchant_id"] == payhere_config.merchant_id
        assert data["items"] == "Pro"
        assert data["first_name"] == "Acme Ltd"
        assert data["custom_1"] == "100"
        assert data["custom_2"] == "10"
        assert data["return_url"] == f"https://jobs.example.lk/company/{company_id}/subscription/return"
        assert data["hash"] == md5_upper(
            payhere_config.merchant_id + data["order_id"] + "2500.00" + "LKR"
            + md5_upper(payhere_config.merchant_secret)
        )

        order = (await db_session.exec(select(Order))).one()
        assert order.id == data["order_id"]
        assert order.status == OrderStatus.PENDING
        assert order.amount == Decimal("2500.00")
        assert order.company_id == company_id
        assert order.subscription_plan_id == plan_id
        assert order.credits == 100
        assert order.ai_credits == 10

    @pytest.mark.asyncio
    async def test_whole_number_price_is_sent_with_two_decimals(
        self, client: AsyncClient, basic_plan, company, payhere_config
    ):
        # Arrange
        plan_id, company_id = basic_plan.id, company.id

        # Act
        response = await client.post(
            "/api/orders", json={"subscriptionId": plan_id, "companyId": company_id}
        )

        # Assert
        assert response.status_code == 200
        data = response.json()["payhereData"]
        assert data["amount"] == "1500.00"
        assert data["hash"] == md5_upper(
            payhere_config.merchant_id + data["order_id"] + "1500.00" + "LKR"
            + md5_upper(payhere_config.merchant_secret)
        )

    @pytest.mark.asyncio
    async def test_each_call_creates_a_new_order(self, client: AsyncClient, db_session, pro_plan, company):
        # Arrange
        body = {"subscriptionId": pro_plan.id, "companyId": company.id}

        # Act
        first = await client.post("/api/orders", json=body)
        second = await client.post("/api/orders", json=body)

        # Assert
        assert first.json()["payhereData"]["order_id"] != second.json()["payhereData"]["order_id"]
        orders = (await db_session.exec(select(Order))).all()
        assert len(orders) == 2

    @pytest.mark.asyncio
    async def test_missing_ids_return_400(self, client: AsyncClient, db_session, pro_plan):
        # Act
        response = await client.post("/api/orders", json={"subscriptionId": pro_plan.id})

        # Assert
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_REQUEST"
        assert (await db_session.exec(select(Order))).all() == []

    @pytest.mark.asyncio
    async def test_unknown_subscription_returns_404(self, client: AsyncClient, db_session, company):
        # Act
        response = await client.post(
            "/api/orders", json={"subscriptionId": "no-such-plan", "companyId": company.id}
        )

        # Assert
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "SUBSCRIPTION_NOT_FOUND"
        assert (await db_session.exec(select(Order))).all() == []

    @pytest.mark.asyncio
    async def test_unknown_company_returns_404(self, client: AsyncClient, db_session, pro_plan):
        # Act
        response = await client.post(
            "/api/orders", json={"subscriptionId": pro_plan.id, "companyId": "no-such-company"}
        )

        # Assert
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "COMPANY_NOT_FOUND"
        assert (await db_session.exec(select(Order))).all() == []

    @pytest.mark.asyncio
    async def test_malformed_body_returns_422(self, client: AsyncClient):
        response = await client.post(
            "/api/orders", content="not json", headers={"content-type": "application/json"}
        )

        assert response.status_code == 422


class TestGetOrderAPI:
    """GET /api/orders/{order_id}"""

    @pytest.mark.asyncio
    async def test_get_order(self, client: AsyncClient, pro_plan, company):
        # Arrange
        created = await client.post(
            "/api/orders", json={"subscriptionId": pro_plan.id, "companyId": company.id}
        )
        order_id = created.json()["payhereData"]["order_id"]

        # Act
        response = await client.get(f"/api/orders/{order_id}")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["order_id"] == order_id
        assert data["status"] == "pending"
        assert Decimal(data["amount"]) == Decimal("2500.00")

    @pytest.mark.asyncio
    async def test_get_unknown_order_returns_404(self, client: AsyncClient):
        response = await client.get("/api/orders/no-such-order")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "ORDER_NOT_FOUND"
