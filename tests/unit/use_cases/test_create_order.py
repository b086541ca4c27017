"""Unit tests for CreateOrder use case

Tests cover:
- Pending order persisted with the plan's amount, currency and credits
- Signed PayHere checkout payload
- Missing ids and unknown references write nothing
- Persistence failure rolls back
"""

import hashlib
import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.payments.create_order import CreateOrder
from src.app.use_cases.payments.dtos import CreateOrderCommandDTO
from src.app.use_cases.payments.errors import PaymentErrorCode
from src.domain.company import Company
from src.domain.order import Order, OrderStatus
from src.domain.subscription_plan import SubscriptionPlan


def md5_upper(value: str) -> str:
    return hashlib.md5(value.encode()).hexdigest().upper()


@pytest.fixture
def mock_order_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=lambda order: order)
    return repo


@pytest.fixture
def mock_company_repo():
    return MagicMock()


@pytest.fixture
def mock_plan_repo():
    return MagicMock()


@pytest.fixture
def sample_plan():
    """Pro plan priced at a whole number of rupees"""
    return SubscriptionPlan(
        id="plan_pro",
        plan_name="Pro",
        currency="LKR",
        price=Decimal("1500"),
        credits=100,
        ai_credits=10,
    )


@pytest.fixture
def sample_company():
    return Company(
        id="company_123",
        company_name="Acme Ltd",
        inquiry_email="hello@acme.lk",
        general_phone_number="0771234567",
        address_line1="No. 1, Galle Road",
        city="Colombo",
        country="Sri Lanka",
    )


@pytest.fixture
def create_use_case(mock_uow, mock_order_repo, mock_company_repo, mock_plan_repo, payhere_config):
    return CreateOrder(
        uow=mock_uow,
        order_repo=mock_order_repo,
        company_repo=mock_company_repo,
        plan_repo=mock_plan_repo,
        payhere_config=payhere_config,
    )


@pytest.mark.asyncio
class TestCreateOrderSuccess:
    """Test successful order creation"""

    async def test_creates_pending_order_from_plan(
        self, create_use_case, mock_order_repo, mock_company_repo, mock_plan_repo, mock_uow,
        sample_plan, sample_company
    ):
        """
        Given: Existing plan and company
        When: execute is called
        Then: One pending order is written with the plan's values and committed
        """
        # Arrange
        mock_plan_repo.get_by_id = AsyncMock(return_value=sample_plan)
        mock_company_repo.get_by_id = AsyncMock(return_value=sample_company)
        command = CreateOrderCommandDTO(subscription_id="plan_pro", company_id="company_123")

        # Act
        result = await create_use_case.execute(command)

        # Assert
        assert result.is_ok()
        mock_order_repo.create.assert_awaited_once()
        order: Order = mock_order_repo.create.call_args[0][0]
        assert order.status == OrderStatus.PENDING
        assert order.company_id == "company_123"
        assert order.subscription_plan_id == "plan_pro"
        assert order.amount == Decimal("1500")
        assert order.currency == "LKR"
        assert order.credits == 100
        assert order.ai_credits == 10
        mock_uow.commit.assert_awaited_once()
        mock_uow.rollback.assert_not_called()

    async def test_checkout_payload_is_signed(
        self, create_use_case, mock_order_repo, mock_company_repo, mock_plan_repo,
        sample_plan, sample_company, payhere_config
    ):
        """
        Given: Plan priced 1500 LKR
        When: execute is called
        Then: amount is "1500.00" and the hash covers that exact string
        """
        # Arrange
        mock_plan_repo.get_by_id = AsyncMock(return_value=sample_plan)
        mock_company_repo.get_by_id = AsyncMock(return_value=sample_company)
        command = CreateOrderCommandDTO(subscription_id="plan_pro", company_id="company_123")

        # Act
        result = await create_use_case.execute(command)

        # Assert
        payload = result.value.payhere_data
        order = mock_order_repo.create.call_args[0][0]
        expected_hash = md5_upper(
            payhere_config.merchant_id + order.id + "1500.00" + "LKR"
            + md5_upper(payhere_config.merchant_secret)
        )
        assert payload.order_id == order.id
        assert payload.amount == "1500.00"
        assert payload.currency == "LKR"
        assert payload.hash == expected_hash
        assert payload.merchant_id == payhere_config.merchant_id
        assert payload.sandbox is True
        assert payload.items == "Pro"

    async def test_checkout_payload_carries_company_details(
        self, create_use_case, mock_company_repo, mock_plan_repo, sample_plan, sample_company
    ):
        # Arrange
        mock_plan_repo.get_by_id = AsyncMock(return_value=sample_plan)
        mock_company_repo.get_by_id = AsyncMock(return_value=sample_company)

        # Act
        result = await create_use_case.execute(
            CreateOrderCommandDTO(subscription_id="plan_pro", company_id="company_123")
        )

        # Assert
        payload = result.value.payhere_data
        assert payload.first_name == "Acme Ltd"
        assert payload.last_name == ""
        assert payload.email == "hello@acme.lk"
        assert payload.phone == "0771234567"
        assert payload.address == "No. 1, Galle Road"
        assert payload.city == "Colombo"
        assert payload.country == "Sri Lanka"
        assert payload.custom_1 == "100"
        assert payload.custom_2 == "10"
        assert payload.return_url == "https://jobs.example.lk/company/company_123/subscription/return"
        assert payload.cancel_url == "https://jobs.example.lk/company/company_123/subscription/cancel"
        assert payload.notify_url == "https://jobs.example.lk/api/payhere/notify"

    async def test_missing_company_contact_details_use_defaults(
        self, create_use_case, mock_company_repo, mock_plan_repo, sample_plan
    ):
        # Arrange
        mock_plan_repo.get_by_id = AsyncMock(return_value=sample_plan)
        mock_company_repo.get_by_id = AsyncMock(
            return_value=Company(id="company_123", company_name="Acme Ltd")
        )

        # Act
        result = await create_use_case.execute(
            CreateOrderCommandDTO(subscription_id="plan_pro", company_id="company_123")
        )

        # Assert
        payload = result.value.payhere_data
        assert payload.email == ""
        assert payload.phone == ""
        assert payload.address == ""
        assert payload.city == "city"
        assert payload.country == "sri lanka"

    async def test_response_serializes_under_payhere_data_key(
        self, create_use_case, mock_company_repo, mock_plan_repo, sample_plan, sample_company
    ):
        # Arrange
        mock_plan_repo.get_by_id = AsyncMock(return_value=sample_plan)
        mock_company_repo.get_by_id = AsyncMock(return_value=sample_company)

        # Act
        result = await create_use_case.execute(
            CreateOrderCommandDTO(subscription_id="plan_pro", company_id="company_123")
        )

        # Assert
        body = result.value.model_dump(by_alias=True)
        assert "payhereData" in body
        assert body["payhereData"]["amount"] == "1500.00"


@pytest.mark.asyncio
class TestCreateOrderValidation:
    """Invalid requests never write an order"""

    @pytest.mark.parametrize(
        "subscription_id, company_id",
        [(None, "company_123"), ("plan_pro", None), ("", ""), (None, None)],
    )
    async def test_missing_ids_return_invalid_request(
        self, create_use_case, mock_order_repo, mock_plan_repo, mock_uow, subscription_id, company_id
    ):
        # Arrange
        mock_plan_repo.get_by_id = AsyncMock()
        command = CreateOrderCommandDTO(subscription_id=subscription_id, company_id=company_id)

        # Act
        result = await create_use_case.execute(command)

        # Assert
        assert result.is_err()
        assert result.error.code == PaymentErrorCode.INVALID_REQUEST
        mock_plan_repo.get_by_id.assert_not_called()
        mock_order_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_unknown_plan_returns_subscription_not_found(
        self, create_use_case, mock_order_repo, mock_plan_repo, mock_company_repo, mock_uow
    ):
        # Arrange
        mock_plan_repo.get_by_id = AsyncMock(return_value=None)
        mock_company_repo.get_by_id = AsyncMock()

        # Act
        result = await create_use_case.execute(
            CreateOrderCommandDTO(subscription_id="missing", company_id="company_123")
        )

        # Assert
        assert result.is_err()
        assert result.error.code == PaymentErrorCode.SUBSCRIPTION_NOT_FOUND
        mock_order_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_unknown_company_returns_company_not_found(
        self, create_use_case, mock_order_repo, mock_plan_repo, mock_company_repo, mock_uow, sample_plan
    ):
        # Arrange
        mock_plan_repo.get_by_id = AsyncMock(return_value=sample_plan)
        mock_company_repo.get_by_id = AsyncMock(return_value=None)

        # Act
        result = await create_use_case.execute(
            CreateOrderCommandDTO(subscription_id="plan_pro", company_id="missing")
        )

        # Assert
        assert result.is_err()
        assert result.error.code == PaymentErrorCode.COMPANY_NOT_FOUND
        mock_order_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
class TestCreateOrderFailure:
    async def test_persistence_error_rolls_back(
        self, create_use_case, mock_order_repo, mock_plan_repo, mock_company_repo, mock_uow,
        sample_plan, sample_company
    ):
        """
        Given: Database insert fails
        When: execute is called
        Then: Transaction rolled back, CREATE_ORDER_FAILED returned
        """
        # Arrange
        mock_plan_repo.get_by_id = AsyncMock(return_value=sample_plan)
        mock_company_repo.get_by_id = AsyncMock(return_value=sample_company)
        mock_order_repo.create = AsyncMock(side_effect=Exception("Database error"))

        # Act
        result = await create_use_case.execute(
            CreateOrderCommandDTO(subscription_id="plan_pro", company_id="company_123")
        )

        # Assert
        assert result.is_err()
        assert result.error.code == PaymentErrorCode.CREATE_ORDER_FAILED
        mock_uow.rollback.assert_awaited_once()
        mock_uow.commit.assert_not_called()

    async def test_payload_build_failure_commits_nothing(
        self, mock_uow, mock_order_repo, mock_plan_repo, mock_company_repo,
        sample_plan, sample_company, payhere_config
    ):
        """
        Given: Return URL template with an unknown placeholder
        When: execute is called
        Then: The order is never committed, CREATE_ORDER_FAILED returned
        """
        # Arrange
        mock_plan_repo.get_by_id = AsyncMock(return_value=sample_plan)
        mock_company_repo.get_by_id = AsyncMock(return_value=sample_company)
        broken_config = payhere_config.model_copy(
            update={"return_url": "https://jobs.example.lk/company/{companyId}/return"}
        )
        use_case = CreateOrder(
            uow=mock_uow,
            order_repo=mock_order_repo,
            company_repo=mock_company_repo,
            plan_repo=mock_plan_repo,
            payhere_config=broken_config,
        )

        # Act
        result = await use_case.execute(
            CreateOrderCommandDTO(subscription_id="plan_pro", company_id="company_123")
        )

        # Assert
        assert result.is_err()
        assert result.error.code == PaymentErrorCode.CREATE_ORDER_FAILED
        mock_uow.commit.assert_not_called()
        mock_uow.rollback.assert_awaited_once()

    async def test_commit_happens_after_payload_is_built(
        self, create_use_case, mock_plan_repo, mock_company_repo, mock_uow,
        sample_plan, sample_company
    ):
        # Arrange
        mock_plan_repo.get_by_id = AsyncMock(return_value=sample_plan)
        mock_company_repo.get_by_id = AsyncMock(return_value=sample_company)
        mock_uow.commit = AsyncMock(side_effect=Exception("Database error"))

        # Act
        result = await create_use_case.execute(
            CreateOrderCommandDTO(subscription_id="plan_pro", company_id="company_123")
        )

        # Assert
        assert result.is_err()
        assert result.error.code == PaymentErrorCode.CREATE_ORDER_FAILED
        mock_uow.rollback.assert_awaited_once()
