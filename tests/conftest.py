import pytest
from unittest.mock import AsyncMock, MagicMock
from src.app.services.payhere import PayHereConfig

TEST_MERCHANT_ID = "1211149"
TEST_MERCHANT_SECRET = "8nWRHZEwCRSi4kEThbhrwB4p0Kf3Pc5EA6dvDF2WXyNn"


@pytest.fixture
def mock_uow():
    """Unit of work whose commit/rollback can be asserted"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def payhere_config():
    """PayHere settings with a fixture merchant secret"""
    return PayHereConfig(
        merchant_id=TEST_MERCHANT_ID,
        merchant_secret=TEST_MERCHANT_SECRET,
        return_url="https://jobs.example.lk/company/{company_id}/subscription/return",
        cancel_url="https://jobs.example.lk/company/{company_id}/subscription/cancel",
        notify_url="https://jobs.example.lk/api/payhere/notify",
        currency="LKR",
        sandbox=True,
        default_city="city",
        default_country="sri lanka",
    )
