import hashlib
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401
from src.depends import get_session, get_payhere_config
from src.domain.company import Company
from src.domain.subscription_plan import SubscriptionPlan


def md5_upper(value: str) -> str:
    return hashlib.md5(value.encode()).hexdigest().upper()


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    """Create a throwaway SQLite database per test"""
    test_db_url = f"sqlite+aiosqlite:///{tmp_path / 'payments_test.db'}"

    engine = create_async_engine(test_db_url, echo=False, future=True)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session, payhere_config):
    """Create test client with database session and PayHere config overrides"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    # Override the session dependency to use test session
    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_payhere_config] = lambda: payhere_config

    # Use ASGITransport for httpx AsyncClient
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def pro_plan(db_session):
    """Pro plan: 2500 LKR for 100 credits and 10 AI credits"""
    plan = SubscriptionPlan(
        plan_name="Pro",
        subtitle="For growing teams",
        currency="LKR",
        price=Decimal("2500.00"),
        credits=100,
        ai_credits=10,
        included_features=["Job posts", "AI screening"],
        not_included_features=["Dedicated manager"],
    )
    db_session.add(plan)
    await db_session.commit()
    return plan


@pytest_asyncio.fixture
async def basic_plan(db_session):
    plan = SubscriptionPlan(
        plan_name="Basic",
        currency="LKR",
        price=Decimal("1500"),
        credits=40,
        ai_credits=0,
    )
    db_session.add(plan)
    await db_session.commit()
    return plan


@pytest_asyncio.fixture
async def company(db_session):
    """Company without a subscription and with zero credits"""
    company = Company(
        company_name="Acme Ltd",
        inquiry_email="hello@acme.lk",
        general_phone_number="0771234567",
        address_line1="No. 1, Galle Road",
        city="Colombo",
        country="Sri Lanka",
    )
    db_session.add(company)
    await db_session.commit()
    return company


@pytest.fixture
def reload(db_session):
    """Re-read an entity from the database, discarding in-session state"""

    async def _reload(model, entity_id):
        return await db_session.get(model, entity_id, populate_existing=True)

    return _reload


@pytest.fixture
def signed_notification(payhere_config):
    """Build a notify form signed with the configured merchant secret"""

    def build(order_id: str, status_code: str = "2", amount: str = "2500.00",
              currency: str = "LKR", **overrides) -> dict:
        form = {
            "merchant_id": payhere_config.merchant_id,
            "order_id": order_id,
            "payment_id": "320025071278",
            "payhere_amount": amount,
            "payhere_currency": currency,
            "status_code": status_code,
            "md5sig": md5_upper(
                payhere_config.merchant_id + order_id + amount + currency + status_code
                + md5_upper(payhere_config.merchant_secret)
            ),
            "method": "VISA",
            "status_message": "Successfully completed the payment.",
            "card_holder_name": "A Perera",
            "card_no": "************1292",
            "custom_1": "100",
            "custom_2": "10",
        }
        form.update(overrides)
        return form

    return build
