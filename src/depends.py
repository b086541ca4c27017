from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.app.services.payhere import PayHereConfig

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def build_payhere_config(config=ApplicationConfig) -> PayHereConfig:
    return PayHereConfig(
        merchant_id=config.PAYHERE_MERCHANT_ID,
        merchant_secret=config.PAYHERE_SECRET,
        return_url=config.PAYHERE_RETURN_URL,
        cancel_url=config.PAYHERE_CANCEL_URL,
        notify_url=config.PAYHERE_NOTIFY_URL,
        currency=config.PAYHERE_CURRENCY,
        sandbox=config.PAYHERE_SANDBOX,
        default_city=config.PAYHERE_DEFAULT_CITY,
        default_country=config.PAYHERE_DEFAULT_COUNTRY,
    )


def get_payhere_config() -> PayHereConfig:
    return build_payhere_config(ApplicationConfig)
