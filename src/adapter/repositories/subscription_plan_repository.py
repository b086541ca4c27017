"""SQLAlchemy Subscription Plan Repository Implementation"""

from typing import List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.subscription_plan_repository import SubscriptionPlanRepository
from src.domain.subscription_plan import SubscriptionPlan


class SqlAlchemySubscriptionPlanRepository(SubscriptionPlanRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, plan_id: str) -> Optional[SubscriptionPlan]:
        statement = select(SubscriptionPlan).where(SubscriptionPlan.id == plan_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_all(self) -> List[SubscriptionPlan]:
        statement = select(SubscriptionPlan).order_by(SubscriptionPlan.price)
        result = await self.session.execute(statement)
        return list(result.scalars().all())
