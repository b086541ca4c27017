"""Subscription plan API Routes"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.payments.dtos import SubscriptionPlanDTO
from src.app.use_cases.payments.list_subscription_plans import ListSubscriptionPlans
from src.adapter.repositories.subscription_plan_repository import SqlAlchemySubscriptionPlanRepository
from src.depends import get_session

router = APIRouter(prefix="/subscriptions", tags=["Subscriptions"])


@router.get("", response_model=List[SubscriptionPlanDTO], status_code=status.HTTP_200_OK)
async def list_subscription_plans(session: AsyncSession = Depends(get_session)):
    """List the purchasable subscription plans, cheapest first."""
    use_case = ListSubscriptionPlans(SqlAlchemySubscriptionPlanRepository(session))
    result = await use_case.execute()
    return result.value
