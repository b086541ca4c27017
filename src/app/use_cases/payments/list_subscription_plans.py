"""ListSubscriptionPlans Use Case"""

from typing import List
from libs.result import Result, Return
from src.app.repositories.subscription_plan_repository import SubscriptionPlanRepository
from .dtos import SubscriptionPlanDTO


class ListSubscriptionPlans:
    """Read-only listing of the purchasable plans, cheapest first"""

    def __init__(self, plan_repo: SubscriptionPlanRepository):
        self.plan_repo = plan_repo

    async def execute(self) -> Result[List[SubscriptionPlanDTO]]:
        plans = await self.plan_repo.get_all()
        return Return.ok(
            [
                SubscriptionPlanDTO(
                    id=plan.id,
                    plan_name=plan.plan_name,
                    subtitle=plan.subtitle,
                    currency=plan.currency,
                    price=plan.price,
                    credits=plan.credits or 0,
                    ai_credits=plan.ai_credits or 0,
                    included_features=plan.included_features or [],
                    not_included_features=plan.not_included_features or [],
                    package_color=plan.package_color,
                    icon=plan.icon,
                )
                for plan in plans
            ]
        )
