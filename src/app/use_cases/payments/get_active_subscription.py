"""GetActiveSubscription Use Case

Returns a company's active plan and remaining credit balances.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.company_repository import CompanyRepository
from src.app.repositories.subscription_plan_repository import SubscriptionPlanRepository
from src.domain.company import CompanySubscriptionStatus
from .dtos import ActiveSubscriptionDTO, ActiveSubscriptionResponseDTO
from .errors import PaymentErrorCode

logger = logging.getLogger(__name__)


class GetActiveSubscription:
    """
    Get Active Subscription Use Case

    A company without an active subscription still reports its balances,
    with subscription set to None.
    """

    def __init__(self, company_repo: CompanyRepository, plan_repo: SubscriptionPlanRepository):
        self.company_repo = company_repo
        self.plan_repo = plan_repo

    async def execute(self, company_id: str) -> Result[ActiveSubscriptionResponseDTO]:
        company = await self.company_repo.get_by_id(company_id)

        if not company:
            return Return.err(
                Error(
                    code=PaymentErrorCode.COMPANY_NOT_FOUND,
                    message=f"Company {company_id} not found",
                )
            )

        plan = None
        if company.has_active_subscription:
            plan = await self.plan_repo.get_by_id(company.subscription_plan_id)

        if plan is None:
            logger.info(f"No active subscription for company: {company_id}")
            return Return.ok(
                ActiveSubscriptionResponseDTO(
                    subscription=None,
                    remaining_credits=company.credits or 0,
                    remaining_ai_credits=company.ai_credits or 0,
                )
            )

        return Return.ok(
            ActiveSubscriptionResponseDTO(
                subscription=ActiveSubscriptionDTO(
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
                    subscription_status=CompanySubscriptionStatus(company.subscription_status).value,
                ),
                remaining_credits=company.credits or 0,
                remaining_ai_credits=company.ai_credits or 0,
            )
        )
