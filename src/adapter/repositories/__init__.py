from .order_repository import SqlAlchemyOrderRepository
from .company_repository import SqlAlchemyCompanyRepository
from .subscription_plan_repository import SqlAlchemySubscriptionPlanRepository

__all__ = [
    "SqlAlchemyOrderRepository",
    "SqlAlchemyCompanyRepository",
    "SqlAlchemySubscriptionPlanRepository",
]
