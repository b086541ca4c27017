from .order_repository import OrderRepository
from .company_repository import CompanyRepository
from .subscription_plan_repository import SubscriptionPlanRepository

__all__ = [
    "OrderRepository",
    "CompanyRepository",
    "SubscriptionPlanRepository",
]
