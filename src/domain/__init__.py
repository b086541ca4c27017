from .base import BaseModel, generate_uuid, utcnow
from .order import Order, OrderStatus
from .company import Company, CompanyOrder, CompanySubscriptionStatus
from .subscription_plan import SubscriptionPlan
from .payhere_status import PayHereStatus

__all__ = [
    "BaseModel",
    "generate_uuid",
    "utcnow",
    "Order",
    "OrderStatus",
    "Company",
    "CompanyOrder",
    "CompanySubscriptionStatus",
    "SubscriptionPlan",
    "PayHereStatus",
]
