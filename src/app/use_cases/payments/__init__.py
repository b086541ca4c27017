"""Payment domain use cases"""
from .create_order import CreateOrder
from .apply_settlement import ApplySettlement
from .handle_notification import HandlePayHereNotification
from .get_order import GetOrder
from .list_company_orders import ListCompanyOrders
from .get_active_subscription import GetActiveSubscription
from .list_subscription_plans import ListSubscriptionPlans
from .errors import PaymentErrorCode, INVALID_REQUEST_CODES, NOT_FOUND_CODES
from .dtos import (
    CreateOrderCommandDTO,
    CreateOrderResponseDTO,
    PayHereCheckoutDTO,
    PayHereNotificationDTO,
    SettlementCommandDTO,
    SettlementResultDTO,
    OrderDetailDTO,
    OrderSummaryDTO,
    PaginatedOrdersResponseDTO,
    SubscriptionPlanDTO,
    ActiveSubscriptionDTO,
    ActiveSubscriptionResponseDTO,
)

__all__ = [
    "CreateOrder",
    "ApplySettlement",
    "HandlePayHereNotification",
    "GetOrder",
    "ListCompanyOrders",
    "GetActiveSubscription",
    "ListSubscriptionPlans",
    "PaymentErrorCode",
    "INVALID_REQUEST_CODES",
    "NOT_FOUND_CODES",
    "CreateOrderCommandDTO",
    "CreateOrderResponseDTO",
    "PayHereCheckoutDTO",
    "PayHereNotificationDTO",
    "SettlementCommandDTO",
    "SettlementResultDTO",
    "OrderDetailDTO",
    "OrderSummaryDTO",
    "PaginatedOrdersResponseDTO",
    "SubscriptionPlanDTO",
    "ActiveSubscriptionDTO",
    "ActiveSubscriptionResponseDTO",
]
