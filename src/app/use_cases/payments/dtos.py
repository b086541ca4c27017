"""Data Transfer Objects for Payment Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, List, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field

NOTIFICATION_REQUIRED_FIELDS = (
    "merchant_id",
    "order_id",
    "payment_id",
    "payhere_amount",
    "payhere_currency",
    "status_code",
    "md5sig",
)

NOTIFICATION_OPTIONAL_FIELDS = (
    "payhere_order_id",
    "custom_1",
    "custom_2",
    "method",
    "status_message",
    "card_holder_name",
    "card_no",
    "card_expiry",
)


class CreateOrderCommandDTO(BaseModel):
    """
    Command DTO for creating an order

    Used as input to CreateOrder use case. Both ids are optional here so the
    use case can report missing ids as INVALID_REQUEST.
    """

    subscription_id: Optional[str] = Field(
        default=None,
        description="Subscription plan to purchase"
    )

    company_id: Optional[str] = Field(
        default=None,
        description="Company the plan is purchased for"
    )


class PayHereCheckoutDTO(BaseModel):
    """
    Field set handed to the PayHere JS SDK (payhere.startPayment)

    custom_1 / custom_2 carry the credits / AI credits to be granted.
    """

    sandbox: bool
    merchant_id: str
    return_url: str
    cancel_url: str
    notify_url: str
    order_id: str
    items: str
    amount: str = Field(..., description="Amount with exactly two decimal places")
    currency: str
    hash: str = Field(..., description="Upper-case hex MD5 checkout hash")
    first_name: str
    last_name: str
    email: str
    phone: str
    address: str
    city: str
    country: str
    custom_1: str
    custom_2: str

    class Config:
        json_schema_extra = {
            "example": {
                "sandbox": True,
                "merchant_id": "1211149",
                "return_url": "https://example.com/company/c1/subscription/return",
                "cancel_url": "https://example.com/company/c1/subscription/cancel",
                "notify_url": "https://example.com/api/payhere/notify",
                "order_id": "5f0c7a1e-9a59-4d3b-8a8f-0f2b1c9f6d11",
                "items": "Pro",
                "amount": "2500.00",
                "currency": "LKR",
                "hash": "45D3CBA93E9F2189BD630ADFE19AA6DC",
                "first_name": "Acme Ltd",
                "last_name": "",
                "email": "hello@acme.lk",
                "phone": "0771234567",
                "address": "No. 1, Galle Road",
                "city": "Colombo",
                "country": "Sri Lanka",
                "custom_1": "100",
                "custom_2": "10"
            }
        }


class CreateOrderResponseDTO(BaseModel):
    """Response DTO for CreateOrder, serialized as {"payhereData": {...}}"""

    model_config = ConfigDict(populate_by_name=True)

    payhere_data: PayHereCheckoutDTO = Field(..., alias="payhereData")


class PayHereNotificationDTO(BaseModel):
    """
    Notification posted by PayHere to notify_url

    Required fields default to "" instead of failing validation; an empty
    merchant_id or md5sig is rejected by the verifier anyway.
    """

    merchant_id: str = ""
    order_id: str = ""
    payment_id: str = ""
    payhere_amount: str = ""
    payhere_currency: str = ""
    status_code: str = ""
    md5sig: str = ""

    payhere_order_id: Optional[str] = None
    custom_1: Optional[str] = None
    custom_2: Optional[str] = None
    method: Optional[str] = None
    status_message: Optional[str] = None
    card_holder_name: Optional[str] = None
    card_no: Optional[str] = None
    card_expiry: Optional[str] = None

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "PayHereNotificationDTO":
        """Build from parsed form data, ignoring non-string entries such as uploads"""
        values = {}
        for name in NOTIFICATION_REQUIRED_FIELDS:
            value = form.get(name)
            values[name] = value if isinstance(value, str) else ""
        for name in NOTIFICATION_OPTIONAL_FIELDS:
            value = form.get(name)
            values[name] = value if isinstance(value, str) else None
        return cls(**values)

    def log_fields(self) -> dict:
        """Fields safe to write to logs (md5sig and card holder omitted)"""
        return {
            "merchant_id": self.merchant_id,
            "order_id": self.order_id,
            "payment_id": self.payment_id,
            "payhere_amount": self.payhere_amount,
            "payhere_currency": self.payhere_currency,
            "status_code": self.status_code,
            "status_message": self.status_message,
            "method": self.method,
            "card_no": self.card_no,
            "custom_1": self.custom_1,
            "custom_2": self.custom_2,
        }


class SettlementCommandDTO(BaseModel):
    """
    Command DTO for applying a verified notification to an order

    Used as input to ApplySettlement use case.
    """

    order_id: str
    status_code: str
    payment_id: Optional[str] = None
    payhere_order_id: Optional[str] = None
    custom_1: Optional[str] = Field(default=None, description="Credits echoed by PayHere")
    custom_2: Optional[str] = Field(default=None, description="AI credits echoed by PayHere")


class SettlementResultDTO(BaseModel):
    """Outcome of a settlement attempt"""

    order_id: str
    status_code: str
    order_status: str = Field(..., description="Order status after processing")
    applied: bool = Field(..., description="True if company subscription/credits were updated")
    duplicate: bool = Field(default=False, description="True if the order was already completed")


class OrderDetailDTO(BaseModel):
    """Response DTO for GetOrder (browser return page)"""

    order_id: str
    status: str
    amount: Decimal
    currency: str
    company_id: str
    subscription_plan_id: str
    payhere_order_id: Optional[str] = None
    payhere_transaction_id: Optional[str] = None
    credits: int
    ai_credits: int
    created_at: datetime
    updated_at: datetime


class OrderSummaryDTO(BaseModel):
    """One entry of a company's order history"""

    id: str
    subscription_plan: str
    amount: Decimal
    currency: str
    status: str
    payhere_transaction_id: Optional[str] = None
    payhere_order_id: Optional[str] = None
    credits: int
    ai_credits: int
    created_at: datetime


class PaginatedOrdersResponseDTO(BaseModel):
    """Response DTO for ListCompanyOrders"""

    orders: List[OrderSummaryDTO]
    total: int
    page: int
    limit: int
    total_pages: int


class SubscriptionPlanDTO(BaseModel):
    """Plan catalogue entry"""

    id: str
    plan_name: str
    subtitle: Optional[str] = None
    currency: str
    price: Decimal
    credits: int
    ai_credits: int
    included_features: List[str] = Field(default_factory=list)
    not_included_features: List[str] = Field(default_factory=list)
    package_color: Optional[str] = None
    icon: Optional[str] = None


class ActiveSubscriptionDTO(SubscriptionPlanDTO):
    subscription_status: str


class ActiveSubscriptionResponseDTO(BaseModel):
    """Response DTO for GetActiveSubscription"""

    subscription: Optional[ActiveSubscriptionDTO] = None
    remaining_credits: int
    remaining_ai_credits: int
