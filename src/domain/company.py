"""Company Domain Entity

Only the fields this service reads or owns are mapped: the contact details
sent to PayHere checkout and the subscription/credit state written on
settlement.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint
from src.domain.base import BaseModel, generate_uuid, utcnow


class CompanySubscriptionStatus(str, Enum):
    """Company subscription states"""
    INACTIVE = "inactive"
    ACTIVE = "active"


class Company(BaseModel, table=True):
    """
    Company - Owner of zero or one active subscription

    Domain Rules:
    - ACTIVE implies subscription_plan_id is set
    - Subscription, status and credit balances change only on settlement
      of a successful payment (activate_subscription)
    """

    __tablename__ = "companies"

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Company identifier"
    )

    company_name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Company display name (sent as PayHere first_name)"
    )

    inquiry_email: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))

    general_phone_number: Optional[str] = Field(default=None, sa_column=Column(String(50), nullable=True))

    address_line1: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))

    city: Optional[str] = Field(default=None, sa_column=Column(String(100), nullable=True))

    country: Optional[str] = Field(default=None, sa_column=Column(String(100), nullable=True))

    subscription_plan_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String(36), ForeignKey("subscription_plans.id"), nullable=True),
        description="Current subscription plan (None = no subscription)"
    )

    subscription_status: CompanySubscriptionStatus = Field(
        default=CompanySubscriptionStatus.INACTIVE,
        description="Subscription status (inactive, active)"
    )

    credits: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Remaining credits"
    )

    ai_credits: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Remaining AI credits"
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )

    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )

    @property
    def has_active_subscription(self) -> bool:
        return (
            self.subscription_status == CompanySubscriptionStatus.ACTIVE
            and self.subscription_plan_id is not None
        )

    def activate_subscription(self, subscription_plan_id: str, credits: int, ai_credits: int) -> None:
        """Switch to the purchased plan and overwrite the credit balances"""
        if not subscription_plan_id:
            raise ValueError("An active subscription requires a subscription plan")
        self.subscription_plan_id = subscription_plan_id
        self.credits = credits
        self.ai_credits = ai_credits
        self.subscription_status = CompanySubscriptionStatus.ACTIVE
        self.updated_at = utcnow()


class CompanyOrder(BaseModel, table=True):
    """
    Company Order - Append-only order history of a company

    Domain Rules:
    - Rows are only inserted, on successful settlement
    - (company_id, order_id) is unique: an order appears at most once
    """

    __tablename__ = "company_orders"
    __table_args__ = (
        UniqueConstraint('company_id', 'order_id', name='uq_company_orders_company_order'),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    company_id: str = Field(
        sa_column=Column(String(36), ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True),
    )

    order_id: str = Field(
        sa_column=Column(String(36), ForeignKey("orders.id"), nullable=False),
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
