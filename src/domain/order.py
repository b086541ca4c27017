"""Order Domain Entity

One purchase attempt linking a company to a subscription plan.
Carries the payment lifecycle state driven by PayHere notifications.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String
from src.domain.base import BaseModel, generate_uuid, utcnow


class OrderStatus(str, Enum):
    """Order lifecycle states"""
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class Order(BaseModel, table=True):
    """
    Order - A single purchase attempt for a subscription plan

    Domain Rules:
    - Created in PENDING by the order initiator
    - amount, currency, credits and ai_credits are copied from the plan at
      creation and never change afterwards
    - Only status, provider ids and updated_at mutate after creation
    - COMPLETED is final; settlement is applied at most once
    - Orders are never deleted
    """

    __tablename__ = "orders"
    __table_args__ = (
        Index('ix_orders_company_id', 'company_id'),
        Index('ix_orders_status', 'status'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Opaque order identifier (sent to PayHere as order_id)"
    )

    company_id: str = Field(
        sa_column=Column(String(36), ForeignKey("companies.id"), nullable=False),
        description="Owning company"
    )

    subscription_plan_id: str = Field(
        sa_column=Column(String(36), ForeignKey("subscription_plans.id"), nullable=False),
        description="Purchased subscription plan"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="Order amount (two decimal places)"
    )

    currency: str = Field(
        sa_column=Column(String(3), nullable=False),
        description="Currency code (ISO 4217)"
    )

    status: OrderStatus = Field(
        default=OrderStatus.PENDING,
        description="Order status (pending, completed, failed)"
    )

    payhere_transaction_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String(64), nullable=True),
        description="PayHere payment_id"
    )

    payhere_order_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String(64), nullable=True),
        description="PayHere order reference"
    )

    credits: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Credits granted on successful payment"
    )

    ai_credits: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="AI credits granted on successful payment"
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Order creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last status update timestamp"
    )

    @property
    def is_completed(self) -> bool:
        return self.status == OrderStatus.COMPLETED

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "5f0c7a1e-9a59-4d3b-8a8f-0f2b1c9f6d11",
                "company_id": "c0a8012e-1d4b-4a53-9d0f-2f3b1a7e9c55",
                "subscription_plan_id": "3b2f1a0e-7c6d-4e5f-8a9b-1c2d3e4f5a6b",
                "amount": "2500.00",
                "currency": "LKR",
                "status": "pending",
                "payhere_transaction_id": None,
                "payhere_order_id": None,
                "credits": 100,
                "ai_credits": 10,
                "created_at": "2024-01-01T00:00:00Z",
                "updated_at": "2024-01-01T00:00:00Z"
            }
        }
