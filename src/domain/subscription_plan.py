"""Subscription Plan Domain Entity

Read-only reference data: the plans a company can purchase.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from sqlmodel import Field, Column
from sqlalchemy import DateTime, Integer, JSON, Numeric, String
from src.domain.base import BaseModel, generate_uuid, utcnow


class SubscriptionPlan(BaseModel, table=True):
    """
    Subscription Plan - Price and credit grant of a purchasable plan

    Domain Rules:
    - plan_name is unique
    - Orders copy price, currency, credits and ai_credits at creation time,
      so later plan edits never affect existing orders
    """

    __tablename__ = "subscription_plans"

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Plan identifier"
    )

    plan_name: str = Field(
        sa_column=Column(String(100), nullable=False, unique=True),
        description="Display name of the plan (sent as PayHere items)"
    )

    subtitle: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Short tagline"
    )

    currency: str = Field(
        sa_column=Column(String(3), nullable=False),
        description="Currency code (ISO 4217)"
    )

    price: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="Plan price (two decimal places)"
    )

    credits: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Credits granted by the plan"
    )

    ai_credits: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="AI credits granted by the plan"
    )

    included_features: List[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False, default=list),
        description="Feature bullet points included in the plan"
    )

    not_included_features: List[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False, default=list),
        description="Feature bullet points not included in the plan"
    )

    package_color: Optional[str] = Field(
        default=None,
        sa_column=Column(String(32), nullable=True),
    )

    icon: Optional[str] = Field(
        default=None,
        sa_column=Column(String(64), nullable=True),
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )

    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
