"""Request schemas for Order API

Pydantic models for validating incoming HTTP requests.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class CreateOrderRequestSchema(BaseModel):
    """
    Request schema for creating an order

    Used for POST /orders endpoint. Ids are optional at the schema level so
    a missing id is reported as 400 INVALID_REQUEST rather than 422.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "subscriptionId": "3b2f1a0e-7c6d-4e5f-8a9b-1c2d3e4f5a6b",
                "companyId": "c0a8012e-1d4b-4a53-9d0f-2f3b1a7e9c55",
            }
        },
    )

    subscription_id: Optional[str] = Field(
        default=None,
        alias="subscriptionId",
        description="Subscription plan to purchase"
    )

    company_id: Optional[str] = Field(
        default=None,
        alias="companyId",
        description="Company the plan is purchased for"
    )
