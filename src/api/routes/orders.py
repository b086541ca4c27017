"""Order API Routes

Order creation (PayHere checkout initiation) and order status lookup.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.order_request import CreateOrderRequestSchema
from src.app.services.payhere import PayHereConfig
from src.app.use_cases.payments.dtos import (
    CreateOrderCommandDTO,
    CreateOrderResponseDTO,
    OrderDetailDTO,
)
from src.app.use_cases.payments.create_order import CreateOrder
from src.app.use_cases.payments.get_order import GetOrder
from src.adapter.repositories.order_repository import SqlAlchemyOrderRepository
from src.adapter.repositories.company_repository import SqlAlchemyCompanyRepository
from src.adapter.repositories.subscription_plan_repository import SqlAlchemySubscriptionPlanRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_payhere_config
from src.api.error import ClientError, status_code_for

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.post(
    "",
    response_model=CreateOrderResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        400: {
            "description": "Missing subscriptionId or companyId",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVALID_REQUEST",
                            "message": "subscriptionId and companyId are required"
                        }
                    }
                }
            }
        },
        404: {
            "description": "Subscription or company not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "SUBSCRIPTION_NOT_FOUND",
                            "message": "Subscription 3b2f1a0e not found"
                        }
                    }
                }
            }
        }
    }
)
async def create_order(
    request: CreateOrderRequestSchema,
    session: AsyncSession = Depends(get_session),
    payhere_config: PayHereConfig = Depends(get_payhere_config),
):
    """
    Create a pending order and return the PayHere checkout payload.

    The browser passes `payhereData` to `payhere.startPayment`. The payload
    carries the signed `hash`; no call to PayHere is made server-side.

    **Request body:**
    - `subscriptionId` (required): Plan to purchase
    - `companyId` (required): Purchasing company

    **Returns:**
    - 200: `{"payhereData": {...}}`
    - 400: Missing ids
    - 404: Subscription or company not found
    - 500: Order could not be persisted
    """
    uow = SqlAlchemyUnitOfWork(session)
    order_repo = SqlAlchemyOrderRepository(session)
    company_repo = SqlAlchemyCompanyRepository(session)
    plan_repo = SqlAlchemySubscriptionPlanRepository(session)

    command = CreateOrderCommandDTO(
        subscription_id=request.subscription_id,
        company_id=request.company_id,
    )

    use_case = CreateOrder(uow, order_repo, company_repo, plan_repo, payhere_config)
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error, status_code=status_code_for(result.error))

    return result.value


@router.get(
    "/{order_id}",
    response_model=OrderDetailDTO,
    status_code=status.HTTP_200_OK,
    responses={
        404: {
            "description": "Order not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "ORDER_NOT_FOUND",
                            "message": "Order 5f0c7a1e not found"
                        }
                    }
                }
            }
        }
    }
)
async def get_order(
    order_id: str,
    session: AsyncSession = Depends(get_session),
):
    """
    Get the current status of an order.

    Read-only; used by the checkout return page. The order may still be
    pending if PayHere has not delivered its notification yet.
    """
    use_case = GetOrder(SqlAlchemyOrderRepository(session))
    result = await use_case.execute(order_id)

    if result.is_err():
        raise ClientError(result.error, status_code=status_code_for(result.error))

    return result.value
