"""Company API Routes

Read-only views of a company's order history and active subscription.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.payments.dtos import (
    ActiveSubscriptionResponseDTO,
    PaginatedOrdersResponseDTO,
)
from src.app.use_cases.payments.get_active_subscription import GetActiveSubscription
from src.app.use_cases.payments.list_company_orders import ListCompanyOrders
from src.adapter.repositories.order_repository import SqlAlchemyOrderRepository
from src.adapter.repositories.company_repository import SqlAlchemyCompanyRepository
from src.adapter.repositories.subscription_plan_repository import SqlAlchemySubscriptionPlanRepository
from src.depends import get_session
from src.api.error import ClientError, status_code_for

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.get(
    "/{company_id}/orders",
    response_model=PaginatedOrdersResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_company_orders(
    company_id: str,
    page: int = 1,
    limit: int = 10,
    session: AsyncSession = Depends(get_session),
):
    """
    List a company's orders, paginated.

    **Query parameters:**
    - `page` (default 1, >= 1)
    - `limit` (default 10, 1..100)

    **Returns:**
    - 200: Orders page
    - 400: Invalid pagination parameters
    - 404: Company not found
    """
    use_case = ListCompanyOrders(
        SqlAlchemyCompanyRepository(session),
        SqlAlchemyOrderRepository(session),
        SqlAlchemySubscriptionPlanRepository(session),
    )
    result = await use_case.execute(company_id, page=page, limit=limit)

    if result.is_err():
        raise ClientError(result.error, status_code=status_code_for(result.error))

    return result.value


@router.get(
    "/{company_id}/subscription",
    response_model=ActiveSubscriptionResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_active_subscription(
    company_id: str,
    session: AsyncSession = Depends(get_session),
):
    """
    Get the company's active subscription and remaining credits.

    `subscription` is null when the company has no active plan.
    """
    use_case = GetActiveSubscription(
        SqlAlchemyCompanyRepository(session),
        SqlAlchemySubscriptionPlanRepository(session),
    )
    result = await use_case.execute(company_id)

    if result.is_err():
        raise ClientError(result.error, status_code=status_code_for(result.error))

    return result.value
