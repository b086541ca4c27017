"""ListCompanyOrders Use Case

Paginated view of a company's order history, newest first.
"""

import math
from libs.result import Result, Return, Error
from src.app.repositories.company_repository import CompanyRepository
from src.app.repositories.order_repository import OrderRepository
from src.app.repositories.subscription_plan_repository import SubscriptionPlanRepository
from src.domain.order import OrderStatus
from .dtos import OrderSummaryDTO, PaginatedOrdersResponseDTO
from .errors import PaymentErrorCode

MAX_PAGE_SIZE = 100


class ListCompanyOrders:
    """
    Use Case: List the orders recorded in a company's history

    Business Rules:
    1. page >= 1 and 1 <= limit <= 100
    2. A page past the end is clamped to the last page
    3. Plan names are resolved for display; deleted plans show as "N/A"
    """

    def __init__(
        self,
        company_repo: CompanyRepository,
        order_repo: OrderRepository,
        plan_repo: SubscriptionPlanRepository,
    ):
        self.company_repo = company_repo
        self.order_repo = order_repo
        self.plan_repo = plan_repo

    async def execute(self, company_id: str, page: int = 1, limit: int = 10) -> Result[PaginatedOrdersResponseDTO]:
        if page < 1:
            return Return.err(
                Error(code=PaymentErrorCode.INVALID_PAGINATION, message="Invalid page number")
            )
        if limit < 1 or limit > MAX_PAGE_SIZE:
            return Return.err(
                Error(code=PaymentErrorCode.INVALID_PAGINATION, message="Invalid limit value")
            )

        company = await self.company_repo.get_by_id(company_id)
        if not company:
            return Return.err(
                Error(
                    code=PaymentErrorCode.COMPANY_NOT_FOUND,
                    message=f"Company {company_id} not found",
                )
            )

        total = await self.company_repo.count_orders(company_id)
        total_pages = math.ceil(total / limit)
        current_page = min(page, max(total_pages, 1))

        order_ids = await self.company_repo.list_order_ids(
            company_id, limit=limit, offset=(current_page - 1) * limit
        )
        orders = await self.order_repo.get_by_ids(order_ids)
        plan_names = {plan.id: plan.plan_name for plan in await self.plan_repo.get_all()}

        return Return.ok(
            PaginatedOrdersResponseDTO(
                orders=[
                    OrderSummaryDTO(
                        id=order.id,
                        subscription_plan=plan_names.get(order.subscription_plan_id, "N/A"),
                        amount=order.amount,
                        currency=order.currency,
                        status=OrderStatus(order.status).value,
                        payhere_transaction_id=order.payhere_transaction_id,
                        payhere_order_id=order.payhere_order_id,
                        credits=order.credits or 0,
                        ai_credits=order.ai_credits or 0,
                        created_at=order.created_at,
                    )
                    for order in orders
                ],
                total=total,
                page=current_page,
                limit=limit,
                total_pages=total_pages,
            )
        )
