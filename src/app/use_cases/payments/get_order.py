"""Get Order Use Case

Read-only order status lookup used by the checkout return page.
"""

from libs.result import Result, Return, Error
from src.app.repositories.order_repository import OrderRepository
from src.domain.order import OrderStatus
from .dtos import OrderDetailDTO
from .errors import PaymentErrorCode


class GetOrder:
    """
    Get Order Use Case

    Never mutates state. The order may be in any of its three states,
    since the PayHere notification can arrive before or after the browser
    returns.
    """

    def __init__(self, order_repo: OrderRepository):
        self.order_repo = order_repo

    async def execute(self, order_id: str) -> Result[OrderDetailDTO]:
        """
        Execute get order operation

        Args:
            order_id: Order identifier

        Returns:
            Result[OrderDetailDTO]: Order details or error

        Errors:
            ORDER_NOT_FOUND: No order with this id
        """
        order = await self.order_repo.get_by_id(order_id)

        if not order:
            return Return.err(
                Error(
                    code=PaymentErrorCode.ORDER_NOT_FOUND,
                    message=f"Order {order_id} not found",
                )
            )

        return Return.ok(
            OrderDetailDTO(
                order_id=order.id,
                status=OrderStatus(order.status).value,
                amount=order.amount,
                currency=order.currency,
                company_id=order.company_id,
                subscription_plan_id=order.subscription_plan_id,
                payhere_order_id=order.payhere_order_id,
                payhere_transaction_id=order.payhere_transaction_id,
                credits=order.credits,
                ai_credits=order.ai_credits,
                created_at=order.created_at,
                updated_at=order.updated_at,
            )
        )
