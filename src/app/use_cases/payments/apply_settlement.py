"""ApplySettlement Use Case

Applies a verified PayHere notification to its order and, on successful
payment, to the owning company's subscription and credits.
"""

import logging
from typing import Any, Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.order_repository import OrderRepository
from src.app.repositories.company_repository import CompanyRepository
from src.domain.base import utcnow
from src.domain.order import Order, OrderStatus
from src.domain.payhere_status import PayHereStatus
from .dtos import SettlementCommandDTO, SettlementResultDTO
from .errors import PaymentErrorCode

logger = logging.getLogger(__name__)


def parse_credit_amount(value: Any) -> int:
    """Integer credit amount, 0 when missing or unparsable"""
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


class ApplySettlement:
    """
    Use Case: Settle an order from a verified PayHere notification

    Business Rules:
    1. Only call after the notification's merchant id and md5sig are verified
    2. status_code 2 -> COMPLETED and company credited
       status_code 0 -> PENDING
       status_code -1/-2/-3 -> FAILED
       anything else -> order unchanged
    3. COMPLETED is final: repeated notifications apply nothing
       FAILED only moves on to COMPLETED: a late pending (0) leaves it FAILED
    4. Order and company writes are committed together or not at all
    5. Pessimistic locking: the order row is locked for the whole settlement

    Flow:
    1. Get order with lock (SELECT FOR UPDATE)
    2. Map status_code, skip unknown codes and completed orders
    3. Update order status and provider ids
    4. On success, lock company, activate subscription, append order to history
    5. Commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        order_repo: OrderRepository,
        company_repo: CompanyRepository,
    ):
        self.uow = uow
        self.order_repo = order_repo
        self.company_repo = company_repo

    async def execute(self, command: SettlementCommandDTO) -> Result[SettlementResultDTO]:
        """
        Execute settlement

        Args:
            command: SettlementCommandDTO built from a verified notification

        Returns:
            Result[SettlementResultDTO]: Settlement outcome or error

        Errors:
            ORDER_NOT_FOUND: No order with this id
            SETTLEMENT_COMPANY_MISSING: Order's company does not exist
            SETTLEMENT_FAILED: Persistence failure, nothing was written
        """
        try:
            # Step 1: Lock the order so duplicate notifications serialize
            order = await self.order_repo.get_by_id(command.order_id, for_update=True)

            if not order:
                await self.uow.rollback()
                logger.warning(f"Order not found: {command.order_id}")
                return Return.err(
                    Error(
                        code=PaymentErrorCode.ORDER_NOT_FOUND,
                        message=f"Order {command.order_id} not found",
                    )
                )

            # Step 2: Map status code
            payhere_status = PayHereStatus.parse(command.status_code)

            if payhere_status is None:
                result = self._result(order, command, applied=False)
                await self.uow.rollback()
                logger.warning(
                    f"Unknown status_code: {command.status_code} for order: {command.order_id}"
                )
                return Return.ok(result)

            if order.is_completed:
                result = self._result(order, command, applied=False, duplicate=True)
                await self.uow.rollback()
                logger.info(
                    f"Order {command.order_id} already completed, ignoring "
                    f"status_code {command.status_code}"
                )
                return Return.ok(result)

            if payhere_status is PayHereStatus.PENDING and order.status == OrderStatus.FAILED:
                result = self._result(order, command, applied=False)
                await self.uow.rollback()
                logger.info(
                    f"Order {command.order_id} already failed, ignoring pending status_code"
                )
                return Return.ok(result)

            # Step 3: Update order
            order.status = payhere_status.order_status
            self._record_provider_ids(order, command)
            order.updated_at = utcnow()
            await self.order_repo.update(order)

            applied = False

            # Step 4: Credit the company on successful payment
            if payhere_status is PayHereStatus.SUCCESS:
                company = await self.company_repo.get_by_id(order.company_id, for_update=True)

                if not company:
                    await self.uow.rollback()
                    logger.error(
                        f"Company {order.company_id} not found while settling order "
                        f"{command.order_id}; settlement rolled back"
                    )
                    return Return.err(
                        Error(
                            code=PaymentErrorCode.SETTLEMENT_COMPANY_MISSING,
                            message=f"Company for order {command.order_id} not found",
                        )
                    )

                credits = parse_credit_amount(order.credits)
                ai_credits = parse_credit_amount(order.ai_credits)
                self._check_echoed_credits(command, credits, ai_credits)

                company.activate_subscription(order.subscription_plan_id, credits, ai_credits)
                await self.company_repo.update(company)

                if not await self.company_repo.has_order(company.id, order.id):
                    await self.company_repo.append_order(company.id, order.id)

                applied = True

            result = self._result(order, command, applied=applied)

            # Step 5: Commit order and company together
            await self.uow.commit()

            if applied:
                logger.info(
                    f"Order completed: {command.order_id}; company {order.company_id} "
                    f"subscription activated with {order.credits} credits, "
                    f"{order.ai_credits} AI credits"
                )
            else:
                logger.info(f"Order {command.order_id} status updated to {result.order_status}")

            return Return.ok(result)

        except Exception as e:
            await self.uow.rollback()
            logger.error(
                f"Failed to settle order {command.order_id} "
                f"(status_code={command.status_code}, payment_id={command.payment_id}): {e}"
            )
            return Return.err(
                Error(
                    code=PaymentErrorCode.SETTLEMENT_FAILED,
                    message="Error processing notification",
                    reason=str(e),
                )
            )

    def _record_provider_ids(self, order: Order, command: SettlementCommandDTO) -> None:
        if command.payment_id:
            order.payhere_transaction_id = command.payment_id
        provider_order_id = command.payhere_order_id or command.payment_id
        if provider_order_id:
            order.payhere_order_id = provider_order_id

    def _check_echoed_credits(self, command: SettlementCommandDTO, credits: int, ai_credits: int) -> None:
        # custom_1/custom_2 are not covered by md5sig; the order's values win
        echoed_credits = self._optional_int(command.custom_1)
        echoed_ai_credits = self._optional_int(command.custom_2)
        if (echoed_credits is not None and echoed_credits != credits) or (
            echoed_ai_credits is not None and echoed_ai_credits != ai_credits
        ):
            logger.warning(
                f"Custom fields for order {command.order_id} differ from the order: "
                f"custom_1={command.custom_1}, custom_2={command.custom_2}, "
                f"order credits={credits}, ai_credits={ai_credits}"
            )

    @staticmethod
    def _optional_int(value: Optional[str]) -> Optional[int]:
        if value is None or value == "":
            return None
        try:
            return int(value)
        except ValueError:
            return None

    @staticmethod
    def _result(
        order: Order, command: SettlementCommandDTO, applied: bool, duplicate: bool = False
    ) -> SettlementResultDTO:
        return SettlementResultDTO(
            order_id=command.order_id,
            status_code=command.status_code,
            order_status=OrderStatus(order.status).value,
            applied=applied,
            duplicate=duplicate,
        )
