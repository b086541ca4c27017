"""CreateOrder Use Case

Persists a pending order for a subscription plan and builds the signed
PayHere checkout payload the browser redirects with.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.payhere import PayHereConfig, PayHereSigner, format_amount
from src.app.repositories.order_repository import OrderRepository
from src.app.repositories.company_repository import CompanyRepository
from src.app.repositories.subscription_plan_repository import SubscriptionPlanRepository
from src.domain.company import Company
from src.domain.order import Order, OrderStatus
from src.domain.subscription_plan import SubscriptionPlan
from .dtos import CreateOrderCommandDTO, CreateOrderResponseDTO, PayHereCheckoutDTO
from .errors import PaymentErrorCode

logger = logging.getLogger(__name__)


class CreateOrder:
    """
    Use Case: Create a pending order and its PayHere checkout payload

    Business Rules:
    1. subscription_id and company_id are both required
    2. Both must reference existing records; otherwise nothing is written
    3. Amount, currency and credits are copied verbatim from the plan
    4. Exactly one order is written per successful call
    5. The checkout hash is computed over the two-decimal amount string

    Flow:
    1. Validate ids
    2. Load plan and company
    3. Create order (PENDING)
    4. Build signed checkout payload, then commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        order_repo: OrderRepository,
        company_repo: CompanyRepository,
        plan_repo: SubscriptionPlanRepository,
        payhere_config: PayHereConfig,
    ):
        self.uow = uow
        self.order_repo = order_repo
        self.company_repo = company_repo
        self.plan_repo = plan_repo
        self.payhere_config = payhere_config
        self.signer = PayHereSigner.from_config(payhere_config)

    async def execute(self, command: CreateOrderCommandDTO) -> Result[CreateOrderResponseDTO]:
        """
        Execute order creation

        Args:
            command: CreateOrderCommandDTO with subscription_id and company_id

        Returns:
            Result[CreateOrderResponseDTO]: Checkout payload or error

        Errors:
            INVALID_REQUEST: An id is missing
            SUBSCRIPTION_NOT_FOUND / COMPANY_NOT_FOUND: Unknown reference
            CREATE_ORDER_FAILED: Persistence failure
        """
        if not command.subscription_id or not command.company_id:
            return Return.err(
                Error(
                    code=PaymentErrorCode.INVALID_REQUEST,
                    message="subscriptionId and companyId are required",
                )
            )

        try:
            plan = await self.plan_repo.get_by_id(command.subscription_id)
            if not plan:
                return Return.err(
                    Error(
                        code=PaymentErrorCode.SUBSCRIPTION_NOT_FOUND,
                        message=f"Subscription {command.subscription_id} not found",
                    )
                )

            company = await self.company_repo.get_by_id(command.company_id)
            if not company:
                return Return.err(
                    Error(
                        code=PaymentErrorCode.COMPANY_NOT_FOUND,
                        message=f"Company {command.company_id} not found",
                    )
                )

            order = Order(
                company_id=company.id,
                subscription_plan_id=plan.id,
                amount=plan.price,
                currency=plan.currency or self.payhere_config.currency,
                status=OrderStatus.PENDING,
                credits=plan.credits or 0,
                ai_credits=plan.ai_credits or 0,
            )
            order = await self.order_repo.create(order)

            # Payload is complete before the order becomes visible
            response = CreateOrderResponseDTO(payhere_data=self._build_checkout(order, plan, company))

            await self.uow.commit()

            logger.info(
                f"Created order {order.id} for company {company.id}: "
                f"plan={plan.plan_name}, amount={response.payhere_data.amount} {order.currency}"
            )

            return Return.ok(response)

        except Exception as e:
            await self.uow.rollback()
            logger.error(
                f"Failed to create order for company {command.company_id}, "
                f"subscription {command.subscription_id}: {e}"
            )
            return Return.err(
                Error(
                    code=PaymentErrorCode.CREATE_ORDER_FAILED,
                    message="Error creating order",
                    reason=str(e),
                )
            )

    def _build_checkout(
        self, order: Order, plan: SubscriptionPlan, company: Company
    ) -> PayHereCheckoutDTO:
        config = self.payhere_config
        amount = format_amount(order.amount)

        return PayHereCheckoutDTO(
            sandbox=config.sandbox,
            merchant_id=config.merchant_id,
            return_url=config.return_url.format(company_id=company.id),
            cancel_url=config.cancel_url.format(company_id=company.id),
            notify_url=config.notify_url,
            order_id=str(order.id),
            items=plan.plan_name,
            amount=amount,
            currency=order.currency,
            hash=self.signer.checkout_hash(str(order.id), amount, order.currency),
            first_name=company.company_name,
            last_name="",
            email=company.inquiry_email or "",
            phone=company.general_phone_number or "",
            address=company.address_line1 or "",
            city=company.city or config.default_city,
            country=company.country or config.default_country,
            custom_1=str(order.credits),
            custom_2=str(order.ai_credits),
        )
