"""PayHere API Routes

Server-to-server payment notification endpoint. PayHere retries until it
receives 200, so every verified notification is acknowledged with "OK",
including pending, failed and unknown status codes.
"""

import logging
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.services.payhere import PayHereConfig
from src.app.use_cases.payments.dtos import PayHereNotificationDTO
from src.app.use_cases.payments.errors import PaymentErrorCode
from src.app.use_cases.payments.apply_settlement import ApplySettlement
from src.app.use_cases.payments.handle_notification import HandlePayHereNotification
from src.adapter.repositories.order_repository import SqlAlchemyOrderRepository
from src.adapter.repositories.company_repository import SqlAlchemyCompanyRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_payhere_config

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/payhere", tags=["PayHere"])

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

ERROR_RESPONSES = {
    PaymentErrorCode.MERCHANT_MISMATCH: ("Invalid Merchant ID", status.HTTP_400_BAD_REQUEST),
    PaymentErrorCode.SIGNATURE_MISMATCH: ("Hash mismatch", status.HTTP_400_BAD_REQUEST),
    PaymentErrorCode.ORDER_NOT_FOUND: ("Order not found", status.HTTP_404_NOT_FOUND),
}


def text_response(content: str, status_code: int = status.HTTP_200_OK) -> PlainTextResponse:
    return PlainTextResponse(content, status_code=status_code)


@router.post(
    "/notify",
    response_class=PlainTextResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"description": "Merchant id or md5sig mismatch"},
        404: {"description": "Order not found"},
        415: {"description": "Body is not form-encoded"},
        500: {"description": "Notification could not be processed"},
    }
)
async def payhere_notify(
    request: Request,
    session: AsyncSession = Depends(get_session),
    payhere_config: PayHereConfig = Depends(get_payhere_config),
):
    """
    Receive a PayHere payment notification (notify_url).

    **Form fields:** merchant_id, order_id, payment_id, payhere_amount,
    payhere_currency, status_code, md5sig, plus optional custom_1, custom_2,
    method, status_message and card metadata.

    **Returns (text/plain):**
    - 200 `OK`: Notification verified and processed (any status_code)
    - 400: Merchant id or signature mismatch
    - 404: Unknown order id
    - 415: Wrong content type
    - 500: Internal failure, nothing was applied
    """
    content_type = request.headers.get("content-type", "")
    if FORM_CONTENT_TYPE not in content_type.lower():
        logger.warning(f"Invalid Content-Type: {content_type!r}")
        return text_response("Unsupported Media Type", status.HTTP_415_UNSUPPORTED_MEDIA_TYPE)

    notification = None
    try:
        form = await request.form()
        notification = PayHereNotificationDTO.from_form(form)

        logger.info(f"Received PayHere notification: {notification.log_fields()}")

        uow = SqlAlchemyUnitOfWork(session)
        apply_settlement = ApplySettlement(
            uow,
            SqlAlchemyOrderRepository(session),
            SqlAlchemyCompanyRepository(session),
        )
        use_case = HandlePayHereNotification(payhere_config, apply_settlement)
        result = await use_case.execute(notification)

        if result.is_err():
            content, status_code = ERROR_RESPONSES.get(
                result.error.code,
                ("Error processing notification", status.HTTP_500_INTERNAL_SERVER_ERROR),
            )
            if status_code >= 500:
                logger.error(
                    f"Error processing PayHere notification {notification.log_fields()}: "
                    f"{result.error.code} ({result.error.reason})"
                )
            return text_response(content, status_code)

        return text_response("OK")

    except Exception:
        payload = notification.log_fields() if notification else None
        logger.exception(f"Error processing PayHere notification: {payload}")
        return text_response("Error processing notification", status.HTTP_500_INTERNAL_SERVER_ERROR)
