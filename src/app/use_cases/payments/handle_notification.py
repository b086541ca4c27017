"""HandlePayHereNotification Use Case

Verifies an unauthenticated PayHere notification and hands it to
ApplySettlement. The md5sig check is the only authenticity gate on the
notify endpoint, so nothing is read or written before it passes.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.payhere import PayHereConfig, PayHereSigner
from .apply_settlement import ApplySettlement
from .dtos import PayHereNotificationDTO, SettlementCommandDTO, SettlementResultDTO
from .errors import PaymentErrorCode

logger = logging.getLogger(__name__)


class HandlePayHereNotification:
    """
    Use Case: Verify a PayHere notification and settle its order

    Business Rules:
    1. merchant_id must equal the configured merchant id (checked first,
       independent of the signature)
    2. md5sig must equal the locally computed hash exactly
    3. Only verified notifications reach ApplySettlement
    """

    def __init__(self, payhere_config: PayHereConfig, apply_settlement: ApplySettlement):
        self.payhere_config = payhere_config
        self.signer = PayHereSigner.from_config(payhere_config)
        self.apply_settlement = apply_settlement

    async def execute(self, notification: PayHereNotificationDTO) -> Result[SettlementResultDTO]:
        """
        Execute notification handling

        Args:
            notification: Parsed notification fields

        Returns:
            Result[SettlementResultDTO]: Settlement outcome or error

        Errors:
            MERCHANT_MISMATCH: merchant_id is not ours
            SIGNATURE_MISMATCH: md5sig does not match
            plus the errors of ApplySettlement
        """
        # Step 1: Merchant identity
        if notification.merchant_id != self.payhere_config.merchant_id:
            logger.warning(f"Invalid Merchant ID: {notification.merchant_id!r}")
            return Return.err(
                Error(
                    code=PaymentErrorCode.MERCHANT_MISMATCH,
                    message="Invalid Merchant ID",
                )
            )

        # Step 2: Signature
        verified = self.signer.verify_notification(
            merchant_id=notification.merchant_id,
            order_id=notification.order_id,
            payhere_amount=notification.payhere_amount,
            payhere_currency=notification.payhere_currency,
            status_code=notification.status_code,
            md5sig=notification.md5sig,
        )

        if not verified:
            logger.warning(
                f"Hash mismatch for order {notification.order_id!r}. "
                f"Notification may not be genuine."
            )
            return Return.err(
                Error(
                    code=PaymentErrorCode.SIGNATURE_MISMATCH,
                    message="Hash mismatch",
                )
            )

        logger.info(f"Hash verification passed for order {notification.order_id}")

        # Step 3: Settle
        command = SettlementCommandDTO(
            order_id=notification.order_id,
            status_code=notification.status_code,
            payment_id=notification.payment_id or None,
            payhere_order_id=notification.payhere_order_id,
            custom_1=notification.custom_1,
            custom_2=notification.custom_2,
        )
        return await self.apply_settlement.execute(command)
