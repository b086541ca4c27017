"""PayHere gateway configuration and integrity hashes

PayHere authenticates both the checkout request and the payment
notification with an upper-case hex MD5 over selected fields and the
upper-case hex MD5 of the merchant secret.
"""

import hashlib
import hmac
from decimal import Decimal, ROUND_HALF_UP
from typing import Union
from pydantic import BaseModel, ConfigDict, Field

TWO_PLACES = Decimal("0.01")


class PayHereConfig(BaseModel):
    """Merchant credentials and checkout settings injected into the payment use cases"""

    model_config = ConfigDict(frozen=True)

    merchant_id: str = Field(..., description="PayHere merchant id")
    merchant_secret: str = Field(..., description="PayHere merchant secret")
    return_url: str = Field(..., description="Return URL template, may contain {company_id}")
    cancel_url: str = Field(..., description="Cancel URL template, may contain {company_id}")
    notify_url: str = Field(..., description="Server-to-server notification URL")
    currency: str = Field(default="LKR", description="Fallback currency code")
    sandbox: bool = Field(default=True, description="Use the PayHere sandbox checkout")
    default_city: str = Field(default="city")
    default_country: str = Field(default="sri lanka")


def md5_upper(value: str) -> str:
    return hashlib.md5(value.encode("utf-8")).hexdigest().upper()


def format_amount(amount: Union[Decimal, int, float, str]) -> str:
    """Render an amount with exactly two decimal places ("1500" -> "1500.00")"""
    return str(Decimal(str(amount)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


class PayHereSigner:
    """
    Computes and verifies PayHere integrity hashes

    checkout:     MD5(merchant_id + order_id + amount + currency + MD5(secret))
    notification: MD5(merchant_id + order_id + payhere_amount + payhere_currency
                      + status_code + MD5(secret))

    All digests are upper-case hex.
    """

    def __init__(self, merchant_id: str, merchant_secret: str):
        self.merchant_id = merchant_id
        self.secret_digest = md5_upper(merchant_secret)

    @classmethod
    def from_config(cls, config: PayHereConfig) -> "PayHereSigner":
        return cls(config.merchant_id, config.merchant_secret)

    def checkout_hash(self, order_id: str, amount: str, currency: str) -> str:
        """
        Hash embedded in the checkout payload

        Args:
            order_id: Order id as sent to PayHere
            amount: Two-decimal amount string (see format_amount)
            currency: Currency code

        Returns:
            Upper-case hex MD5
        """
        return md5_upper(self.merchant_id + order_id + amount + currency + self.secret_digest)

    def notification_hash(
        self,
        merchant_id: str,
        order_id: str,
        payhere_amount: str,
        payhere_currency: str,
        status_code: str,
    ) -> str:
        """Hash PayHere is expected to send as md5sig for these fields"""
        return md5_upper(
            merchant_id + order_id + payhere_amount + payhere_currency + status_code + self.secret_digest
        )

    def verify_notification(
        self,
        merchant_id: str,
        order_id: str,
        payhere_amount: str,
        payhere_currency: str,
        status_code: str,
        md5sig: str,
    ) -> bool:
        """Exact, case-sensitive, constant-time comparison against md5sig"""
        local_hash = self.notification_hash(
            merchant_id, order_id, payhere_amount, payhere_currency, status_code
        )
        return hmac.compare_digest(local_hash.encode("utf-8"), md5sig.encode("utf-8"))
