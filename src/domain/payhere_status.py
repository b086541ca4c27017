"""PayHere payment status codes

Maps the status_code sent in PayHere notifications onto order states.
"""

from enum import Enum
from typing import Optional
from src.domain.order import OrderStatus


class PayHereStatus(str, Enum):
    """status_code values documented by PayHere"""
    SUCCESS = "2"
    PENDING = "0"
    CANCELED = "-1"
    FAILED = "-2"
    CHARGEDBACK = "-3"

    @classmethod
    def parse(cls, status_code: str) -> Optional["PayHereStatus"]:
        """Return the matching status, or None for codes PayHere may add later"""
        try:
            return cls(status_code)
        except ValueError:
            return None

    @property
    def order_status(self) -> OrderStatus:
        if self is PayHereStatus.SUCCESS:
            return OrderStatus.COMPLETED
        if self is PayHereStatus.PENDING:
            return OrderStatus.PENDING
        return OrderStatus.FAILED
