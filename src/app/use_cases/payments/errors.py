"""Error codes returned by the payment use cases

Codes are grouped by kind so the API layer can map them to status codes.
"""


class PaymentErrorCode:
    # Invalid request
    INVALID_REQUEST = "INVALID_REQUEST"
    INVALID_PAGINATION = "INVALID_PAGINATION"
    MERCHANT_MISMATCH = "MERCHANT_MISMATCH"
    SIGNATURE_MISMATCH = "SIGNATURE_MISMATCH"

    # Not found
    SUBSCRIPTION_NOT_FOUND = "SUBSCRIPTION_NOT_FOUND"
    COMPANY_NOT_FOUND = "COMPANY_NOT_FOUND"
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"

    # Internal
    CREATE_ORDER_FAILED = "CREATE_ORDER_FAILED"
    SETTLEMENT_FAILED = "SETTLEMENT_FAILED"
    SETTLEMENT_COMPANY_MISSING = "SETTLEMENT_COMPANY_MISSING"


INVALID_REQUEST_CODES = frozenset({
    PaymentErrorCode.INVALID_REQUEST,
    PaymentErrorCode.INVALID_PAGINATION,
    PaymentErrorCode.MERCHANT_MISMATCH,
    PaymentErrorCode.SIGNATURE_MISMATCH,
})

NOT_FOUND_CODES = frozenset({
    PaymentErrorCode.SUBSCRIPTION_NOT_FOUND,
    PaymentErrorCode.COMPANY_NOT_FOUND,
    PaymentErrorCode.ORDER_NOT_FOUND,
})
