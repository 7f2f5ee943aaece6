"""
Translation of account failure kinds into HTTP status codes.
"""

from app.domain.accounts.outcomes import FailureKind

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_500 = 500


def status_for(kind: FailureKind) -> int:
    """Return the HTTP status code reported for a failure kind.

    Every FailureKind member has an explicit case.
    """
    match kind:
        case FailureKind.VALIDATION | FailureKind.INVALID_AMOUNT:
            return HTTP_400
        case FailureKind.TRADER_NOT_FOUND:
            return HTTP_404
        case (
            FailureKind.EMAIL_IN_USE
            | FailureKind.NON_ZERO_BALANCE
            | FailureKind.PENDING_ORDERS
            | FailureKind.INSUFFICIENT_FUNDS
        ):
            return HTTP_409
        case FailureKind.UNEXPECTED:
            return HTTP_500
    raise ValueError(f"Unmapped failure kind: {kind}")
