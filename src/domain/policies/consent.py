"""Consent gate applied before cash call approval."""

from src.domain.constants import CONSENT_REQUIRED_MESSAGE
from src.domain.errors import InvalidStateError
from src.domain.models.cash_call import CashCall, CashCallConsentStatus


def ensure_consent_allows_approval(cash_call: CashCall) -> None:
    """Raise when required partner consent has not been received.

    Raises:
        InvalidStateError: If consent is required and not RECEIVED.
    """
    if (
        cash_call.consent_required
        and cash_call.consent_status is not CashCallConsentStatus.RECEIVED
    ):
        raise InvalidStateError(CONSENT_REQUIRED_MESSAGE)


__all__ = ["ensure_consent_allows_approval"]
