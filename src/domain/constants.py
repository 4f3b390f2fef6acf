"""Domain constants for cash calls and JIB statements."""

DAY_COUNT_BASES = (360, 365)
DEFAULT_DAY_COUNT_BASIS = 365

CONSENT_REQUIRED_MESSAGE = "Consent must be RECEIVED before approval"

CASH_CALL_AGGREGATE = "CashCall"
CASH_CALL_CREATED_EVENT = "CashCallCreated"


__all__ = [
    "DAY_COUNT_BASES",
    "DEFAULT_DAY_COUNT_BASIS",
    "CONSENT_REQUIRED_MESSAGE",
    "CASH_CALL_AGGREGATE",
    "CASH_CALL_CREATED_EVENT",
]
