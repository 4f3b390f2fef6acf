"""Domain policies package."""

from .consent import ensure_consent_allows_approval

__all__ = ["ensure_consent_allows_approval"]
