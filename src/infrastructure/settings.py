"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import DEFAULT_DAY_COUNT_BASIS
from src.domain.errors import ValidationError
from src.domain.models.interest import InterestPolicy
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class JibSettings:
    """Default interest terms for statement linking runs.

    Attributes:
        annual_interest_rate_percent: Default annual late-payment rate.
        day_count_basis: Default day-count basis (360 or 365).
    """

    annual_interest_rate_percent: str = "0.00"
    day_count_basis: int = DEFAULT_DAY_COUNT_BASIS

    @classmethod
    def from_env(cls) -> "JibSettings":
        """Build settings from environment variables.

        Returns:
            JibSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        rate = os.getenv("JIB_INTEREST_RATE_PERCENT", "0.00").strip()
        raw_basis = os.getenv("JIB_DAY_COUNT_BASIS", "").strip()
        basis = cls._parse_basis(raw_basis, logger=get_app_logger())
        return cls(annual_interest_rate_percent=rate, day_count_basis=basis)

    @staticmethod
    def _parse_basis(raw_basis: str, logger) -> int:
        """Parse the day-count basis, falling back to the default.

        Args:
            raw_basis: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: Parsed basis or the default when unset or not numeric.
        """
        if not raw_basis:
            return DEFAULT_DAY_COUNT_BASIS
        if not raw_basis.isdigit():
            logger.warning(
                f"Ignoring non-numeric JIB_DAY_COUNT_BASIS={raw_basis!r}"
            )
            return DEFAULT_DAY_COUNT_BASIS
        return int(raw_basis)

    def interest_policy(self) -> InterestPolicy:
        """Return the configured interest policy.

        Raises:
            ValidationError: If the configured rate or basis is invalid.
        """
        try:
            return InterestPolicy(
                annual_interest_rate_percent=self.annual_interest_rate_percent,
                day_count_basis=self.day_count_basis,
            )
        except ValidationError as exc:
            raise ValidationError(f"Invalid interest settings: {exc}") from exc


__all__ = ["JibSettings"]
