"""Cash call aggregate and its status and consent state machines."""

import uuid
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from src.domain.errors import InvalidStateError, ValidationError
from src.utils.date_utils import parse_iso_date, utc_now
from src.utils.decimal_utils import format_amount, parse_amount, parse_percentage


class CashCallStatus(str, Enum):
    """Lifecycle states of a cash call."""

    DRAFT = "DRAFT"
    SENT = "SENT"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    PAID = "PAID"
    DEFAULTED = "DEFAULTED"


class CashCallType(str, Enum):
    """Kinds of cash call."""

    MONTHLY = "MONTHLY"
    SUPPLEMENTAL = "SUPPLEMENTAL"


class CashCallConsentStatus(str, Enum):
    """Partner consent states, independent from the lifecycle status."""

    NOT_REQUIRED = "NOT_REQUIRED"
    REQUIRED = "REQUIRED"
    RECEIVED = "RECEIVED"
    WAIVED = "WAIVED"


# APPROVED is reached through approve(), which is gated by the consent policy
# rather than by this table.
ALLOWED_TRANSITIONS: dict[CashCallStatus, frozenset[CashCallStatus]] = {
    CashCallStatus.DRAFT: frozenset(
        {CashCallStatus.SENT, CashCallStatus.REJECTED}
    ),
    CashCallStatus.SENT: frozenset({CashCallStatus.REJECTED}),
    CashCallStatus.APPROVED: frozenset(
        {CashCallStatus.PAID, CashCallStatus.DEFAULTED}
    ),
    CashCallStatus.DEFAULTED: frozenset({CashCallStatus.PAID}),
    CashCallStatus.REJECTED: frozenset(),
    CashCallStatus.PAID: frozenset(),
}


@dataclass(frozen=True)
class CashCallRecord:
    """Persistence representation of a cash call.

    Attributes:
        id: Opaque identifier.
        organization_id: Owning organization.
        lease_id: Funded lease.
        partner_id: Working-interest partner asked for funds.
        billing_month: ``YYYY-MM-DD``; only year and month are meaningful.
        amount: Two-decimal amount, negative for credits.
        type: Cash call type value.
        status: Lifecycle status value.
        consent_required: Whether partner consent gates approval.
        consent_status: Consent status value.
        due_date: Optional ``YYYY-MM-DD`` due date.
        interest_rate_percent: Optional annual late-payment rate.
        consent_received_at: When consent was received.
        approved_at: When the cash call was approved.
        created_at: Creation timestamp.
        updated_at: Last mutation timestamp.
    """

    id: str
    organization_id: str
    lease_id: str
    partner_id: str
    billing_month: str
    amount: str
    type: str
    status: str
    consent_required: bool
    consent_status: str
    due_date: str | None = None
    interest_rate_percent: str | None = None
    consent_received_at: datetime | None = None
    approved_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CashCall:
    """Request for partner funding of a lease for a billing month."""

    def __init__(
        self,
        *,
        organization_id: str,
        lease_id: str,
        partner_id: str,
        billing_month: str,
        amount: str,
        type: CashCallType | str = CashCallType.MONTHLY,
        status: CashCallStatus | str = CashCallStatus.DRAFT,
        consent_required: bool = False,
        consent_status: CashCallConsentStatus | str | None = None,
        id: str | None = None,
        due_date: str | None = None,
        interest_rate_percent: str | None = None,
        consent_received_at: datetime | None = None,
        approved_at: datetime | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> None:
        """Build a cash call, validating its formatted fields.

        Raises:
            ValidationError: If billing_month, due_date, amount, type,
                status or interest_rate_percent are malformed.
        """
        parse_iso_date(billing_month, "billingMonth")
        if due_date is not None:
            parse_iso_date(due_date, "dueDate")
        self._amount = parse_amount(amount, "amount")
        if interest_rate_percent is not None:
            parse_percentage(
                interest_rate_percent,
                "interestRatePercent",
                max_places=2,
            )

        self._id = id or str(uuid.uuid4())
        self._organization_id = organization_id
        self._lease_id = lease_id
        self._partner_id = partner_id
        self._billing_month = billing_month
        self._due_date = due_date
        self._type = _coerce_enum(CashCallType, type, "type")
        self._status = _coerce_enum(CashCallStatus, status, "status")
        self._interest_rate_percent = interest_rate_percent
        self._consent_required = bool(consent_required)
        if consent_status is None:
            consent_status = (
                CashCallConsentStatus.REQUIRED
                if self._consent_required
                else CashCallConsentStatus.NOT_REQUIRED
            )
        self._consent_status = _coerce_enum(
            CashCallConsentStatus,
            consent_status,
            "consentStatus",
        )
        self._consent_received_at = consent_received_at
        self._approved_at = approved_at
        now = utc_now()
        self._created_at = created_at or now
        self._updated_at = updated_at or now

    @property
    def id(self) -> str:
        return self._id

    @property
    def organization_id(self) -> str:
        return self._organization_id

    @property
    def lease_id(self) -> str:
        return self._lease_id

    @property
    def partner_id(self) -> str:
        return self._partner_id

    @property
    def billing_month(self) -> str:
        return self._billing_month

    @property
    def due_date(self) -> str | None:
        return self._due_date

    @property
    def amount(self) -> str:
        return format_amount(self._amount)

    @property
    def type(self) -> CashCallType:
        return self._type

    @property
    def status(self) -> CashCallStatus:
        return self._status

    @property
    def interest_rate_percent(self) -> str | None:
        return self._interest_rate_percent

    @property
    def consent_required(self) -> bool:
        return self._consent_required

    @property
    def consent_status(self) -> CashCallConsentStatus:
        return self._consent_status

    @property
    def consent_received_at(self) -> datetime | None:
        return self._consent_received_at

    @property
    def approved_at(self) -> datetime | None:
        return self._approved_at

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def approve(self, now: datetime | None = None) -> None:
        """Mark the cash call approved.

        Consent gating is enforced by the caller through
        ``ensure_consent_allows_approval`` before this method runs.
        """
        stamp = now or utc_now()
        self._status = CashCallStatus.APPROVED
        self._approved_at = stamp
        self._updated_at = stamp

    def mark_sent(self, now: datetime | None = None) -> None:
        """Move a draft cash call to SENT."""
        self._transition(CashCallStatus.SENT, now)

    def mark_paid(self, now: datetime | None = None) -> None:
        """Move an approved or defaulted cash call to PAID."""
        self._transition(CashCallStatus.PAID, now)

    def reject(self, now: datetime | None = None) -> None:
        """Move a draft or sent cash call to REJECTED."""
        self._transition(CashCallStatus.REJECTED, now)

    def mark_defaulted(self, now: datetime | None = None) -> None:
        """Move an approved cash call to DEFAULTED."""
        self._transition(CashCallStatus.DEFAULTED, now)

    def record_consent(
        self,
        status: CashCallConsentStatus | str,
        received_at: datetime | None = None,
        now: datetime | None = None,
    ) -> None:
        """Record the partner consent outcome.

        Args:
            status: New consent status.
            received_at: When consent was received; defaults to now for
                RECEIVED and is ignored otherwise.
            now: Optional clock override for the update timestamp.
        """
        consent_status = _coerce_enum(
            CashCallConsentStatus,
            status,
            "consentStatus",
        )
        stamp = now or utc_now()
        self._consent_status = consent_status
        if consent_status is CashCallConsentStatus.RECEIVED:
            self._consent_received_at = received_at or stamp
        else:
            self._consent_received_at = None
        self._updated_at = stamp

    def can_transition_to(self, target: CashCallStatus) -> bool:
        """Return True when the transition table allows ``target``."""
        return target in ALLOWED_TRANSITIONS[self._status]

    def _transition(
        self,
        target: CashCallStatus,
        now: datetime | None,
    ) -> None:
        if not self.can_transition_to(target):
            raise InvalidStateError(
                f"Cannot move cash call from {self._status.value} "
                f"to {target.value}"
            )
        self._status = target
        self._updated_at = now or utc_now()

    def to_persistence(self) -> CashCallRecord:
        """Return the persistence representation of the aggregate."""
        return CashCallRecord(
            id=self._id,
            organization_id=self._organization_id,
            lease_id=self._lease_id,
            partner_id=self._partner_id,
            billing_month=self._billing_month,
            amount=self.amount,
            type=self._type.value,
            status=self._status.value,
            consent_required=self._consent_required,
            consent_status=self._consent_status.value,
            due_date=self._due_date,
            interest_rate_percent=self._interest_rate_percent,
            consent_received_at=self._consent_received_at,
            approved_at=self._approved_at,
            created_at=self._created_at,
            updated_at=self._updated_at,
        )

    @classmethod
    def from_persistence(cls, record: CashCallRecord) -> "CashCall":
        """Rebuild an aggregate from its persistence representation."""
        return cls(
            id=record.id,
            organization_id=record.organization_id,
            lease_id=record.lease_id,
            partner_id=record.partner_id,
            billing_month=record.billing_month,
            amount=record.amount,
            type=record.type,
            status=record.status,
            consent_required=record.consent_required,
            consent_status=record.consent_status,
            due_date=record.due_date,
            interest_rate_percent=record.interest_rate_percent,
            consent_received_at=record.consent_received_at,
            approved_at=record.approved_at,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CashCall):
            return NotImplemented
        return self.to_persistence() == other.to_persistence()

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"CashCall(id={self._id!r}, status={self._status.value}, "
            f"amount={self.amount})"
        )


def _coerce_enum(enum_cls, value, field: str):
    try:
        return enum_cls(value)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(f"{field} must be one of: {allowed}") from exc


__all__ = [
    "ALLOWED_TRANSITIONS",
    "CashCall",
    "CashCallConsentStatus",
    "CashCallRecord",
    "CashCallStatus",
    "CashCallType",
]
