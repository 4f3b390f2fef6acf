"""Domain error taxonomy.

Every error is raised synchronously by the aggregate or use case that detects
it and propagates to the caller unchanged.
"""


class DomainError(Exception):
    """Base class for workflow core errors."""


class ValidationError(DomainError, ValueError):
    """Malformed dates, amounts or percentages, or contradictory input."""


class NotFoundError(DomainError, LookupError):
    """A referenced cash call, statement, lease or partner does not exist."""


class OrgMismatchError(NotFoundError):
    """Entity exists but belongs to a different organization."""


class InvalidStateError(DomainError):
    """Operation violates a lifecycle or consent rule."""


__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "OrgMismatchError",
    "InvalidStateError",
]
