"""Error types raised by the ledger services."""


class LedgerError(Exception):
    """Base class for ledger errors."""


class StoreUnavailableError(LedgerError):
    """
    The transaction/budget store could not answer a query.

    Carries the zero-defaulted payload for the requested view so callers can
    render a degraded page instead of a partially filled one.
    """

    def __init__(self, message: str, fallback: dict | None = None):
        super().__init__(message)
        self.fallback = fallback or {}


class DuplicateUserError(LedgerError):
    """A registration collided with an existing username or email."""

    def __init__(self, field: str):
        super().__init__(f"{field} already registered")
        self.field = field


class InvalidCredentialsError(LedgerError):
    """Username/password pair did not match a user."""
