"""Domain errors raised by ledger services and policies."""


class LedgerError(Exception):
    """Base class for ledger domain errors."""


class NoPeriodSelectedError(LedgerError):
    """Raised when an export is requested without a bounded period."""

    def __init__(self) -> None:
        super().__init__(
            "Select a date range before exporting; "
            "all-time reports are not exported."
        )


class InvalidEntryError(LedgerError, ValueError):
    """Raised when a submitted entry fails validation."""


class InvalidAmountError(InvalidEntryError):
    """Raised when an entry amount is not a positive finite number."""


class EntryNotFoundError(LedgerError):
    """Raised when an entry id does not exist in storage."""

    def __init__(self, entry_id: str) -> None:
        super().__init__(f"Entry not found: {entry_id}")
        self.entry_id = entry_id


class UnauthorizedUserError(LedgerError):
    """Raised when a signed-in user is not on the authorized list."""

    def __init__(self, email: str | None) -> None:
        super().__init__(f"User is not authorized: {email or '<anonymous>'}")
        self.email = email


__all__ = [
    "LedgerError",
    "NoPeriodSelectedError",
    "InvalidEntryError",
    "InvalidAmountError",
    "EntryNotFoundError",
    "UnauthorizedUserError",
]
