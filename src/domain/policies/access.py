"""Access policies for the shared ledger."""

from collections.abc import Iterable

from src.domain.errors import UnauthorizedUserError
from src.domain.services.normalization import normalize_email


def is_user_authorized(
    email: str | None,
    authorized_users: Iterable[str],
) -> bool:
    """Return True when the email belongs to the authorized list.

    Args:
        email: Email reported by the identity provider.
        authorized_users: Emails allowed to use the ledger.

    Returns:
        bool: True when the normalized email is listed.
    """
    candidate = normalize_email(email)
    if candidate is None:
        return False
    allowed = {normalize_email(user) for user in authorized_users}
    return candidate in allowed


def is_user_admin(email: str | None, admin_users: Iterable[str]) -> bool:
    """Return True when the email belongs to an administrator."""
    return is_user_authorized(email, admin_users)


def ensure_user_authorized(
    email: str | None,
    authorized_users: Iterable[str],
) -> str:
    """Return the normalized email or raise when access is denied.

    Raises:
        UnauthorizedUserError: If the email is missing or not listed.
    """
    if not is_user_authorized(email, authorized_users):
        raise UnauthorizedUserError(email)
    return normalize_email(email)


__all__ = ["is_user_authorized", "is_user_admin", "ensure_user_authorized"]
