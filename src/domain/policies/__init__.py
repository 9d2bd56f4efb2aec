"""Domain policies package."""

from .access import ensure_user_authorized, is_user_admin, is_user_authorized

__all__ = ["ensure_user_authorized", "is_user_admin", "is_user_authorized"]
