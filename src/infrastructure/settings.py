"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import DEFAULT_PAGE_SIZE, DEFAULT_TOP_CATEGORIES
from src.domain.services.normalization import normalize_email
from src.infrastructure.logging.logger import get_app_logger
from src.utils.formatting import DEFAULT_CURRENCY_PREFIX


@dataclass(frozen=True)
class LedgerSettings:
    """Runtime settings for the ledger dashboard.

    Attributes:
        authorized_users: Emails allowed to use the dashboard.
        admin_users: Emails with administrator rights.
        page_size: Rows per page in the entries table.
        top_categories: Number of categories in the breakdown chart.
        report_title: Title printed on exported reports.
        currency_prefix: Prefix used when formatting amounts.
    """

    authorized_users: tuple[str, ...] = ()
    admin_users: tuple[str, ...] = ()
    page_size: int = DEFAULT_PAGE_SIZE
    top_categories: int = DEFAULT_TOP_CATEGORIES
    report_title: str = "Financial Report"
    currency_prefix: str = DEFAULT_CURRENCY_PREFIX

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        admin_users = cls._parse_emails(os.getenv("LEDGER_ADMIN_USERS"))
        authorized_users = cls._parse_emails(
            os.getenv("LEDGER_AUTHORIZED_USERS")
        )
        # Administrators always have access.
        for email in admin_users:
            if email not in authorized_users:
                authorized_users += (email,)
        if not authorized_users:
            logger.warning(
                "LEDGER_AUTHORIZED_USERS is empty; every sign-in will be "
                "rejected."
            )
        return cls(
            authorized_users=authorized_users,
            admin_users=admin_users,
            page_size=cls._parse_positive_int(
                "LEDGER_PAGE_SIZE",
                DEFAULT_PAGE_SIZE,
                logger,
            ),
            top_categories=cls._parse_positive_int(
                "LEDGER_TOP_CATEGORIES",
                DEFAULT_TOP_CATEGORIES,
                logger,
            ),
            report_title=(
                os.getenv("LEDGER_REPORT_TITLE", "").strip()
                or "Financial Report"
            ),
            currency_prefix=(
                os.getenv("LEDGER_CURRENCY_PREFIX", "").strip()
                or DEFAULT_CURRENCY_PREFIX
            ),
        )

    @staticmethod
    def _parse_emails(raw: str | None) -> tuple[str, ...]:
        """Split a comma-separated list of emails.

        Args:
            raw: Raw environment value.

        Returns:
            tuple[str, ...]: Normalized emails without duplicates.
        """
        if not raw:
            return ()
        emails: list[str] = []
        for chunk in raw.split(","):
            email = normalize_email(chunk)
            if email and email not in emails:
                emails.append(email)
        return tuple(emails)

    @staticmethod
    def _parse_positive_int(name: str, default: int, logger) -> int:
        """Read a positive integer, falling back to ``default``.

        Args:
            name: Environment variable name.
            default: Value used when missing or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            logger.warning(f"Invalid {name}='{raw}'; using {default}.")
            return default
        if value < 1:
            logger.warning(f"{name} must be positive; using {default}.")
            return default
        return value


__all__ = ["LedgerSettings"]
