"""Domain normalization helpers."""


def normalize_email(email: str | None) -> str | None:
    """Normalize email addresses for comparisons.

    Args:
        email: Raw email from the identity provider or settings.

    Returns:
        str | None: Lower-cased, stripped email or None when blank.
    """
    if not email:
        return None
    cleaned = email.strip()
    return cleaned.lower() if cleaned else None


def normalize_label(label: str | None) -> str:
    """Strip surrounding whitespace from free-text labels."""
    if not label:
        return ""
    return label.strip()


__all__ = ["normalize_email", "normalize_label"]
