"""Form value sanitization shared by the form models and the validation layer."""

from markupsafe import escape


def sanitize(value: str) -> str:
    """Trim surrounding whitespace and escape markup-significant characters."""
    return str(escape(value.strip()))
