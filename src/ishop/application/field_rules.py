"""Text-field rule shared by every use case whose input ends up in a data file.

The data files hold one comma-separated record per line with no
escaping, so a stored text value must not contain the delimiter or a
line terminator.
"""

from __future__ import annotations

from ishop.domain.exceptions import ValidationError

FORBIDDEN_CHARACTERS = (",", "\n", "\r")


def check_text(label: str, value: str) -> str:
    """Return *value* unchanged, or raise ValidationError if it cannot be stored."""
    if any(ch in value for ch in FORBIDDEN_CHARACTERS):
        raise ValidationError(f"{label} must not contain commas or line breaks")
    return value
