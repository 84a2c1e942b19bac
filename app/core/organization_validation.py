"""Organization ID format validation for the organization header.

CUID/UUID-style: alphanumeric, hyphen, underscore; bounded length.
"""

import re

ORGANIZATION_ID_MAX_LENGTH = 64
_ORGANIZATION_ID_RE = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(ORGANIZATION_ID_MAX_LENGTH) + r"}$"
)


def is_valid_organization_id_format(value: str | None) -> bool:
    """Return True if value is a well-formed organization ID."""
    if not value or len(value) > ORGANIZATION_ID_MAX_LENGTH:
        return False
    return bool(_ORGANIZATION_ID_RE.fullmatch(value))
