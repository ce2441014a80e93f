"""
Domain rule: canonical user identifier layout.

User ids are UUID strings in the 36-character 8-4-4-4-12 hexadecimal
layout. Any id failing this check is rejected before it reaches storage.
"""

import re

IDENTIFIER_LENGTH = 36
IDENTIFIER_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def is_valid_identifier(value: object) -> bool:
    """Return True if `value` is a canonical, hyphenated UUID string."""
    if not isinstance(value, str) or len(value) != IDENTIFIER_LENGTH:
        return False
    return IDENTIFIER_PATTERN.fullmatch(value) is not None


def normalize_identifier(value: str) -> str:
    """Return the lower-case storage form of a valid identifier."""
    return value.lower()
