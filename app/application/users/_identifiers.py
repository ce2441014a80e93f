"""Path identifier gate shared by the single-user use cases."""

from app.domain.users.errors import MalformedIdentifierError
from app.domain.users.identifiers import is_valid_identifier, normalize_identifier


def require_identifier(user_id: object) -> str:
    """Return the storage form of `user_id` or raise MalformedIdentifierError."""
    if not is_valid_identifier(user_id):
        raise MalformedIdentifierError(user_id)
    return normalize_identifier(user_id)
