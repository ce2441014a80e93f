"""
Domain-specific errors for the users bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class UserDomainError(Exception):
    """Base error for all users domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class MalformedIdentifierError(UserDomainError):
    """Raised when a user id does not match the canonical UUID layout."""

    def __init__(self, user_id: object) -> None:
        super().__init__("Invalid user ID")
        self.user_id = user_id


class ValidationFailureError(UserDomainError):
    """Raised when a user payload violates one or more field rules.

    Every violated rule is kept in `messages`; the error message is
    their comma-joined form.
    """

    def __init__(self, messages: list[str]) -> None:
        super().__init__(", ".join(messages))
        self.messages = list(messages)


class UserNotFoundError(UserDomainError):
    """Raised when a user cannot be found."""

    def __init__(self, user_id: str) -> None:
        super().__init__("User not found")
        self.user_id = user_id


class NoMatchingUsersError(UserDomainError):
    """Raised when none (or, under a strict policy, not all) of a batch exists."""

    def __init__(self, missing_ids: tuple[str, ...] = ()) -> None:
        message = "No matching users found."
        if missing_ids:
            message = f"Users not found: {', '.join(missing_ids)}"
        super().__init__(message)
        self.missing_ids = missing_ids


class DuplicateEmailError(UserDomainError):
    """Raised when an email is already owned by another user."""

    def __init__(self, email: str) -> None:
        super().__init__("Email already exists. Please use a different email.")
        self.email = email


class NoOpUpdateError(UserDomainError):
    """Raised when every supplied field already matches the stored value."""

    def __init__(self, user_id: str) -> None:
        super().__init__("No changes detected. Please provide different values.")
        self.user_id = user_id


class InvalidBatchRequestError(UserDomainError):
    """Raised when a batch delete request is malformed."""
