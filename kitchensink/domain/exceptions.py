"""
Domain exceptions - Semantic error types for member registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class MemberError(Exception):
    """Base class for member domain errors."""

    pass


class InvalidMember(MemberError):
    """One or more member fields violate their declared rules."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        super().__init__(
            "Validation failed: " + ", ".join(f"{field}: {message}" for field, message in errors.items())
        )


class EmailAlreadyRegistered(MemberError):
    """A member with the same email address already exists."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email address {email} is already registered.")
