"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .model import Member


class MemberRepository(Protocol):
    """Port interface for member persistence."""

    def save_new(self, member: "Member") -> "Member | None":
        """
        Persist a new member and assign its identifier.

        The store enforces email uniqueness. A rejected insert is reported
        by returning None rather than raising.

        Args:
            member: Validated member without an id

        Returns:
            The stored member with its generated id,
            or None if the email is already taken
        """
        ...

    def find_by_email(self, email: str) -> "Member | None":
        """Find a member by exact email match."""
        ...

    def find_by_id(self, member_id: str) -> "Member | None":
        """Find a member by identifier."""
        ...

    def find_all_ordered_by_name(self) -> "list[Member]":
        """
        Return every member sorted by name ascending.

        Ordering is lexicographic on the stored text, not locale-aware.
        """
        ...
