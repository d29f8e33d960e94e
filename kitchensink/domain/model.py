"""
Member entity.

A member is created transiently without an id, validated, and then
persisted by a repository which assigns the id. Persisted members are
never updated or deleted.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Member:
    """A registered person's contact record."""

    name: str | None
    email: str | None
    phone_number: str | None
    id: str | None = None
