"""Repository adapters - Database and in-memory implementations."""

from .memory import InMemoryMemberRepository
from .postgres import PostgresMemberRepository, run_migrations

__all__ = ["InMemoryMemberRepository", "PostgresMemberRepository", "run_migrations"]
