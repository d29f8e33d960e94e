"""
Domain layer - Pure business logic with zero framework imports.

This package contains the member model, field validation and the
registration workflow. It defines its own port interfaces for
infrastructure abstraction so that storage adapters stay swappable.
"""

from .exceptions import EmailAlreadyRegistered, InvalidMember, MemberError
from .model import Member
from .ports import MemberRepository
from .registration import MemberService
from .validation import Violation, validate

__all__ = [
    "EmailAlreadyRegistered",
    "InvalidMember",
    "Member",
    "MemberError",
    "MemberRepository",
    "MemberService",
    "Violation",
    "validate",
]
