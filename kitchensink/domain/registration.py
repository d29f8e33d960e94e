"""
Member domain service - Registration workflow and read operations.

Registration runs three steps in a fixed order:

1. Field validation. Every rule runs and violations are collapsed into
   a field -> message mapping (last violation per field wins).
2. Uniqueness check by email lookup.
3. Persistence through the repository, which assigns the id.

Uniqueness is never checked against invalid data. The lookup in step 2
can race with a concurrent registration; the repository's unique
constraint is the final guard and a rejected insert is reported the
same way as a found duplicate.
"""

import logging
from dataclasses import dataclass, replace

from .exceptions import EmailAlreadyRegistered, InvalidMember
from .model import Member
from .ports import MemberRepository
from .validation import validate

logger = logging.getLogger(__name__)


@dataclass
class MemberService:
    """
    Domain service for members.

    Orchestrates registration (validation, duplicate check, persistence)
    and exposes the read paths used by the API.
    """

    repository: MemberRepository

    def list_all(self) -> list[Member]:
        """Return all members ordered by name ascending."""
        return self.repository.find_all_ordered_by_name()

    def find_by_id(self, member_id: str) -> Member | None:
        """Return the member with the given id, or None."""
        return self.repository.find_by_id(member_id)

    def find_by_email(self, email: str) -> Member | None:
        """Return the member registered with the given email, or None."""
        return self.repository.find_by_email(email)

    def register(self, candidate: Member) -> Member:
        """
        Register a new member.

        Args:
            candidate: Submitted member; any id it carries is discarded

        Returns:
            The persisted member with its generated id

        Raises:
            InvalidMember: If one or more fields break their rules
            EmailAlreadyRegistered: If the email belongs to another member
        """
        errors = self._collect_errors(candidate)
        if errors:
            raise InvalidMember(errors)

        email = candidate.email
        if self.find_by_email(email) is not None:
            raise EmailAlreadyRegistered(email)

        saved = self.repository.save_new(replace(candidate, id=None))
        if saved is None:
            # Lost a race with a concurrent registration of the same email
            raise EmailAlreadyRegistered(email)

        logger.info("Registered member %s", saved.id)
        return saved

    def _collect_errors(self, candidate: Member) -> dict[str, str]:
        """Collapse violations into one message per field."""
        errors: dict[str, str] = {}
        for violation in validate(candidate):
            errors[violation.field] = violation.message
        return errors
