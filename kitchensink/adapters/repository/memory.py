"""
In-memory repository adapter - Implements MemberRepository protocol.

Keeps members in a dict keyed by id. Used for local development without
a database (STORE_BACKEND=memory) and in tests.
"""

import threading
import uuid
from dataclasses import replace

from kitchensink.domain.model import Member


class InMemoryMemberRepository:
    """In-memory member storage with an email uniqueness guarantee."""

    def __init__(self) -> None:
        self._members: dict[str, Member] = {}
        self._lock = threading.Lock()

    # ── Write ──

    def save_new(self, member: Member) -> Member | None:
        with self._lock:
            if any(existing.email == member.email for existing in self._members.values()):
                return None
            saved = replace(member, id=uuid.uuid4().hex)
            self._members[saved.id] = saved
            return saved

    # ── Read ──

    def find_by_email(self, email: str) -> Member | None:
        with self._lock:
            for member in self._members.values():
                if member.email == email:
                    return member
        return None

    def find_by_id(self, member_id: str) -> Member | None:
        with self._lock:
            return self._members.get(member_id)

    def find_all_ordered_by_name(self) -> list[Member]:
        with self._lock:
            members = list(self._members.values())
        # Dict order is insertion order, so the stable sort keeps ties in
        # registration order. Encoding to bytes matches COLLATE "C".
        return sorted(members, key=lambda member: member.name.encode("utf-8"))

    # ── Bulk / internal ──

    def count(self) -> int:
        with self._lock:
            return len(self._members)

    def clear(self) -> None:
        with self._lock:
            self._members.clear()
