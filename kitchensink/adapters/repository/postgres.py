"""
PostgreSQL repository adapter - Implements MemberRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Uniqueness Guarantee:
--------------------
The members table carries a UNIQUE constraint on email. save_new inserts
with ON CONFLICT (email) DO NOTHING, so a concurrent registration that
slipped past the domain's existence check produces no row instead of an
IntegrityError. The domain maps that empty result to EmailAlreadyRegistered.

Identifiers are generated by the database (gen_random_uuid) and stored as
text, so callers treat them as opaque strings.
"""

import logging
from pathlib import Path

from psycopg_pool import ConnectionPool

from kitchensink.domain.model import Member

logger = logging.getLogger(__name__)

_COLUMNS = "id, name, email, phone_number"

MIGRATIONS_DIR = Path(__file__).resolve().parent.parent.parent / "migrations"


def _to_member(row: tuple) -> Member:
    return Member(id=row[0], name=row[1], email=row[2], phone_number=row[3])


class PostgresMemberRepository:
    """
    Implements MemberRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def save_new(self, member: Member) -> Member | None:
        """
        Insert a new member and return it with its generated id.

        Args:
            member: Validated member (id is ignored)

        Returns:
            Stored member, or None if the email is already registered
        """
        sql = f"""
            INSERT INTO members (name, email, phone_number)
            VALUES (%s, %s, %s)
            ON CONFLICT (email) DO NOTHING
            RETURNING {_COLUMNS}
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (member.name, member.email, member.phone_number))
            row = cursor.fetchone()
            conn.commit()

        if row is None:
            logger.info("Insert rejected by email unique constraint")
            return None
        return _to_member(row)

    def find_by_email(self, email: str) -> Member | None:
        """Find a member by exact email match."""
        sql = f"SELECT {_COLUMNS} FROM members WHERE email = %s"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (email,))
            row = cursor.fetchone()

        return _to_member(row) if row is not None else None

    def find_by_id(self, member_id: str) -> Member | None:
        """Find a member by identifier."""
        sql = f"SELECT {_COLUMNS} FROM members WHERE id = %s"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (member_id,))
            row = cursor.fetchone()

        return _to_member(row) if row is not None else None

    def find_all_ordered_by_name(self) -> list[Member]:
        """
        Return every member sorted by name.

        COLLATE "C" compares raw bytes so ordering does not depend on the
        database locale. Insertion time breaks ties between equal names.
        """
        sql = f"""
            SELECT {_COLUMNS}
            FROM members
            ORDER BY name COLLATE "C" ASC, created_at ASC
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql)
            rows = cursor.fetchall()

        return [_to_member(row) for row in rows]


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the packaged migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    if not MIGRATIONS_DIR.exists():
        logger.warning(f"Migrations directory not found: {MIGRATIONS_DIR}")
        return

    sql_files = sorted(MIGRATIONS_DIR.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
