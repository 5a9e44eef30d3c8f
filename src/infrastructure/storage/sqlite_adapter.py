"""
SQLite Adapter - Saved-login storage backed by aiosqlite.
"""

import logging
import uuid
from pathlib import Path
from typing import Optional

import aiosqlite

from src.application.interfaces import LoginStorePort
from src.domain.value_objects import CommittedEdit, CredentialRecord
from .migrations import run_migrations


logger = logging.getLogger(__name__)


class SQLiteAdapter(LoginStorePort):
    """
    SQLite database adapter for saved logins.
    
    A login's (origin, username) pair is unique; an update that would
    collide raises ``sqlite3.IntegrityError``.
    """
    
    def __init__(self, db_path: Path) -> None:
        """
        Initialize the adapter.
        
        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = db_path
        self._connection: Optional[aiosqlite.Connection] = None

    async def initialize(self) -> None:
        """Initialize database and run migrations."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        
        # Run migrations synchronously first
        run_migrations(self.db_path)
        
        self._connection = await aiosqlite.connect(str(self.db_path))
        self._connection.row_factory = aiosqlite.Row

    async def close(self) -> None:
        """Close the database connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None

    @property
    def conn(self) -> aiosqlite.Connection:
        """Get the active connection or raise error."""
        if not self._connection:
            raise RuntimeError("Database not initialized. Call initialize() first.")
        return self._connection

    @staticmethod
    def _to_record(row: aiosqlite.Row) -> CredentialRecord:
        return CredentialRecord(
            id=row["guid"],
            origin=row["origin"],
            username=row["username"],
            password=row["password"],
        )

    async def add_login(self, origin: str, username: str, password: str) -> CredentialRecord:
        """Insert a new login with a generated id."""
        record = CredentialRecord(
            id=uuid.uuid4().hex,
            origin=origin,
            username=username,
            password=password,
        )
        await self.conn.execute(
            "INSERT INTO logins (guid, origin, username, password) VALUES (?, ?, ?, ?)",
            (record.id, record.origin, record.username, record.password)
        )
        await self.conn.commit()
        return record

    async def get_login(self, login_id: str) -> Optional[CredentialRecord]:
        """Get a login by id."""
        cursor = await self.conn.execute(
            "SELECT * FROM logins WHERE guid = ?",
            (login_id,)
        )
        row = await cursor.fetchone()
        return self._to_record(row) if row else None

    async def get_logins(self) -> list[CredentialRecord]:
        """Get all logins ordered by origin and username."""
        cursor = await self.conn.execute(
            "SELECT * FROM logins ORDER BY origin, username"
        )
        rows = await cursor.fetchall()
        return [self._to_record(row) for row in rows]

    async def find_potential_duplicates(
        self,
        origin: str,
        exclude_id: str,
    ) -> list[CredentialRecord]:
        """Get the other logins saved for an origin."""
        cursor = await self.conn.execute(
            "SELECT * FROM logins WHERE origin = ? AND guid != ?",
            (origin, exclude_id)
        )
        rows = await cursor.fetchall()
        return [self._to_record(row) for row in rows]

    async def update_login(self, edit: CommittedEdit) -> None:
        """
        Persist a committed edit.
        
        Raises:
            LookupError: If no login has this id.
            sqlite3.IntegrityError: If the username collides at the origin.
        """
        cursor = await self.conn.execute(
            """
            UPDATE logins
            SET username = ?,
                password = ?,
                time_password_changed = CASE
                    WHEN password != ? THEN CURRENT_TIMESTAMP
                    ELSE time_password_changed
                END
            WHERE guid = ?
            """,
            (edit.new_username, edit.new_password, edit.new_password, edit.id)
        )
        if cursor.rowcount == 0:
            await self.conn.rollback()
            raise LookupError(f"No saved login with id {edit.id}")
        await self.conn.commit()
        logger.debug(f"Updated login {edit.id}")
