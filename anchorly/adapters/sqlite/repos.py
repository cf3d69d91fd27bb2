import sqlite3
from datetime import datetime
from typing import Any
from uuid import uuid4

from anchorly.adapters.errors import DuplicateKeyError
from anchorly.domain.entities import Link, User


def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


class _SQLiteRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn


class SQLiteUserRepo(_SQLiteRepo):
    def create(self, user: User) -> User:
        stored = user.model_copy(update={"id": user.id or str(uuid4())})
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO users (id, username, email, password_hash, created_at)
                VALUES (?, ?, ?, ?, ?)
            """,
                (
                    stored.id,
                    stored.username,
                    stored.email,
                    stored.password_hash,
                    stored.created_at.isoformat(),
                ),
            )
            conn.commit()
        except sqlite3.IntegrityError as e:
            raise DuplicateKeyError(stored.email) from e
        finally:
            conn.close()
        return stored

    def get_by_id(self, user_id: str) -> User | None:
        return self._fetch_one("SELECT * FROM users WHERE id = ?", user_id)

    def get_by_email(self, email: str) -> User | None:
        return self._fetch_one("SELECT * FROM users WHERE email = ?", email)

    def _fetch_one(self, query: str, param: str) -> User | None:
        conn = self._get_conn()
        try:
            row = conn.execute(query, (param,)).fetchone()
        finally:
            conn.close()
        if not row:
            return None
        return self._map_row_to_user(row)

    def _map_row_to_user(self, row: dict[str, Any]) -> User:
        return User(
            id=row["id"],
            username=row["username"],
            email=row["email"],
            password_hash=row["password_hash"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )


class SQLiteLinkRepo(_SQLiteRepo):
    def create(self, link: Link) -> Link:
        stored = link.model_copy(update={"id": link.id or str(uuid4())})
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO links (id, title, href, user_id, created_at)
                VALUES (?, ?, ?, ?, ?)
            """,
                (
                    stored.id,
                    stored.title,
                    stored.href,
                    stored.user_id,
                    stored.created_at.isoformat(),
                ),
            )
            conn.commit()
        finally:
            conn.close()
        return stored

    def get_by_id(self, link_id: str) -> Link | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM links WHERE id = ?", (link_id,)).fetchone()
        finally:
            conn.close()
        if not row:
            return None
        return Link(
            id=row["id"],
            title=row["title"],
            href=row["href"],
            user_id=row["user_id"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )
