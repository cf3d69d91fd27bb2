"""
Schema migrations for the SQLite store.

Each ``NNNN_name.sql`` file in the migrations directory is applied once, in
file-name order, inside its own transaction. Applied names are recorded in
``schema_migrations``.
"""

import logging
import sqlite3
from contextlib import closing
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_MIGRATIONS_DIR = Path(__file__).parent / "migrations"

_LEDGER_DDL = """
CREATE TABLE IF NOT EXISTS schema_migrations (
    name TEXT PRIMARY KEY,
    applied_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
)
"""


class MigrationError(RuntimeError):
    def __init__(self, name: str, cause: sqlite3.Error) -> None:
        self.name = name
        super().__init__(f"Migration {name} failed: {cause}")


class SQLiteMigrator:
    def __init__(self, db_path: str, migrations_dir: str | Path = DEFAULT_MIGRATIONS_DIR):
        self.db_path = db_path
        self.migrations_dir = Path(migrations_dir)

    def pending(self) -> list[Path]:
        with closing(sqlite3.connect(self.db_path)) as conn:
            conn.execute(_LEDGER_DDL)
            applied = {row[0] for row in conn.execute("SELECT name FROM schema_migrations")}
        return [p for p in sorted(self.migrations_dir.glob("*.sql")) if p.name not in applied]

    def run_migrations(self) -> list[str]:
        """Apply all pending migrations. Returns the names applied."""
        applied_now: list[str] = []
        for script in self.pending():
            logger.info("Applying migration: %s", script.name)
            self._apply(script)
            applied_now.append(script.name)
        return applied_now

    def _apply(self, script: Path) -> None:
        # executescript commits any open transaction first, so BEGIN is explicit.
        sql = script.read_text(encoding="utf-8")
        name = script.name.replace("'", "''")
        with closing(sqlite3.connect(self.db_path, isolation_level=None)) as conn:
            try:
                conn.executescript(
                    f"BEGIN;\n{sql}\n;\n"
                    f"INSERT INTO schema_migrations (name) VALUES ('{name}');\n"
                    "COMMIT;"
                )
            except sqlite3.Error as e:
                if conn.in_transaction:
                    conn.execute("ROLLBACK")
                raise MigrationError(script.name, e) from e
