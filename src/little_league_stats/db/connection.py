import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

_MIGRATIONS_DIR = Path(__file__).parent / "migrations"


def create_connection(path: str | Path, *, check_same_thread: bool = True) -> sqlite3.Connection:
    """Open the stats database with WAL mode, foreign keys, and pending migrations applied."""
    in_memory = str(path) == ":memory:"
    if not in_memory:
        path = Path(path).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path), check_same_thread=check_same_thread)
    conn.row_factory = sqlite3.Row
    if not in_memory:
        conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")
    apply_migrations(conn)
    return conn


def get_schema_version(conn: sqlite3.Connection) -> int:
    """Return the current schema version, or 0 if no migrations have run."""
    try:
        row = conn.execute("SELECT MAX(version) FROM schema_version").fetchone()
    except sqlite3.OperationalError:
        return 0
    return row[0] if row and row[0] is not None else 0


def apply_migrations(conn: sqlite3.Connection, migrations_dir: Path | None = None) -> int:
    """Apply numbered ``NNN_name.sql`` files newer than the schema version.

    Returns the number of migrations applied.
    """
    conn.execute(
        "CREATE TABLE IF NOT EXISTS schema_version ("
        "    version INTEGER PRIMARY KEY,"
        "    applied_at TEXT NOT NULL DEFAULT (datetime('now'))"
        ")"
    )
    current = get_schema_version(conn)
    applied = 0
    for migration in sorted((migrations_dir or _MIGRATIONS_DIR).glob("*.sql")):
        version = int(migration.stem.split("_")[0])
        if version <= current:
            continue
        _apply_migration(conn, version, migration.read_text())
        logger.debug("Applied migration %s", migration.name)
        applied += 1
    return applied


def _apply_migration(conn: sqlite3.Connection, version: int, sql: str) -> None:
    statements = [s.strip() for s in sql.split(";") if s.strip()]
    # DDL only joins the transaction under manual isolation control.
    old_isolation = conn.isolation_level
    conn.isolation_level = None
    try:
        conn.execute("BEGIN")
        for statement in statements:
            conn.execute(statement)
        conn.execute("INSERT INTO schema_version (version) VALUES (?)", (version,))
        conn.execute("COMMIT")
    except Exception:
        conn.execute("ROLLBACK")
        raise
    finally:
        conn.isolation_level = old_isolation
