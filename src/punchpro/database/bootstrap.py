from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"

_SKIPPED_PREFIXES = ("CREATE DATABASE", "USE ")


def iter_schema_statements(sql: str) -> Iterator[str]:
    """Yield the statements of a schema file one at a time.

    Statements end with ``;`` at the end of a line. ``--`` comment lines are
    dropped, as are ``CREATE DATABASE`` / ``USE`` so the file works for any
    configured database name.
    """

    pending: list[str] = []
    for line in sql.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("--"):
            continue
        pending.append(line)
        if not stripped.endswith(";"):
            continue

        stmt = "\n".join(pending).strip().rstrip(";").strip()
        pending = []
        if stmt and not stmt.upper().startswith(_SKIPPED_PREFIXES):
            yield stmt

    leftover = "\n".join(pending).strip()
    if leftover:
        yield leftover


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{conn_factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    ensure_database_exists(conn_factory)

    sql = Path(schema_path).read_text(encoding="utf-8")

    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        for stmt in iter_schema_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Schema applied to %s", conn_factory.config.database)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
