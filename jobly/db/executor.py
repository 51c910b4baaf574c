from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Sequence

from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError


logger = logging.getLogger(__name__)


class DatabaseConnectionError(RuntimeError):
    pass


class DatabaseQueryError(RuntimeError):
    pass


class DatabaseIntegrityError(DatabaseQueryError):
    """A constraint rejected the statement.

    `kind` is one of "unique", "foreign_key", "check", "not_null" or None when the
    driver error could not be classified.
    """

    def __init__(self, message: str, kind: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind


_DOLLAR_PARAM_RE = re.compile(r"\$(\d+)")
_ILIKE_RE = re.compile(r"\bILIKE\b", re.IGNORECASE)

# SQLSTATE class 23 codes reported by PostgreSQL drivers.
_PG_INTEGRITY_CODES = {
    "23505": "unique",
    "23503": "foreign_key",
    "23514": "check",
    "23502": "not_null",
}

_SQLITE_INTEGRITY_PREFIXES = {
    "UNIQUE constraint failed": "unique",
    "FOREIGN KEY constraint failed": "foreign_key",
    "CHECK constraint failed": "check",
    "NOT NULL constraint failed": "not_null",
}


def compile_dollar_params(sql: str, values: Sequence[Any], paramstyle: str) -> tuple[str, tuple[Any, ...]]:
    """Rewrite `$1..$n` placeholders into the driver's positional paramstyle.

    Values are reordered (and repeated) to follow placeholder occurrence, so
    `... WHERE a=$2 AND b=$1` binds values[1] then values[0].
    """

    if paramstyle == "qmark":
        marker = "?"
    elif paramstyle in {"format", "pyformat"}:
        marker = "%s"
    else:
        raise DatabaseQueryError(f"Unsupported driver paramstyle: {paramstyle}")

    order: list[int] = []

    def repl(match: re.Match[str]) -> str:
        order.append(int(match.group(1)))
        return marker

    compiled_sql = _DOLLAR_PARAM_RE.sub(repl, sql)

    if marker == "%s" and order:
        # With parameters, format/pyformat drivers apply Python's `%` operator, so
        # any literal percent sign left in the SQL must be doubled.
        sentinel = "__PCT_S_PLACEHOLDER__"
        compiled_sql = compiled_sql.replace("%s", sentinel)
        compiled_sql = compiled_sql.replace("%", "%%")
        compiled_sql = compiled_sql.replace(sentinel, "%s")

    if any(idx < 1 for idx in order):
        raise DatabaseQueryError("SQL parameters are numbered from $1")
    try:
        bound = tuple(values[idx - 1] for idx in order)
    except IndexError as exc:
        raise DatabaseQueryError(
            f"SQL references ${max(order)} but only {len(values)} value(s) were given"
        ) from exc
    return compiled_sql, bound


def classify_integrity_error(exc: IntegrityError) -> str | None:
    orig = getattr(exc, "orig", None)
    pgcode = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if pgcode:
        return _PG_INTEGRITY_CODES.get(str(pgcode))

    message = str(orig if orig is not None else exc)
    for prefix, kind in _SQLITE_INTEGRITY_PREFIXES.items():
        if message.startswith(prefix):
            return kind
    return None


class Database:
    """Query-execution capability handed to every accessor.

    Statements use PostgreSQL-style `$n` placeholders; each call runs in its own
    transaction and returns rows as plain dicts.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    @property
    def is_sqlite(self) -> bool:
        return self.engine.dialect.name == "sqlite"

    def _prepare(self, sql: str, values: Sequence[Any]) -> tuple[str, tuple[Any, ...]]:
        if self.is_sqlite:
            # sqlite has no ILIKE; its LIKE is already case-insensitive for ASCII.
            sql = _ILIKE_RE.sub("LIKE", sql)
        return compile_dollar_params(sql, values, self.engine.dialect.paramstyle)

    def _connect(self) -> Connection:
        try:
            return self.engine.connect()
        except SQLAlchemyError as exc:
            raise DatabaseConnectionError(
                f"Failed to connect to {self.engine.dialect.name}. Last error: {type(exc).__name__}: {exc}"
            ) from exc

    def query(self, sql: str, values: Iterable[Any] | None = None) -> list[dict[str, Any]]:
        """Run a statement and return its rows as dicts (empty for statements without rows)."""

        compiled_sql, bound = self._prepare(sql, list(values or []))
        conn = self._connect()
        try:
            with conn:
                with conn.begin():
                    result = conn.exec_driver_sql(compiled_sql, bound)
                    if not result.returns_rows:
                        return []
                    return [dict(row) for row in result.mappings().all()]
        except IntegrityError as exc:
            kind = classify_integrity_error(exc)
            logger.info("db.integrity_error kind=%s", kind)
            raise DatabaseIntegrityError("Database constraint violated", kind=kind) from exc
        except SQLAlchemyError as exc:
            logger.warning("db.query_failed error=%s", type(exc).__name__)
            raise DatabaseQueryError("Database query failed") from exc

    def query_one(self, sql: str, values: Iterable[Any] | None = None) -> dict[str, Any] | None:
        rows = self.query(sql, values)
        return rows[0] if rows else None
