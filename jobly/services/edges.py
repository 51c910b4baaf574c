# edges.py
from dataclasses import dataclass
from typing import Any, Sequence

from jobly.db.executor import Database, DatabaseIntegrityError
from jobly.errors import ConflictError, NotFoundError


@dataclass(frozen=True)
class Endpoint:
    """One side of a relation edge and how to check that it exists."""

    label: str
    exists_sql: str
    key: Any


def insert_edge(
    db: Database,
    *,
    sql: str,
    values: Sequence[Any],
    duplicate_message: str,
    endpoints: Sequence[Endpoint],
) -> dict[str, Any]:
    """Insert a relation row and classify constraint violations.

    The unique constraint on the pair is the guard against duplicates, so there
    is no check-then-insert race. Existence lookups only run after a foreign key
    violation, to report which endpoint is missing.
    """

    try:
        row = db.query_one(sql, values)
    except DatabaseIntegrityError as exc:
        if exc.kind == "unique":
            raise ConflictError(duplicate_message) from exc
        if exc.kind != "foreign_key":
            raise
        for endpoint in endpoints:
            if db.query_one(endpoint.exists_sql, [endpoint.key]) is None:
                raise NotFoundError(f"No {endpoint.label}: {endpoint.key}") from exc
        # The missing endpoint was created after the insert failed.
        labels = " or ".join(f"{e.label} {e.key}" for e in endpoints)
        raise NotFoundError(f"No {labels}") from exc

    if row is None:
        raise NotFoundError("Relation was not created")
    return row
