# technologies.py
import logging
from typing import Any, Mapping

from jobly.db.executor import Database, DatabaseIntegrityError
from jobly.errors import BadRequestError, ConflictError, NotFoundError
from jobly.utils.sql import sql_for_partial_update


logger = logging.getLogger(__name__)


def create(db: Database, data: Mapping[str, Any]) -> dict[str, Any]:
    """Create a technology from {technology}; returns {id, technology}.

    Raises ConflictError if the label already exists.
    """

    label = data.get("technology")
    try:
        row = db.query_one(
            """INSERT INTO technologies (technology)
               VALUES ($1)
               RETURNING id, technology""",
            [label],
        )
    except DatabaseIntegrityError as exc:
        if exc.kind == "unique":
            raise ConflictError(f"Duplicate technology: {label}") from exc
        if exc.kind == "not_null":
            raise BadRequestError("technology is required") from exc
        raise
    logger.info("technologies.create id=%s", row["id"])
    return row


def find_all(db: Database) -> list[dict[str, Any]]:
    return db.query(
        """SELECT id, technology
           FROM technologies
           ORDER BY technology"""
    )


def get(db: Database, tech_id: int) -> dict[str, Any]:
    technology = db.query_one(
        """SELECT id, technology
           FROM technologies
           WHERE id = $1""",
        [tech_id],
    )
    if not technology:
        raise NotFoundError(f"No technology: {tech_id}")
    return technology


def update(db: Database, tech_id: int, data: Mapping[str, Any]) -> dict[str, Any]:
    extra = [key for key in data if key != "technology"]
    if extra:
        raise BadRequestError(f"Cannot update technology field(s): {', '.join(sorted(extra))}")

    set_cols, values = sql_for_partial_update(data, {})
    id_var_idx = f"${len(values) + 1}"

    try:
        technology = db.query_one(
            f"""UPDATE technologies
               SET {set_cols}
               WHERE id = {id_var_idx}
               RETURNING id, technology""",
            [*values, tech_id],
        )
    except DatabaseIntegrityError as exc:
        if exc.kind == "unique":
            raise ConflictError(f"Duplicate technology: {data.get('technology')}") from exc
        if exc.kind == "not_null":
            raise BadRequestError("technology is required") from exc
        raise
    if not technology:
        raise NotFoundError(f"No technology: {tech_id}")

    logger.info("technologies.update id=%s", tech_id)
    return technology


def remove(db: Database, tech_id: int) -> None:
    row = db.query_one(
        """DELETE
           FROM technologies
           WHERE id = $1
           RETURNING id""",
        [tech_id],
    )
    if not row:
        raise NotFoundError(f"No technology: {tech_id}")
    logger.info("technologies.remove id=%s", tech_id)
