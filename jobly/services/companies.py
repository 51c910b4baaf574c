# companies.py
import logging
from typing import Any, Mapping

from jobly.db.executor import Database, DatabaseIntegrityError
from jobly.errors import BadRequestError, ConflictError, NotFoundError
from jobly.services import jobs as job_service
from jobly.utils.sql import sql_for_filter, sql_for_partial_update


logger = logging.getLogger(__name__)

COMPANY_COLUMNS = (
    'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'
)

_JS_TO_SQL = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

_UPDATABLE_FIELDS = ("name", "description", "numEmployees", "logoUrl")


def create(db: Database, data: Mapping[str, Any]) -> dict[str, Any]:
    """Create a company from {handle, name, description, numEmployees, logoUrl}.

    Raises ConflictError if the handle or name is taken.
    """

    handle = data.get("handle")
    try:
        row = db.query_one(
            f"""INSERT INTO companies (handle, name, description, num_employees, logo_url)
               VALUES ($1, $2, $3, $4, $5)
               RETURNING {COMPANY_COLUMNS}""",
            [handle, data.get("name"), data.get("description"), data.get("numEmployees"), data.get("logoUrl")],
        )
    except DatabaseIntegrityError as exc:
        if exc.kind == "unique":
            raise ConflictError(f"Duplicate company: {handle}") from exc
        if exc.kind in {"check", "not_null"}:
            raise BadRequestError("Invalid company data") from exc
        raise
    logger.info("companies.create handle=%s", handle)
    return row


def find_all(db: Database, criteria: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
    """All companies ordered by name, optionally filtered by minEmployees, maxEmployees and name."""

    where_str = ""
    values: list[Any] = []
    if criteria:
        where_str, values = sql_for_filter(criteria)
        if where_str:
            where_str = "WHERE " + where_str

    return db.query(
        f"""SELECT {COMPANY_COLUMNS}
           FROM companies
           {where_str}
           ORDER BY name""",
        values,
    )


def get(db: Database, handle: str) -> dict[str, Any]:
    """Return a company plus its `jobs` ({id, title, salary, equity})."""

    company = db.query_one(
        f"""SELECT {COMPANY_COLUMNS}
           FROM companies
           WHERE handle = $1""",
        [handle],
    )
    if not company:
        raise NotFoundError(f"No company: {handle}")

    company["jobs"] = job_service.find_by_company(db, handle)
    return company


def update(db: Database, handle: str, data: Mapping[str, Any]) -> dict[str, Any]:
    extra = [key for key in data if key not in _UPDATABLE_FIELDS]
    if extra:
        raise BadRequestError(f"Cannot update company field(s): {', '.join(sorted(extra))}")

    set_cols, values = sql_for_partial_update(data, _JS_TO_SQL)
    handle_var_idx = f"${len(values) + 1}"

    try:
        company = db.query_one(
            f"""UPDATE companies
               SET {set_cols}
               WHERE handle = {handle_var_idx}
               RETURNING {COMPANY_COLUMNS}""",
            [*values, handle],
        )
    except DatabaseIntegrityError as exc:
        if exc.kind == "unique":
            raise ConflictError(f"Duplicate company name: {data.get('name')}") from exc
        if exc.kind in {"check", "not_null"}:
            raise BadRequestError("Invalid company data") from exc
        raise
    if not company:
        raise NotFoundError(f"No company: {handle}")

    logger.info("companies.update handle=%s fields=%s", handle, ",".join(data))
    return company


def remove(db: Database, handle: str) -> None:
    """Delete a company; its jobs go with it."""

    row = db.query_one(
        """DELETE
           FROM companies
           WHERE handle = $1
           RETURNING handle""",
        [handle],
    )
    if not row:
        raise NotFoundError(f"No company: {handle}")
    logger.info("companies.remove handle=%s", handle)
