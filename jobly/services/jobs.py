# jobs.py
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from jobly.db.executor import Database, DatabaseIntegrityError
from jobly.errors import BadRequestError, NotFoundError
from jobly.services.edges import Endpoint, insert_edge
from jobly.utils.sql import sql_for_job_filter, sql_for_partial_update


logger = logging.getLogger(__name__)

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'

# companyHandle and id are fixed once a job exists.
_UPDATABLE_FIELDS = ("title", "salary", "equity")


def equity_param(value: Any) -> str | None:
    """Bind equity as a decimal string so it never passes through a float."""

    if value is None:
        return None
    try:
        parsed = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise BadRequestError("equity must be a decimal number") from exc
    if not parsed.is_finite() or parsed < 0 or parsed >= 1:
        raise BadRequestError("equity must be at least 0 and below 1")
    return format(parsed, "f")


def format_equity(value: Any) -> str | None:
    if value is None:
        return None
    # Fixed-point notation; str() would render small values as "1E-19".
    parsed = value if isinstance(value, Decimal) else Decimal(str(value))
    return format(parsed, "f")


def job_record(row: Mapping[str, Any]) -> dict[str, Any]:
    job = dict(row)
    job["equity"] = format_equity(job.get("equity"))
    return job


def _translate_integrity_error(exc: DatabaseIntegrityError, company_handle: Any = None) -> Exception:
    if exc.kind == "foreign_key":
        return NotFoundError(f"No company: {company_handle}")
    if exc.kind in {"check", "not_null"}:
        return BadRequestError("Invalid job data")
    return exc


def create(db: Database, data: Mapping[str, Any]) -> dict[str, Any]:
    """Create a job from {title, salary, equity, companyHandle}; return the new job."""

    try:
        row = db.query_one(
            f"""INSERT INTO jobs (title, salary, equity, company_handle)
               VALUES ($1, $2, $3, $4)
               RETURNING {JOB_COLUMNS}""",
            [
                data.get("title"),
                data.get("salary"),
                equity_param(data.get("equity")),
                data.get("companyHandle"),
            ],
        )
    except DatabaseIntegrityError as exc:
        translated = _translate_integrity_error(exc, data.get("companyHandle"))
        if translated is exc:
            raise
        raise translated from exc
    logger.info("jobs.create id=%s company=%s", row["id"], row["companyHandle"])
    return job_record(row)


def find_all(db: Database, criteria: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
    """All jobs ordered by title, optionally filtered by title, minSalary and hasEquity."""

    where_str = ""
    values: list[Any] = []
    if criteria:
        where_str, values = sql_for_job_filter(criteria)
        if where_str:
            where_str = "WHERE " + where_str

    rows = db.query(
        f"""SELECT {JOB_COLUMNS}
           FROM jobs
           {where_str}
           ORDER BY title, id""",
        values,
    )
    return [job_record(row) for row in rows]


def find_by_company(db: Database, handle: str) -> list[dict[str, Any]]:
    rows = db.query(
        """SELECT id, title, salary, equity
           FROM jobs
           WHERE company_handle = $1
           ORDER BY id""",
        [handle],
    )
    return [job_record(row) for row in rows]


def get(db: Database, job_id: int) -> dict[str, Any]:
    """Return a job plus `technologies`, the ids of the technologies it requires."""

    row = db.query_one(
        f"""SELECT {JOB_COLUMNS}
           FROM jobs
           WHERE id = $1""",
        [job_id],
    )
    if not row:
        raise NotFoundError(f"No job: {job_id}")

    job = job_record(row)
    job["technologies"] = get_requirements(db, job_id)
    return job


def get_requirements(db: Database, job_id: int) -> list[int]:
    """Technology ids required by a job, ascending."""

    rows = db.query(
        """SELECT tech_id AS "techId"
           FROM requirements
           WHERE job_id = $1
           ORDER BY tech_id""",
        [job_id],
    )
    return [int(row["techId"]) for row in rows]


def find_ids_requiring(db: Database, tech_id: int) -> list[int]:
    """Ids of every job that requires the given technology, ascending."""

    rows = db.query(
        """SELECT job_id AS "jobId"
           FROM requirements
           WHERE tech_id = $1
           ORDER BY job_id""",
        [tech_id],
    )
    return [int(row["jobId"]) for row in rows]


def update(db: Database, job_id: int, data: Mapping[str, Any]) -> dict[str, Any]:
    """Partial update of title, salary and equity.

    Only the supplied fields change. Raises BadRequestError for an empty payload
    or other fields, NotFoundError for a missing job.
    """

    extra = [key for key in data if key not in _UPDATABLE_FIELDS]
    if extra:
        raise BadRequestError(f"Cannot update job field(s): {', '.join(sorted(extra))}")

    changes = dict(data)
    if "equity" in changes:
        changes["equity"] = equity_param(changes["equity"])

    set_cols, values = sql_for_partial_update(changes, {})
    id_var_idx = f"${len(values) + 1}"

    try:
        row = db.query_one(
            f"""UPDATE jobs
               SET {set_cols}
               WHERE id = {id_var_idx}
               RETURNING {JOB_COLUMNS}""",
            [*values, job_id],
        )
    except DatabaseIntegrityError as exc:
        translated = _translate_integrity_error(exc)
        if translated is exc:
            raise
        raise translated from exc
    if not row:
        raise NotFoundError(f"No job: {job_id}")

    logger.info("jobs.update id=%s fields=%s", job_id, ",".join(changes))
    return job_record(row)


def remove(db: Database, job_id: int) -> None:
    row = db.query_one(
        """DELETE
           FROM jobs
           WHERE id = $1
           RETURNING id""",
        [job_id],
    )
    if not row:
        raise NotFoundError(f"No job: {job_id}")
    logger.info("jobs.remove id=%s", job_id)


def require(db: Database, job_id: int, tech_id: int) -> dict[str, Any]:
    """Record that a job requires a technology; returns {jobId, techId}.

    Raises ConflictError if the requirement exists, NotFoundError if the job or
    technology does not.
    """

    requirement = insert_edge(
        db,
        sql="""INSERT INTO requirements (job_id, tech_id)
               VALUES ($1, $2)
               RETURNING job_id AS "jobId", tech_id AS "techId"
            """,
        values=[job_id, tech_id],
        duplicate_message=f"Duplicate requirement for job {job_id} and technology {tech_id}",
        endpoints=[
            Endpoint("job", "SELECT id FROM jobs WHERE id = $1", job_id),
            Endpoint("technology", "SELECT id FROM technologies WHERE id = $1", tech_id),
        ],
    )
    logger.info("jobs.require job=%s tech=%s", job_id, tech_id)
    return requirement
