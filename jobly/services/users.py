# users.py
import logging
from typing import Any, Mapping

from jobly.db.executor import Database, DatabaseIntegrityError
from jobly.errors import BadRequestError, ConflictError, NotFoundError, UnauthorizedError
from jobly.services.edges import Endpoint, insert_edge
from jobly.utils.password_hash import hash_password, verify_password
from jobly.utils.sql import sql_for_partial_update


logger = logging.getLogger(__name__)

USER_COLUMNS = (
    'username, first_name AS "firstName", last_name AS "lastName", email, is_admin AS "isAdmin"'
)

_JS_TO_SQL = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}

_UPDATABLE_FIELDS = ("firstName", "lastName", "password", "email", "isAdmin")

_USER_EXISTS_SQL = "SELECT username FROM users WHERE username = $1"


def user_record(row: Mapping[str, Any]) -> dict[str, Any]:
    """Shape a users row for callers; the password hash never leaves this module."""

    user = {key: value for key, value in row.items() if key != "password"}
    if "isAdmin" in user:
        user["isAdmin"] = bool(user["isAdmin"])
    return user


def authenticate(db: Database, username: str, password: str) -> dict[str, Any]:
    """Return the user when the password matches; raise UnauthorizedError otherwise."""

    row = db.query_one(
        f"""SELECT {USER_COLUMNS}, password
           FROM users
           WHERE username = $1""",
        [username],
    )
    if row and verify_password(password, row.get("password")):
        return user_record(row)

    logger.info("users.authenticate_failed username=%s", username)
    raise UnauthorizedError("Invalid username/password")


def register(db: Database, data: Mapping[str, Any]) -> dict[str, Any]:
    """Create a user from {username, password, firstName, lastName, email, isAdmin}.

    Raises ConflictError on a duplicate username.
    """

    username = data.get("username")
    password = data.get("password")
    if not password:
        raise BadRequestError("password is required")

    try:
        row = db.query_one(
            f"""INSERT INTO users (username, password, first_name, last_name, email, is_admin)
               VALUES ($1, $2, $3, $4, $5, $6)
               RETURNING {USER_COLUMNS}""",
            [
                username,
                hash_password(password),
                data.get("firstName"),
                data.get("lastName"),
                data.get("email"),
                bool(data.get("isAdmin", False)),
            ],
        )
    except DatabaseIntegrityError as exc:
        if exc.kind == "unique":
            raise ConflictError(f"Duplicate username: {username}") from exc
        if exc.kind in {"check", "not_null"}:
            raise BadRequestError("Invalid user data") from exc
        raise
    logger.info("users.register username=%s is_admin=%s", username, bool(row["isAdmin"]))
    return user_record(row)


def find_all(db: Database) -> list[dict[str, Any]]:
    rows = db.query(
        f"""SELECT {USER_COLUMNS}
           FROM users
           ORDER BY username"""
    )
    return [user_record(row) for row in rows]


def exists(db: Database, username: str) -> bool:
    return db.query_one(_USER_EXISTS_SQL, [username]) is not None


def get(db: Database, username: str) -> dict[str, Any]:
    """Return a user plus `jobs` (applied job ids) and `qualifications` (technology ids)."""

    row = db.query_one(
        f"""SELECT {USER_COLUMNS}
           FROM users
           WHERE username = $1""",
        [username],
    )
    if not row:
        raise NotFoundError(f"No user: {username}")

    user = user_record(row)
    user["jobs"] = get_applications(db, username)
    user["qualifications"] = get_qualifications(db, username)
    return user


def get_applications(db: Database, username: str) -> list[int]:
    rows = db.query(
        """SELECT job_id AS "jobId"
           FROM applications
           WHERE username = $1
           ORDER BY job_id""",
        [username],
    )
    return [int(row["jobId"]) for row in rows]


def get_qualifications(db: Database, username: str) -> list[int]:
    """Technology ids the user is qualified in, ascending."""

    rows = db.query(
        """SELECT tech_id AS "techId"
           FROM qualifications
           WHERE username = $1
           ORDER BY tech_id""",
        [username],
    )
    return [int(row["techId"]) for row in rows]


def update(db: Database, username: str, data: Mapping[str, Any]) -> dict[str, Any]:
    """Partial update of firstName, lastName, password, email and isAdmin.

    This can set a new password or grant admin; callers must have validated and
    authorized the payload.
    """

    extra = [key for key in data if key not in _UPDATABLE_FIELDS]
    if extra:
        raise BadRequestError(f"Cannot update user field(s): {', '.join(sorted(extra))}")

    changes = dict(data)
    if "password" in changes:
        if not changes["password"]:
            raise BadRequestError("password cannot be empty")
        changes["password"] = hash_password(changes["password"])

    set_cols, values = sql_for_partial_update(changes, _JS_TO_SQL)
    username_var_idx = f"${len(values) + 1}"

    try:
        row = db.query_one(
            f"""UPDATE users
               SET {set_cols}
               WHERE username = {username_var_idx}
               RETURNING {USER_COLUMNS}""",
            [*values, username],
        )
    except DatabaseIntegrityError as exc:
        if exc.kind in {"check", "not_null"}:
            raise BadRequestError("Invalid user data") from exc
        raise
    if not row:
        raise NotFoundError(f"No user: {username}")

    logger.info("users.update username=%s fields=%s", username, ",".join(changes))
    return user_record(row)


def remove(db: Database, username: str) -> None:
    row = db.query_one(
        """DELETE
           FROM users
           WHERE username = $1
           RETURNING username""",
        [username],
    )
    if not row:
        raise NotFoundError(f"No user: {username}")
    logger.info("users.remove username=%s", username)


def apply(db: Database, username: str, job_id: int) -> dict[str, Any]:
    """Record an application; returns {username, jobId}.

    Raises ConflictError on a repeat application, NotFoundError if the user or
    job does not exist.
    """

    application = insert_edge(
        db,
        sql="""INSERT INTO applications (username, job_id)
               VALUES ($1, $2)
               RETURNING username, job_id AS "jobId"
            """,
        values=[username, job_id],
        duplicate_message=f"Duplicate application for username {username} and job {job_id}",
        endpoints=[
            Endpoint("user", _USER_EXISTS_SQL, username),
            Endpoint("job", "SELECT id FROM jobs WHERE id = $1", job_id),
        ],
    )
    logger.info("users.apply username=%s job=%s", username, job_id)
    return application


def qualify(db: Database, username: str, tech_id: int) -> dict[str, Any]:
    """Record a technology qualification; returns {username, techId}."""

    qualification = insert_edge(
        db,
        sql="""INSERT INTO qualifications (username, tech_id)
               VALUES ($1, $2)
               RETURNING username, tech_id AS "techId"
            """,
        values=[username, tech_id],
        duplicate_message=f"Duplicate qualification for username {username} and technology {tech_id}",
        endpoints=[
            Endpoint("user", _USER_EXISTS_SQL, username),
            Endpoint("technology", "SELECT id FROM technologies WHERE id = $1", tech_id),
        ],
    )
    logger.info("users.qualify username=%s tech=%s", username, tech_id)
    return qualification
