from __future__ import annotations

from typing import Any, Mapping

from jobly.errors import BadRequestError


_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off", ""}

COMPANY_FILTER_KEYS = ("minEmployees", "maxEmployees", "name")
JOB_FILTER_KEYS = ("title", "minSalary", "hasEquity")


def sql_for_partial_update(data_to_update: Mapping[str, Any], js_to_sql: Mapping[str, str]) -> tuple[str, list[Any]]:
    """Build the SET body of a partial UPDATE.

    `data_to_update` holds only the fields being changed; `js_to_sql` maps field
    names to column names (unmapped fields are used as-is).

    Example: ({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
      -> ('"first_name"=$1, "age"=$2', ["Aliya", 32])

    Raises BadRequestError when there is nothing to update.
    """

    keys = list(data_to_update.keys())
    if not keys:
        raise BadRequestError("No data")

    cols = [f'"{js_to_sql.get(key, key)}"=${idx}' for idx, key in enumerate(keys, start=1)]
    return ", ".join(cols), [data_to_update[key] for key in keys]


def _to_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise BadRequestError(f"{key} must be a number")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise BadRequestError(f"{key} must be a number") from exc


def to_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, int):
        return value != 0
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise BadRequestError(f"{key} must be a boolean")


def _reject_unknown(criteria: Mapping[str, Any], allowed: tuple[str, ...]) -> None:
    unknown = [key for key in criteria if key not in allowed]
    if unknown:
        raise BadRequestError(f"Invalid filter(s): {', '.join(sorted(unknown))}")


def sql_for_filter(criteria: Mapping[str, Any]) -> tuple[str, list[Any]]:
    """Build the WHERE body (without the keyword) for company searches.

    Recognized keys, in parameter order: minEmployees, maxEmployees, name.
    Absent keys leave no gap in the $n numbering.

    Example: {"minEmployees": "10", "maxEmployees": "100"}
      -> ("num_employees>=$1 AND num_employees<=$2", [10, 100])

    minEmployees > maxEmployees is not rejected here; the two clauses simply
    match nothing.
    """

    if not criteria:
        raise BadRequestError("No filtering criteria")
    _reject_unknown(criteria, COMPANY_FILTER_KEYS)

    clauses: list[str] = []
    values: list[Any] = []

    if criteria.get("minEmployees") is not None:
        values.append(_to_int("minEmployees", criteria["minEmployees"]))
        clauses.append(f"num_employees>=${len(values)}")
    if criteria.get("maxEmployees") is not None:
        values.append(_to_int("maxEmployees", criteria["maxEmployees"]))
        clauses.append(f"num_employees<=${len(values)}")
    if criteria.get("name") is not None:
        values.append(f"%{criteria['name']}%")
        clauses.append(f"name ILIKE ${len(values)}")

    return " AND ".join(clauses), values


def sql_for_job_filter(criteria: Mapping[str, Any]) -> tuple[str, list[Any]]:
    """Build the WHERE body (without the keyword) for job searches.

    Recognized keys, in parameter order: title, minSalary, hasEquity.
    A truthy hasEquity keeps only jobs with equity above zero; a falsy one adds
    no clause at all (it does not mean "equity = 0").

    Example: {"title": "eng", "hasEquity": True}
      -> ("title ILIKE $1 AND equity IS NOT NULL AND CAST(equity AS NUMERIC)>0", ["%eng%"])
    """

    if not criteria:
        raise BadRequestError("No filtering criteria")
    _reject_unknown(criteria, JOB_FILTER_KEYS)

    clauses: list[str] = []
    values: list[Any] = []

    if criteria.get("title") is not None:
        values.append(f"%{criteria['title']}%")
        clauses.append(f"title ILIKE ${len(values)}")
    if criteria.get("minSalary") is not None:
        values.append(_to_int("minSalary", criteria["minSalary"]))
        clauses.append(f"salary>=${len(values)}")
    if to_bool("hasEquity", criteria.get("hasEquity")):
        clauses.append("equity IS NOT NULL AND CAST(equity AS NUMERIC)>0")

    return " AND ".join(clauses), values
