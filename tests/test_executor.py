from __future__ import annotations

import pytest

from jobly.db.executor import DatabaseIntegrityError, DatabaseQueryError, compile_dollar_params


def test_compile_qmark_reorders_and_repeats_values() -> None:
    sql, values = compile_dollar_params("SELECT * FROM t WHERE a=$2 AND b=$1 OR c=$2", ["x", "y"], "qmark")
    assert sql == "SELECT * FROM t WHERE a=? AND b=? OR c=?"
    assert values == ("y", "x", "y")


def test_compile_pyformat_escapes_literal_percent() -> None:
    sql, values = compile_dollar_params("SELECT '100%' AS p, name FROM t WHERE name ILIKE $1", ["%ok%"], "pyformat")
    assert sql == "SELECT '100%%' AS p, name FROM t WHERE name ILIKE %s"
    assert values == ("%ok%",)


def test_compile_rejects_missing_values() -> None:
    with pytest.raises(DatabaseQueryError):
        compile_dollar_params("SELECT $1, $2", [1], "qmark")


def test_compile_rejects_unknown_paramstyle() -> None:
    with pytest.raises(DatabaseQueryError):
        compile_dollar_params("SELECT $1", [1], "named")


def test_query_returns_rows_as_dicts(db) -> None:
    db.query("INSERT INTO technologies (technology) VALUES ($1)", ["Python"])
    rows = db.query('SELECT id, technology AS "label" FROM technologies WHERE technology ILIKE $1', ["py%"])
    assert rows == [{"id": rows[0]["id"], "label": "Python"}]


def test_query_one_returns_none_without_rows(db) -> None:
    assert db.query_one("SELECT id FROM technologies WHERE id = $1", [999]) is None


def test_statement_without_rows_returns_empty_list(db) -> None:
    assert db.query("DELETE FROM technologies WHERE id = $1", [999]) == []


def test_unique_violation_is_classified(db) -> None:
    db.query("INSERT INTO technologies (technology) VALUES ($1)", ["Go"])
    with pytest.raises(DatabaseIntegrityError) as excinfo:
        db.query("INSERT INTO technologies (technology) VALUES ($1)", ["Go"])
    assert excinfo.value.kind == "unique"


def test_foreign_key_violation_is_classified(db) -> None:
    with pytest.raises(DatabaseIntegrityError) as excinfo:
        db.query("INSERT INTO requirements (job_id, tech_id) VALUES ($1, $2)", [1, 1])
    assert excinfo.value.kind == "foreign_key"


def test_bad_sql_raises_query_error(db) -> None:
    with pytest.raises(DatabaseQueryError):
        db.query("SELECT nope FROM nowhere")
