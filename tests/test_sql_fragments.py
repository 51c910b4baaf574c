from __future__ import annotations

import pytest

from jobly.errors import BadRequestError
from jobly.utils.sql import sql_for_filter, sql_for_job_filter, sql_for_partial_update


def test_partial_update_maps_columns_in_input_order() -> None:
    set_cols, values = sql_for_partial_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
    assert set_cols == '"first_name"=$1, "age"=$2'
    assert values == ["Aliya", 32]


def test_partial_update_parameter_count_matches_keys() -> None:
    data = {"c": 3, "a": 1, "b": None}
    set_cols, values = sql_for_partial_update(data, {})
    assert set_cols == '"c"=$1, "a"=$2, "b"=$3'
    assert values == [3, 1, None]


def test_partial_update_rejects_empty_payload() -> None:
    with pytest.raises(BadRequestError):
        sql_for_partial_update({}, {"firstName": "first_name"})


def test_company_filter_min_employees() -> None:
    assert sql_for_filter({"minEmployees": "10"}) == ("num_employees>=$1", [10])


def test_company_filter_max_employees() -> None:
    assert sql_for_filter({"maxEmployees": "10"}) == ("num_employees<=$1", [10])


def test_company_filter_min_and_max() -> None:
    where_str, values = sql_for_filter({"minEmployees": 10, "maxEmployees": 100})
    assert where_str == "num_employees>=$1 AND num_employees<=$2"
    assert values == [10, 100]


def test_company_filter_name_is_substring_match() -> None:
    assert sql_for_filter({"name": "ok"}) == ("name ILIKE $1", ["%ok%"])


def test_company_filter_numbers_without_gaps_in_fixed_order() -> None:
    where_str, values = sql_for_filter({"name": "net", "maxEmployees": "50"})
    assert where_str == "num_employees<=$1 AND name ILIKE $2"
    assert values == [50, "%net%"]


def test_company_filter_allows_min_above_max() -> None:
    where_str, values = sql_for_filter({"minEmployees": "100", "maxEmployees": "10"})
    assert where_str == "num_employees>=$1 AND num_employees<=$2"
    assert values == [100, 10]


def test_company_filter_rejects_empty_criteria() -> None:
    with pytest.raises(BadRequestError):
        sql_for_filter({})


@pytest.mark.parametrize("criteria", [{"minEmployees": "lots"}, {"color": "red"}])
def test_company_filter_rejects_malformed_criteria(criteria) -> None:
    with pytest.raises(BadRequestError):
        sql_for_filter(criteria)


def test_job_filter_all_keys() -> None:
    where_str, values = sql_for_job_filter({"hasEquity": True, "minSalary": "2000", "title": "eng"})
    assert where_str == "title ILIKE $1 AND salary>=$2 AND equity IS NOT NULL AND CAST(equity AS NUMERIC)>0"
    assert values == ["%eng%", 2000]


def test_job_filter_has_equity_adds_no_parameter() -> None:
    assert sql_for_job_filter({"hasEquity": "true"}) == ("equity IS NOT NULL AND CAST(equity AS NUMERIC)>0", [])


@pytest.mark.parametrize("flag", [False, "false", "0", None])
def test_job_filter_falsy_has_equity_is_no_filter(flag) -> None:
    assert sql_for_job_filter({"hasEquity": flag}) == ("", [])
    assert sql_for_job_filter({"hasEquity": flag, "minSalary": 5}) == ("salary>=$1", [5])


def test_job_filter_rejects_company_keys() -> None:
    with pytest.raises(BadRequestError):
        sql_for_job_filter({"minEmployees": 3})


def test_job_filter_rejects_empty_criteria() -> None:
    with pytest.raises(BadRequestError):
        sql_for_job_filter({})
