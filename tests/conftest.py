from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Point the engine at a throwaway sqlite file before jobly is imported.
    os.environ["DB_URL"] = "sqlite:///./test_jobly.db"
    os.environ["ENVIRONMENT"] = "test"
    os.environ["SECRET_KEY"] = "secret-test"
    # Cheapest bcrypt cost accepted by the library.
    os.environ["BCRYPT_WORK_FACTOR"] = "4"


@dataclass
class SeedData:
    job_ids: list[int] = field(default_factory=list)
    tech_ids: list[int] = field(default_factory=list)


def reset_database() -> None:
    from jobly.database import Base, engine
    import jobly.models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


def seed_common(db: Any) -> SeedData:
    from jobly.utils.password_hash import hash_password

    seed = SeedData()

    db.query(
        """INSERT INTO companies (handle, name, num_employees, description, logo_url)
           VALUES ('c1', 'C1', 1, 'Desc1', 'http://c1.img'),
                  ('c2', 'C2', 2, 'Desc2', 'http://c2.img'),
                  ('c3', 'C3', 3, 'Desc3', 'http://c3.img')"""
    )

    for title, salary, equity, handle in (
        ("Job 1", 1000, "0.1", "c1"),
        ("Job 2", 2000, "0.2", "c1"),
        ("Job 3", 3000, "0", "c2"),
    ):
        row = db.query_one(
            """INSERT INTO jobs (title, salary, equity, company_handle)
               VALUES ($1, $2, $3, $4)
               RETURNING id""",
            [title, salary, equity, handle],
        )
        seed.job_ids.append(int(row["id"]))

    for username, password, is_admin in (
        ("u1", "password1", False),
        ("u2", "password2", False),
        ("admin", "password3", True),
    ):
        db.query(
            """INSERT INTO users (username, password, first_name, last_name, email, is_admin)
               VALUES ($1, $2, $3, $4, $5, $6)""",
            [
                username,
                hash_password(password),
                f"{username.upper()}F",
                f"{username.upper()}L",
                f"{username}@email.com",
                is_admin,
            ],
        )

    for job_id in (seed.job_ids[1], seed.job_ids[2]):
        db.query("INSERT INTO applications (username, job_id) VALUES ($1, $2)", ["u1", job_id])

    for label in ("Tech1", "Tech2"):
        row = db.query_one("INSERT INTO technologies (technology) VALUES ($1) RETURNING id", [label])
        seed.tech_ids.append(int(row["id"]))

    for tech_id in seed.tech_ids:
        db.query("INSERT INTO requirements (job_id, tech_id) VALUES ($1, $2)", [seed.job_ids[0], tech_id])
        db.query("INSERT INTO qualifications (username, tech_id) VALUES ($1, $2)", ["u1", tech_id])

    return seed


@pytest.fixture()
def db() -> Any:
    from jobly.database import db as database

    reset_database()
    return database


@pytest.fixture()
def seed(db: Any) -> SeedData:
    return seed_common(db)


@pytest.fixture()
def client(db: Any) -> Any:
    from jobly.main import create_app

    app = create_app()
    with TestClient(app) as c:
        yield c


def _token(username: str, is_admin: bool) -> str:
    from jobly.utils.jwt_handler import create_user_token

    return create_user_token({"username": username, "isAdmin": is_admin})


@pytest.fixture()
def u1_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {_token('u1', False)}"}


@pytest.fixture()
def u2_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {_token('u2', False)}"}


@pytest.fixture()
def admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {_token('admin', True)}"}
