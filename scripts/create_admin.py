from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from jobly.config import build_sqlalchemy_db_url, is_sqlite_url, settings  # noqa: E402
from jobly.database import Base, db, engine  # noqa: E402
from jobly.errors import ConflictError  # noqa: E402
from jobly.services import users as user_service  # noqa: E402
from jobly.utils.password_hash import generate_password  # noqa: E402
import jobly.models  # noqa: F401,E402


def _ensure_tables() -> None:
    if is_sqlite_url(build_sqlalchemy_db_url(settings)):
        Base.metadata.create_all(bind=engine)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an admin user, or promote an existing user to admin.")
    parser.add_argument("--username", required=True, help="Admin username")
    parser.add_argument("--email", required=True, help="Admin email")
    parser.add_argument("--password", default=None, help="Admin password (generated if omitted)")
    parser.add_argument("--first-name", default="Admin")
    parser.add_argument("--last-name", default="User")
    parser.add_argument(
        "--update-password",
        action="store_true",
        help="If the user exists, overwrite their password",
    )

    args = parser.parse_args(argv)

    _ensure_tables()

    password = args.password or generate_password()

    try:
        user = user_service.register(
            db,
            {
                "username": args.username,
                "password": password,
                "firstName": args.first_name,
                "lastName": args.last_name,
                "email": args.email,
                "isAdmin": True,
            },
        )
        created = True
    except ConflictError:
        changes: dict = {"isAdmin": True}
        if args.update_password:
            changes["password"] = password
        user = user_service.update(db, args.username, changes)
        created = False

    if created:
        # Print the password so the operator can log in immediately.
        print(f"created admin username={user['username']}")
        if args.password is None:
            print(f"generated password: {password}")
    else:
        print(f"user already exists username={user['username']}; admin granted")
        if args.update_password:
            print("password updated")
        elif args.password is None:
            print("(password not changed)")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
