"""
Create a user (e.g. a second admin) directly in users.json. Run from project root:
  python -m bread_order.scripts.create_user USERNAME PASSWORD [role]
Example:
  python -m bread_order.scripts.create_user baker s3cret-password user
"""
import argparse
import logging
import sys

from dotenv import load_dotenv

from bread_order.core.config import get_settings
from bread_order.core.errors import ConflictError, ValidationError
from bread_order.services.datastore import DataStore


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a bread order user (no signup UI).")
    parser.add_argument("username", help="Username")
    parser.add_argument("password", help="Password")
    parser.add_argument("role", nargs="?", default="user", choices=["user", "admin"])
    args = parser.parse_args(argv)

    load_dotenv()
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )

    datastore = DataStore.from_settings(settings)
    datastore.seed(
        settings.DEFAULT_ADMIN_USERNAME,
        settings.DEFAULT_ADMIN_PASSWORD.get_secret_value(),
    )
    try:
        datastore.users.create_user(args.username.strip(), args.password, args.role)
    except (ValidationError, ConflictError) as e:
        print(e.message, file=sys.stderr)
        return 1
    if datastore.users.file.in_memory:
        print("Data directory is not writable; user was not saved.", file=sys.stderr)
        return 1
    print(f"Created user '{args.username.strip()}' with role '{args.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
