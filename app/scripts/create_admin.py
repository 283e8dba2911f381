"""
Create an administrator (there is no admin registration endpoint). Run from project root:
  python -m app.scripts.create_admin NAME PASSWORD
Example:
  python -m app.scripts.create_admin librarian your-secure-password
"""
import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.database import build_engine, build_session_factory
from app.core.security import hash_password
from app.models import AdminUser

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

PASSWORD_MIN_LEN = 8


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Geolib admin account.")
    parser.add_argument("name", help="Admin name (1-255 chars)")
    parser.add_argument("password", help=f"Password (at least {PASSWORD_MIN_LEN} chars)")
    args = parser.parse_args(argv)

    name = args.name.strip()
    if not name or len(name) > 255:
        print("Invalid name length.", file=sys.stderr)
        return 1
    if len(args.password) < PASSWORD_MIN_LEN:
        print(f"Password must be at least {PASSWORD_MIN_LEN} characters.", file=sys.stderr)
        return 1

    settings = get_settings()
    engine = build_engine(settings)
    db = build_session_factory(engine)()
    try:
        existing = db.query(AdminUser).filter(AdminUser.name == name).first()
        if existing:
            print(f"Admin '{name}' already exists.", file=sys.stderr)
            return 1
        admin = AdminUser(
            name=name,
            password_hash=hash_password(args.password, rounds=settings.BCRYPT_ROUNDS),
        )
        db.add(admin)
        db.commit()
        logger.info("Created admin '%s' with id %s", name, admin.id)
        return 0
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
