"""PostgreSQL engine construction and per-request session management."""

import logging
from collections.abc import Generator

from fastapi import Request
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import Settings

logger = logging.getLogger(__name__)

# Postgres SQLSTATE codes we map to domain errors.
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def build_engine(settings: Settings) -> Engine:
    """Create the engine for DATABASE_URL. The caller owns and disposes it."""
    connect_args: dict[str, str] = {}
    if settings.DATABASE_SSL or settings.APP_ENV == "prod":
        connect_args["sslmode"] = "require"
    return create_engine(
        settings.DATABASE_URL,
        pool_pre_ping=True,
        echo=settings.DEBUG,
        connect_args=connect_args,
    )


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that yields a DB session from the app's factory and closes it when done."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        logger.warning("Database connectivity check failed", exc_info=True)
        return False


def integrity_code(exc: IntegrityError) -> str | None:
    """SQLSTATE of the driver error behind an IntegrityError, if the driver exposes one."""
    return getattr(exc.orig, "pgcode", None)
