"""
Database Session Module

Builds the one engine the service uses (local SQLite, ``DATABASE_URL``, or
MySQL reached through an SSH tunnel) and the helpers every service module
commits through.
"""
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import SQLModel, Session, create_engine

from studio.core.config import settings
from studio.core.errors import ConflictError, StorageFailure

logger = logging.getLogger(__name__)

# Opened lazily, kept for the life of the process
_tunnel = None
_engine = None


def _tunnelled_mysql_url() -> str:
    global _tunnel
    from sshtunnel import SSHTunnelForwarder

    if _tunnel is None:
        _tunnel = SSHTunnelForwarder(
            (settings.SSH_HOST, 22),
            ssh_username=settings.SSH_USER,
            ssh_password=settings.SSH_PASSWORD,
            remote_bind_address=(settings.DB_HOST, 3306),
            set_keepalive=60,
        )
        _tunnel.start()
        logger.info("SSH tunnel to %s open on local port %s", settings.SSH_HOST, _tunnel.local_bind_port)

    return (
        f"mysql+pymysql://{settings.DB_USER}:{settings.DB_PASSWORD}"
        f"@127.0.0.1:{_tunnel.local_bind_port}/{settings.DB_NAME}"
    )


def get_engine():
    global _engine
    if _engine is not None:
        return _engine

    if settings.USE_SSH:
        _engine = create_engine(_tunnelled_mysql_url(), pool_pre_ping=True)
        return _engine

    db_url = settings.DATABASE_URL or "sqlite:///./studio.db"
    # Request threads share the SQLite connection pool
    connect_args = {"check_same_thread": False} if db_url.startswith("sqlite") else {}
    _engine = create_engine(db_url, connect_args=connect_args)
    return _engine


engine = get_engine()


def init_db(bind=None):
    """Create any missing tables. Existing tables are left untouched."""
    # Import models so they register on the metadata
    from studio import models  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)


def get_db():
    with Session(engine) as session:
        yield session


def commit(db: Session) -> None:
    """
    Commit the session's pending changes as one transaction.

    On failure the session is rolled back, so nothing staged is kept:
    constraint violations become ``ConflictError``, any other database
    error becomes ``StorageFailure``.
    """
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.info("Commit rejected by a constraint: %s", exc.orig)
        raise ConflictError("Change conflicts with existing data") from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Database commit failed")
        raise StorageFailure("Database commit failed") from exc
