import logging
from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool

from inventario.config import Settings, get_settings

logger = logging.getLogger(__name__)

_SQLITE_BUSY_TIMEOUT_SECONDS = 30
_SQLITE_BUSY_TIMEOUT_MS = _SQLITE_BUSY_TIMEOUT_SECONDS * 1000


def _is_sqlite_memory(url):
    database = url.database
    if database in (None, "", ":memory:"):
        return True
    return url.query.get("mode") == "memory"


def ensure_database_dir(database_url):
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite" or _is_sqlite_memory(url):
        return None
    parent = Path(url.database).expanduser().resolve().parent
    if not parent.exists():
        parent.mkdir(parents=True, exist_ok=True)
        logger.info("Created database directory %s", parent)
    return parent


def create_db_engine(database_url, foreign_keys=False):
    url = make_url(database_url)
    is_sqlite = url.get_backend_name() == "sqlite"
    is_memory = is_sqlite and _is_sqlite_memory(url)

    connect_args = {}
    engine_kwargs: dict[str, object] = dict(pool_pre_ping=True)
    if is_sqlite:
        connect_args = {"check_same_thread": False, "timeout": _SQLITE_BUSY_TIMEOUT_SECONDS}
        if is_memory:
            engine_kwargs.update(poolclass=StaticPool)

    db_engine = create_engine(database_url, connect_args=connect_args, **engine_kwargs)

    if is_sqlite:
        @event.listens_for(db_engine, "connect")
        def _set_sqlite_pragmas(dbapi_connection, _connection_record):
            cursor = dbapi_connection.cursor()
            try:
                cursor.execute("PRAGMA foreign_keys={}".format("ON" if foreign_keys else "OFF"))
                cursor.execute(f"PRAGMA busy_timeout={_SQLITE_BUSY_TIMEOUT_MS}")
                if not is_memory:
                    cursor.execute("PRAGMA journal_mode=WAL")
                    cursor.execute("PRAGMA synchronous=NORMAL")
            finally:
                cursor.close()

    return db_engine


def init_schema(db_engine):
    """Create missing tables. Existing tables are left untouched."""
    import inventario.models  # noqa: F401

    from inventario.database.base import Base

    Base.metadata.create_all(bind=db_engine)


app_settings: Settings = get_settings()
engine = create_db_engine(
    app_settings.DATABASE_URL,
    foreign_keys=app_settings.SQLITE_FOREIGN_KEYS,
)
