import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from inventory_api.config import Settings, get_settings
from inventory_api.database.base import Base


app_settings: Settings = get_settings()
logger = logging.getLogger(__name__)

_SQLITE_BUSY_TIMEOUT_SECONDS = 30
_SQLITE_BUSY_TIMEOUT_MS = _SQLITE_BUSY_TIMEOUT_SECONDS * 1000


def _is_sqlite_memory(url) -> bool:
    database = url.database
    if database in (None, "", ":memory:"):
        return True
    return url.query.get("mode") == "memory"


def _set_sqlite_pragmas(dbapi_connection, _connection_record):
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute(f"PRAGMA busy_timeout={_SQLITE_BUSY_TIMEOUT_MS}")
    finally:
        cursor.close()


def build_engine(database_url: str) -> Engine:
    url = make_url(database_url)
    connect_args = {}
    engine_kwargs: dict[str, object] = dict(pool_pre_ping=True)
    is_sqlite = url.get_backend_name() == "sqlite"
    if is_sqlite:
        connect_args = {"check_same_thread": False, "timeout": _SQLITE_BUSY_TIMEOUT_SECONDS}
        if _is_sqlite_memory(url):
            engine_kwargs.update(poolclass=StaticPool)

    new_engine = create_engine(database_url, connect_args=connect_args, **engine_kwargs)
    if is_sqlite:
        event.listen(new_engine, "connect", _set_sqlite_pragmas)
    return new_engine


engine = build_engine(app_settings.DATABASE_URL)


def init_db(bind: Engine | None = None) -> None:
    from inventory_api.models import import_all_models

    import_all_models()
    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    logger.info("Database schema ready (%s)", bind.url.get_backend_name())
