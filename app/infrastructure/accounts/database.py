"""
Engine construction for the accounts database.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

SQLITE_BUSY_TIMEOUT_SECONDS = 15


def _begin_immediately(engine: Engine) -> None:
    """Make every SQLite transaction take the database write lock at BEGIN.

    pysqlite otherwise opens transactions lazily at the first write, so a
    balance read inside engine.begin() would not be isolated from a
    concurrent writer.
    """

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_transactions(dbapi_connection, _connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def build_engine(database_url: str) -> Engine:
    """Build a SQLAlchemy engine for the configured database URL.

    An in-memory SQLite database only lives as long as its connection,
    so it is served from a single shared connection.
    """
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(url, pool_pre_ping=True)

    connect_args = {
        "check_same_thread": False,
        "timeout": SQLITE_BUSY_TIMEOUT_SECONDS,
    }
    if url.database in (None, "", ":memory:"):
        engine = create_engine(url, connect_args=connect_args, poolclass=StaticPool)
    else:
        engine = create_engine(url, connect_args=connect_args)
    _begin_immediately(engine)
    return engine
