"""SQLAlchemy engine factory.

SQLite connections are tuned so that concurrent request threads queue on the
database lock instead of failing with ``database is locked``:

- ``journal_mode=WAL`` lets readers proceed while a writer holds the lock
- ``busy_timeout`` makes writers wait for the lock

An in-memory SQLite database only exists per connection, so it is served
from a single shared connection. That setup is meant for local runs, not for
concurrent load.
"""

import logging
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.pool import StaticPool

SQLITE_BUSY_TIMEOUT_MS = 30_000

logger = logging.getLogger(__name__)


def is_sqlite(url: str | URL) -> bool:
    return make_url(str(url)).get_backend_name() == 'sqlite'


def is_sqlite_memory(url: str | URL) -> bool:
    u = make_url(str(url))
    return is_sqlite(u) and u.database in (None, '', ':memory:')


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    kwargs: dict[str, Any] = {}
    if is_sqlite_memory(url):
        logger.warning('In-memory SQLite shares one connection, transactions are not isolated between threads')
        kwargs['poolclass'] = StaticPool
        kwargs['connect_args'] = {'check_same_thread': False}

    engine = create_engine(url, echo=echo, **kwargs)

    if is_sqlite(url):

        @event.listens_for(engine, 'connect')
        def _sqlite_pragmas(dbapi_conn, conn_record) -> None:  # type: ignore[no-untyped-def] # noqa: ANN001, ARG001
            cur = dbapi_conn.cursor()
            cur.execute('PRAGMA journal_mode=WAL;')
            cur.execute(f'PRAGMA busy_timeout={SQLITE_BUSY_TIMEOUT_MS};')
            cur.close()

    return engine
