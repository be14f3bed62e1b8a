"""
Database engine and session management for a single World.

Each World owns one SQLite file; engines are built per World folder rather than
from a process-wide URL.
"""
from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy import create_engine, event, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

logger = logging.getLogger(__name__)

DATABASE_FILENAME = "database.sqlite"
UPLOADS_DIRNAME = "uploads"


def database_path(world_folder_path: Path) -> Path:
    return Path(world_folder_path) / DATABASE_FILENAME


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):  # pragma: no cover - trivial
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_world_engine(world_folder_path: Path) -> Engine:
    """Create an engine bound to the World's database file.

    The file is created by SQLite on first connect. Foreign keys are enforced
    on every pooled connection so cascade ordering mistakes surface as errors.
    """
    db_path = database_path(world_folder_path)
    engine = create_engine(
        f"sqlite+pysqlite:///{db_path}",
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    logger.debug("world_engine_created: path=%s", db_path)
    return engine


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def has_tables(engine: Engine) -> bool:
    """Return True when the database already holds any table."""
    return bool(inspect(engine).get_table_names())
