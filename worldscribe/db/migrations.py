"""
Alembic helpers: run the packaged World migrations against an engine.

Migration scripts live in ``worldscribe/migrations`` so they ship with the
package; the Alembic config is built in code instead of from an ini file.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

MIGRATIONS_PATH = Path(__file__).resolve().parents[1] / "migrations"


def make_alembic_config(engine: Optional[Engine] = None) -> Config:
    """Return an Alembic config pointing at the packaged migrations."""
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_PATH))
    if engine is not None:
        cfg.set_main_option("sqlalchemy.url", engine.url.render_as_string(hide_password=False))
    return cfg


def head_revision() -> str:
    script = ScriptDirectory.from_config(make_alembic_config())
    return script.get_current_head()


def current_revision(engine: Engine) -> Optional[str]:
    with engine.connect() as connection:
        return MigrationContext.configure(connection).get_current_revision()


def upgrade(engine: Engine, revision: str = "head") -> None:
    """Advance the World schema to ``revision`` (default: latest)."""
    cfg = make_alembic_config(engine)
    with engine.begin() as connection:
        cfg.attributes["connection"] = connection
        command.upgrade(cfg, revision)
    logger.info("world_schema_upgraded: url=%s revision=%s", engine.url, revision)


def downgrade(engine: Engine, revision: str) -> None:
    cfg = make_alembic_config(engine)
    with engine.begin() as connection:
        cfg.attributes["connection"] = connection
        command.downgrade(cfg, revision)
    logger.info("world_schema_downgraded: url=%s revision=%s", engine.url, revision)
