import pytest
from sqlalchemy import inspect

from worldscribe.db import database, migrations

pytestmark = pytest.mark.integration

TABLES = {
    "categories",
    "fields",
    "articles",
    "field_values",
    "connection_descriptions",
    "connections",
    "snippets",
}


@pytest.fixture
def engine(tmp_path):
    eng = database.create_world_engine(tmp_path)
    try:
        yield eng
    finally:
        eng.dispose()


def test_upgrade_creates_tables_and_indexes(engine):
    assert not database.has_tables(engine)
    migrations.upgrade(engine)
    assert migrations.current_revision(engine) == migrations.head_revision() == "8a4d6b2c1e05"

    inspector = inspect(engine)
    assert TABLES.issubset(set(inspector.get_table_names()))
    connection_indexes = {ix["name"] for ix in inspector.get_indexes("connections")}
    assert {
        "idx_connections_main_article_id",
        "idx_connections_other_article_id",
        "idx_connections_description_id",
    }.issubset(connection_indexes)


def test_downgrade_chain_to_base(engine):
    migrations.upgrade(engine)
    migrations.downgrade(engine, "3c1f0e2a9b7d")
    assert {ix["name"] for ix in inspect(engine).get_indexes("articles")} == set()

    migrations.downgrade(engine, "base")
    assert migrations.current_revision(engine) is None
    assert not TABLES.intersection(inspect(engine).get_table_names())
