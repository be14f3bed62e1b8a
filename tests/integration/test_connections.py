import pytest

from worldscribe.db import models
from worldscribe.db.repositories import connections as repo_connections
from worldscribe.errors import NotFoundError, ValidationError

pytestmark = pytest.mark.integration


@pytest.fixture
def trio(place, article_factory):
    return article_factory("Harbor", place), article_factory("Market", place), article_factory("Abbey", place)


def test_shared_description_survives_until_last_reference(db, trio):
    harbor, market, _ = trio
    first = repo_connections.create_connection(
        db, harbor.id, market.id, "supplies", description_content="Trade route"
    )
    second = repo_connections.create_connection(
        db, market.id, harbor.id, "supplied by", description_id=first.connection_description_id
    )
    description_id = first.connection_description_id
    assert second.connection_description_id == description_id
    assert repo_connections.count_description_references(db, description_id) == 2

    deleted = repo_connections.delete_connection(db, first.id)
    assert deleted.id == first.id
    assert repo_connections.get_connection_description(db, description_id).content == "Trade route"

    repo_connections.delete_connection(db, second.id)
    with pytest.raises(NotFoundError):
        repo_connections.get_connection_description(db, description_id)


@pytest.mark.parametrize(
    "kwargs",
    [{}, {"description_content": "x", "description_id": 1}],
)
def test_exactly_one_description_source(db, trio, kwargs):
    harbor, market, _ = trio
    with pytest.raises(ValidationError):
        repo_connections.create_connection(db, harbor.id, market.id, **kwargs)
    assert db.query(models.Connection).count() == 0


def test_self_connection_rejected(db, trio):
    harbor, _, _ = trio
    with pytest.raises(ValidationError):
        repo_connections.create_connection(db, harbor.id, harbor.id, description_content="mirror")


def test_missing_endpoints_and_description(db, trio):
    harbor, market, _ = trio
    with pytest.raises(NotFoundError):
        repo_connections.create_connection(db, harbor.id, 9999, description_content="x")
    with pytest.raises(NotFoundError):
        repo_connections.create_connection(db, harbor.id, market.id, description_id=9999)
    assert db.query(models.ConnectionDescription).count() == 0


def test_pair_shares_one_description(db, trio):
    harbor, market, _ = trio
    forward, backward = repo_connections.create_connection_pair(
        db, harbor.id, market.id, other_article_role="customer", article_role="port",
        description_content="They trade fish",
    )
    assert (forward.main_article_id, forward.other_article_id) == (harbor.id, market.id)
    assert (backward.main_article_id, backward.other_article_id) == (market.id, harbor.id)
    assert forward.other_article_role == "customer"
    assert backward.other_article_role == "port"
    assert forward.connection_description_id == backward.connection_description_id


def test_connections_for_article_are_outgoing_and_sorted(db, trio):
    harbor, market, abbey = trio
    repo_connections.create_connection(db, harbor.id, market.id, "buyer", description_content="fish")
    repo_connections.create_connection(db, harbor.id, abbey.id, "patron", description_content="tithes")
    repo_connections.create_connection(db, market.id, harbor.id, "seller", description_content="coin")

    rows = repo_connections.get_connections_for_article(db, harbor.id)
    assert [r.other_article_name for r in rows] == ["Abbey", "Market"]
    assert [r.description for r in rows] == ["tithes", "fish"]
    assert [r.other_article_role for r in rows] == ["patron", "buyer"]


def test_update_role_and_description(db, trio):
    harbor, market, _ = trio
    connection = repo_connections.create_connection(db, harbor.id, market.id, description_content="old")
    assert connection.other_article_role == ""

    assert repo_connections.update_connection_role(db, connection.id, "rival").other_article_role == "rival"
    updated = repo_connections.update_connection_description(
        db, connection.connection_description_id, "new"
    )
    assert updated.content == "new"

    with pytest.raises(NotFoundError):
        repo_connections.update_connection_role(db, 9999, "x")
    with pytest.raises(NotFoundError):
        repo_connections.delete_connection(db, 9999)
