import pytest

from worldscribe.db.repositories import snippets as repo_snippets
from worldscribe.errors import NotFoundError

pytestmark = pytest.mark.integration


def test_snippet_lifecycle(db, place, article_factory):
    town = article_factory("Town", place)
    snippet = repo_snippets.create_snippet(db, "Rumor", "A dragon nearby", town.id)
    assert snippet.article_id == town.id

    renamed = repo_snippets.update_snippet(db, snippet.id, name="Gossip")
    assert (renamed.name, renamed.content) == ("Gossip", "A dragon nearby")
    edited = repo_snippets.update_snippet(db, snippet.id, content="Two dragons")
    assert (edited.name, edited.content) == ("Gossip", "Two dragons")

    deleted = repo_snippets.delete_snippet(db, snippet.id)
    assert deleted.name == "Gossip"
    with pytest.raises(NotFoundError):
        repo_snippets.get_snippet(db, snippet.id)


def test_snippets_for_article_sorted_by_name(db, place, article_factory):
    town = article_factory("Town", place)
    other = article_factory("Other", place)
    for name in ("Weather", "Arrival", "Market day"):
        repo_snippets.create_snippet(db, name, "", town.id)
    repo_snippets.create_snippet(db, "Elsewhere", "", other.id)

    names = [s.name for s in repo_snippets.get_snippets_for_article(db, town.id)]
    assert names == ["Arrival", "Market day", "Weather"]


def test_snippet_requires_article(db):
    with pytest.raises(NotFoundError):
        repo_snippets.create_snippet(db, "Lost", "", 9999)
    with pytest.raises(NotFoundError):
        repo_snippets.get_snippets_for_article(db, 9999)
    with pytest.raises(NotFoundError):
        repo_snippets.update_snippet(db, 9999, name="x")
