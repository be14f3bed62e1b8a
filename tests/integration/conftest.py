import pytest

from worldscribe.db.repositories import articles as repo_articles
from worldscribe.db.repositories import categories as repo_categories

PNG = b"\x89PNG\r\n\x1a\n0000"
JPEG = b"\xff\xd8\xff\xe0jpeg"


@pytest.fixture
def category_factory(db):
    def _create(name: str, description: str = None):
        return repo_categories.create_category(db, name, description)
    return _create


@pytest.fixture
def article_factory(db):
    def _create(name: str, category):
        return repo_articles.create_article(db, name, category.id)
    return _create


@pytest.fixture
def place(db):
    return repo_categories.get_category_by_name(db, "Place")
