import pytest

from worldscribe.utils.settings import refresh_settings
from worldscribe.world import WorldManager, create_world

_SETTINGS_ENV = (
    "WORLDSCRIBE_WORLDS_FOLDER",
    "WORLDSCRIBE_MAX_IMAGE_BYTES",
    "WORLDSCRIBE_DEFAULT_PAGE_SIZE",
    "WORLDSCRIBE_MAX_PAGE_SIZE",
    "WORLDSCRIBE_CORS_ORIGINS",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Clear env + cached settings for each test to avoid cross-contamination."""
    for env_name in _SETTINGS_ENV:
        monkeypatch.delenv(env_name, raising=False)
    refresh_settings()
    yield
    refresh_settings()


@pytest.fixture
def worlds_folder(tmp_path):
    folder = tmp_path / "Worlds"
    folder.mkdir()
    return folder


@pytest.fixture
def manager():
    m = WorldManager()
    try:
        yield m
    finally:
        m.close()


@pytest.fixture
def world(manager, worlds_folder):
    """A freshly created World (default categories seeded) opened on ``manager``."""
    folder = create_world(worlds_folder, "Testland")
    return manager.open(folder)


@pytest.fixture
def db(world):
    with world.session() as session:
        yield session


@pytest.fixture
def images(world):
    return world.images
