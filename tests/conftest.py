import pytest

from recipe_keeper.app.core.config import get_settings
from recipe_keeper.app.services.url_parsing.html_fetcher import parse_document


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in (
        "SCRAPER_RELAY_URL",
        "SCRAPER_TIMEOUT_SECONDS",
        "SCRAPER_MAX_INGREDIENTS",
        "SCRAPER_MAX_INSTRUCTIONS",
        "SCRAPER_MIN_INSTRUCTION_LENGTH",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def soup_from():
    return parse_document
