import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from bs4 import BeautifulSoup

from recipe_keeper.app.services.url_parsing.errors import RecipeScrapeError, RecipeUrlRequiredError
from recipe_keeper.app.services.url_parsing.extractors import (
    extract_recipe_from_schema_org,
    extract_recipe_from_wprm,
    extract_recipe_heuristic,
)
from recipe_keeper.app.services.url_parsing.html_fetcher import fetch_html, parse_document
from recipe_keeper.app.services.url_parsing.models import CanonicalRecipe, RecipeFields
from recipe_keeper.app.services.url_parsing.parsing_utils import resolve_title

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionStrategy:
    name: str
    extract: Callable[[BeautifulSoup, str], Optional[RecipeFields]]

    def attempt(self, soup: BeautifulSoup, url: str) -> Optional[RecipeFields]:
        fields = self.extract(soup, url)
        if fields is None or not fields.has_content:
            return None
        return fields


def get_strategies() -> Tuple[ExtractionStrategy, ...]:
    """The cascade, in the fixed order it is tried."""
    return (
        ExtractionStrategy("schema_org_json_ld", extract_recipe_from_schema_org),
        ExtractionStrategy("wprm", extract_recipe_from_wprm),
        ExtractionStrategy("heuristic", extract_recipe_heuristic),
    )

_id_lock = threading.Lock()
_last_id = 0


def next_recipe_id() -> int:
    """Millisecond timestamp, bumped so ids never repeat within the process."""
    global _last_id
    with _id_lock:
        _last_id = max(int(time.time() * 1000), _last_id + 1)
        return _last_id


def extract_fields(soup: BeautifulSoup, url: str) -> Tuple[str, RecipeFields]:
    """Run the strategies in order and return the first non-empty result."""
    for strategy in get_strategies():
        fields = strategy.attempt(soup, url)
        if fields is not None:
            return strategy.name, fields
    # The heuristic strategy always yields placeholders, so this is unreachable in practice.
    raise RecipeScrapeError()


async def scrape_recipe_from_url(url: str) -> CanonicalRecipe:
    """Fetch ``url`` and extract a recipe from it.

    Raises RecipeUrlRequiredError for a blank URL, and RecipeScrapeError for
    anything else that goes wrong; the underlying cause is logged and chained
    but never exposed in the message.
    """
    if not url or not url.strip():
        raise RecipeUrlRequiredError()
    url = url.strip()

    try:
        html = await fetch_html(url)
        soup = parse_document(html)
        strategy_name, fields = extract_fields(soup, url)
        logger.info("Recipe extracted from %s using %s", url, strategy_name)
        return CanonicalRecipe(
            id=next_recipe_id(),
            title=resolve_title(fields.title, url=url),
            ingredients=fields.ingredients,
            instructions=fields.instructions,
            image=fields.image,
            servings=fields.servings,
            url=url,
            pinned=False,
        )
    except RecipeScrapeError:
        raise
    except Exception as exc:
        logger.warning("Error scraping recipe from %s: %s", url, exc, exc_info=True)
        raise RecipeScrapeError() from exc
