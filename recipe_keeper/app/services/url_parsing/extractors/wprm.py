"""WP Recipe Maker markup extraction.

Plenty of WordPress food blogs render recipes with the WP Recipe Maker
plugin but ship no usable JSON-LD. The plugin's CSS classes are stable
enough to read fields straight from the DOM.
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup

from recipe_keeper.app.services.url_parsing.html_fetcher import document_title
from recipe_keeper.app.services.url_parsing.models import RecipeFields
from recipe_keeper.app.services.url_parsing.parsing_utils import clean_text, resolve_title

logger = logging.getLogger(__name__)

CONTAINER_SELECTOR = ".wprm-recipe-container"
TITLE_SELECTOR = ".wprm-recipe-name"
INGREDIENT_SELECTOR = ".wprm-recipe-ingredient"
INSTRUCTION_SELECTOR = ".wprm-recipe-instruction-text"
SERVINGS_SELECTOR = ".wprm-recipe-servings"


def _texts(soup: BeautifulSoup, selector: str) -> List[str]:
    texts = [clean_text(node.get_text(" ")) for node in soup.select(selector)]
    return [text for text in texts if text]


def _first_text(soup: BeautifulSoup, selector: str) -> str:
    node = soup.select_one(selector)
    return clean_text(node.get_text(" ")) if node else ""


def _image_src(container) -> str:
    img = container.find("img")
    if img is None:
        return ""
    for attr in ("src", "data-src", "data-lazy-src"):
        value = img.get(attr)
        if value and not value.startswith("data:"):
            return value
    return ""


def extract_recipe_from_wprm(soup: BeautifulSoup, url: str) -> Optional[RecipeFields]:
    """Extract recipe fields from WP Recipe Maker markup, if the page uses it."""
    container = soup.select_one(CONTAINER_SELECTOR)
    if container is None:
        return None

    ingredients = _texts(soup, INGREDIENT_SELECTOR)
    instructions = _texts(soup, INSTRUCTION_SELECTOR)
    logger.info(
        "WPRM container found: ingredients=%d, instructions=%d",
        len(ingredients),
        len(instructions),
    )
    if not ingredients and not instructions:
        return None

    return RecipeFields(
        title=resolve_title(_first_text(soup, TITLE_SELECTOR), document_title(soup), url=url),
        ingredients=ingredients,
        instructions=instructions,
        image=_image_src(container),
        servings=_first_text(soup, SERVINGS_SELECTOR),
    )
