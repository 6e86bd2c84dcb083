"""Heuristic recipe extraction from generic list markup."""

import logging
from typing import List

from bs4 import BeautifulSoup

from recipe_keeper.app.core.config import get_settings
from recipe_keeper.app.services.url_parsing.html_fetcher import document_title
from recipe_keeper.app.services.url_parsing.models import RecipeFields
from recipe_keeper.app.services.url_parsing.parsing_utils import clean_text, resolve_title

logger = logging.getLogger(__name__)

MEASUREMENT_KEYWORDS = ("cup", "tsp", "tbsp", "pound", "oz", "gram")
INSTRUCTION_ITEM_SELECTOR = "ol li, .instructions li, .directions li"
INGREDIENTS_PLACEHOLDER = "Add ingredients manually"
INSTRUCTIONS_PLACEHOLDER = "Add instructions manually"


def _find_ingredient_items(soup: BeautifulSoup, limit: int) -> List[str]:
    """List items mentioning a measurement unit, in document order."""
    items: List[str] = []
    for li in soup.find_all("li"):
        text = clean_text(li.get_text(" "))
        if text and any(keyword in text for keyword in MEASUREMENT_KEYWORDS):
            items.append(text)
            if len(items) >= limit:
                break
    return items


def _find_instruction_items(soup: BeautifulSoup, limit: int, min_length: int) -> List[str]:
    """Long list items inside ordered lists or instruction/direction containers."""
    steps: List[str] = []
    for li in soup.select(INSTRUCTION_ITEM_SELECTOR):
        raw_text = li.get_text().strip()
        if len(raw_text) > min_length:
            steps.append(clean_text(raw_text))
            if len(steps) >= limit:
                break
    return steps


def extract_recipe_heuristic(soup: BeautifulSoup, url: str) -> RecipeFields:
    """Last resort: always returns fields, using placeholders when nothing matches."""
    settings = get_settings()
    ingredients = _find_ingredient_items(soup, settings.scraper_max_ingredients)
    instructions = _find_instruction_items(
        soup, settings.scraper_max_instructions, settings.scraper_min_instruction_length
    )
    logger.info(
        "Heuristic scan: ingredients=%d, instructions=%d", len(ingredients), len(instructions)
    )

    return RecipeFields(
        title=resolve_title(document_title(soup), url=url),
        ingredients=ingredients or [INGREDIENTS_PLACEHOLDER],
        instructions=instructions or [INSTRUCTIONS_PLACEHOLDER],
    )
