"""Schema.org JSON-LD recipe extraction."""

import logging
from typing import Optional

from bs4 import BeautifulSoup

from recipe_keeper.app.services.url_parsing.html_fetcher import document_title
from recipe_keeper.app.services.url_parsing.json_ld import find_json_ld_blocks, find_recipe_node
from recipe_keeper.app.services.url_parsing.models import RecipeFields
from recipe_keeper.app.services.url_parsing.parsing_utils import normalize_recipe_node, resolve_title

logger = logging.getLogger(__name__)


def extract_recipe_from_schema_org(soup: BeautifulSoup, url: str) -> Optional[RecipeFields]:
    """Extract recipe fields from the first schema.org Recipe node embedded in the page."""
    blocks = find_json_ld_blocks(soup)
    logger.info("Found %d JSON-LD script blocks", len(blocks))

    node = find_recipe_node(blocks)
    if node is None:
        return None

    fields = normalize_recipe_node(node)
    fields.title = resolve_title(fields.title, document_title(soup), url=url)
    logger.info(
        "JSON-LD recipe: title=%s, ingredients=%d, instructions=%d",
        fields.title[:50],
        len(fields.ingredients),
        len(fields.instructions),
    )
    return fields
