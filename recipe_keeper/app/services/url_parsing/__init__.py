"""URL recipe parsing package.

Recipes are extracted from a page by trying, in order: schema.org JSON-LD,
WP Recipe Maker markup, and a heuristic scan of list markup.
"""

from recipe_keeper.app.services.url_parsing.errors import (
    GENERIC_SCRAPE_ERROR,
    RecipeScrapeError,
    RecipeUrlRequiredError,
)
from recipe_keeper.app.services.url_parsing.html_fetcher import (
    document_title,
    fetch_html,
    is_private_host,
    parse_document,
    validate_url,
)
from recipe_keeper.app.services.url_parsing.json_ld import (
    find_json_ld_blocks,
    find_recipe_node,
    flatten_json,
    is_recipe_node,
    load_json_block,
    sanitize_json,
)
from recipe_keeper.app.services.url_parsing.models import (
    CanonicalRecipe,
    JsonValue,
    RecipeFields,
)
from recipe_keeper.app.services.url_parsing.parsing_utils import (
    clean_text,
    extract_image,
    extract_ingredients,
    extract_instruction_text,
    extract_servings,
    normalize_recipe_node,
    resolve_title,
    synthetic_title,
)

__all__ = [
    # Models
    "CanonicalRecipe",
    "JsonValue",
    "RecipeFields",
    # Errors
    "GENERIC_SCRAPE_ERROR",
    "RecipeScrapeError",
    "RecipeUrlRequiredError",
    # HTML fetching
    "document_title",
    "fetch_html",
    "is_private_host",
    "parse_document",
    "validate_url",
    # JSON-LD recovery
    "find_json_ld_blocks",
    "find_recipe_node",
    "flatten_json",
    "is_recipe_node",
    "load_json_block",
    "sanitize_json",
    # Field normalization
    "clean_text",
    "extract_image",
    "extract_ingredients",
    "extract_instruction_text",
    "extract_servings",
    "normalize_recipe_node",
    "resolve_title",
    "synthetic_title",
]
