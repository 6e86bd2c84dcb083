"""Recipe extractors for the different parsing strategies."""

from recipe_keeper.app.services.url_parsing.extractors.heuristic import extract_recipe_heuristic
from recipe_keeper.app.services.url_parsing.extractors.schema_org import (
    extract_recipe_from_schema_org,
)
from recipe_keeper.app.services.url_parsing.extractors.wprm import extract_recipe_from_wprm

__all__ = [
    "extract_recipe_from_schema_org",
    "extract_recipe_from_wprm",
    "extract_recipe_heuristic",
]
