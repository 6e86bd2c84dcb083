"""General parsing utilities for recipe extraction."""

import re
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

from recipe_keeper.app.services.url_parsing.models import JsonValue, RecipeFields


def clean_text(text: str) -> str:
    """Normalize whitespace in text."""
    return re.sub(r"\s+", " ", text or "").strip()


def synthetic_title(url: str) -> str:
    """Title used when a page offers nothing better."""
    hostname = urlparse(url).hostname
    if hostname:
        return f"Recipe from {hostname}"
    return "Scraped Recipe"


def resolve_title(*candidates: Optional[str], url: str) -> str:
    """Return the first non-blank candidate, else a hostname-derived title."""
    for candidate in candidates:
        if isinstance(candidate, str):
            cleaned = clean_text(candidate)
            if cleaned:
                return cleaned
    return synthetic_title(url)


def extract_ingredients(node: Dict[str, Any]) -> List[str]:
    """Read recipeIngredient (or the legacy ingredients property) as a list of lines."""
    raw = node.get("recipeIngredient")
    if raw is None:
        raw = node.get("ingredients")
    if raw is None:
        return []
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list):
        return []
    entries = [item if isinstance(item, str) else "" for item in raw]
    return [entry for entry in entries if entry.strip()]


def extract_instruction_text(instructions: JsonValue) -> List[str]:
    """Extract step text from a string, a list of steps, or nested HowToSections."""
    if isinstance(instructions, str):
        return [line.strip() for line in re.split(r"\r?\n", instructions) if line.strip()]
    if not isinstance(instructions, list):
        return []

    steps: List[str] = []
    for entry in instructions:
        if isinstance(entry, str):
            steps.append(entry)
        elif isinstance(entry, dict):
            text_val = entry.get("text")
            if isinstance(text_val, str) and text_val:
                steps.append(text_val)
            elif entry.get("itemListElement"):
                steps.extend(extract_instruction_text(entry["itemListElement"]))
    return [step.strip() for step in steps if step.strip()]


def extract_image(value: JsonValue) -> str:
    """Extract image URL from a string or the first entry of an image list."""
    if isinstance(value, str):
        return value
    if isinstance(value, list) and value:
        first = value[0]
        if isinstance(first, str):
            return first
        if isinstance(first, dict) and isinstance(first.get("url"), str):
            return first["url"]
    return ""


def extract_servings(value: JsonValue) -> str:
    """recipeYield is free text ("4-6 servings"); keep it as written."""
    if isinstance(value, list):
        value = value[0] if value else None
    if isinstance(value, bool) or value is None:
        return ""
    if isinstance(value, (int, float, str)):
        return str(value)
    return ""


def normalize_recipe_node(node: Dict[str, Any]) -> RecipeFields:
    """Map a schema.org Recipe node onto recipe fields.

    The title is left as the raw ``name`` so callers can apply their own
    fallbacks (document title, hostname).
    """
    name = node.get("name")
    return RecipeFields(
        title=name if isinstance(name, str) else None,
        ingredients=extract_ingredients(node),
        instructions=extract_instruction_text(node.get("recipeInstructions")),
        image=extract_image(node.get("image")),
        servings=extract_servings(node.get("recipeYield")),
    )
