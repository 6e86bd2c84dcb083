"""Recovery of JSON-LD blocks embedded in recipe pages.

Sites routinely ship JSON-LD that ``json.loads`` rejects: stray control
characters and trailing commas are the usual culprits. Each block gets a
strict parse, then one sanitized retry, and is skipped if both fail.
"""

import json
import logging
import re
from typing import Any, Dict, Iterable, List, Optional

from bs4 import BeautifulSoup

from recipe_keeper.app.services.url_parsing.models import JsonValue

logger = logging.getLogger(__name__)

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")
_TRAILING_COMMA = re.compile(r",\s*([}\]])")


def find_json_ld_blocks(soup: BeautifulSoup) -> List[str]:
    """Return the raw text of every JSON-LD script in document order."""
    blocks: List[str] = []
    for script in soup.find_all("script", attrs={"type": "application/ld+json"}):
        raw = script.string or script.get_text()
        if raw and raw.strip():
            blocks.append(raw)
    return blocks


def sanitize_json(raw: str) -> str:
    """Strip control characters (except tab/LF/CR) and trailing commas."""
    cleaned = _CONTROL_CHARS.sub("", raw)
    return _TRAILING_COMMA.sub(r"\1", cleaned).strip()


def load_json_block(raw: str) -> Optional[JsonValue]:
    """Parse a JSON-LD block, retrying once on sanitized text. Never raises."""
    try:
        return json.loads(raw)
    except (ValueError, RecursionError):
        pass
    try:
        # strict=False lets raw newlines inside strings through.
        return json.loads(sanitize_json(raw), strict=False)
    except (ValueError, RecursionError) as exc:
        logger.debug("Skipping unparseable JSON-LD block: %s (first 200 chars: %s)", exc, raw[:200])
        return None


def flatten_json(value: JsonValue) -> List[Dict[str, Any]]:
    """Every object in ``value``, depth-first with parents before children."""
    if isinstance(value, list):
        nodes: List[Dict[str, Any]] = []
        for item in value:
            nodes.extend(flatten_json(item))
        return nodes
    if isinstance(value, dict):
        nodes = [value]
        for child in value.values():
            nodes.extend(flatten_json(child))
        return nodes
    return []


def is_recipe_node(node: Dict[str, Any]) -> bool:
    node_type = node.get("@type")
    if isinstance(node_type, str):
        return node_type == "Recipe"
    if isinstance(node_type, list):
        return "Recipe" in node_type
    return False


def find_recipe_node(blocks: Iterable[str]) -> Optional[Dict[str, Any]]:
    """First Recipe node across all blocks; later blocks are only tried if earlier ones miss."""
    for idx, raw in enumerate(blocks):
        data = load_json_block(raw)
        if data is None:
            continue
        try:
            nodes = flatten_json(data)
        except RecursionError:
            logger.debug("Skipping JSON-LD block %d: nested too deeply", idx)
            continue
        for node in nodes:
            if is_recipe_node(node):
                logger.debug("Recipe node found in JSON-LD block %d", idx)
                return node
    return None
