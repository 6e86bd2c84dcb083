"""Pydantic models for URL recipe scraping."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

# Parsed JSON-LD: objects, arrays and scalars, nested arbitrarily.
JsonValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]


class RecipeFields(BaseModel):
    """Fields recovered by a single extraction strategy."""

    title: Optional[str] = None
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    image: str = ""
    servings: str = ""

    @property
    def has_content(self) -> bool:
        return bool(self.ingredients or self.instructions)


class CanonicalRecipe(BaseModel):
    """A scraped recipe in the shape handed to callers."""

    id: int
    title: str = Field(min_length=1)
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    image: str = ""
    servings: str = ""
    url: str
    pinned: bool = False
