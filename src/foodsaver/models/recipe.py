"""Recipe catalogue models."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

RecipeCategory = Literal["breakfast", "lunch", "dinner", "snack", "dessert"]


class Recipe(BaseModel):
    """Static catalogue recipe."""

    id: str
    name: str
    description: str
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    prep_time: int = Field(ge=0)
    cook_time: int = Field(ge=0)
    servings: int = Field(ge=1)
    category: RecipeCategory
    cuisine: str
    dietary_restrictions: list[str] = Field(default_factory=list)
    image_url: Optional[str] = Field(default=None)

    model_config = ConfigDict(frozen=True)

    @property
    def total_time(self) -> int:
        return self.prep_time + self.cook_time


class RecipeRecommendation(Recipe):
    """Recipe ranked against a user's on-hand ingredients."""

    match_score: float = Field(ge=0, le=1)
    matching_ingredients: int = Field(ge=0)


__all__ = ["Recipe", "RecipeCategory", "RecipeRecommendation"]
