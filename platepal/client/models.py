from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

MACROS = ("carbs", "protein", "fat")
FOOD_GROUPS = ("vegetables", "fruits", "grains", "dairy", "meat", "seafood")


class Restaurant(BaseModel):
    """One recommendation as the model described it. Nothing is verified."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    address: str = ""
    description: str = ""
    rating: str | None = None

    @field_validator("name", "address", "description", mode="before")
    @classmethod
    def _text_or_empty(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("rating", mode="before")
    @classmethod
    def _rating_as_text(cls, value: Any) -> str | None:
        if value is None or isinstance(value, str):
            return value
        return str(value)


class Location(BaseModel):
    latitude: float
    longitude: float


class MacroIntensity(str, Enum):
    minimize = "minimize"
    balanced = "balanced"
    maximize = "maximize"
    unset = "unset"


class FoodGroupPriority(str, Enum):
    avoid = "avoid"
    neutral = "neutral"
    prioritize = "prioritize"
    unset = "unset"


class SortMode(str, Enum):
    relevance = "relevance"
    rating = "rating"
    diet_match = "diet_match"
    distance = "distance"
    price_low_high = "price_low_high"
    price_high_low = "price_high_low"


class CalorieRange(BaseModel):
    min_calories: int | None = Field(default=None, ge=0)
    max_calories: int | None = Field(default=None, ge=0)

    @property
    def is_set(self) -> bool:
        return self.min_calories is not None or self.max_calories is not None


def _unset_macros() -> dict[str, MacroIntensity]:
    return {m: MacroIntensity.unset for m in MACROS}


def _unset_food_groups() -> dict[str, FoodGroupPriority]:
    return {g: FoodGroupPriority.unset for g in FOOD_GROUPS}


class SearchForm(BaseModel):
    """Per-session UI state. Each search re-reads it before sending anything."""

    diet_prefs: str = ""
    zipcode: str = ""
    location: Location | None = None
    calorie_range: CalorieRange = Field(default_factory=CalorieRange)
    macros: dict[str, MacroIntensity] = Field(default_factory=_unset_macros)
    food_groups: dict[str, FoodGroupPriority] = Field(default_factory=_unset_food_groups)
    restaurants: list[Restaurant] = Field(default_factory=list)
    sort_mode: SortMode = SortMode.relevance
    loading: bool = False
    error: str | None = None

    @property
    def has_customizations(self) -> bool:
        """True when any extended-variant control is set."""
        return (
            self.calorie_range.is_set
            or any(v != MacroIntensity.unset for v in self.macros.values())
            or any(v != FoodGroupPriority.unset for v in self.food_groups.values())
        )
