from __future__ import annotations

from .models import FoodGroupPriority, MacroIntensity, SearchForm

MAX_RESTAURANTS = 8

FORMAT_INSTRUCTIONS = f"""\
Please return ONLY a JSON array of restaurants in this exact format:
[
  {{
    "name": "Restaurant Name",
    "address": "Street address",
    "description": "Brief description of why it matches the dietary preferences",
    "rating": "4.5/5 or similar"
  }}
]

Limit to {MAX_RESTAURANTS} restaurants maximum. Make sure the JSON is valid and contains no other text."""


def describe_location(form: SearchForm) -> str:
    """Coordinates win over the zipcode when both are present."""
    if form.location is not None:
        return f"latitude {form.location.latitude}, longitude {form.location.longitude}"
    return f"zipcode {form.zipcode.strip()}"


def _describe_calories(form: SearchForm) -> str | None:
    low = form.calorie_range.min_calories
    high = form.calorie_range.max_calories
    if low is not None and high is not None:
        return f"between {low} and {high} calories per meal"
    if low is not None:
        return f"at least {low} calories per meal"
    if high is not None:
        return f"at most {high} calories per meal"
    return None


def customization_lines(form: SearchForm) -> list[str]:
    """Bullet lines for the extended variant; unset controls are left out."""
    lines: list[str] = []
    if form.diet_prefs.strip():
        lines.append(f"Diet: {form.diet_prefs.strip()}")

    calories = _describe_calories(form)
    if calories:
        lines.append(f"Calorie range: {calories}")

    for macro, intensity in form.macros.items():
        intensity = MacroIntensity(intensity)
        if intensity is not MacroIntensity.unset:
            lines.append(f"{macro.capitalize()}: {intensity.value}")

    for group, priority in form.food_groups.items():
        priority = FoodGroupPriority(priority)
        if priority is not FoodGroupPriority.unset:
            lines.append(f"{group.capitalize()}: {priority.value}")

    return lines


def build_prompt(form: SearchForm) -> str:
    """
    Build the natural-language prompt for the current form.

    Without any extended control the prompt carries the flat preference
    string; otherwise it lists one customization per line.
    """
    location = describe_location(form)
    if not form.has_customizations:
        opening = (
            f"Find me restaurants near {location} that match these dietary "
            f"preferences: {form.diet_prefs}."
        )
    else:
        bullets = "\n".join(f"- {line}" for line in customization_lines(form))
        opening = (
            f"Find me restaurants near {location} that match this customized "
            f"meal profile:\n{bullets}"
        )
    return f"{opening}\n\n{FORMAT_INSTRUCTIONS}"
