"""Gradio front end: form controls, quick preferences, geolocation and result cards."""
from __future__ import annotations

import html
import json

import gradio as gr
import httpx

from ..client.config import DEFAULT_CLIENT_CONFIG, ClientConfig
from ..client.geo import GEOLOCATION_OPTIONS, apply_position, maps_url
from ..client.models import (
    FOOD_GROUPS,
    MACROS,
    CalorieRange,
    FoodGroupPriority,
    MacroIntensity,
    Restaurant,
    SearchForm,
    SortMode,
)
from ..client.preferences import QUICK_PREFS, is_active, suggestions, toggle_preference
from ..client.search import dismiss_error, refresh, run_search, visible_restaurants
from ..client.sorting import SORT_LABELS

# Runs in the browser; hands [latitude, longitude] (or nulls) to the hidden boxes.
GEOLOCATE_JS = """
async () => {
  if (!("geolocation" in navigator)) {
    console.error("Your browser doesn't support geolocation.");
    return [null, null];
  }
  try {
    const pos = await new Promise((resolve, reject) =>
      navigator.geolocation.getCurrentPosition(resolve, reject, %s)
    );
    return [pos.coords.latitude, pos.coords.longitude];
  } catch (e) {
    console.error(e);
    return [null, null];
  }
}
""" % json.dumps(GEOLOCATION_OPTIONS)

EMPTY_STATE_HTML = (
    "<div class='platepal-empty'>"
    "<h3>Ready to discover amazing restaurants?</h3>"
    "<p>Enter your dietary preferences and location above to get started!</p>"
    "</div>"
)


# ── Rendering ────────────────────────────────────────────────────────────


def render_card(restaurant: Restaurant, config: ClientConfig = DEFAULT_CLIENT_CONFIG) -> str:
    rating = ""
    if restaurant.rating:
        rating = f"<span class='platepal-rating'>★ {html.escape(restaurant.rating)}</span>"
    return (
        "<div class='platepal-card'>"
        f"{rating}"
        f"<h3>{html.escape(restaurant.name)}</h3>"
        f"<p class='platepal-address'>{html.escape(restaurant.address)}</p>"
        f"<p>{html.escape(restaurant.description)}</p>"
        f"<a href='{html.escape(maps_url(restaurant, config), quote=True)}' "
        "target='_blank' rel='noopener noreferrer'>Open in Maps</a>"
        "</div>"
    )


def render_results(form: SearchForm, config: ClientConfig = DEFAULT_CLIENT_CONFIG) -> str:
    restaurants = visible_restaurants(form)
    if not restaurants:
        return "" if form.loading else EMPTY_STATE_HTML
    cards = "".join(render_card(r, config) for r in restaurants)
    return f"<h2>Recommended Restaurants</h2>{cards}"


def _error_updates(form: SearchForm):
    if form.error:
        return gr.update(value=f"**⚠️ {form.error}**", visible=True), gr.update(visible=True)
    return gr.update(value="", visible=False), gr.update(visible=False)


def _outputs(form: SearchForm, config: ClientConfig = DEFAULT_CLIENT_CONFIG):
    error_md, dismiss_btn = _error_updates(form)
    return form, render_results(form, config), error_md, dismiss_btn


# ── Form syncing ─────────────────────────────────────────────────────────


def read_form(
    form: SearchForm,
    diet_prefs: str,
    zipcode: str,
    min_calories: float | None,
    max_calories: float | None,
    *selections: str,
) -> SearchForm:
    """Copy the current widget values onto the session form."""
    form.diet_prefs = diet_prefs or ""
    form.zipcode = zipcode or ""
    form.calorie_range = CalorieRange(
        min_calories=int(min_calories) if min_calories is not None else None,
        max_calories=int(max_calories) if max_calories is not None else None,
    )
    macro_values = selections[: len(MACROS)]
    group_values = selections[len(MACROS):]
    form.macros = {m: MacroIntensity(v or "unset") for m, v in zip(MACROS, macro_values)}
    form.food_groups = {
        g: FoodGroupPriority(v or "unset") for g, v in zip(FOOD_GROUPS, group_values)
    }
    return form


# ── Event handlers ───────────────────────────────────────────────────────


def on_prefs_input(diet_prefs: str):
    matches = suggestions(diet_prefs or "")
    return gr.update(choices=matches, value=None, visible=bool(matches))


def on_suggestion_select(diet_prefs: str, evt: gr.SelectData):
    return toggle_preference(diet_prefs or "", str(evt.value)), gr.update(visible=False, value=None)


def quick_button_updates(diet_prefs: str):
    return [
        gr.update(variant="primary" if is_active(diet_prefs or "", label) else "secondary")
        for label in QUICK_PREFS
    ]


def _make_toggle(label: str):
    def on_toggle(diet_prefs: str) -> str:
        return toggle_preference(diet_prefs or "", label)

    return on_toggle


def _location_note(form: SearchForm) -> str:
    if form.location is None:
        return ""
    return f"📍 Using your location ({form.location.latitude:.4f}, {form.location.longitude:.4f})"


async def handle_search(
    form: SearchForm,
    http: httpx.AsyncClient,
    *values,
    config: ClientConfig = DEFAULT_CLIENT_CONFIG,
):
    read_form(form, *values)
    await run_search(form, http, config=config)
    return _outputs(form, config)


async def handle_refresh(
    form: SearchForm,
    http: httpx.AsyncClient,
    *values,
    config: ClientConfig = DEFAULT_CLIENT_CONFIG,
):
    read_form(form, *values)
    await refresh(form, http, config=config)
    return _outputs(form, config)


async def handle_position(
    form: SearchForm,
    http: httpx.AsyncClient,
    zipcode: str,
    latitude: float | None,
    longitude: float | None,
    config: ClientConfig = DEFAULT_CLIENT_CONFIG,
):
    """
    Apply a browser position, starting from the zipcode currently typed in the box.

    The box keeps what the user typed unless the lookup produced a postcode.
    """
    form.zipcode = zipcode or ""
    await apply_position(form, http, latitude, longitude, config=config)
    return form, form.zipcode, _location_note(form)


def build_demo(config: ClientConfig = DEFAULT_CLIENT_CONFIG) -> gr.Blocks:
    async def on_search(form: SearchForm, *values):
        async with httpx.AsyncClient() as http:
            return await handle_search(form, http, *values, config=config)

    async def on_refresh(form: SearchForm, *values):
        async with httpx.AsyncClient() as http:
            return await handle_refresh(form, http, *values, config=config)

    async def on_position(
        form: SearchForm, zipcode: str, latitude: float | None, longitude: float | None
    ):
        async with httpx.AsyncClient() as http:
            return await handle_position(form, http, zipcode, latitude, longitude, config=config)

    def on_sort(form: SearchForm, mode: str):
        form.sort_mode = SortMode(mode)
        return form, render_results(form, config)

    def on_dismiss(form: SearchForm):
        return _outputs(dismiss_error(form), config)

    with gr.Blocks(title="PlatePal") as demo:
        state = gr.State(SearchForm())

        gr.Markdown(
            """
            # 🍽️ PlatePal

            Discover restaurants that match your dietary preferences. *Powered by AI.*
            """
        )

        with gr.Row():
            error_md = gr.Markdown(visible=False)
            dismiss_btn = gr.Button("Dismiss", size="sm", visible=False)

        diet_input = gr.Textbox(
            label="Dietary Preferences",
            placeholder="Type or select your preferences...",
        )
        suggestion_radio = gr.Radio(choices=[], label="Suggestions", visible=False)
        with gr.Row():
            quick_buttons = [gr.Button(label, size="sm") for label in QUICK_PREFS]

        with gr.Accordion("Customize your meal", open=False):
            with gr.Row():
                min_cal = gr.Number(label="Min calories per meal", precision=0, minimum=0)
                max_cal = gr.Number(label="Max calories per meal", precision=0, minimum=0)
            with gr.Row():
                macro_dds = [
                    gr.Dropdown(
                        choices=[m.value for m in MacroIntensity],
                        value=MacroIntensity.unset.value,
                        label=macro.capitalize(),
                    )
                    for macro in MACROS
                ]
            with gr.Row():
                group_dds = [
                    gr.Dropdown(
                        choices=[p.value for p in FoodGroupPriority],
                        value=FoodGroupPriority.unset.value,
                        label=group.capitalize(),
                    )
                    for group in FOOD_GROUPS
                ]

        with gr.Row():
            zipcode_box = gr.Textbox(
                label="Location",
                placeholder="Enter zipcode (e.g., 10001)",
                scale=4,
            )
            locate_btn = gr.Button("📍 Use my location", scale=1)
        location_md = gr.Markdown()
        lat_box = gr.Number(visible=False)
        lon_box = gr.Number(visible=False)

        with gr.Row():
            search_btn = gr.Button("🔍 Find restaurants", variant="primary", size="lg")
            refresh_btn = gr.Button("↻ Refresh", size="lg")

        sort_dd = gr.Dropdown(
            choices=[(label, mode.value) for mode, label in SORT_LABELS.items()],
            value=SortMode.relevance.value,
            label="Sort by",
        )
        results_html = gr.HTML(EMPTY_STATE_HTML)

        form_inputs = [state, diet_input, zipcode_box, min_cal, max_cal, *macro_dds, *group_dds]
        result_outputs = [state, results_html, error_md, dismiss_btn]

        diet_input.input(on_prefs_input, inputs=diet_input, outputs=suggestion_radio)
        diet_input.change(quick_button_updates, inputs=diet_input, outputs=quick_buttons)
        suggestion_radio.select(
            on_suggestion_select,
            inputs=diet_input,
            outputs=[diet_input, suggestion_radio],
        )
        for label, button in zip(QUICK_PREFS, quick_buttons):
            button.click(_make_toggle(label), inputs=diet_input, outputs=diet_input)

        locate_btn.click(None, None, [lat_box, lon_box], js=GEOLOCATE_JS).then(
            on_position,
            inputs=[state, zipcode_box, lat_box, lon_box],
            outputs=[state, zipcode_box, location_md],
        )

        search_btn.click(on_search, inputs=form_inputs, outputs=result_outputs)
        zipcode_box.submit(on_search, inputs=form_inputs, outputs=result_outputs)
        refresh_btn.click(on_refresh, inputs=form_inputs, outputs=result_outputs)
        sort_dd.change(on_sort, inputs=[state, sort_dd], outputs=[state, results_html])
        dismiss_btn.click(on_dismiss, inputs=state, outputs=result_outputs)

    return demo
