"""
View state behind the Streamlit shell.

All functions take the session state mapping (st.session_state in the app, a
plain dict in tests) and a fetch callable from backend_client, so the rules
(empty input makes no call, language change clears results, failures show a
localized message or are only logged) live outside of the rendering code.
"""

import logging

from backend_client import BackendError
from localization import strings
from pydantic_models import Language

logger = logging.getLogger(__name__)

VIEWS = ("home", "medicine", "symptoms", "nearby", "wellness")

# sidebar radio and home hero switch
LANGUAGE_WIDGET_KEYS = ("lang_choice", "hero_lang_choice")

# icon per tip category; anything else is shown as Wellness
CATEGORY_ICONS = {"Yoga": "🌿", "Diet": "🥗", "Wellness": "💙"}


def _result_defaults():
    return {
        "medicine_result": None,
        "medicine_error": "",
        "medicine_autorun": False,
        "symptom_advice": None,
        "nearby_summary": "",
        "nearby_places": [],
        "nearby_notice": "",
        "nearby_coords": None,
        "wellness_tips": [],
        "wellness_lang": None,
    }


def init_state(state):
    defaults = {
        "lang": Language.EN.value,
        "lang_choice": Language.EN.value,
        "hero_lang_choice": Language.EN.value,
        "view": "home",
        "disclaimer_accepted": False,
        "home_query": "",
        "medicine_query": "",
    }
    defaults.update(_result_defaults())
    for key, value in defaults.items():
        if key not in state:
            state[key] = value


def clear_results(state):
    for key, value in _result_defaults().items():
        state[key] = value


def accept_disclaimer(state):
    state["disclaimer_accepted"] = True


def set_language(state, lang) -> bool:
    """Switch language. Returns False when lang is already active."""
    lang = Language(lang).value
    if state["lang"] == lang:
        return False
    state["lang"] = lang
    clear_results(state)
    # the medicine view re-runs the home search in the new language
    if state["view"] == "medicine" and state["home_query"].strip():
        state["medicine_autorun"] = True
    return True


def set_language_from(state, widget_key: str) -> bool:
    """Callback for any language widget: apply its choice and align the other widgets."""
    changed = set_language(state, state[widget_key])
    sync_language_choices(state)
    return changed


def sync_language_choices(state):
    for key in LANGUAGE_WIDGET_KEYS:
        state[key] = state["lang"]


def navigate(state, view: str):
    if view not in VIEWS:
        raise ValueError(f"Unknown view: {view}")
    state["view"] = view
    clear_results(state)
    if view == "medicine":
        state["medicine_query"] = state["home_query"]
        state["medicine_autorun"] = bool(state["home_query"].strip())


def go_home(state):
    state["home_query"] = ""
    navigate(state, "home")


def submit_home_search(state, query: str) -> bool:
    if not query or not query.strip():
        return False
    state["home_query"] = query
    navigate(state, "medicine")
    return True


def search_medicine(state, query: str, fetch) -> bool:
    """Look up a medicine. Returns False (and makes no call) for blank input."""
    if not query or not query.strip():
        return False
    state["medicine_error"] = ""
    try:
        state["medicine_result"] = fetch(query, state["lang"])
    except BackendError as e:
        logger.warning("medicine lookup failed: %s", e)
        state["medicine_result"] = None
        state["medicine_error"] = strings(state["lang"])["medicineError"]
    return True


def run_pending_medicine(state, fetch) -> bool:
    if not state.get("medicine_autorun"):
        return False
    state["medicine_autorun"] = False
    return search_medicine(state, state["home_query"], fetch)


def check_symptoms(state, symptoms: str, fetch) -> bool:
    if not symptoms or not symptoms.strip():
        return False
    try:
        state["symptom_advice"] = fetch(symptoms, state["lang"])
    except BackendError as e:
        logger.error("symptom advice failed: %s", e)
    return True


def find_nearby(state, location, fetch) -> bool:
    """
    location is the dict reported by the browser geolocation widget.

    All-None coordinates mean the user has not shared a location yet: no call,
    no notice. An "error" entry means the browser refused: the localized denial
    notice is set. Each new pair of coordinates is searched once.
    """
    location = location or {}
    state["nearby_notice"] = ""
    if location.get("error"):
        state["nearby_notice"] = strings(state["lang"])["locationDenied"]
        return False
    lat = location.get("latitude")
    lng = location.get("longitude")
    if lat is None or lng is None:
        return False
    if state["nearby_coords"] == (lat, lng):
        return False
    state["nearby_coords"] = (lat, lng)
    try:
        places = fetch(lat, lng, state["lang"])
    except BackendError as e:
        logger.error("nearby search failed: %s", e)
        return True
    state["nearby_summary"] = places.text
    state["nearby_places"] = places.chunks
    return True


def map_links(chunks):
    """(title, uri) for every grounding chunk that carries a maps reference."""
    return [(c.maps.title, c.maps.uri) for c in chunks if c.maps is not None]


def load_wellness(state, fetch) -> bool:
    """Load tips once per language. Returns False when they are already loaded."""
    lang = state["lang"]
    if state["wellness_lang"] == lang:
        return False
    state["wellness_lang"] = lang
    try:
        state["wellness_tips"] = fetch(lang)
    except BackendError as e:
        logger.error("daily wellness failed: %s", e)
        state["wellness_tips"] = []
    return True


def tip_icon(category) -> str:
    value = getattr(category, "value", category)
    return CATEGORY_ICONS.get(value, CATEGORY_ICONS["Wellness"])
