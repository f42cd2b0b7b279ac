import pytest

import ui_state
from backend_client import BackendError
from pydantic_models import DailyTip, GroundingChunk, MapsReference, MedicineInfo, NearbyPlaces, SymptomAdvice


class Recorder:
    """Fetch stand-in that records its calls and returns (or raises) a fixed value."""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def state():
    s = {}
    ui_state.init_state(s)
    return s


PARACETAMOL = MedicineInfo(name="Paracetamol", usage="Fever", dosage="500mg", warning="Consult a doctor")


def test_init_state_keeps_existing_values():
    s = {"lang": "HI"}
    ui_state.init_state(s)
    assert s["lang"] == "HI"
    assert s["view"] == "home"
    assert s["disclaimer_accepted"] is False


def test_accept_disclaimer(state):
    ui_state.accept_disclaimer(state)
    assert state["disclaimer_accepted"] is True


@pytest.mark.parametrize("query", ["", "   ", None])
def test_empty_medicine_query_makes_no_call(state, query):
    fetch = Recorder(PARACETAMOL)
    assert ui_state.search_medicine(state, query, fetch) is False
    assert fetch.calls == []
    assert state["medicine_result"] is None


def test_medicine_search_uses_current_language(state):
    ui_state.set_language(state, "MR")
    fetch = Recorder(PARACETAMOL)
    ui_state.search_medicine(state, "Paracetamol", fetch)
    assert fetch.calls == [("Paracetamol", "MR")]
    assert state["medicine_result"] == PARACETAMOL
    assert state["medicine_error"] == ""


@pytest.mark.parametrize("lang,message", [
    ("EN", "Could not find medicine details."),
    ("HI", "दवा का विवरण नहीं मिल सका।"),
    ("MR", "औषधाची माहिती मिळू शकली नाही."),
])
def test_failed_medicine_call_shows_localized_error(state, lang, message):
    ui_state.set_language(state, lang)
    ui_state.search_medicine(state, "Xyz", Recorder(error=BackendError("502")))
    assert state["medicine_error"] == message
    assert state["medicine_result"] is None


def test_language_change_clears_results(state):
    state["medicine_result"] = PARACETAMOL
    state["symptom_advice"] = SymptomAdvice(firstAid=[], otcSuggestions=[], disclaimer="x")
    state["nearby_summary"] = "summary"
    state["nearby_places"] = [GroundingChunk()]
    state["wellness_tips"] = [DailyTip(title="t", content="c", category="Diet")]
    state["wellness_lang"] = "EN"

    assert ui_state.set_language(state, "HI") is True

    assert state["lang"] == "HI"
    assert state["medicine_result"] is None
    assert state["symptom_advice"] is None
    assert state["nearby_summary"] == ""
    assert state["nearby_places"] == []
    assert state["wellness_tips"] == []
    assert state["wellness_lang"] is None


def test_same_language_is_a_no_op(state):
    state["medicine_result"] = PARACETAMOL
    assert ui_state.set_language(state, "EN") is False
    assert state["medicine_result"] == PARACETAMOL


def test_hero_switch_changes_language_and_aligns_sidebar(state):
    state["medicine_result"] = PARACETAMOL
    state["hero_lang_choice"] = "MR"

    assert ui_state.set_language_from(state, "hero_lang_choice") is True

    assert state["lang"] == "MR"
    assert state["lang_choice"] == "MR"
    assert state["medicine_result"] is None


def test_sidebar_switch_aligns_hero(state):
    state["lang_choice"] = "HI"
    ui_state.set_language_from(state, "lang_choice")
    assert state["hero_lang_choice"] == "HI"


def test_sync_language_choices_follows_active_language(state):
    state["lang"] = "HI"
    ui_state.sync_language_choices(state)
    assert [state[k] for k in ui_state.LANGUAGE_WIDGET_KEYS] == ["HI", "HI"]


def test_home_search_opens_medicine_view_and_runs_once(state):
    assert ui_state.submit_home_search(state, "  ") is False
    assert state["view"] == "home"

    assert ui_state.submit_home_search(state, "Dolo 650") is True
    assert state["view"] == "medicine"
    assert state["medicine_query"] == "Dolo 650"

    fetch = Recorder(PARACETAMOL)
    assert ui_state.run_pending_medicine(state, fetch) is True
    assert ui_state.run_pending_medicine(state, fetch) is False
    assert fetch.calls == [("Dolo 650", "EN")]


def test_language_change_reruns_home_query_in_medicine_view(state):
    ui_state.submit_home_search(state, "Dolo 650")
    fetch = Recorder(PARACETAMOL)
    ui_state.run_pending_medicine(state, fetch)

    ui_state.set_language(state, "HI")
    assert state["medicine_result"] is None
    ui_state.run_pending_medicine(state, fetch)

    assert fetch.calls == [("Dolo 650", "EN"), ("Dolo 650", "HI")]


def test_navigation_discards_results(state):
    state["symptom_advice"] = SymptomAdvice(firstAid=[], otcSuggestions=[], disclaimer="x")
    ui_state.navigate(state, "nearby")
    assert state["view"] == "nearby"
    assert state["symptom_advice"] is None
    assert state["medicine_autorun"] is False
    with pytest.raises(ValueError):
        ui_state.navigate(state, "settings")


def test_go_home_clears_home_query(state):
    ui_state.submit_home_search(state, "Aspirin")
    ui_state.go_home(state)
    assert state["view"] == "home"
    assert state["home_query"] == ""


def test_empty_symptoms_make_no_call(state):
    fetch = Recorder()
    assert ui_state.check_symptoms(state, "  \n", fetch) is False
    assert fetch.calls == []


def test_symptom_failure_is_only_logged(state, caplog):
    ui_state.check_symptoms(state, "snake bite", Recorder(error=BackendError("down")))
    assert state["symptom_advice"] is None
    assert state["medicine_error"] == ""
    assert "symptom advice failed" in caplog.text


def test_symptom_advice_stored(state):
    advice = SymptomAdvice(firstAid=[{"step": "Rest", "description": "Lie down"}],
                           otcSuggestions=["ORS"], disclaimer="AI advice")
    fetch = Recorder(advice)
    ui_state.check_symptoms(state, "dizziness", fetch)
    assert state["symptom_advice"] == advice
    assert fetch.calls == [("dizziness", "EN")]


@pytest.mark.parametrize("location", [None, {}, {"latitude": None, "longitude": None}])
def test_nearby_before_location_is_shared_stays_quiet(state, location):
    ui_state.set_language(state, "MR")
    fetch = Recorder()
    assert ui_state.find_nearby(state, location, fetch) is False
    assert fetch.calls == []
    assert state["nearby_notice"] == ""


def test_nearby_refused_location_shows_localized_notice(state):
    ui_state.set_language(state, "MR")
    fetch = Recorder()
    refused = {"latitude": None, "longitude": None, "error": "User denied Geolocation"}
    assert ui_state.find_nearby(state, refused, fetch) is False
    assert fetch.calls == []
    assert state["nearby_notice"] == "स्थान प्रवेश नाकारला."


def test_nearby_searches_each_location_once(state):
    fetch = Recorder(NearbyPlaces(text="Closest options", chunks=[]))
    here = {"latitude": 18.53, "longitude": 73.87}

    assert ui_state.find_nearby(state, here, fetch) is True
    assert ui_state.find_nearby(state, here, fetch) is False
    ui_state.set_language(state, "HI")
    assert ui_state.find_nearby(state, here, fetch) is True

    assert fetch.calls == [(18.53, 73.87, "EN"), (18.53, 73.87, "HI")]


def test_nearby_results_and_map_links(state):
    places = NearbyPlaces(text="Closest options", chunks=[
        GroundingChunk(maps=MapsReference(uri="https://maps.google.com/?cid=1", title="Ruby Hall")),
        GroundingChunk(),
    ])
    fetch = Recorder(places)
    ui_state.find_nearby(state, {"latitude": 18.53, "longitude": 73.87}, fetch)

    assert fetch.calls == [(18.53, 73.87, "EN")]
    assert state["nearby_summary"] == "Closest options"
    assert ui_state.map_links(state["nearby_places"]) == [("Ruby Hall", "https://maps.google.com/?cid=1")]


def test_nearby_failure_keeps_view_empty(state):
    ui_state.find_nearby(state, {"latitude": 1.0, "longitude": 2.0}, Recorder(error=BackendError("x")))
    assert state["nearby_summary"] == ""
    assert state["nearby_places"] == []
    assert state["nearby_notice"] == ""


def test_wellness_loads_once_per_language(state):
    tips = [DailyTip(title="Walk", content="30 minutes", category="Wellness")]
    fetch = Recorder(tips)

    assert ui_state.load_wellness(state, fetch) is True
    assert ui_state.load_wellness(state, fetch) is False
    ui_state.set_language(state, "HI")
    ui_state.load_wellness(state, fetch)

    assert fetch.calls == [("EN",), ("HI",)]


def test_wellness_failure_leaves_empty_list(state):
    ui_state.load_wellness(state, Recorder(error=BackendError("x")))
    assert state["wellness_tips"] == []


def test_tip_icon():
    assert ui_state.tip_icon("Yoga") == "🌿"
    assert ui_state.tip_icon("Diet") == "🥗"
    assert ui_state.tip_icon("Unknown") == ui_state.tip_icon("Wellness")
