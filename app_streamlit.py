import os

import streamlit as st
from streamlit_geolocation import streamlit_geolocation

import backend_client
import config
import history_db
import ui_state
from localization import LANGUAGE_OPTIONS, strings

config.setup_logging()

st.set_page_config(page_title="Aapla Doctor", page_icon="🩺", layout="wide")

state = st.session_state
ui_state.init_state(state)
ui_state.sync_language_choices(state)
s = strings(state["lang"])

LANG_LABELS = {lang.value: label for lang, label in LANGUAGE_OPTIONS}


def language_switch(container, key):
    container.radio(
        "🌐",
        options=list(LANG_LABELS),
        format_func=LANG_LABELS.get,
        key=key,
        on_change=ui_state.set_language_from,
        args=(st.session_state, key),
        horizontal=True,
    )


# ---------- sidebar: language, navigation, history ----------
language_switch(st.sidebar, "lang_choice")
st.sidebar.title(f"🩺 {s['title']}")
st.sidebar.button("🏠 Home", on_click=ui_state.go_home, args=(state,), use_container_width=True)
for view, label in [("medicine", s["medicineFinder"]),
                    ("symptoms", s["symptomChecker"]),
                    ("nearby", s["nearbyFacilities"]),
                    ("wellness", s["wellnessTips"])]:
    st.sidebar.button(label, on_click=ui_state.navigate, args=(state, view),
                      use_container_width=True, type="primary" if state["view"] == view else "secondary")

st.sidebar.header(f"📊 {s['recentQueries']}")
if os.path.exists(config.DB_PATH):
    st.sidebar.dataframe(history_db.recent_queries(10), hide_index=True)
else:
    st.sidebar.info(s["noHistory"])


# ---------- disclaimer (blocks the app until accepted) ----------
if not state["disclaimer_accepted"]:
    st.title(f"⚠️ {s['disclaimerTitle']}")
    st.warning(s["disclaimerText"])
    st.button(s["accept"], type="primary", on_click=ui_state.accept_disclaimer, args=(state,))
    st.stop()


# ---------- views ----------
def render_wellness():
    st.subheader(f"✨ {s['wellnessTips']}")
    with st.spinner("..."):
        ui_state.load_wellness(state, backend_client.fetch_daily_wellness)
    tips = state["wellness_tips"]
    if not tips:
        return
    for col, tip in zip(st.columns(len(tips)), tips):
        with col.container(border=True):
            st.markdown(f"### {ui_state.tip_icon(tip.category)}")
            st.caption(tip.category.value.upper())
            st.markdown(f"**{tip.title}**")
            st.write(tip.content)


def render_home():
    st.title(s["title"])
    st.header(s["tagline"])
    st.caption("✨ Powered by Google Gemini AI")
    language_switch(st, "hero_lang_choice")

    with st.form("home_search"):
        query = st.text_input(s["searchPlaceholder"], label_visibility="collapsed",
                              placeholder=s["searchPlaceholder"])
        searched = st.form_submit_button(s["searchBtn"], type="primary")
    if searched and ui_state.submit_home_search(state, query):
        st.rerun()

    c1, c2 = st.columns(2)
    c1.button(f"💊 {s['medicineFinder']}", on_click=ui_state.navigate, args=(state, "medicine"),
              use_container_width=True)
    c2.button(f"🚑 {s['symptomChecker']}", on_click=ui_state.navigate, args=(state, "symptoms"),
              use_container_width=True, type="primary")

    cards = [("📍", s["nearbyFacilities"], s["nearbyFeature"], "nearby"),
             ("✨", s["wellnessTips"], s["wellnessFeature"], "wellness"),
             ("🎥", s["consultDoctor"], s["consultFeature"], None)]
    for col, (icon, title, text, view) in zip(st.columns(3), cards):
        with col.container(border=True):
            st.markdown(f"### {icon} {title}")
            st.write(text)
            if view:
                st.button("→", key=f"card_{view}", on_click=ui_state.navigate, args=(state, view))

    st.divider()
    render_wellness()


def render_medicine():
    st.subheader(f"💊 {s['medicineFinder']}")
    with st.spinner("..."):
        ui_state.run_pending_medicine(state, backend_client.fetch_medicine_info)

    with st.form("medicine_form"):
        query = st.text_input(s["medicineSearchLabel"], key="medicine_query")
        submitted = st.form_submit_button(f"🔍 {s['medicineSearchBtn']}", type="primary")
    if submitted:
        with st.spinner("..."):
            ui_state.search_medicine(state, query, backend_client.fetch_medicine_info)

    if state["medicine_error"]:
        st.error(state["medicine_error"])

    info = state["medicine_result"]
    if info:
        with st.container(border=True):
            st.header(info.name)
            st.caption(s["usageLabel"].upper())
            st.write(info.usage)
            st.caption(s["dosageLabel"].upper())
            st.write(info.dosage)
            st.warning(f"**{s['warningLabel']}**  \n{info.warning}")


def render_symptoms():
    st.subheader(f"🚑 {s['symptomChecker']}")
    with st.form("symptom_form"):
        symptoms = st.text_area(s["symptomSearchLabel"], height=100)
        submitted = st.form_submit_button(f"❤️ {s['symptomSearchBtn']}", type="primary")
    if submitted:
        with st.spinner("..."):
            ui_state.check_symptoms(state, symptoms, backend_client.fetch_symptom_advice)

    advice = state["symptom_advice"]
    if advice:
        with st.container(border=True):
            st.markdown(f"#### {s['firstAidLabel']}")
            for i, step in enumerate(advice.firstAid, start=1):
                st.markdown(f"**{i}. {step.step}**  \n{step.description}")
        with st.container(border=True):
            st.markdown(f"#### {s['otcLabel']}")
            for med in advice.otcSuggestions:
                st.write("•", med)
        st.info(advice.disclaimer)


def render_nearby():
    st.subheader(f"📍 {s['nearbyFacilities']}")
    st.markdown(f"**🧭 {s['nearbyBtn']}**")
    st.caption(s["locationPrompt"])
    # the widget's own button asks the browser for the location
    location = streamlit_geolocation()
    with st.spinner("..."):
        ui_state.find_nearby(state, location, backend_client.fetch_nearby_places)

    if state["nearby_notice"]:
        st.warning(state["nearby_notice"])
    if state["nearby_summary"]:
        with st.container(border=True):
            st.markdown(state["nearby_summary"])
    links = ui_state.map_links(state["nearby_places"])
    if not links:
        return
    cols = st.columns(2)
    for i, (title, uri) in enumerate(links):
        with cols[i % 2].container(border=True):
            st.markdown(f"**{title}**")
            st.link_button("Google Maps ↗", uri)


if state["view"] != "home":
    st.button(f"← {s['backToHome']}", on_click=ui_state.go_home, args=(state,))

{
    "home": render_home,
    "medicine": render_medicine,
    "symptoms": render_symptoms,
    "nearby": render_nearby,
    "wellness": render_wellness,
}[state["view"]]()


# ---------- footer ----------
st.divider()
f1, f2 = st.columns([2, 1])
f1.markdown(f"### 🩺 {s['title']}")
f1.caption(s["footerCopyright"])
f2.markdown(f"**{s['contactUs']}**")
f2.markdown("📞 **108**  \nEmail: help@aapladoctor.com")
f2.caption(s["privacyPolicy"])
