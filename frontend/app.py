#file: frontend/app.py

import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import asyncio
import logging
import streamlit as st

st.set_page_config(page_title="Aura - Air Quality", page_icon="🌍", layout="wide")
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

from frontend.config import FrontendSettings, load_settings
from frontend.dashboard import Dashboard, DashboardState
from frontend.insights import InsightGenerator
from frontend.utils import classify, derive_hourly_series, derive_pollutant_rows, describe_conditions
from frontend.ui_elements import display_aqi_summary, display_hourly_chart, display_pollutants, display_insights, \
    display_health_tips


@st.cache_resource
def get_insight_generator(api_key, model) :
    return InsightGenerator.from_settings(FrontendSettings(gemini_api_key = api_key, gemini_model = model))


settings = load_settings()
if "dashboard_state" not in st.session_state :
    st.session_state["dashboard_state"] = DashboardState()
state = st.session_state["dashboard_state"]
dashboard = Dashboard(settings, state, get_insight_generator(settings.gemini_api_key, settings.gemini_model))

# Header and search
col1, col2 = st.columns([2, 1])
with col2 :
    with st.form("search", clear_on_submit = False) :
        query = st.text_input("Search city...", label_visibility = "collapsed", placeholder = "Search city...")
        submitted = st.form_submit_button("Search")

if not state.started :
    with st.spinner("Analyzing atmosphere...") :
        asyncio.run(dashboard.load())
if submitted :
    with st.spinner("Analyzing atmosphere...") :
        asyncio.run(dashboard.search(query))

with col1 :
    st.title("Aura")
    st.caption(f"📍 {state.place}")
    if state.coordinate :
        st.caption(f"{state.coordinate.latitude:.4f}, {state.coordinate.longitude:.4f}")

if state.notice and not state.error :
    st.warning(state.notice)

if state.error :
    st.error(state.error)
    if st.button("Retry") :
        del st.session_state["dashboard_state"]
        st.rerun()
elif state.reading :
    reading = state.reading
    index = reading.current.us_aqi
    tier = classify(index)

    main_col, side_col = st.columns([2, 1])
    with main_col :
        display_aqi_summary(index, tier, describe_conditions(tier, state.place, index), reading.current.pm2_5,
                            reading.current.ozone)
        display_hourly_chart(derive_hourly_series(reading, settings.hourly_limit))
    with side_col :
        display_insights(state.insights)
        display_pollutants(derive_pollutant_rows(reading))
        display_health_tips()

st.markdown("---")
st.caption("Data provided by Open-Meteo & OpenStreetMap. AI insights powered by Gemini.")
