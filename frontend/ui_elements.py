#file: frontend/ui_elements.py

import streamlit as st
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
from typing import List

from backend.models import PollutantRow, SeverityTier
from frontend.utils import HEALTH_TIPS, gauge_fraction


def build_aqi_gauge(index: float, tier: SeverityTier) -> go.Figure :
    """Gauge ring for the US AQI; full at GAUGE_CEILING and above."""
    fig = go.Figure(
        go.Indicator(
            mode = "gauge",
            value = gauge_fraction(index),
            gauge = {
                "axis" : {"range" : [0, 1], "visible" : False},
                "bar" : {"color" : tier.color, "thickness" : 1},
                "bgcolor" : "#27272a",
                "borderwidth" : 0,
                "shape" : "angular",
            },
        )
    )
    fig.update_layout(height = 220, margin = {"r" : 10, "t" : 10, "l" : 10, "b" : 10})
    return fig


def build_hourly_chart(series: pd.DataFrame) -> go.Figure :
    """Area chart of PM2.5 and ozone over the hourly window."""
    long_df = series.melt(id_vars = "time", value_vars = ["pm25", "ozone"], var_name = "pollutant",
                          value_name = "value")
    fig = px.area(
        long_df,
        x = "time",
        y = "value",
        color = "pollutant",
        color_discrete_map = {"pm25" : "#34d399", "ozone" : "#60a5fa"},
        labels = {
            "time" : "Time",
            "value" : "µg/m³",
            "pollutant" : "Pollutant"
        }
    )
    fig.update_xaxes(tickformat = "%H:%M")
    fig.update_layout(
        legend=dict(
            orientation="h",
            yanchor="top",
            y=-0.2,
            xanchor="center",
            x=0.5
        )
    )
    return fig


def display_aqi_summary(index: float, tier: SeverityTier, description: str, pm25: float, ozone: float) :
    """Current AQI card: gauge, tier label and a one-line status."""
    col1, col2 = st.columns([1, 2])
    with col1 :
        st.plotly_chart(build_aqi_gauge(index, tier))
    with col2 :
        st.metric("US AQI", f"{index:.0f}")
        st.markdown(f"<span style='color:{tier.color};font-weight:700;text-transform:uppercase'>{tier.label}</span>",
                    unsafe_allow_html = True)
        st.subheader("Current Air Quality")
        st.write(description)
        st.caption(f"💧 PM2.5: {pm25}  ·  ☀️ Ozone: {ozone}")


def display_hourly_chart(series: pd.DataFrame) :
    st.subheader("24-Hour Trends")
    if series.empty :
        st.info("No hourly data available.")
        return
    st.plotly_chart(build_hourly_chart(series))


def display_pollutants(rows: List[PollutantRow]) :
    st.subheader("Pollutant Breakdown")
    columns = st.columns(2)
    for i, row in enumerate(rows) :
        with columns[i % 2] :
            st.metric(row.name, f"{row.value:.1f} {row.unit}")


def display_insights(text: str) :
    st.subheader("AI Prediction")
    st.markdown(text)


def display_health_tips() :
    st.subheader("Health Advice")
    st.markdown("\n".join(f"- {tip}" for tip in HEALTH_TIPS))
