import pandas as pd
import streamlit as st

from config.settings import Settings
from data.constants import KNOWN_ROUTES
from utilities.helpers import format_duration

st.set_page_config(page_title="Yatra Planner — Home", layout="wide", initial_sidebar_state="expanded")

settings = Settings.from_env()

st.sidebar.info("Use **Route Planner** to compare transport options and **Trip Planner** for an AI itinerary.")
st.sidebar.caption(f"API: {settings.api_base_url}")

st.title("Yatra Planner — Travel India, planned")
st.markdown(
    """
    **Routes, fares and day-wise plans across India.**
    Compare trains, flights, buses and road trips between state capitals, then let the planner
    build a day-by-day itinerary with meals, stays and local tips.
    """
)

st.markdown("---")

st.header("Popular routes")
st.markdown("Curated fares for well-travelled city pairs. Everything else is estimated on the fly.")

rows = []
for route in KNOWN_ROUTES:
    for mode, fare in route.fares.items():
        rows.append({
            "Route": f"{route.origin} ↔ {route.destination}",
            "Distance": f"{route.distance_km} km",
            "Mode": mode.title(),
            "Duration": format_duration(fare.duration_hours),
            "Price": f"₹{fare.min_price:,} – ₹{fare.max_price:,}",
        })
st.dataframe(pd.DataFrame(rows), hide_index=True, use_container_width=True)

st.markdown("---")

st.header("How estimates work")
st.markdown(
    "- **Known route** — hand-curated fares for popular pairs.\n"
    "- **AI estimate** — for longer trips, when `GROQ_API_KEY` is configured on the API.\n"
    "- **Rough estimate** — distance × typical speed and per-km fares for the mode.")

st.caption("Yatra Planner. Fares are indicative and in INR.")
