import logging
from typing import Any, Dict, List

import folium
import pandas as pd
import streamlit as st
from streamlit.components.v1 import html as components_html

from config.settings import Settings, configure_logging
from data.constants import STATE_CAPITALS, TRAVEL_MODES
from utilities.helpers import format_duration
from utilities.http_helpers import safe_post

st.set_page_config(page_title="Route Planner | Yatra", layout="wide")

settings = Settings.from_env()
configure_logging(settings.log_level)

MODE_ICONS = {
    "train": "🚆", "flight": "✈️", "bus": "🚌", "car": "🚗",
    "bike": "🏍️", "taxi": "🚕", "walking": "🚶",
}
SOURCE_LABELS = {
    "cached_data": "Known route",
    "ai_estimate": "AI estimate",
    "formula_estimate": "Rough estimate",
}


def fetch_routes(origin: Dict[str, Any], destination: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Ask the API for every travel mode; keep the ones that actually run."""
    results = []
    for mode in TRAVEL_MODES:
        resp = safe_post(
            f"{settings.api_base_url}/estimate-route",
            json={
                "fromCity": origin["capital"],
                "toCity": destination["capital"],
                "fromCoords": {"lat": origin["lat"], "lng": origin["lon"]},
                "toCoords": {"lat": destination["lat"], "lng": destination["lon"]},
                "mode": mode,
            },
        )
        if not resp:
            logging.warning("No estimate for %s", mode)
            continue
        data = resp.json()
        if data.get("duration", 0) > 0:
            results.append(data)
    return results


def render_route_map(origin: Dict[str, Any], destination: Dict[str, Any]) -> str:
    points = [(origin["lat"], origin["lon"]), (destination["lat"], destination["lon"])]
    m = folium.Map(location=points[0], zoom_start=5, tiles="CartoDB positron")
    for label, place in (("From", origin), ("To", destination)):
        folium.Marker(
            location=[place["lat"], place["lon"]],
            tooltip=f"{label}: {place['capital']} ({place['state']})",
        ).add_to(m)
    folium.PolyLine(points, color="#ff7f0e", weight=4, opacity=0.85, dash_array="8").add_to(m)
    m.fit_bounds(points)
    return m.get_root().render()


# Sidebar Controls

state_names = [s["state"] for s in STATE_CAPITALS]
by_state = {s["state"]: s for s in STATE_CAPITALS}

with st.sidebar:
    st.markdown("### 🧭 Route controls")
    from_state = st.selectbox("From", state_names, index=0)
    to_state = st.selectbox("To", state_names, index=2)
    calculate = st.button("Calculate routes", type="primary")

st.title("🗺 Route Planner")
st.caption("Compare travel time and fares between state capitals across every mode of transport.")

if calculate:
    if from_state == to_state:
        st.error("Origin and destination cannot be the same")
    else:
        with st.spinner("Calculating routes..."):
            st.session_state.routes = fetch_routes(by_state[from_state], by_state[to_state])
            st.session_state.route_pair = (from_state, to_state)
        if st.session_state.routes:
            st.success("Routes calculated!")
        else:
            st.error("Failed to calculate routes. Is the API running at %s?" % settings.api_base_url)

routes = st.session_state.get("routes", [])
pair = st.session_state.get("route_pair")

if routes and pair:
    origin, destination = by_state[pair[0]], by_state[pair[1]]
    col_table, col_map = st.columns([3, 2])

    with col_table:
        st.subheader(f"{origin['capital']} → {destination['capital']}")
        table = pd.DataFrame([
            {
                "Mode": f"{MODE_ICONS.get(r['mode'], '')} {r['mode'].title()}",
                "Distance": f"{r['distance']:.0f} km",
                "Duration": format_duration(r["duration"]),
                "Price": f"₹{r['minPrice']:,.0f} – ₹{r['maxPrice']:,.0f}",
                "Source": SOURCE_LABELS.get(r["source"], r["source"]),
            }
            for r in sorted(routes, key=lambda r: r["duration"])
        ])
        st.table(table)
        if any(r["isEstimate"] for r in routes):
            st.info("Estimates are approximate. Check with operators before booking.")

    with col_map:
        components_html(render_route_map(origin, destination), height=460)
else:
    st.info("Pick two states and hit **Calculate routes**.")
