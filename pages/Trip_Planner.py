import streamlit as st

from config.settings import Settings, configure_logging
from utilities.http_helpers import safe_post

st.set_page_config(page_title="Trip Planner | Yatra", layout="wide")

settings = Settings.from_env()
configure_logging(settings.log_level)

INTERESTS = ["history", "culture", "food", "nature", "adventure", "spiritual", "shopping", "nightlife"]

# Sidebar Controls

with st.sidebar:
    st.markdown("### 🧭 Trip controls")
    destination = st.text_input("Destination", value="Rajasthan")
    duration = st.slider("Trip length (days)", 1, 14, 3)
    budget = st.selectbox("Budget", ["budget", "moderate", "luxury"], index=1)
    travel_style = st.selectbox(
        "Travel style",
        ["cultural exploration", "relaxed", "adventure", "family", "backpacking"],
    )
    interests = st.multiselect("Interests", INTERESTS, default=["history", "food"])
    plan_button = st.button("✨ Generate itinerary", type="primary")

st.title("✈️ AI Trip Planner")

if plan_button:
    if not destination.strip():
        st.error("Please select a destination")
    else:
        with st.spinner("Crafting your itinerary..."):
            resp = safe_post(
                f"{settings.api_base_url}/generate-itinerary",
                json={
                    "destination": destination.strip(),
                    "duration": duration,
                    "budget": budget,
                    "interests": interests,
                    "travelStyle": travel_style,
                },
                timeout=120,
            )
        if resp:
            st.session_state.itinerary = resp.json().get("itinerary")
            st.success("Your personalized itinerary is ready!")
        else:
            st.error("Failed to generate itinerary. Please try again.")

itinerary = st.session_state.get("itinerary")

if not itinerary:
    st.info("Tell us where you want to go and hit **Generate itinerary**.")
elif not isinstance(itinerary, dict):
    st.json(itinerary)
elif itinerary.get("parseError"):
    st.warning("The planner answered in free text:")
    st.markdown(itinerary.get("raw", ""))
else:
    st.header(itinerary.get("title", destination))
    st.write(itinerary.get("summary", ""))
    if itinerary.get("totalEstimatedCost"):
        st.metric("Estimated total", f"₹{itinerary['totalEstimatedCost']:,}")

    for day in itinerary.get("days", []):
        with st.expander(f"Day {day.get('day')}: {day.get('location', '')} · {day.get('theme', '')}"):
            for a in day.get("activities", []):
                st.markdown(f"**{a.get('time', '')} · {a.get('activity', '')}** ({a.get('duration', '')}, ₹{a.get('cost', 0)})")
                st.write(a.get("description", ""))
                if a.get("tips"):
                    st.caption(f"💡 {a['tips']}")
            meals = day.get("meals", {})
            if meals:
                st.markdown("**Meals:** " + " · ".join(
                    f"{name.title()}: {m.get('dish', '')} at {m.get('place', '')}" for name, m in meals.items()
                ))
            stay = day.get("accommodation")
            if stay:
                st.markdown(f"**Stay:** {stay.get('name', '')} ({stay.get('type', '')}, ₹{stay.get('cost', 0)})")

    col_pack, col_notes = st.columns(2)
    with col_pack:
        st.subheader("🎒 Packing list")
        for item in itinerary.get("packingList", []):
            st.markdown(f"- {item}")
    with col_notes:
        st.subheader("🪔 Cultural notes")
        for note in itinerary.get("culturalNotes", []):
            st.markdown(f"- {note}")
