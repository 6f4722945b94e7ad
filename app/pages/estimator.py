import streamlit as st
from kraftybrew.taste import (
    BREW_METHODS,
    DEFAULTS,
    FIELD_HINTS,
    GRIND_RANGE,
    PROCESS_TYPES,
    ROAST_LEVELS,
    WATER_RATIO_RANGE,
    WATER_TEMP_RANGE,
    BrewParameters,
    estimate_taste_for,
)


st.title("Coffee Flavor Estimator")
st.caption(
    "Tweak the parameters below to instantly see how they'll affect your brew's flavor, body, and aroma."
)

# Result first; widgets below fill it in on rerun
outcome_box = st.container(border=True)

process_type = st.selectbox(
    "Process Type", PROCESS_TYPES, index=PROCESS_TYPES.index(DEFAULTS["process_type"])
)
st.caption(FIELD_HINTS["process_type"])

roast_level = st.selectbox(
    "Roast Level", ROAST_LEVELS, index=ROAST_LEVELS.index(DEFAULTS["roast_level"])
)
st.caption(FIELD_HINTS["roast_level"])

grind_level = st.slider(
    "Grind Level (Fine → Coarse)",
    min_value=GRIND_RANGE[0], max_value=GRIND_RANGE[1], value=DEFAULTS["grind_level"], step=1
)
st.caption(f"Current: {grind_level} ({FIELD_HINTS['grind_level']})")

water_temp = st.slider(
    "Water Temperature (°C)",
    min_value=WATER_TEMP_RANGE[0], max_value=WATER_TEMP_RANGE[1], value=DEFAULTS["water_temp"], step=1
)
st.caption(f"Current: {water_temp}°C • {FIELD_HINTS['water_temp']}")

brew_method = st.selectbox(
    "Brew Method", BREW_METHODS, index=BREW_METHODS.index(DEFAULTS["brew_method"])
)
st.caption(FIELD_HINTS["brew_method"])

water_ratio = st.slider(
    "Water Ratio (1:X)",
    min_value=WATER_RATIO_RANGE[0], max_value=WATER_RATIO_RANGE[1], value=DEFAULTS["water_ratio"], step=1
)
st.caption(f"Current: 1:{water_ratio}. {FIELD_HINTS['water_ratio']}")

params = BrewParameters(
    process_type=process_type,
    roast_level=roast_level,
    grind_level=grind_level,
    water_temp=water_temp,
    brew_method=brew_method,
    water_ratio=water_ratio,
)

with outcome_box:
    st.subheader("Predicted Taste Outcome")
    st.caption("A quick summary of your current selections.")
    st.write(estimate_taste_for(params))
