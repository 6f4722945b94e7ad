import streamlit as st
from kraftybrew.config import DEFAULT_COFFEE_G, DEFAULT_RATIO, SHOW_CUSTOM_DRIP
from kraftybrew.recipes import (
    RecipeInputs,
    available_recipes,
    brew_summary,
    coffee_for_water,
    plan_recipe,
    water_for_coffee,
)


st.set_page_config(page_title="Krafty Brew Coffee", page_icon="☕")

st.title("Drip Coffee Recipes ☕")
st.caption("Explore different methods, adjust parameters, and brew the perfect cup.")

recipes = available_recipes(include_custom_drip=SHOW_CUSTOM_DRIP)
labels = {r.id: r.label for r in recipes}

# Starting values, set once per session
if "coffee_g" not in st.session_state:
    st.session_state["coffee_g"] = float(DEFAULT_COFFEE_G)
    st.session_state["ratio"] = float(DEFAULT_RATIO)
    st.session_state["water_ml"] = float(water_for_coffee(DEFAULT_COFFEE_G, DEFAULT_RATIO))


def _on_coffee_change():
    st.session_state["water_ml"] = float(
        water_for_coffee(st.session_state["coffee_g"], st.session_state["ratio"])
    )


def _on_water_change():
    st.session_state["coffee_g"] = float(
        coffee_for_water(st.session_state["water_ml"], st.session_state["ratio"])
    )


def _on_ratio_change():
    st.session_state["water_ml"] = float(
        water_for_coffee(st.session_state["coffee_g"], st.session_state["ratio"])
    )


method_id = st.selectbox(
    "Brew Method",
    list(labels),
    format_func=lambda rid: labels[rid],
)
current = next(r for r in recipes if r.id == method_id)
st.write(current.description)

st.subheader("Adjust Your Parameters")
st.caption("Enter coffee grams, water, and ratio below.")

st.number_input("Coffee (grams)", min_value=1.0, step=1.0, key="coffee_g", on_change=_on_coffee_change)
st.number_input("Water (ml)", min_value=1.0, step=1.0, key="water_ml", on_change=_on_water_change)
st.number_input("Ratio (1: X)", min_value=1.0, step=0.5, key="ratio", on_change=_on_ratio_change)

coffee_g = st.session_state["coffee_g"]
water_ml = st.session_state["water_ml"]
ratio = st.session_state["ratio"]

st.info(brew_summary(coffee_g, water_ml, ratio))


@st.dialog("Instructions")
def show_instructions(plan):
    st.subheader(f"{plan['label']} Instructions")
    st.caption("Follow these steps carefully to brew.")

    st.write("**Steps**")
    for s in plan["steps"]:
        st.write(f"- {s}")

    if plan["tips"]:
        st.write("**Tips**")
        for t in plan["tips"]:
            st.write(f"- {t}")


if st.button("Start Brewing"):
    plan = plan_recipe(method_id, RecipeInputs(coffee_g=coffee_g, water_ml=water_ml, ratio=ratio))
    if plan is None:
        st.error("That brew method is not available.")
    else:
        show_instructions(plan)
