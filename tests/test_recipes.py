import pytest

from kraftybrew.recipes import (
    CUSTOM_DRIP,
    FOUR_SIX,
    JAMES_HOFFMANN,
    RecipeInputs,
    available_recipes,
    brew_summary,
    coffee_for_water,
    fmt_num,
    get_recipe,
    plan_recipe,
    recipe_ids,
    round_half_up,
    water_for_coffee,
)


def test_four_six_default_recipe():
    plan = plan_recipe(FOUR_SIX, RecipeInputs(coffee_g=15, water_ml=240, ratio=16))

    assert plan["method"] == FOUR_SIX
    assert plan["label"] == "Hario V60 4:6 Method"
    assert plan["steps"] == [
        "Bloom: Pour ~30ml water for 30-45 seconds.",
        "Sweetness phase: Pour ~84ml water, wait ~45-60 seconds.",
        "Strength phase: Pour ~126ml water in increments.",
        "Total brew time: ~2:30 - 3:00 minutes.",
    ]
    assert len(plan["tips"]) == 3


def test_four_six_strong_ratio_adds_tip():
    plan = plan_recipe(FOUR_SIX, RecipeInputs(coffee_g=15, water_ml=210, ratio=14))

    assert "~30ml" in plan["steps"][0]
    assert "~72ml" in plan["steps"][1]
    assert "~108ml" in plan["steps"][2]
    assert len(plan["tips"]) == 4
    assert plan["tips"][-1].startswith("Your ratio (1:14) is quite strong.")


def test_four_six_light_ratio_adds_tip():
    plan = plan_recipe(FOUR_SIX, RecipeInputs(coffee_g=15, water_ml=255, ratio=17))

    assert len(plan["tips"]) == 4
    assert plan["tips"][-1].startswith("Your ratio (1:17) is lighter.")


@pytest.mark.parametrize("ratio", [15, 15.5, 16])
def test_four_six_no_ratio_tip_in_sweet_spot(ratio):
    plan = plan_recipe(FOUR_SIX, RecipeInputs(coffee_g=15, water_ml=15 * ratio, ratio=ratio))

    assert len(plan["tips"]) == 3


def test_swirl_method_steps_and_no_tips():
    plan = plan_recipe(JAMES_HOFFMANN, RecipeInputs(coffee_g=15, water_ml=240, ratio=16))

    assert plan["steps"] == [
        "Bloom: Pour ~30ml water, swirl gently (30-45s).",
        "Main pour: Pour until ~144ml total. Swirl again.",
        "Final pour: Add remaining ~66ml water. Swirl once more.",
        "Total brew time: ~3:00 - 3:30 minutes.",
    ]
    assert plan["tips"] == []


def test_custom_drip_has_three_steps():
    plan = plan_recipe(CUSTOM_DRIP, RecipeInputs(coffee_g=20, water_ml=325, ratio=16.25))

    assert len(plan["steps"]) == 3
    assert "~40ml" in plan["steps"][0]
    # 162.5 rounds up
    assert "~163ml" in plan["steps"][1]
    assert "325ml" in plan["steps"][2]
    assert plan["tips"] == []


def test_volumes_are_rounded_independently():
    # bloom 33 (16.6 * 2 = 33.2), sweetness round(217 * 0.4 = 86.8) = 87
    plan = plan_recipe(FOUR_SIX, RecipeInputs(coffee_g=16.6, water_ml=250, ratio=15))

    assert "~33ml" in plan["steps"][0]
    assert "~87ml" in plan["steps"][1]
    assert "~130ml" in plan["steps"][2]


def test_unknown_recipe_returns_none():
    assert plan_recipe("moka-pot", RecipeInputs(coffee_g=15, water_ml=240, ratio=16)) is None
    assert get_recipe("moka-pot") is None


def test_plan_is_repeatable():
    inputs = RecipeInputs(coffee_g=18, water_ml=300, ratio=16.7)

    assert plan_recipe(FOUR_SIX, inputs) == plan_recipe(FOUR_SIX, inputs)


def test_catalog_order_and_selector_variants():
    assert recipe_ids() == [FOUR_SIX, JAMES_HOFFMANN, CUSTOM_DRIP]
    assert [r.id for r in available_recipes()] == [FOUR_SIX, JAMES_HOFFMANN]
    assert [r.id for r in available_recipes(include_custom_drip=True)] == recipe_ids()


def test_ratio_sync_helpers():
    assert water_for_coffee(15, 16) == 240
    assert water_for_coffee(18, 15.5) == 279
    assert coffee_for_water(250, 16) == 16
    assert coffee_for_water(248, 16) == 16


def test_coffee_for_water_rejects_zero_ratio():
    with pytest.raises(ValueError):
        coffee_for_water(240, 0)


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(84.0) == 84
    assert round_half_up(-2.5) == -2


def test_number_formatting_and_summary():
    assert fmt_num(240.0) == "240"
    assert fmt_num(16.5) == "16.5"
    assert brew_summary(15.0, 240.0, 16.0) == (
        "With 15g of coffee and a ratio of 1:16, you'll use about 240ml of water."
    )
