from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple
import logging
import math


log = logging.getLogger("kraftybrew.recipes")


@dataclass(frozen=True)
class RecipeInputs:
    coffee_g: float
    water_ml: float           # usually coffee_g * ratio, not enforced
    ratio: float              # 1:X


@dataclass(frozen=True)
class RecipeMethod:
    id: str
    label: str
    description: str
    steps: Callable[[RecipeInputs], List[str]]
    tips: Optional[Callable[[RecipeInputs], List[str]]] = None


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def fmt_num(x: float) -> str:
    """
    Render a number the way the brew guide shows it: 240.0 -> "240", 16.5 -> "16.5".
    """
    if isinstance(x, float) and x.is_integer():
        return str(int(x))
    return str(x)


# --- Ratio helpers (keep coffee / water / ratio in sync) ---
def water_for_coffee(coffee_g: float, ratio: float) -> int:
    return round_half_up(coffee_g * ratio)


def coffee_for_water(water_ml: float, ratio: float) -> int:
    if ratio <= 0:
        raise ValueError("ratio must be > 0")
    return round_half_up(water_ml / ratio)


def brew_summary(coffee_g: float, water_ml: float, ratio: float) -> str:
    return (
        f"With {fmt_num(coffee_g)}g of coffee and a ratio of 1:{fmt_num(ratio)}, "
        f"you'll use about {fmt_num(water_ml)}ml of water."
    )


# --- Hario V60 4:6 ---
def _four_six_steps(inp: RecipeInputs) -> List[str]:
    bloom_water = round_half_up(inp.coffee_g * 2)
    sweetness_water = round_half_up((inp.water_ml - bloom_water) * 0.4)
    strength_water = inp.water_ml - bloom_water - sweetness_water

    return [
        f"Bloom: Pour ~{fmt_num(bloom_water)}ml water for 30-45 seconds.",
        f"Sweetness phase: Pour ~{fmt_num(sweetness_water)}ml water, wait ~45-60 seconds.",
        f"Strength phase: Pour ~{fmt_num(strength_water)}ml water in increments.",
        "Total brew time: ~2:30 - 3:00 minutes.",
    ]


def _four_six_tips(inp: RecipeInputs) -> List[str]:
    tips = [
        "Increase the sweetness phase (50-60%) to emphasize sweetness.",
        "Decrease the sweetness phase (30-35%) if you want brighter or more acidic flavors.",
        "Swirl or stir lightly after each pour for even extraction.",
    ]

    ratio = fmt_num(inp.ratio)
    if inp.ratio < 15:
        tips.append(
            f"Your ratio (1:{ratio}) is quite strong. You could add more water in the "
            "sweetness phase to balance any bitterness."
        )
    elif inp.ratio > 16:
        tips.append(
            f"Your ratio (1:{ratio}) is lighter. Slowing down pours or reducing the "
            "sweetness water may preserve complexity."
        )

    return tips


# --- James Hoffmann (swirl) ---
def _swirl_steps(inp: RecipeInputs) -> List[str]:
    bloom_water = round_half_up(inp.coffee_g * 2)
    main_pour = round_half_up(inp.water_ml * 0.6)
    final_pour = inp.water_ml - bloom_water - main_pour

    return [
        f"Bloom: Pour ~{fmt_num(bloom_water)}ml water, swirl gently (30-45s).",
        f"Main pour: Pour until ~{fmt_num(main_pour)}ml total. Swirl again.",
        f"Final pour: Add remaining ~{fmt_num(final_pour)}ml water. Swirl once more.",
        "Total brew time: ~3:00 - 3:30 minutes.",
    ]


# --- Custom drip ---
def _custom_drip_steps(inp: RecipeInputs) -> List[str]:
    bloom_water = round_half_up(inp.coffee_g * 2)
    halfway = round_half_up(inp.water_ml / 2)

    return [
        f"Bloom: Pour ~{fmt_num(bloom_water)}ml water and wait 30-45 seconds.",
        f"Second pour: Pour slowly in circles until ~{fmt_num(halfway)}ml total.",
        f"Final pour: Finish at {fmt_num(inp.water_ml)}ml total and let it drain.",
    ]


FOUR_SIX = "4-6"
JAMES_HOFFMANN = "james-hoffmann"
CUSTOM_DRIP = "custom-drip"

RECIPES: Tuple[RecipeMethod, ...] = (
    RecipeMethod(
        id=FOUR_SIX,
        label="Hario V60 4:6 Method",
        description=(
            "The 4:6 method by Tetsu Kasuya divides the brew into two parts: sweetness "
            "and strength. Adjust water pours and intervals based on your taste preferences."
        ),
        steps=_four_six_steps,
        tips=_four_six_tips,
    ),
    RecipeMethod(
        id=JAMES_HOFFMANN,
        label="James Hoffmann Method",
        description=(
            "A method focusing on swirling or agitation for even extraction. "
            "Timings and pours are crucial for optimal flavor."
        ),
        steps=_swirl_steps,
    ),
    RecipeMethod(
        id=CUSTOM_DRIP,
        label="Custom Drip",
        description="A simple three-pour drip: bloom, fill to halfway, then finish at your total water.",
        steps=_custom_drip_steps,
    ),
)

_BY_ID: Dict[str, RecipeMethod] = {r.id: r for r in RECIPES}


def recipe_ids() -> List[str]:
    return [r.id for r in RECIPES]


def get_recipe(method_id: str) -> Optional[RecipeMethod]:
    return _BY_ID.get(method_id)


def available_recipes(include_custom_drip: bool = False) -> List[RecipeMethod]:
    """
    Recipes to offer in the method selector.
    """
    return [r for r in RECIPES if include_custom_drip or r.id != CUSTOM_DRIP]


def plan_recipe(method_id: str, inputs: RecipeInputs) -> Optional[Dict[str, Any]]:
    """
    Build the pour schedule and tips for one catalog recipe.
    Returns None if method_id is not in the catalog.
    Inputs are used as given: no range or consistency checks.
    """
    recipe = get_recipe(method_id)
    if recipe is None:
        log.warning("Unknown recipe id %r (known: %s)", method_id, ", ".join(recipe_ids()))
        return None

    steps = recipe.steps(inputs)
    tips = recipe.tips(inputs) if recipe.tips is not None else []

    log.debug(
        "Planned %s for %sg / %sml / 1:%s (%d steps, %d tips)",
        recipe.id, inputs.coffee_g, inputs.water_ml, inputs.ratio, len(steps), len(tips),
    )

    return {
        "method": recipe.id,
        "label": recipe.label,
        "description": recipe.description,
        "coffee_g": inputs.coffee_g,
        "water_ml": inputs.water_ml,
        "ratio": inputs.ratio,
        "steps": steps,
        "tips": tips,
    }
