from dataclasses import dataclass
from typing import Dict, List
import logging


log = logging.getLogger("kraftybrew.taste")


# --- Selectable values (what the estimator page offers) ---
PROCESS_TYPES = ("Washed", "Natural", "Honey")
ROAST_LEVELS = ("Light", "Medium", "Dark")
BREW_METHODS = ("V60", "French Press", "Espresso", "AeroPress")

GRIND_RANGE = (0, 100)          # 0 = fine, 100 = coarse
WATER_TEMP_RANGE = (80, 100)    # °C
WATER_RATIO_RANGE = (12, 20)    # 1:X

DEFAULTS = {
    "process_type": PROCESS_TYPES[0],
    "roast_level": ROAST_LEVELS[1],
    "grind_level": 33,
    "water_temp": 93,
    "brew_method": BREW_METHODS[0],
    "water_ratio": 16,
}

FIELD_HINTS = {
    "process_type": "Washed: clean & bright • Natural: fruity & sweet • Honey: balanced sweetness",
    "roast_level": "Light: bright & acidic • Medium: balanced • Dark: bold & possibly smoky",
    "grind_level": "0=Fine, 100=Coarse. Fine = more extraction, Coarse = less extraction",
    "water_temp": "<90°C=less acidity/sweetness, >95°C=stronger extraction",
    "brew_method": "V60 (clarity) • French Press (full-bodied) • Espresso (intense) • AeroPress (fast & flexible)",
    "water_ratio": "Lower ratio (1:12)=stronger, higher (1:18)=lighter",
}


# --- Phrase tables ---
PROCESS_PHRASES: Dict[str, str] = {
    "Washed": "Cleaner, brighter notes.",
    "Natural": "Fruity, sweet undertones.",
    "Honey": "Balanced sweetness with mild acidity.",
}

ROAST_PHRASES: Dict[str, str] = {
    "Light": "Higher acidity, lighter body.",
    "Medium": "More balanced flavor.",
    "Dark": "Bolder with bittersweet, smoky notes.",
}

METHOD_PHRASES: Dict[str, str] = {
    "V60": "Clarity from pour-over style.",
    "French Press": "Heavier body & oils from immersion.",
    "Espresso": "Concentrated, intense flavors with crema.",
    "AeroPress": "Quick brew, moderate body, flexible methods.",
}


@dataclass(frozen=True)
class BrewParameters:
    process_type: str         # "Washed" | "Natural" | "Honey"
    roast_level: str          # "Light" | "Medium" | "Dark"
    grind_level: int          # 0..100
    water_temp: float         # 80..100 °C
    brew_method: str          # "V60" | "French Press" | "Espresso" | "AeroPress"
    water_ratio: int          # 12..20, water per gram of coffee


def _lookup(table: Dict[str, str], value: str, field: str) -> str:
    phrase = table.get(value, "")
    if not phrase:
        log.debug("No phrase for %s=%r, skipping", field, value)
    return phrase


def grind_phrase(grind_level: float) -> str:
    if grind_level <= 33:
        return "Fine grind intensifies extraction, watch for bitterness."
    elif grind_level <= 66:
        return "Medium grind yields balanced extraction."
    return "Coarse grind extracts slower, often lighter body."


def temp_phrase(water_temp: float) -> str:
    if water_temp < 90:
        return "Lower temp reduces acidity & sweetness."
    elif water_temp > 95:
        return "Higher temp boosts extraction, potential bitterness."
    return "Moderate temp for balanced extraction."


def ratio_phrase(water_ratio: float) -> str:
    if water_ratio < 14:
        return "Strong, bold brew."
    elif water_ratio > 17:
        return "Lighter, delicate brew."
    return "Moderately strong cup."


def describe_fragments(
    process_type: str,
    roast_level: str,
    grind_level: float,
    water_temp: float,
    brew_method: str,
    water_ratio: float,
) -> List[str]:
    """
    One phrase per dimension, in the order process, roast, grind, temp,
    method, ratio. Unknown categorical values are left out.
    """
    fragments = [
        _lookup(PROCESS_PHRASES, process_type, "process_type"),
        _lookup(ROAST_PHRASES, roast_level, "roast_level"),
        grind_phrase(grind_level),
        temp_phrase(water_temp),
        _lookup(METHOD_PHRASES, brew_method, "brew_method"),
        ratio_phrase(water_ratio),
    ]
    return [f for f in fragments if f]


def estimate_taste(
    process_type: str,
    roast_level: str,
    grind_level: float,
    water_temp: float,
    brew_method: str,
    water_ratio: float,
) -> str:
    """
    Short descriptive taste outcome for the given brew settings.
    Never raises for unrecognised process/roast/method values.
    """
    outcome = " ".join(
        describe_fragments(process_type, roast_level, grind_level, water_temp, brew_method, water_ratio)
    ).strip()
    log.debug("Taste outcome for %s/%s/%s: %s", process_type, roast_level, brew_method, outcome)
    return outcome


def estimate_taste_for(params: BrewParameters) -> str:
    return estimate_taste(
        process_type=params.process_type,
        roast_level=params.roast_level,
        grind_level=params.grind_level,
        water_temp=params.water_temp,
        brew_method=params.brew_method,
        water_ratio=params.water_ratio,
    )
