from __future__ import annotations

from enum import Enum


class ConditionCategory(str, Enum):
    CLEAR = "clear"
    PARTLY_CLOUDY = "partly_cloudy"
    RAIN = "rain"
    SNOW = "snow"
    STORM = "storm"
    UNKNOWN = "unknown"


# Open-Meteo WMO code sets. Unversioned: a change to the provider's code table needs an edit here.
CATEGORY_CODES: tuple[tuple[ConditionCategory, frozenset[int]], ...] = (
    (ConditionCategory.CLEAR, frozenset({0})),
    (ConditionCategory.PARTLY_CLOUDY, frozenset({1, 2, 3})),
    (ConditionCategory.RAIN, frozenset({61, 63, 65, 80, 81, 82})),
    (ConditionCategory.SNOW, frozenset({71, 73, 75, 85, 86})),
    (ConditionCategory.STORM, frozenset({95, 96, 99})),
)

CATEGORY_ICONS = {
    ConditionCategory.CLEAR: "☀️",
    ConditionCategory.PARTLY_CLOUDY: "⛅",
    ConditionCategory.RAIN: "🌧️",
    ConditionCategory.SNOW: "❄️",
    ConditionCategory.STORM: "⛈️",
    ConditionCategory.UNKNOWN: "🌡️",
}

NEUTRAL_THEME = "from-blue-200 to-indigo-300"

CATEGORY_THEMES = {
    ConditionCategory.CLEAR: "from-yellow-300 to-orange-400",
    ConditionCategory.PARTLY_CLOUDY: "from-gray-300 to-gray-500",
    ConditionCategory.RAIN: "from-blue-400 to-blue-700",
    ConditionCategory.SNOW: "from-blue-100 to-white",
    ConditionCategory.STORM: "from-purple-600 to-gray-900",
    ConditionCategory.UNKNOWN: "from-slate-300 to-slate-500",
}

WEATHER_CODE_LABELS = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    71: "Slight snow",
    73: "Moderate snow",
    75: "Heavy snow",
    80: "Rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with hail",
    99: "Heavy thunderstorm with hail",
}


def _as_code(value: object) -> int | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not value.is_integer():
        return None
    return int(value)


def classify(code: object) -> ConditionCategory:
    """Map a weather code to its category. Total: unknown, missing or malformed codes give UNKNOWN."""
    parsed = _as_code(code)
    if parsed is None:
        return ConditionCategory.UNKNOWN
    for category, codes in CATEGORY_CODES:
        if parsed in codes:
            return category
    return ConditionCategory.UNKNOWN


def icon_for(category: ConditionCategory) -> str:
    return CATEGORY_ICONS.get(category, CATEGORY_ICONS[ConditionCategory.UNKNOWN])


def background_theme_for(category: ConditionCategory | None) -> str:
    """Theme token for the page background.

    ``None`` means no weather has been loaded yet and maps to the neutral theme,
    which never equals the UNKNOWN category's theme.
    """
    if category is None:
        return NEUTRAL_THEME
    return CATEGORY_THEMES.get(category, CATEGORY_THEMES[ConditionCategory.UNKNOWN])


def condition_label(code: object) -> str:
    parsed = _as_code(code)
    if parsed is None:
        return "Unknown"
    return WEATHER_CODE_LABELS.get(parsed, "Unknown")
