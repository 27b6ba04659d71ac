from __future__ import annotations

from weatherdash.schemas import RawDailySeries
from weatherdash.services.conditions import ConditionCategory, classify
from weatherdash.services.hourly import value_at


# The daily series starts one day in the past: offset 0 is yesterday, not today.
YESTERDAY_OFFSET = 0
TODAY_OFFSET = 1
TOMORROW_OFFSET = 2

HOTTER_MESSAGE = "Today is hotter than yesterday."
COOLER_MESSAGE = "Today is cooler than yesterday."
SIMILAR_MESSAGE = "Today's temperature is similar to yesterday."

TOMORROW_MESSAGES = {
    ConditionCategory.RAIN: "Expect rain tomorrow.",
    ConditionCategory.SNOW: "Snowfall is likely tomorrow.",
    ConditionCategory.STORM: "Thunderstorms possible tomorrow.",
}


def _trend_message(yesterday: float | None, today: float | None) -> str | None:
    if yesterday is None or today is None:
        return None
    if today > yesterday:
        return HOTTER_MESSAGE
    if today < yesterday:
        return COOLER_MESSAGE
    return SIMILAR_MESSAGE


def generate_insights(raw: RawDailySeries | None) -> list[str]:
    """Temperature trend first, then at most one precipitation warning for tomorrow."""
    if raw is None or raw.temperature_max is None or raw.weather_code is None:
        return []

    insights: list[str] = []

    trend = _trend_message(
        value_at(raw.temperature_max, YESTERDAY_OFFSET, None),
        value_at(raw.temperature_max, TODAY_OFFSET, None),
    )
    if trend:
        insights.append(trend)

    tomorrow_category = classify(value_at(raw.weather_code, TOMORROW_OFFSET, None))
    tomorrow_message = TOMORROW_MESSAGES.get(tomorrow_category)
    if tomorrow_message:
        insights.append(tomorrow_message)

    return insights
