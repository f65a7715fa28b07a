"""Status and color classification tables for command attachments."""

from __future__ import annotations

from dataclasses import dataclass

RED = "#d60000"
ORANGE = "#ea8522"
YELLOW = "#e7b60d"
BLUE = "#006fa1"
GREEN = "#479b02"


@dataclass(frozen=True)
class PsiBand:
    """A PSI band applies to readings strictly above ``threshold``."""

    threshold: int
    descriptor: str
    color: str


# Checked in order; first match wins.
PSI_BANDS = (
    PsiBand(300, "Hazardous", RED),
    PsiBand(200, "Very Unhealthy", ORANGE),
    PsiBand(100, "Unhealthy", YELLOW),
    PsiBand(50, "Moderate", BLUE),
)
PSI_DEFAULT_BAND = PsiBand(0, "Good", GREEN)

# Only the next bus's load is considered.
BUS_LOAD_COLORS = (
    ("Limited Standing", RED),
    ("Standing Available", ORANGE),
)
BUS_LOAD_DEFAULT_COLOR = GREEN

NOWCAST_FORECASTS = {
    "BR": "Mist",
    "CL": "Cloudy",
    "DR": "Drizzle",
    "FA": "Fair (Day)",
    "FG": "Fog",
    "FN": "Fair (Night)",
    "FW": "Fair & Warm",
    "HG": "Heavy Thundery Showers with Gusty Winds",
    "HR": "Heavy Rain",
    "HS": "Heavy Showers",
    "HT": "Heavy Thundery Showers",
    "HZ": "Hazy",
    "LH": "Slightly Hazy",
    "LR": "Light Rain",
    "LS": "Light Showers",
    "OC": "Overcast",
    "PC": "Partly Cloudy (Day)",
    "PN": "Partly Cloudy (Night)",
    "PS": "Passing Showers",
    "RA": "Moderate Rain",
    "SH": "Showers",
    "SK": "Strong Winds, Showers",
    "SN": "Snow",
    "SR": "Strong Winds, Rain",
    "SS": "Snow Showers",
    "SU": "Sunny",
    "SW": "Strong Winds",
    "TL": "Thundery Showers",
    "WC": "Windy, Cloudy",
    "WD": "Windy",
    "WF": "Windy, Fair",
    "WR": "Windy, Rain",
    "WS": "Windy, Showers",
}


def classify_psi(value: int) -> PsiBand:
    """Return the band for a PSI reading."""
    for band in PSI_BANDS:
        if value > band.threshold:
            return band
    return PSI_DEFAULT_BAND


def psi_color(value: int) -> str:
    return classify_psi(value).color


def describe_psi(value: int) -> str:
    """Render a PSI reading with its health descriptor, e.g. ``"57 (Moderate)"``."""
    return f"{value} ({classify_psi(value).descriptor})"


def bus_load_color(load: str | None) -> str:
    for level, color in BUS_LOAD_COLORS:
        if load == level:
            return color
    return BUS_LOAD_DEFAULT_COLOR


__all__ = [
    "RED",
    "ORANGE",
    "YELLOW",
    "BLUE",
    "GREEN",
    "PsiBand",
    "PSI_BANDS",
    "PSI_DEFAULT_BAND",
    "BUS_LOAD_COLORS",
    "BUS_LOAD_DEFAULT_COLOR",
    "NOWCAST_FORECASTS",
    "classify_psi",
    "psi_color",
    "describe_psi",
    "bus_load_color",
]
