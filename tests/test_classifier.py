from __future__ import annotations

import pytest

from commandbot.logic.classifier import (
    BLUE,
    GREEN,
    ORANGE,
    PSI_BANDS,
    RED,
    YELLOW,
    bus_load_color,
    classify_psi,
    describe_psi,
    psi_color,
)


@pytest.mark.parametrize(
    ("average", "expected"),
    [
        (0, GREEN),
        (50, GREEN),
        (51, BLUE),
        (100, BLUE),
        (101, YELLOW),
        (200, YELLOW),
        (201, ORANGE),
        (300, ORANGE),
        (301, RED),
        (999, RED),
    ],
)
def test_psi_color_boundaries(average: int, expected: str) -> None:
    assert psi_color(average) == expected


def test_psi_bands_are_checked_highest_first() -> None:
    thresholds = [band.threshold for band in PSI_BANDS]

    assert thresholds == sorted(thresholds, reverse=True)


def test_describe_psi() -> None:
    assert describe_psi(42) == "42 (Good)"
    assert describe_psi(57) == "57 (Moderate)"
    assert describe_psi(150) == "150 (Unhealthy)"
    assert describe_psi(250) == "250 (Very Unhealthy)"
    assert describe_psi(301) == "301 (Hazardous)"


def test_classify_psi_is_total_for_negative_readings() -> None:
    assert classify_psi(-5).color == GREEN


@pytest.mark.parametrize(
    ("load", "expected"),
    [
        ("Limited Standing", RED),
        ("Standing Available", ORANGE),
        ("Seats Available", GREEN),
        ("", GREEN),
        (None, GREEN),
    ],
)
def test_bus_load_color(load, expected: str) -> None:
    assert bus_load_color(load) == expected
