from __future__ import annotations

import pytest

from commandbot.commands.haze import UNAVAILABLE_MESSAGE, haze
from commandbot.logic.classifier import BLUE, GREEN, ORANGE, RED, YELLOW
from commandbot.rendering.attachment import AttachmentSet, CommandFailure
from commandbot.rendering.formatting import PLACEHOLDER, fallback_text


def _psi_body(readings, timestamp: str | None = "20240101120000") -> dict:
    regions = []
    for value in readings:
        record = {"reading": {"@attributes": {"type": "NPSI_PM25_3HR", "value": str(value)}}}
        if timestamp is not None:
            record["@attributes"] = {"timestamp": timestamp}
        regions.append({"record": record})
    return {"item": {"region": regions}}


def test_haze_fields_and_average(make_context, settings) -> None:
    context = make_context(_psi_body([10, 60, 110, 210, 310]))

    result = haze(context, [])

    assert isinstance(result, AttachmentSet)
    attachment = result.attachments[0]
    assert [(f.title, f.value) for f in attachment.fields] == [
        ("Average", "140 (Unhealthy)"),
        ("Central", "60 (Moderate)"),
        ("North", "10 (Good)"),
        ("South", "310 (Hazardous)"),
        ("East", "110 (Unhealthy)"),
        ("West", "210 (Very Unhealthy)"),
    ]
    assert attachment.color == YELLOW
    assert attachment.text == "Last updated at _01 Jan 2024 12:00_"
    assert attachment.fallback == fallback_text(attachment.fields)
    context.client.get_json.assert_called_once_with(f"{settings.api_url}/nea/psipm25")


def test_haze_average_rounds_up(make_context) -> None:
    result = haze(make_context(_psi_body([1, 1, 1, 1, 2])), [])

    assert result.attachments[0].fields[0].value == "2 (Good)"


@pytest.mark.parametrize(
    ("average", "expected"),
    [
        (50, GREEN),
        (51, BLUE),
        (100, BLUE),
        (101, YELLOW),
        (200, YELLOW),
        (201, ORANGE),
        (300, ORANGE),
        (301, RED),
    ],
)
def test_haze_color_ladder(make_context, average: int, expected: str) -> None:
    result = haze(make_context(_psi_body([average] * 5)), [])

    assert result.attachments[0].color == expected


def test_haze_missing_timestamp_renders_placeholder(make_context) -> None:
    result = haze(make_context(_psi_body([10] * 5, timestamp=None)), [])

    assert result.attachments[0].text == f"Last updated at _{PLACEHOLDER}_"


def test_haze_missing_regions_is_command_failure(make_context) -> None:
    result = haze(make_context({"item": {"region": []}}), [])

    assert result == CommandFailure(UNAVAILABLE_MESSAGE)


@pytest.mark.parametrize("reading", ["inf", "1e400", "nan"])
def test_haze_non_finite_reading_is_command_failure(make_context, reading: str) -> None:
    result = haze(make_context(_psi_body([10, 10, 10, 10, reading])), [])

    assert result == CommandFailure(UNAVAILABLE_MESSAGE)
