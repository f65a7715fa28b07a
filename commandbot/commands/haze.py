"""Hourly PM2.5 readings across the five regions."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
import math

from commandbot.commands.context import CommandContext
from commandbot.data.responses import PsiSnapshot, decode_psi
from commandbot.logic.classifier import describe_psi, psi_color
from commandbot.rendering.attachment import Attachment, AttachmentSet, CommandFailure, CommandResult, Field
from commandbot.rendering.formatting import PLACEHOLDER, qualitative_label

PSI_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"
UNAVAILABLE_MESSAGE = "PSI readings are unavailable"


def average_psi(snapshot: PsiSnapshot) -> int:
    readings = snapshot.readings
    return math.ceil(sum(readings) / len(readings))


def format_psi_timestamp(timestamp: str | None, datetime_format: str) -> str:
    if not timestamp:
        return PLACEHOLDER
    try:
        parsed = datetime.strptime(timestamp, PSI_TIMESTAMP_FORMAT)
    except ValueError:
        return PLACEHOLDER
    return parsed.strftime(datetime_format)


def psi_fields(snapshot: PsiSnapshot) -> list[Field]:
    rows = (
        ("Average", average_psi(snapshot)),
        ("Central", snapshot.central),
        ("North", snapshot.north),
        ("South", snapshot.south),
        ("East", snapshot.east),
        ("West", snapshot.west),
    )
    return [Field(title=title, value=qualitative_label(value, describe_psi)) for title, value in rows]


def haze(context: CommandContext, args: Sequence[str]) -> CommandResult:
    body = context.client.get_json(f"{context.settings.api_url}/nea/psipm25")
    snapshot = decode_psi(body)
    if snapshot is None:
        return CommandFailure(UNAVAILABLE_MESSAGE)

    fields = psi_fields(snapshot)
    updated_at = format_psi_timestamp(snapshot.timestamp, context.settings.datetime_format)
    attachment = Attachment(
        pretext=":cloud: *Haze*",
        title="PM2.5 Hourly Update",
        text=f"Last updated at _{updated_at}_",
        color=psi_color(average_psi(snapshot)),
        fields=fields,
    )
    return AttachmentSet(attachments=[attachment])


__all__ = ["UNAVAILABLE_MESSAGE", "average_psi", "format_psi_timestamp", "psi_fields", "haze"]
