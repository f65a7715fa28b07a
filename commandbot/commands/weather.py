"""Two-hour weather nowcast by area."""

from __future__ import annotations

from collections.abc import Sequence

from commandbot.commands.context import CommandContext
from commandbot.data.responses import decode_nowcast
from commandbot.logic.classifier import NOWCAST_FORECASTS
from commandbot.rendering.attachment import Attachment, AttachmentSet, CommandResult, Field
from commandbot.rendering.formatting import qualitative_label, title_case


def weather(context: CommandContext, args: Sequence[str]) -> CommandResult:
    body = context.client.get_json(f"{context.settings.api_url}/nea/nowcast")
    nowcast = decode_nowcast(body)

    # An empty area list is still a valid (field-less) forecast.
    fields = [
        Field(title=title_case(area.name), value=qualitative_label(area.forecast, NOWCAST_FORECASTS))
        for area in nowcast.areas
    ]
    attachment = Attachment(
        pretext=":sunny: :cloud: :rain_cloud: *Singapore Weather Conditions*",
        title="2 hour Forecast",
        text=f"{nowcast.valid_time}.",
        color=context.settings.default_color,
        fields=fields,
    )
    return AttachmentSet(attachments=[attachment])


__all__ = ["weather"]
