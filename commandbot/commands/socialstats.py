"""Social network share counts for a link."""

from __future__ import annotations

from collections.abc import Sequence

from commandbot.commands.context import CommandContext, get_arg
from commandbot.data.responses import decode_share_counts
from commandbot.rendering.attachment import Attachment, AttachmentSet, CommandResult, Field
from commandbot.rendering.formatting import grouped_number

DEFAULT_LINK = "https://lesterchan.net"


def socialstats(context: CommandContext, args: Sequence[str]) -> CommandResult:
    link = get_arg(args, 0, DEFAULT_LINK)
    body = context.client.get_json(f"{context.settings.api_url}/link/", params={"page": link})
    counts = decode_share_counts(body)

    fields = [
        Field(title="Total", value=grouped_number(counts.total)),
        Field(title="Facebook", value=grouped_number(counts.facebook)),
        Field(title="Twitter", value=grouped_number(counts.twitter)),
        Field(title="Google+", value=grouped_number(counts.google_plus)),
        Field(title="LinkedIn", value=grouped_number(counts.linkedin)),
        Field(title="Pinterest", value=grouped_number(counts.pinterest)),
    ]
    url = counts.url or link
    attachment = Attachment(
        pretext=":link: *Link Social Stats*",
        title=url,
        title_link=url,
        color=context.settings.default_color,
        fields=fields,
    )
    return AttachmentSet(attachments=[attachment])


__all__ = ["DEFAULT_LINK", "socialstats"]
