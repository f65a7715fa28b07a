"""Geolocation lookup for an IP address."""

from __future__ import annotations

from collections.abc import Sequence

from commandbot.commands.context import CommandContext, get_arg
from commandbot.data.responses import decode_ip_info
from commandbot.rendering.attachment import Attachment, AttachmentSet, CommandFailure, CommandResult, Field
from commandbot.rendering.formatting import qualitative_label, validate_ip

DEFAULT_IP = "127.0.0.1"
INVALID_IP_MESSAGE = "Invalid IP"


def ipinfo(context: CommandContext, args: Sequence[str]) -> CommandResult:
    ip = get_arg(args, 0, DEFAULT_IP)
    if not validate_ip(ip):
        return CommandFailure(INVALID_IP_MESSAGE)

    body = context.client.get_json(f"{context.settings.ipinfo_url}/{ip}/json")
    info = decode_ip_info(body)

    fields = [
        Field(title="Country", value=qualitative_label(info.country)),
        Field(title="City", value=qualitative_label(info.city)),
        Field(title="Region", value=qualitative_label(info.region)),
        Field(title="Organization", value=qualitative_label(info.org)),
    ]
    attachment = Attachment(
        pretext=":exclamation: *IP Information*",
        title=info.ip or ip,
        text=info.hostname or "",
        color=context.settings.default_color,
        fields=fields,
    )
    return AttachmentSet(attachments=[attachment])


__all__ = ["DEFAULT_IP", "INVALID_IP_MESSAGE", "ipinfo"]
