"""Bus arrival timings for a stop."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from urllib.parse import quote

from commandbot.commands.context import CommandContext, get_arg
from commandbot.data.responses import BusService, BusTiming, decode_bus_arrival
from commandbot.logic.classifier import bus_load_color
from commandbot.rendering.attachment import Attachment, AttachmentSet, CommandFailure, CommandResult, Field
from commandbot.rendering.formatting import relative_time

IN_OPERATION = "In Operation"
NOT_IN_OPERATION = "Not In Operation"
INVALID_STOP_MESSAGE = "Bus stop or number is invalid"

NO_ESTIMATE = "No Estimate Available"
NOT_OPERATING = "Not Operating Now"

SLOT_TITLES = ("Next Bus", "Subsequent Bus", "Following Bus")


def slot_value(timing: BusTiming, status: str, now: datetime | None = None) -> str:
    """Render one upcoming bus for a service that is not marked out of operation."""
    if timing.estimated_arrival:
        return f"{relative_time(timing.estimated_arrival, now)} ({timing.load})"
    if status == IN_OPERATION:
        return NO_ESTIMATE
    return NOT_OPERATING


def service_fields(service: BusService, now: datetime | None = None) -> list[Field]:
    if service.status == NOT_IN_OPERATION:
        return []
    timings = (service.next_bus, service.subsequent_bus, service.following_bus)
    return [
        Field(title=title, value=slot_value(timing, service.status, now))
        for title, timing in zip(SLOT_TITLES, timings)
    ]


def service_attachment(service: BusService, bus_stop_id: str, now: datetime | None = None) -> Attachment:
    fields = service_fields(service, now)
    return Attachment(
        pretext=f":oncoming_bus:   *{service.service_no}*   :busstop: *{bus_stop_id}*",
        title=service.status,
        color=bus_load_color(service.next_bus.load),
        fields=fields,
        markdown_in=("pretext", "title"),
    )


def bus(context: CommandContext, args: Sequence[str]) -> CommandResult:
    """Arrival timings at ``args[0]``, optionally filtered to service ``args[1]``."""
    stop_id = get_arg(args, 0)
    service_no = get_arg(args, 1)
    if not stop_id:
        return CommandFailure(INVALID_STOP_MESSAGE)

    query = quote(stop_id, safe="")
    if service_no:
        query = f"{query}/{quote(service_no, safe='')}"

    body = context.client.get_json(f"{context.settings.api_url}/lta/bus-arrival/{query}")
    arrival = decode_bus_arrival(body)
    if not arrival.services:
        return CommandFailure(INVALID_STOP_MESSAGE)

    return AttachmentSet(
        attachments=[service_attachment(service, arrival.bus_stop_id) for service in arrival.services]
    )


__all__ = [
    "IN_OPERATION",
    "NOT_IN_OPERATION",
    "INVALID_STOP_MESSAGE",
    "NO_ESTIMATE",
    "NOT_OPERATING",
    "SLOT_TITLES",
    "slot_value",
    "service_fields",
    "service_attachment",
    "bus",
]
