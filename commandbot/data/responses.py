"""Typed views over the upstream JSON bodies.

Each upstream API returns its own shape: the transit API uses named nested
objects, the NEA feeds are XML converted to JSON (``@attributes`` keys,
positional region lists, single items collapsed out of their lists). The
decoders here walk those shapes once so the command handlers only deal with
plain dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

PSI_REGION_ORDER = ("north", "central", "east", "west", "south")


@dataclass(frozen=True)
class BusTiming:
    """One upcoming bus for a service."""

    estimated_arrival: str
    load: str


@dataclass(frozen=True)
class BusService:
    """Arrival data for one service at a stop."""

    service_no: str
    status: str
    next_bus: BusTiming
    subsequent_bus: BusTiming
    following_bus: BusTiming


@dataclass(frozen=True)
class BusArrival:
    bus_stop_id: str
    services: list[BusService]


@dataclass(frozen=True)
class PsiSnapshot:
    """PM2.5 readings for the five regions, in upstream order."""

    north: int
    central: int
    east: int
    west: int
    south: int
    timestamp: str | None

    @property
    def readings(self) -> tuple[int, int, int, int, int]:
        return (self.north, self.central, self.east, self.west, self.south)


@dataclass(frozen=True)
class NowcastArea:
    name: str
    forecast: str


@dataclass(frozen=True)
class Nowcast:
    valid_time: str
    areas: list[NowcastArea]


@dataclass(frozen=True)
class IpInfo:
    ip: str | None
    hostname: str | None
    country: str | None
    city: str | None
    region: str | None
    org: str | None


@dataclass(frozen=True)
class ShareCounts:
    url: str | None
    total: Any
    facebook: Any
    twitter: Any
    google_plus: Any
    linkedin: Any
    pinterest: Any


def _mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, list):
        return value
    if isinstance(value, dict):
        return [value]
    return []


def _attributes(node: Any) -> dict[str, Any]:
    return _mapping(_mapping(node).get("@attributes"))


def _str(value: Any) -> str:
    return "" if value is None else str(value)


def _bus_timing(node: Any) -> BusTiming:
    attrs = _mapping(node)
    return BusTiming(
        estimated_arrival=_str(attrs.get("EstimatedArrival")),
        load=_str(attrs.get("Load")),
    )


def decode_bus_arrival(body: Any) -> BusArrival:
    """Decode a ``bus-arrival`` response; missing services decode to an empty list."""
    data = _mapping(body)
    services = []
    for raw in _as_list(data.get("Services")):
        service = _mapping(raw)
        services.append(
            BusService(
                service_no=_str(service.get("ServiceNo")),
                status=_str(service.get("Status")),
                next_bus=_bus_timing(service.get("NextBus")),
                subsequent_bus=_bus_timing(service.get("SubsequentBus")),
                following_bus=_bus_timing(service.get("SubsequentBus3")),
            )
        )
    return BusArrival(bus_stop_id=_str(data.get("BusStopID")), services=services)


def _psi_value(region: Any) -> int | None:
    record = _mapping(_mapping(region).get("record"))
    raw = _attributes(record.get("reading")).get("value")
    try:
        return int(float(raw))
    except (TypeError, ValueError, OverflowError):
        return None


def decode_psi(body: Any) -> PsiSnapshot | None:
    """Decode the ``psipm25`` feed, or return None when any region is unreadable.

    The timestamp is taken from the first region only.
    """
    regions = _as_list(_mapping(_mapping(body).get("item")).get("region"))
    if len(regions) < len(PSI_REGION_ORDER):
        return None

    values = [_psi_value(region) for region in regions[: len(PSI_REGION_ORDER)]]
    if any(value is None for value in values):
        return None

    first_record = _mapping(_mapping(regions[0]).get("record"))
    timestamp = _attributes(first_record).get("timestamp")
    north, central, east, west, south = values
    return PsiSnapshot(
        north=north,
        central=central,
        east=east,
        west=west,
        south=south,
        timestamp=_str(timestamp) or None,
    )


def decode_nowcast(body: Any) -> Nowcast:
    item = _mapping(_mapping(body).get("item"))
    forecast = _mapping(item.get("weatherForecast"))
    areas = []
    for area in _as_list(forecast.get("area")):
        attrs = _attributes(area)
        areas.append(NowcastArea(name=_str(attrs.get("name")), forecast=_str(attrs.get("forecast"))))
    return Nowcast(valid_time=_str(item.get("validTime")), areas=areas)


def decode_ip_info(body: Any) -> IpInfo:
    data = _mapping(body)
    return IpInfo(
        ip=data.get("ip"),
        hostname=data.get("hostname"),
        country=data.get("country"),
        city=data.get("city"),
        region=data.get("region"),
        org=data.get("org"),
    )


def decode_share_counts(body: Any) -> ShareCounts:
    data = _mapping(body)
    count = _mapping(data.get("count"))
    return ShareCounts(
        url=data.get("url"),
        total=data.get("total_count"),
        facebook=count.get("facebook"),
        twitter=count.get("twitter"),
        google_plus=count.get("google-plus"),
        linkedin=count.get("linkedin"),
        pinterest=count.get("pinterest"),
    )


__all__ = [
    "PSI_REGION_ORDER",
    "BusTiming",
    "BusService",
    "BusArrival",
    "PsiSnapshot",
    "NowcastArea",
    "Nowcast",
    "IpInfo",
    "ShareCounts",
    "decode_bus_arrival",
    "decode_psi",
    "decode_nowcast",
    "decode_ip_info",
    "decode_share_counts",
]
