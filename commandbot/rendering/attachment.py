"""Attachment data structures and their chat payload form."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Field:
    """One titled value line inside an attachment."""

    title: str
    value: str
    short: bool = True

    def to_payload(self) -> dict[str, Any]:
        return {"title": self.title, "value": self.value, "short": self.short}


def fallback_text(fields: Iterable[Field]) -> str:
    """Plain-text rendering of a field list for clients without rich formatting."""
    return "\n".join(f"{f.title}: {f.value}" for f in fields)


@dataclass(frozen=True)
class Attachment:
    """A styled message block with a color bar and a field table.

    ``fallback`` is derived from ``fields`` unless given explicitly.
    """

    pretext: str
    title: str
    color: str
    fields: list[Field] = field(default_factory=list)
    fallback: str | None = None
    text: str | None = None
    title_link: str | None = None
    markdown_in: tuple[str, ...] = ("pretext", "text")

    def __post_init__(self) -> None:
        if self.fallback is None:
            object.__setattr__(self, "fallback", fallback_text(self.fields))

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "pretext": self.pretext,
            "title": self.title,
        }
        if self.text is not None:
            payload["text"] = self.text
        if self.title_link is not None:
            payload["title_link"] = self.title_link
        payload.update(
            {
                "fallback": self.fallback,
                "mrkdwn_in": list(self.markdown_in),
                "color": self.color,
                "fields": [f.to_payload() for f in self.fields],
            }
        )
        return payload


@dataclass(frozen=True)
class AttachmentSet:
    """Successful command result."""

    attachments: list[Attachment]

    def to_payload(self) -> dict[str, Any]:
        return {"attachments": [a.to_payload() for a in self.attachments]}


@dataclass(frozen=True)
class CommandFailure:
    """Expected, user-facing failure such as bad input or an empty result."""

    message: str

    def to_payload(self) -> dict[str, Any]:
        return {"text": self.message}


CommandResult = AttachmentSet | CommandFailure


__all__ = ["Field", "fallback_text", "Attachment", "AttachmentSet", "CommandFailure", "CommandResult"]
