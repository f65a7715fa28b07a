"""Attachment model and formatting helpers."""

from commandbot.rendering.attachment import Attachment, AttachmentSet, CommandFailure, CommandResult, Field
from commandbot.rendering.formatting import (
    PLACEHOLDER,
    fallback_text,
    grouped_number,
    qualitative_label,
    relative_time,
    title_case,
    validate_ip,
)

__all__ = [
    "Attachment",
    "AttachmentSet",
    "CommandFailure",
    "CommandResult",
    "Field",
    "PLACEHOLDER",
    "fallback_text",
    "grouped_number",
    "qualitative_label",
    "relative_time",
    "title_case",
    "validate_ip",
]
