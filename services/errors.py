"""Errors raised by the sitemap services."""
from __future__ import annotations

from pathlib import Path


class IdentifierSourceUnavailable(Exception):
    """An identifier listing (roadmaps or best practices) could not be read."""

    def __init__(self, kind: str, location: Path | str, reason: str | None = None) -> None:
        self.kind = kind
        self.location = location
        message = f"Cannot list {kind} identifiers at {location}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


__all__ = ["IdentifierSourceUnavailable"]
