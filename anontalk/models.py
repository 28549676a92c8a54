"""Domain models shared across the service."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Room:
    """A chat room as seen by the service layer."""

    uuid: str
    name: str