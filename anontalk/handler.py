"""HTTP-level handlers for the room API, independent of any web framework."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Protocol

from anontalk.models import Room


class HandlerError(Exception):
    """Raised when a request cannot be handled."""


class RoomService(Protocol):
    """Service layer operations the handler depends on."""

    def create_new_room(self, room_name: str) -> Room:
        """Create a room with the given name and return it."""

    def get_room(self, room_id: str) -> Room:
        """Return the room with the given identifier."""


@dataclass(frozen=True)
class RoomInfo:
    """Public description of a room."""

    id: str
    name: str

    @classmethod
    def from_room(cls, room: Room) -> RoomInfo:
        return cls(id=room.uuid, name=room.name)

    def to_json(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class Response:
    """An HTTP status with an optional JSON body."""

    status: int
    body: str = ""

    def json(self) -> Any:
        return json.loads(self.body)


def _json_response(status: HTTPStatus, payload: Any) -> Response:
    return Response(status=int(status), body=json.dumps(payload))


class Handler:
    """Request handlers for the v1 room API."""

    def __init__(self, log: logging.Logger, room_service: RoomService) -> None:
        self._log = log
        self._room_service = room_service

    def healthcheck(self) -> Response:
        return Response(status=int(HTTPStatus.OK))

    def create_new_room(self, body: str | bytes | None) -> Response:
        """Create a room from a JSON body of the form {"name": ...}."""
        name = self._parse_room_name(body)
        try:
            room = self._room_service.create_new_room(name)
        except Exception as exc:
            raise HandlerError(f"failed to create new room: {exc}") from exc
        return _json_response(HTTPStatus.CREATED, RoomInfo.from_room(room).to_json())

    def get_room_info(self, room_id: str) -> Response:
        try:
            room = self._room_service.get_room(room_id)
        except Exception as exc:
            raise HandlerError(f"failed to get room: {exc}") from exc
        return _json_response(HTTPStatus.OK, RoomInfo.from_room(room).to_json())

    @staticmethod
    def _parse_room_name(body: str | bytes | None) -> str:
        if body is None or not body.strip():
            return ""
        try:
            data = json.loads(body)
        except (ValueError, UnicodeDecodeError) as exc:
            raise HandlerError(
                f"failed to parse create new room data: {exc}"
            ) from exc
        if not isinstance(data, dict):
            raise HandlerError("failed to parse create new room data: expected an object")
        name = data.get("name", "")
        if not isinstance(name, str):
            raise HandlerError("failed to parse create new room data: name must be a string")
        return name