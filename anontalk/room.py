"""Chat rooms that fan messages out to their connected clients."""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Protocol, runtime_checkable


class ClientNotFoundError(LookupError):
    """Raised when a room client cannot be found."""


class MessageWriteError(Exception):
    """Raised when a message could not be delivered to one or more clients."""

    def __init__(self, message: str, client_ids: list[str] | None = None) -> None:
        super().__init__(message)
        self.client_ids = list(client_ids or [])


@runtime_checkable
class RoomClient(Protocol):
    """A participant connected to a room."""

    def get_id(self) -> str:
        """Return the client's unique identifier."""

    def write(self, msg: str) -> None:
        """Deliver a message to the client; raise on failure."""

    def close(self) -> None:
        """Close the client's connection; raise on failure."""


class Room:
    """A named set of clients that can receive broadcast messages."""

    def __init__(self, log: logging.Logger, name: str, *clients: RoomClient) -> None:
        self.id = str(uuid.uuid4())
        self.name = name
        self._log = logging.LoggerAdapter(log, {"roomID": self.id})
        self._clients: dict[str, RoomClient] = {c.get_id(): c for c in clients}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._clients)

    def __contains__(self, client_id: object) -> bool:
        with self._lock:
            return client_id in self._clients

    def add_clients(self, *clients: RoomClient) -> None:
        """Add clients, replacing any that share an identifier."""
        with self._lock:
            for client in clients:
                client_id = client.get_id()
                self._clients[client_id] = client
                self._log.debug("add client %s", client_id)

    def delete_clients(self, *client_ids: str) -> None:
        """Remove clients by identifier; unknown identifiers are ignored."""
        with self._lock:
            for client_id in client_ids:
                if self._clients.pop(client_id, None) is None:
                    self._log.debug("delete client not found: %s", client_id)

    def broadcast(self, without_client_id: str, msg: str) -> None:
        """Send a message to every client except the one given.

        Raises MessageWriteError listing the clients that failed.
        """
        with self._lock:
            targets = list(self._clients.items())
        failed: list[str] = []
        for client_id, client in targets:
            if client_id == without_client_id:
                continue
            try:
                client.write(msg)
            except Exception:
                failed.append(client_id)
                self._log.error("failed to write message for client %s", client_id)
        if failed:
            raise MessageWriteError(
                "failed to write msg for clients: " + ", ".join(failed), failed
            )

    def close(self) -> None:
        """Close every client, raising RuntimeError if any failed to close."""
        with self._lock:
            clients = list(self._clients.values())
        errors: list[Exception] = []
        for client in clients:
            try:
                client.close()
            except Exception as exc:
                errors.append(exc)
        if errors:
            raise RuntimeError(
                f"failed to close {len(errors)} room client(s)"
            ) from errors[0]