# anontalk

Building blocks for anonymous chat rooms. The package has three parts:

- `anontalk.models.Room`: a frozen dataclass with `uuid` and `name`. The
  handler's service layer returns it.
- `anontalk.room.Room`: a room that holds connected clients and broadcasts
  messages between them.
- `anontalk.handler.Handler`: request handlers for creating rooms and looking
  them up. They are not tied to any web framework.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Rooms

`anontalk.room.Room(log, name, *clients)` takes a `logging.Logger`, a room
name and any number of initial clients. It gives itself a random UUID as
`room.id` and keeps clients keyed by their id. A client is any object with
the `RoomClient` interface: `get_id()`, `write(msg)` and `close()`.

```python
import logging

from anontalk.room import Room, RoomClient


class PrintClient(RoomClient):
    def __init__(self, client_id):
        self._id = client_id

    def get_id(self):
        return self._id

    def write(self, msg):
        print(f"{self._id} <- {msg}")

    def close(self):
        print(f"{self._id} closed")


log = logging.getLogger("chat")
alice, bob = PrintClient("alice"), PrintClient("bob")
room = Room(log, "lobby", alice, bob)

len(room)                          # 2
"bob" in room                      # True

room.broadcast("alice", "hello")   # delivered to everyone except alice
room.delete_clients("bob")         # unknown ids are ignored
room.close()                       # closes every remaining client
```

- `add_clients(*clients)` adds clients. A client with an id that is already
  present replaces the existing one.
- `delete_clients(*client_ids)` removes clients by id.
- `broadcast(without_client_id, msg)` tries every client. A client that fails
  to take the message does not stop the broadcast. Once every client has been
  tried, the failures are raised together as `MessageWriteError`, and its
  `client_ids` attribute lists the clients that failed.
- `close()` closes every client. If any of them fail, it raises
  `RuntimeError`, chained from the first failure.

Membership changes are guarded by a lock, so a room can be shared between
threads.

## Room handler

`anontalk.handler.Handler(log, room_service)` answers the room requests on
top of a `RoomService` that you provide. The service needs
`create_new_room(room_name)` and `get_room(room_id)`, and both return an
`anontalk.models.Room`. Each handler method returns a `Response` with an
integer `status` and a JSON `body` string. `Response.json()` decodes the body.

```python
from anontalk.handler import Handler

handler = Handler(log, service)

handler.healthcheck().status            # 200
resp = handler.create_new_room(b'{"name": "lobby"}')
resp.status                             # 201
resp.json()                             # {"id": "...", "name": "lobby"}
handler.get_room_info(room_id).json()   # {"id": room_id, "name": "..."}
```

`create_new_room` accepts the body as `str`, `bytes` or `None`:

- An empty or missing body gives a room named `""`.
- A body that is not valid JSON raises `HandlerError`. So does a body that is
  not a JSON object, or one whose `name` is not a string.
- Any exception raised by the room service is wrapped in `HandlerError`.

`RoomInfo` is the public shape of a room. `RoomInfo.from_room(room)` builds one
from a model, and `to_json()` returns `{"id": ..., "name": ...}`.

## What this package does not do

- **No server.** It does not run an HTTP server or register routes. You call
  the `Handler` methods from a web framework of your choice and turn each
  `Response` into a real reply.
- **No live connections.** There is no websocket or other connection for
  joining a room. `RoomClient` is the interface your connection objects must
  provide.
- **No storage.** There is no room service and no room storage. You supply the
  `RoomService`.
- **No API description.** There is no endpoint that serves an API description.