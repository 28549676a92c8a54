import logging
import uuid

import pytest

from anontalk.room import MessageWriteError, Room, RoomClient

CLIENTS_COUNT = 10


class FakeClient:
    def __init__(self, fail_write=False, fail_close=False):
        self._id = str(uuid.uuid4())
        self.fail_write = fail_write
        self.fail_close = fail_close
        self.received = []
        self.closed = False

    def get_id(self):
        return self._id

    def write(self, msg):
        if self.fail_write:
            raise OSError("the message was returned to the sender")
        self.received.append(msg)

    def close(self):
        if self.fail_close:
            raise OSError("close failed")
        self.closed = True


@pytest.fixture
def log():
    return logging.getLogger("anontalk-tests")


def make_clients(n=CLIENTS_COUNT):
    return [FakeClient() for _ in range(n)]


def test_fake_client_is_accepted_by_room(log):
    client = FakeClient()
    assert isinstance(client, RoomClient)
    room = Room(log, "test-room", client)
    assert client.get_id() in room
    assert len(room) == 1


def test_new_room_good_path(log):
    room = Room(log, "test-room", *make_clients())
    assert len(room) == CLIENTS_COUNT
    assert room.name == "test-room"


def test_room_ids_are_unique_uuids(log):
    first = Room(log, "a")
    second = Room(log, "b")
    assert first.id != second.id
    assert str(uuid.UUID(first.id)) == first.id


def test_room_add_clients_good_path(log):
    clients = make_clients()
    room = Room(log, "test-room")
    room.add_clients(*clients)
    assert len(room) == CLIENTS_COUNT
    assert all(c.get_id() in room for c in clients)


def test_add_same_client_twice_keeps_one(log):
    client = FakeClient()
    room = Room(log, "test-room", client)
    room.add_clients(client)
    assert len(room) == 1


def test_room_delete_clients_good_path(log):
    clients = make_clients()
    room = Room(log, "test-room", *clients)
    room.delete_clients(*(c.get_id() for c in clients))
    assert len(room) == 0


def test_delete_unknown_client_is_ignored(log):
    room = Room(log, "test-room", *make_clients(3))
    room.delete_clients("missing")
    assert len(room) == 3


def test_room_broadcast_good_path(log):
    clients = make_clients(CLIENTS_COUNT - 1)
    sender = FakeClient(fail_write=True)
    room = Room(log, "test-room", *clients, sender)
    room.broadcast(sender.get_id(), "test-message")
    assert all(c.received == ["test-message"] for c in clients)
    assert sender.received == []


def test_broadcast_reports_failed_clients(log):
    good = FakeClient()
    bad = FakeClient(fail_write=True)
    room = Room(log, "test-room", good, bad)
    with pytest.raises(MessageWriteError) as info:
        room.broadcast("", "hello")
    assert info.value.client_ids == [bad.get_id()]
    assert good.received == ["hello"]


def test_close_closes_every_client(log):
    clients = make_clients(4)
    room = Room(log, "test-room", *clients)
    room.close()
    assert all(c.closed for c in clients)


def test_close_raises_when_a_client_fails(log):
    good = FakeClient()
    bad = FakeClient(fail_close=True)
    room = Room(log, "test-room", good, bad)
    with pytest.raises(RuntimeError) as info:
        room.close()
    assert isinstance(info.value.__cause__, OSError)
    assert good.closed