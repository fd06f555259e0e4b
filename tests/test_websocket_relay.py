import asyncio

from fastapi.testclient import TestClient

from school_connect.realtime.relay import ConnectionManager, WELCOME_FRAME


class FakeSocket:
    def __init__(self, fail: bool = False):
        self.sent = []
        self.accepted = False
        self.fail = fail

    async def accept(self):
        self.accepted = True

    async def send_json(self, frame):
        if self.fail:
            raise RuntimeError("socket closed")
        self.sent.append(frame)


def test_welcome_frame_on_connect(client: TestClient):
    with client.websocket_connect("/ws") as ws:
        assert ws.receive_json() == WELCOME_FRAME


def test_chat_frame_relayed_to_other_clients_only(client: TestClient):
    chat = {"type": "chat", "chatId": 101, "senderId": 1, "content": "Hello from the classroom"}
    reply = {"type": "chat", "chatId": 101, "senderId": 2, "content": "Hi!"}

    with client.websocket_connect("/ws") as sender, client.websocket_connect("/ws") as receiver:
        sender.receive_json()
        receiver.receive_json()

        sender.send_json(chat)
        assert receiver.receive_json() == chat

        receiver.send_json(reply)
        # Had the sender been echoed its own frame, it would arrive before the reply
        assert sender.receive_json() == reply


def test_notification_frame_relayed_verbatim(client: TestClient):
    frame = {"type": "notification", "userId": 2, "title": "Grade posted", "extra": {"nested": [1, 2]}}

    with client.websocket_connect("/ws") as sender, client.websocket_connect("/ws") as receiver:
        sender.receive_json()
        receiver.receive_json()

        sender.send_json(frame)
        assert receiver.receive_json() == frame


def test_unknown_and_malformed_frames_are_dropped(client: TestClient):
    chat = {"type": "chat", "content": "still here"}

    with client.websocket_connect("/ws") as sender, client.websocket_connect("/ws") as receiver:
        sender.receive_json()
        receiver.receive_json()

        sender.send_json({"type": "typing", "userId": 1})
        sender.send_text("this is not json")
        sender.send_json(["not", "an", "object"])
        sender.send_json(chat)

        assert receiver.receive_json() == chat


def test_broadcast_skips_sender():
    manager = ConnectionManager()
    a, b, c = FakeSocket(), FakeSocket(), FakeSocket()

    async def scenario():
        for socket in (a, b, c):
            await manager.connect(socket)
        return await manager.broadcast({"type": "chat"}, sender=a)

    delivered = asyncio.run(scenario())

    assert delivered == 2
    assert a.sent == []
    assert b.sent == [{"type": "chat"}]
    assert c.sent == [{"type": "chat"}]
    assert all(s.accepted for s in (a, b, c))


def test_failed_socket_is_dropped():
    manager = ConnectionManager()
    healthy, broken = FakeSocket(), FakeSocket(fail=True)

    async def scenario():
        await manager.connect(healthy)
        await manager.connect(broken)
        return await manager.handle_frame(None, '{"type": "notification", "title": "x"}')

    delivered = asyncio.run(scenario())

    assert delivered == 1
    assert manager.active_connections == [healthy]


def test_disconnect_removes_connection():
    manager = ConnectionManager()
    socket = FakeSocket()

    asyncio.run(manager.connect(socket))
    manager.disconnect(socket)
    manager.disconnect(socket)

    assert manager.active_connections == []


def test_binary_frames_are_parsed_and_relaying_continues(client: TestClient):
    chat = {"type": "chat", "content": "after binary"}

    with client.websocket_connect("/ws") as sender, client.websocket_connect("/ws") as receiver:
        sender.receive_json()
        receiver.receive_json()

        sender.send_bytes(b"\x00\xffnot json")
        sender.send_bytes(b'{"type": "notification", "title": "binary"}')
        assert receiver.receive_json() == {"type": "notification", "title": "binary"}

        sender.send_json(chat)
        assert receiver.receive_json() == chat
