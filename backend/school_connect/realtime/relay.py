"""
WebSocket relay for chat and notification frames.

Frames are JSON objects carrying a `type` field. `chat` and `notification`
frames are re-emitted unchanged to every other connected socket; there is no
addressing, acknowledgement or replay.
"""
import json
import logging
from typing import Any, Dict, List, Optional

from fastapi import WebSocket

logger = logging.getLogger(__name__)

RELAYED_TYPES = ("chat", "notification")

WELCOME_FRAME = {
    "type": "connection",
    "message": "Connected to School Connect WebSocket server",
}


class ConnectionManager:
    """Keeps the list of open sockets and fans frames out to them."""

    def __init__(self) -> None:
        self.active_connections: List[WebSocket] = []

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.active_connections.append(websocket)
        logger.info(f"WebSocket client connected. Total connections: {len(self.active_connections)}")

    def disconnect(self, websocket: WebSocket) -> None:
        if websocket in self.active_connections:
            self.active_connections.remove(websocket)
            logger.info(f"WebSocket client disconnected. Remaining connections: {len(self.active_connections)}")

    async def broadcast(self, frame: Dict[str, Any], sender: Optional[WebSocket] = None) -> int:
        """
        Send `frame` to every connection except `sender`.

        Returns:
            Number of sockets the frame was delivered to. Sockets that fail
            on send are dropped from the relay.
        """
        delivered = 0
        for connection in list(self.active_connections):
            if connection is sender:
                continue
            try:
                await connection.send_json(frame)
                delivered += 1
            except Exception as e:
                logger.warning(f"Dropping WebSocket client after failed send: {type(e).__name__}: {e}")
                self.disconnect(connection)
        return delivered

    async def handle_frame(self, sender: WebSocket, raw: str) -> int:
        """Parse one incoming text frame and relay it when its type is known."""
        try:
            frame = json.loads(raw)
        except ValueError as e:
            logger.error(f"Error processing WebSocket message: {e}")
            return 0

        if not isinstance(frame, dict):
            logger.error(f"Ignoring WebSocket frame that is not a JSON object: {raw[:100]}")
            return 0

        frame_type = frame.get("type")
        if frame_type not in RELAYED_TYPES:
            logger.info(f"Unknown message type: {frame_type}")
            return 0

        logger.debug(f"Relaying {frame_type} frame")
        return await self.broadcast(frame, sender=sender)


manager = ConnectionManager()
