import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from school_connect.realtime.relay import manager, WELCOME_FRAME

logger = logging.getLogger(__name__)

router = APIRouter(tags=["realtime"])


@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    await manager.connect(websocket)
    try:
        await websocket.send_json(WELCOME_FRAME)
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", 1000))

            # Binary frames are parsed like text ones
            raw = message.get("text")
            if raw is None and message.get("bytes") is not None:
                raw = message["bytes"].decode("utf-8", errors="replace")
            if raw is None:
                continue
            await manager.handle_frame(websocket, raw)
    except WebSocketDisconnect:
        manager.disconnect(websocket)
    except Exception as e:
        logger.error(f"WebSocket Error: {e}")
        manager.disconnect(websocket)
        try:
            await websocket.close(code=1011)
        except RuntimeError as close_error:
            logger.debug(f"WebSocket already closed: {close_error}")
