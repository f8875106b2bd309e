"""
Chat widget endpoints
─────────────────────
POST /api/chat/messages streams the assistant reply as plain-text fragments
while it arrives. The send itself runs on its own task and hands fragments to
the response through a queue, so a client that disconnects mid-reply does not
stop the transcript from being completed.
"""
import asyncio

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from lumina.models.chat_message import ChatMessage
from lumina.routes.dependencies import get_storefront
from lumina.services.chat_session import ChatListener
from lumina.storefront import Storefront
from lumina.utils.logger import get_logger

router = APIRouter(prefix="/api/chat", tags=["chat"])
logger = get_logger(__name__)

# Strong references so in-flight sends are not garbage-collected mid-stream
_background_sends: set[asyncio.Task] = set()


class ChatSendRequest(BaseModel):
    text: str


class _QueueListener(ChatListener):
    def __init__(self):
        self.queue: asyncio.Queue[str | None] = asyncio.Queue()

    def on_fragment(self, message: ChatMessage, fragment: str) -> None:
        self.queue.put_nowait(fragment)

    def on_complete(self, message: ChatMessage) -> None:
        self.queue.put_nowait(None)

    def on_error(self, message: ChatMessage, apology: ChatMessage) -> None:
        self.queue.put_nowait(None)

    def on_cancelled(self, message: ChatMessage) -> None:
        self.queue.put_nowait(None)


def _transcript(storefront: Storefront) -> dict:
    return {
        "busy": storefront.chat.is_busy,
        "is_open": storefront.chat_open,
        "messages": [m.model_dump(mode="json") for m in storefront.chat.messages()],
    }


@router.get("/messages")
async def get_messages(storefront: Storefront = Depends(get_storefront)):
    return _transcript(storefront)


@router.post("/messages")
async def send_message(body: ChatSendRequest, storefront: Storefront = Depends(get_storefront)):
    if not body.text.strip():
        raise HTTPException(status_code=400, detail="Message is empty.")

    listener = _QueueListener()
    task = storefront.chat.start(body.text, listener)
    if task is None:
        raise HTTPException(status_code=409, detail="A reply is still streaming.")
    _background_sends.add(task)
    task.add_done_callback(_background_sends.discard)
    # Also ends the relay if the task dies without a terminal signal
    task.add_done_callback(lambda _: listener.queue.put_nowait(None))

    async def _relay():
        while True:
            fragment = await listener.queue.get()
            if fragment is None:
                break
            yield fragment

    return StreamingResponse(_relay(), media_type="text/plain; charset=utf-8")


@router.post("/toggle")
async def toggle_chat(storefront: Storefront = Depends(get_storefront)):
    return {"is_open": storefront.toggle_chat()}


@router.post("/cancel")
async def cancel_reply(storefront: Storefront = Depends(get_storefront)):
    return {"cancelled": storefront.chat.cancel()}
