"""
Shared test helpers.

ScriptedChatProvider stands in for the generative-text service: it replays a
fixed list of fragments and can fail on open, fail after N fragments, stall
for a while, or hold every fragment until a gate is opened.
"""
import asyncio

import pytest

from lumina.errors import ChatProviderError
from lumina.main import create_app
from lumina.services.chat_provider import Conversation
from lumina.services.chat_session import ChatSession
from lumina.stores.session_store import SessionStore
from lumina.storefront import Storefront


class ScriptedChatProvider:
    def __init__(
        self,
        fragments=(),
        fail_on_open: bool = False,
        fail_after: int | None = None,
        stall_seconds: float = 0.0,
    ):
        self.fragments = list(fragments)
        self.fail_on_open = fail_on_open
        self.fail_after = fail_after
        self.stall_seconds = stall_seconds
        self.gate: asyncio.Event | None = None
        self.conversations: list[Conversation] = []
        self.sent: list[tuple[Conversation, str]] = []

    def create_conversation(self, system_prompt: str) -> Conversation:
        conversation = Conversation(system_prompt)
        self.conversations.append(conversation)
        return conversation

    async def open_stream(self, conversation: Conversation, text: str):
        self.sent.append((conversation, text))
        if self.fail_on_open:
            raise ChatProviderError("provider unavailable")
        return self._fragments()

    async def _fragments(self):
        for i, fragment in enumerate(self.fragments):
            if self.fail_after is not None and i >= self.fail_after:
                raise ChatProviderError("stream broke")
            if self.stall_seconds:
                await asyncio.sleep(self.stall_seconds)
            if self.gate is not None:
                await self.gate.wait()
            yield fragment
        if self.fail_after is not None and self.fail_after >= len(self.fragments):
            raise ChatProviderError("stream broke")


@pytest.fixture
def scripted_provider():
    return ScriptedChatProvider(["안녕", "하세요"])


@pytest.fixture
def storefront(scripted_provider):
    return Storefront(
        session=SessionStore(delay_seconds=0),
        chat=ChatSession(provider=scripted_provider, fragment_timeout=None),
    )


@pytest.fixture
def client(storefront):
    from fastapi.testclient import TestClient

    app = create_app(storefront=storefront)
    with TestClient(app) as test_client:
        yield test_client
