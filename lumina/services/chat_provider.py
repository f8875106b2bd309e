"""
Chat provider boundary
──────────────────────
What the chat widget needs from a generative-text service:

  1. create_conversation(system_prompt) – once per widget, keeps the history
  2. open_stream(conversation, text)     – start a reply to ``text`` and return
     a finite, ordered, forward-only async iterator of text fragments

Either step may raise ChatProviderError. The OpenAI implementation records a
turn in the conversation history only after its stream finished cleanly, so a
failed reply never pollutes the next request.
"""
from typing import AsyncIterator, Protocol

from openai import AsyncOpenAI, OpenAIError

from lumina.config.settings import settings
from lumina.errors import ChatProviderError
from lumina.utils.logger import get_logger

logger = get_logger(__name__)


class Conversation:
    """Per-widget conversation handle: system prompt + completed turns."""

    def __init__(self, system_prompt: str):
        self.system_prompt = system_prompt
        self.turns: list[dict[str, str]] = []

    def as_messages(self) -> list[dict[str, str]]:
        return [{"role": "system", "content": self.system_prompt}, *self.turns]

    def record_turn(self, user_text: str, reply_text: str) -> None:
        self.turns.append({"role": "user", "content": user_text})
        self.turns.append({"role": "assistant", "content": reply_text})


class ChatProvider(Protocol):
    def create_conversation(self, system_prompt: str) -> Conversation:
        ...

    async def open_stream(self, conversation: Conversation, text: str) -> AsyncIterator[str]:
        ...


class OpenAIChatProvider:
    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        max_tokens: int | None = None,
        client: AsyncOpenAI | None = None,
    ):
        self.api_key = api_key or settings.openai_api_key
        self.model = model or settings.chat_model
        self.max_tokens = max_tokens or settings.chat_max_tokens
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        """Created lazily so the storefront boots without an API key."""
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.api_key)
        return self._client

    def create_conversation(self, system_prompt: str) -> Conversation:
        return Conversation(system_prompt)

    async def open_stream(self, conversation: Conversation, text: str) -> AsyncIterator[str]:
        messages = [*conversation.as_messages(), {"role": "user", "content": text}]
        logger.info("open_stream — model=%s history_turns=%d", self.model, len(conversation.turns) // 2)
        try:
            stream = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=self.max_tokens,
                stream=True,
            )
        except OpenAIError as e:
            raise ChatProviderError(f"Could not open chat stream: {e}") from e
        return self._fragments(conversation, text, stream)

    async def _fragments(self, conversation: Conversation, text: str, stream) -> AsyncIterator[str]:
        parts: list[str] = []
        try:
            async for chunk in stream:
                if not chunk.choices:
                    continue
                delta = chunk.choices[0].delta.content
                if delta:
                    parts.append(delta)
                    yield delta
        except OpenAIError as e:
            raise ChatProviderError(f"Chat stream failed: {e}") from e
        finally:
            # Releases the HTTP response on timeout and cancel as well
            await stream.close()
        conversation.record_turn(text, "".join(parts))
