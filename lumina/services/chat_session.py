"""
Chat Session
────────────
One conversation of the "Lumi" chat widget.

send(text):
  1. append the user message
  2. append an empty assistant placeholder (streaming=True)
  3. open a reply stream on the provider's conversation handle
  4. append each fragment to the placeholder; it stays streaming=True until
     the stream is exhausted, then becomes final (streaming=False)

On any provider failure (open, mid-stream, timeout) the placeholder keeps the
text it already has, its streaming flag is cleared, and a separate apology
message is appended. No retry; the user re-submits. Only one send may be in
flight; extra sends are ignored. start() reserves the session synchronously.
"""
import asyncio

from lumina.config.settings import settings
from lumina.models.chat_message import ChatMessage, ChatRole
from lumina.prompts.shopping_prompts import APOLOGY_MESSAGE, GREETING_MESSAGE, SYSTEM_PROMPT
from lumina.services.chat_provider import ChatProvider, OpenAIChatProvider
from lumina.services.fragment_subscription import FragmentSubscription
from lumina.utils.logger import get_logger

logger = get_logger(__name__)

_DEFAULT_TIMEOUT = object()


class ChatListener:
    """Observer for a single send. Override what you need."""

    def on_fragment(self, message: ChatMessage, fragment: str) -> None:
        pass

    def on_complete(self, message: ChatMessage) -> None:
        pass

    def on_error(self, message: ChatMessage, apology: ChatMessage) -> None:
        pass

    def on_cancelled(self, message: ChatMessage) -> None:
        pass


class ChatSession:
    def __init__(
        self,
        provider: ChatProvider | None = None,
        system_prompt: str = SYSTEM_PROMPT,
        greeting: str | None = GREETING_MESSAGE,
        fragment_timeout=_DEFAULT_TIMEOUT,
    ):
        self._provider = provider or OpenAIChatProvider()
        # Created once and reused for every send of this widget
        self._conversation = self._provider.create_conversation(system_prompt)
        self._timeout = (
            settings.chat_fragment_timeout_seconds if fragment_timeout is _DEFAULT_TIMEOUT else fragment_timeout
        )
        self._messages: list[ChatMessage] = []
        self._subscription: FragmentSubscription | None = None
        if greeting:
            self._messages.append(ChatMessage(role=ChatRole.ASSISTANT, text=greeting))

    @property
    def is_busy(self) -> bool:
        return self._subscription is not None

    def messages(self) -> list[ChatMessage]:
        return [m.model_copy() for m in self._messages]

    @property
    def last_message(self) -> ChatMessage | None:
        return self._messages[-1].model_copy() if self._messages else None

    async def send(self, user_text: str, listener: ChatListener | None = None) -> ChatMessage | None:
        """Run one exchange. Returns the assistant placeholder, or None if the send was ignored."""
        task = self.start(user_text, listener)
        if task is None:
            return None
        return await task

    def start(self, user_text: str, listener: ChatListener | None = None) -> "asyncio.Task[ChatMessage] | None":
        """Reserve the session and schedule the reply without yielding to the loop.

        Returns the task resolving to the finished placeholder, or None if the
        send was ignored (blank text, or a reply is still streaming).
        """
        if not user_text or not user_text.strip():
            logger.debug("send — ignored empty message")
            return None
        if self.is_busy:
            logger.info("send — ignored, previous reply still streaming")
            return None

        listener = listener or ChatListener()
        self._messages.append(ChatMessage(role=ChatRole.USER, text=user_text))
        reply = ChatMessage(role=ChatRole.ASSISTANT, text="", streaming=True)
        self._messages.append(reply)

        def apply_fragment(fragment: str) -> None:
            reply.text += fragment
            listener.on_fragment(reply, fragment)

        def finish() -> None:
            reply.streaming = False
            self._subscription = None
            logger.info("send — reply complete id=%s chars=%d", reply.id, len(reply.text))
            listener.on_complete(reply)

        def fail(exc: BaseException) -> None:
            reply.streaming = False
            apology = ChatMessage(role=ChatRole.ASSISTANT, text=APOLOGY_MESSAGE)
            self._messages.append(apology)
            self._subscription = None
            logger.error("send — chat provider error, apology appended: %s", exc)
            listener.on_error(reply, apology)

        def cancelled() -> None:
            reply.streaming = False
            self._subscription = None
            listener.on_cancelled(reply)

        self._subscription = FragmentSubscription(
            open_source=lambda: self._provider.open_stream(self._conversation, user_text),
            on_fragment=apply_fragment,
            on_complete=finish,
            on_error=fail,
            on_cancelled=cancelled,
            timeout=self._timeout,
        )
        logger.info("send — user message chars=%d transcript=%d", len(user_text), len(self._messages))
        return asyncio.ensure_future(self._await_reply(self._subscription, reply))

    @staticmethod
    async def _await_reply(subscription: FragmentSubscription, reply: ChatMessage) -> ChatMessage:
        await subscription.run()
        return reply.model_copy()

    def cancel(self) -> bool:
        """Stop the in-flight reply, keeping what has streamed so far. No apology is added."""
        if self._subscription is None:
            return False
        return self._subscription.cancel()
