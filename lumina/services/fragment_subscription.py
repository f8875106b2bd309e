"""
Fragment subscription
─────────────────────
Consumes one fragment source on its own asyncio task and reports exactly one
terminal signal:

    on_fragment(text)*  then  on_complete()
                        or    on_error(exc)
                        or    on_cancelled()

Fragments are applied strictly in arrival order; empty fragments are skipped.
Opening the source and every wait for the next fragment are bounded by
``timeout`` (None = wait forever); an expired wait counts as a failure.
"""
import asyncio
from typing import AsyncIterable, Awaitable, Callable

from lumina.utils.logger import get_logger

logger = get_logger(__name__)


class FragmentSubscription:
    def __init__(
        self,
        open_source: Callable[[], Awaitable[AsyncIterable[str]]],
        on_fragment: Callable[[str], None],
        on_complete: Callable[[], None],
        on_error: Callable[[BaseException], None],
        on_cancelled: Callable[[], None],
        timeout: float | None = None,
    ):
        self._open_source = open_source
        self._on_fragment = on_fragment
        self._on_complete = on_complete
        self._on_error = on_error
        self._on_cancelled = on_cancelled
        self._timeout = timeout
        self._task: asyncio.Task | None = None
        self._signalled = False
        self.fragments_received = 0

    @property
    def done(self) -> bool:
        return self._task is not None and self._task.done()

    async def run(self) -> None:
        """Start consumption and wait until a terminal signal was delivered."""
        if self._task is not None:
            raise RuntimeError("FragmentSubscription can only be run once")
        self._task = asyncio.ensure_future(self._drive())
        # asyncio.wait never raises the task's outcome, cancellation included
        await asyncio.wait([self._task])
        # Cancelled before its first step: _drive never got to signal
        if not self._signalled:
            self._signalled = True
            self._on_cancelled()

    def cancel(self) -> bool:
        if self._task is None or self._task.done():
            return False
        return self._task.cancel()

    async def _drive(self) -> None:
        try:
            await self._consume()
        except asyncio.CancelledError:
            logger.info("subscription cancelled after %d fragment(s)", self.fragments_received)
            self._signalled = True
            self._on_cancelled()
            raise
        except Exception as e:
            logger.error("subscription failed after %d fragment(s): %r", self.fragments_received, e)
            self._signalled = True
            self._on_error(e)
        else:
            self._signalled = True
            self._on_complete()

    async def _consume(self) -> None:
        source = await asyncio.wait_for(self._open_source(), self._timeout)
        iterator = aiter(source)
        try:
            while True:
                try:
                    fragment = await asyncio.wait_for(anext(iterator), self._timeout)
                except StopAsyncIteration:
                    return
                if not fragment:
                    continue
                self.fragments_received += 1
                self._on_fragment(fragment)
        finally:
            aclose = getattr(iterator, "aclose", None)
            if aclose is not None:
                await aclose()
