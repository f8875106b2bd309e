"""
Chat Message Model
──────────────────
One entry of the chat widget transcript.

Assistant messages go through:
    pending (text="", streaming=True)
      → streaming (partial text, streaming=True) *
      → final (streaming=False)
On provider failure the placeholder keeps whatever text it had and a separate
apology message is appended after it.
"""
import itertools
import time
from enum import Enum

from pydantic import BaseModel, Field

# Millisecond timestamp prefix + process-wide counter: unique and increasing.
_sequence = itertools.count(1)


def next_message_id() -> str:
    return f"{int(time.time() * 1000)}-{next(_sequence)}"


class ChatRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    id: str = Field(default_factory=next_message_id)
    role: ChatRole
    text: str = ""
    streaming: bool = False
