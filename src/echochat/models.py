"""Data models for the echo loop.

A loop run is described by:
1. ``LoopState`` - where the loop is in its two-state lifecycle
2. ``InputKind`` - how a single input line was classified
3. ``ExitReason`` - why a run ended (exit sentinel or end-of-input)
4. ``ChatMessage`` - one user line or assistant reply
5. ``LoopResult`` - what a finished run returns (exit reason, turns, transcript)

Nothing here is persisted. The transcript is opt-in and lives only as long
as the ``LoopResult`` that carries it.
"""

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, Field


class LoopState(StrEnum):
    """Lifecycle of an echo loop. TERMINATED is absorbing."""

    AWAITING_INPUT = "awaiting_input"
    TERMINATED = "terminated"


class InputKind(StrEnum):
    """Classification of one input line."""

    EXIT = "exit"
    EMPTY = "empty"
    TEXT = "text"


class ExitReason(StrEnum):
    """Why a loop run ended."""

    SENTINEL = "sentinel"
    END_OF_INPUT = "end_of_input"


class ChatMessage(BaseModel):
    """One side of an exchange in the transcript."""

    role: Literal["user", "assistant"]
    content: str

    @classmethod
    def user(cls, content: str) -> "ChatMessage":
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, content: str) -> "ChatMessage":
        return cls(role="assistant", content=content)


class LoopResult(BaseModel):
    """Outcome of a finished loop run."""

    exit_reason: ExitReason
    turns: int = Field(default=0, description="Lines handled, excluding the sentinel")
    transcript: list[ChatMessage] = Field(
        default_factory=list,
        description="User lines and assistant replies, in order (opt-in)",
    )
