from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ChatRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True, slots=True)
class ChatAnswer:
    """Raw answer as produced by the AI gateway."""

    answer: str
    search_query: str


@dataclass(frozen=True, slots=True)
class ChatReply:
    answer: str
    youtube_links: tuple[str, str, str]
    search_query: str


@dataclass(frozen=True, slots=True)
class ChatMessage:
    role: ChatRole
    content: str
    youtube_links: tuple[str, ...] = field(default_factory=tuple)
    search_query: str | None = None
