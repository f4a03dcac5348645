from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable

from src.domain.exceptions import ChatError
from src.domain.models.chat import ChatMessage, ChatReply, ChatRole

logger = logging.getLogger(__name__)

GREETING = (
    "Hi there! I'm your study buddy! Ask me anything about your homework, "
    "projects, or topics you're learning. I'll help explain things clearly "
    "and suggest YouTube videos to help you learn more!"
)

FALLBACK_ERROR = "Please try asking your question again."

AskFn = Callable[[str], Awaitable[ChatReply]]


@dataclass(slots=True)
class ChatConversation:
    """Client-side chat history.

    Only one request may be in flight. The user's message and the answer
    are committed together on success; on failure the history stays as it
    was and ``last_error`` holds the notice to show.
    """

    ask: AskFn
    messages: list[ChatMessage] = field(
        default_factory=lambda: [ChatMessage(role=ChatRole.ASSISTANT, content=GREETING)]
    )
    is_loading: bool = False
    last_error: str | None = None

    @property
    def can_submit(self) -> bool:
        return not self.is_loading

    async def submit(self, text: str) -> ChatMessage | None:
        """Send a message; return the assistant reply, or None if not sent/failed."""

        if not text.strip() or self.is_loading:
            return None

        self.is_loading = True
        self.last_error = None
        try:
            reply = await self.ask(text)
        except ChatError as exc:
            logger.warning("Chat request failed: %s", exc)
            self.last_error = exc.message or FALLBACK_ERROR
            return None
        finally:
            self.is_loading = False

        assistant = ChatMessage(
            role=ChatRole.ASSISTANT,
            content=reply.answer,
            youtube_links=reply.youtube_links,
            search_query=reply.search_query,
        )
        self.messages.extend([ChatMessage(role=ChatRole.USER, content=text), assistant])
        return assistant
