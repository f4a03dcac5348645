from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import quote

from src.app.ports.output import IChatGateway
from src.domain.exceptions import ChatError, ChatGatewayError
from src.domain.models.chat import ChatReply

logger = logging.getLogger(__name__)

YOUTUBE_SEARCH_URL = "https://www.youtube.com/results?search_query="

# Characters encodeURIComponent leaves untouched besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def build_youtube_links(search_query: str) -> tuple[str, str, str]:
    """Plain, tutorial and explainer video-search links for a query."""

    return (
        YOUTUBE_SEARCH_URL + encode_uri_component(search_query),
        YOUTUBE_SEARCH_URL + encode_uri_component(search_query + " tutorial"),
        YOUTUBE_SEARCH_URL + encode_uri_component(search_query + " explained"),
    )


@dataclass(slots=True)
class ChatService:
    """Single request/response exchange with the AI gateway. No retries."""

    gateway: IChatGateway

    async def ask(self, message: str) -> ChatReply:
        logger.info("Processing student query: %s", message)
        try:
            answer = await self.gateway.ask(message)
        except ChatError:
            logger.exception("Chat gateway failed")
            raise
        except Exception as exc:
            logger.exception("Unexpected chat gateway failure")
            raise ChatGatewayError(str(exc) or exc.__class__.__name__) from exc

        return ChatReply(
            answer=answer.answer,
            youtube_links=build_youtube_links(answer.search_query),
            search_query=answer.search_query,
        )
