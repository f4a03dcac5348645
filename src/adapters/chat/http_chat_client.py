from __future__ import annotations

from dataclasses import dataclass

import httpx

from src.domain.exceptions import ChatError, ChatGatewayError
from src.domain.models.chat import ChatReply


@dataclass(slots=True)
class HttpChatClient:
    """Caller side of POST /chat.

    ``{"error": ...}`` responses are raised as ChatError with the response
    status, so a conversation can show the message as-is.
    """

    base_url: str
    timeout_s: float | None = None
    transport: httpx.AsyncBaseTransport | None = None

    async def ask(self, message: str) -> ChatReply:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout_s,
                transport=self.transport,
            ) as client:
                resp = await client.post("/chat", json={"message": message})
        except httpx.HTTPError as exc:
            raise ChatGatewayError(f"Chat service unreachable: {exc}") from exc

        try:
            body = resp.json()
        except ValueError:
            body = {}

        if not resp.is_success:
            error = body.get("error") if isinstance(body, dict) else None
            raise ChatError(
                str(error or f"Chat request failed: {resp.status_code}"),
                status_code=resp.status_code,
            )

        try:
            links = tuple(body["youtubeLinks"])
            return ChatReply(
                answer=str(body["answer"]),
                youtube_links=(links[0], links[1], links[2]),
                search_query=str(body["searchQuery"]),
            )
        except (KeyError, IndexError, TypeError) as exc:
            raise ChatGatewayError("Malformed chat response") from exc
