from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any

import httpx

from src.app.ports.output import IChatGateway
from src.domain.exceptions import ChatGatewayError, PaymentRequired, RateLimitExceeded
from src.domain.models.chat import ChatAnswer

DEFAULT_GATEWAY_URL = "https://ai.gateway.lovable.dev/v1/chat/completions"
DEFAULT_MODEL = "google/gemini-2.5-flash"

SYSTEM_PROMPT = (
    "You are a helpful study assistant for students. Provide clear, concise "
    "answers to student questions. Always be encouraging and supportive. "
    "After answering, suggest a relevant YouTube search query that would "
    "help the student learn more about the topic."
)

ANSWER_TOOL_NAME = "provide_answer_with_youtube"

ANSWER_TOOL: dict[str, Any] = {
    "type": "function",
    "function": {
        "name": ANSWER_TOOL_NAME,
        "description": (
            "Provide an answer to the student's question along with a "
            "YouTube search query"
        ),
        "parameters": {
            "type": "object",
            "properties": {
                "answer": {
                    "type": "string",
                    "description": "Clear, student-friendly answer to the question",
                },
                "youtubeQuery": {
                    "type": "string",
                    "description": (
                        "A search query optimized for finding relevant "
                        "educational YouTube videos"
                    ),
                },
            },
            "required": ["answer", "youtubeQuery"],
        },
    },
}


@dataclass(slots=True)
class HttpAiGateway(IChatGateway):
    """OpenAI-compatible chat-completions client forcing a single tool call.

    Env vars:
      - AI_GATEWAY_URL: chat completions endpoint
      - AI_GATEWAY_API_KEY: bearer token (required)
      - AI_GATEWAY_MODEL: model name
      - AI_GATEWAY_TIMEOUT_S: request timeout; unset means no timeout

    Notes:
      - One request per question, no retry.
      - Upstream 429/402 are surfaced as RateLimitExceeded/PaymentRequired.
    """

    url: str | None = None
    api_key: str | None = None
    model: str | None = None
    timeout_s: float | None = None
    transport: httpx.AsyncBaseTransport | None = None

    def __post_init__(self) -> None:
        if self.url is None:
            self.url = os.getenv("AI_GATEWAY_URL") or DEFAULT_GATEWAY_URL
        if self.api_key is None:
            self.api_key = os.getenv("AI_GATEWAY_API_KEY")
        if self.model is None:
            self.model = os.getenv("AI_GATEWAY_MODEL") or DEFAULT_MODEL
        if self.timeout_s is None and os.getenv("AI_GATEWAY_TIMEOUT_S"):
            self.timeout_s = float(os.environ["AI_GATEWAY_TIMEOUT_S"])

    def _payload(self, message: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": message},
            ],
            "tools": [ANSWER_TOOL],
            "tool_choice": {
                "type": "function",
                "function": {"name": ANSWER_TOOL_NAME},
            },
        }

    async def ask(self, message: str) -> ChatAnswer:
        if not self.api_key:
            raise ChatGatewayError("AI_GATEWAY_API_KEY is not configured")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_s, transport=self.transport
            ) as client:
                resp = await client.post(
                    str(self.url), headers=headers, json=self._payload(message)
                )
        except httpx.HTTPError as exc:
            raise ChatGatewayError(f"AI Gateway unreachable: {exc}") from exc

        if resp.status_code == 429:
            raise RateLimitExceeded()
        if resp.status_code == 402:
            raise PaymentRequired()
        if not resp.is_success:
            raise ChatGatewayError(f"AI Gateway error: {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as exc:
            raise ChatGatewayError("AI Gateway returned invalid JSON") from exc

        return _parse_tool_call(data)


def _parse_tool_call(data: Any) -> ChatAnswer:
    try:
        tool_calls = data["choices"][0]["message"].get("tool_calls") or []
    except (KeyError, IndexError, TypeError, AttributeError):
        tool_calls = []
    if not tool_calls:
        raise ChatGatewayError("No tool call in response")

    try:
        arguments = json.loads(tool_calls[0]["function"]["arguments"])
        answer = arguments["answer"]
        query = arguments["youtubeQuery"]
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        raise ChatGatewayError(f"Malformed tool call arguments: {exc}") from exc

    if not isinstance(answer, str) or not isinstance(query, str):
        raise ChatGatewayError("Malformed tool call arguments")

    return ChatAnswer(answer=answer, search_query=query)
