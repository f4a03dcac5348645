from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ChatRequestSchema(BaseModel):
    message: str


class ChatResponseSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    answer: str
    youtube_links: list[str] = Field(..., alias="youtubeLinks")
    search_query: str = Field(..., alias="searchQuery")


class ChatErrorSchema(BaseModel):
    error: str
