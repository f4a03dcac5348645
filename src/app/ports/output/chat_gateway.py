from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models.chat import ChatAnswer


class IChatGateway(ABC):
    """Port for the remote AI service answering student questions.

    Implementations raise ChatError subclasses on failure.
    """

    @abstractmethod
    async def ask(self, message: str) -> ChatAnswer:
        raise NotImplementedError
