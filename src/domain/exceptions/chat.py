class ChatError(Exception):
    """Base exception for chat request failures.

    Carries the HTTP status the failure is reported with.
    """

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code

    @property
    def message(self) -> str:
        return str(self)


class RateLimitExceeded(ChatError):
    status_code = 429

    def __init__(self, message: str = "Rate limit exceeded. Please try again later.") -> None:
        super().__init__(message)


class PaymentRequired(ChatError):
    status_code = 402

    def __init__(self, message: str = "Payment required. Please add credits.") -> None:
        super().__init__(message)


class ChatGatewayError(ChatError):
    """Generic upstream failure (non-2xx, malformed answer, transport error)."""
