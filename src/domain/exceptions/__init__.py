from .catalog import AlertNotFound, UnknownTicket
from .chat import ChatError, ChatGatewayError, PaymentRequired, RateLimitExceeded
from .fleet import ConfigError, UnknownVehicle

__all__ = [
    "AlertNotFound",
    "ChatError",
    "ChatGatewayError",
    "ConfigError",
    "PaymentRequired",
    "RateLimitExceeded",
    "UnknownTicket",
    "UnknownVehicle",
]
