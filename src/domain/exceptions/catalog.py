class AlertNotFound(LookupError):
    """Raised when an alert id does not exist (or was dismissed)."""


class UnknownTicket(LookupError):
    """Raised when a ticket id is not offered."""
