class ConfigError(Exception):
    """Raised when static route/vehicle configuration is malformed."""


class UnknownVehicle(LookupError):
    """Raised when a vehicle id is not part of the roster."""
