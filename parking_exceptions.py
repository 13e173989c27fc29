class ParkingLocatorError(Exception):
    """Base exception for the parking locator."""


class ConfigError(ParkingLocatorError):
    """Raised when configuration is missing or invalid."""


class RegistryError(ConfigError):
    """Raised when the location registry cannot be initialised."""


class HandlerError(ParkingLocatorError):
    """Raised when handler fails to process query."""


class ExternalServiceError(ParkingLocatorError):
    """Raised when an external service fails (OpenAI)."""


class FacilityDataError(ParkingLocatorError):
    """Raised when a facility file cannot be read."""

