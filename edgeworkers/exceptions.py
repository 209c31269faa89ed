"""
Exception hierarchy for the EdgeWorkers SDK.

All custom exceptions inherit from EdgeWorkersError base class.
"""

from typing import Any, Optional


class EdgeWorkersError(Exception):
    """Base exception for all EdgeWorkers SDK errors."""
    pass


# Configuration Errors
class ConfigurationError(EdgeWorkersError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid or malformed."""
    pass


class ConfigurationLoadError(ConfigurationError):
    """Raised when configuration cannot be loaded."""
    pass


class CredentialsNotFoundError(ConfigurationError):
    """Raised when no EdgeGrid credentials exist for the requested section."""
    pass


# SDK Errors
class SDKError(EdgeWorkersError):
    """Base exception for SDK client errors."""
    pass


class SDKConfigurationError(SDKError):
    """Raised when the SDK client is misconfigured."""
    pass


class OperationError(SDKError):
    """Raised when an API operation fails.

    The ``operation`` attribute names the failing call (for example
    ``"list deactivations"``) and prefixes the message.
    """

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        self.message = message
        super().__init__(f"{operation}: {message}")


class StructValidationError(OperationError):
    """Raised when a request object fails local validation.

    No network call is made when this is raised.
    """

    def __init__(self, operation: str, errors: Any) -> None:
        self.errors = errors
        super().__init__(operation, f"struct validation: {errors}")


class RequestFailedError(OperationError):
    """Raised when the transport could not complete the request."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        super().__init__(operation, f"request failed: {cause}")


class ResponseDecodeError(OperationError):
    """Raised when a success response body cannot be decoded."""
    pass
