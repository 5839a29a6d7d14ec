"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class PokefetchError(Exception):
    """Base exception for all application-specific errors."""


class ApiRequestError(PokefetchError):
    """Raised when the API request cannot be completed or its body cannot be read."""


class UnexpectedStatusError(PokefetchError):
    """Raised when a server answers with anything other than HTTP 200."""

    def __init__(self, status: int):
        super().__init__(f"unexpected status code: {status}")
        self.status = status


class MalformedResponseError(PokefetchError):
    """Raised when the API body is not valid JSON or does not match the schema."""


class SpriteDownloadError(PokefetchError):
    """Raised when a sprite image cannot be downloaded."""


class SpriteSaveError(PokefetchError):
    """Raised when a downloaded sprite cannot be written to disk."""


class ConfigurationError(PokefetchError):
    """Raised for issues related to configuration loading or validation."""
