"""Exceptions raised by the image generation client.

Every error carries a message meant to be shown to the user as-is.
"""


class GenerationError(Exception):
    """Base class for failures while generating an image."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(GenerationError):
    """The API credential is missing. Raised before any request is sent."""

    pass


class ServiceError(GenerationError):
    """The image service or the transport to it failed."""

    pass


class RefusalError(GenerationError):
    """The service answered but returned text instead of an image."""

    pass
