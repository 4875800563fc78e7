from __future__ import annotations


class MultipassError(RuntimeError):
    """Base class for every failure raised by this package."""


class ConfigurationError(MultipassError):
    """Invalid secret or store URL, or a broken hash primitive."""


class ValidationError(MultipassError, TypeError):
    """Customer data or token input of the wrong shape."""


class EncryptionError(MultipassError):
    pass


class TokenGenerationError(MultipassError):
    def __init__(self, message: str = "Token generation failed.") -> None:
        super().__init__(message)


class UrlConstructionError(MultipassError):
    pass


class TokenVerificationError(MultipassError):
    def __init__(self, message: str = "Token verification failed.") -> None:
        super().__init__(message)
