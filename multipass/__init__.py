from __future__ import annotations

from .codec import Multipass
from .constants import APP_VERSION
from .errors import (
    ConfigurationError,
    EncryptionError,
    MultipassError,
    TokenGenerationError,
    TokenVerificationError,
    UrlConstructionError,
    ValidationError,
)
from .keys import KeyPair, derive_keys
from .models import CustomerAddress, CustomerData

__version__ = APP_VERSION

__all__ = [
    "ConfigurationError",
    "CustomerAddress",
    "CustomerData",
    "EncryptionError",
    "KeyPair",
    "Multipass",
    "MultipassError",
    "TokenGenerationError",
    "TokenVerificationError",
    "UrlConstructionError",
    "ValidationError",
    "derive_keys",
]
