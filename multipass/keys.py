from __future__ import annotations

import hashlib
from dataclasses import dataclass

from .constants import DIGEST_SIZE, KEY_SIZE
from .errors import ConfigurationError


@dataclass(frozen=True)
class KeyPair:
    encryption_key: bytes
    signature_key: bytes

    def __post_init__(self) -> None:
        for name in ("encryption_key", "signature_key"):
            value = getattr(self, name)
            if not isinstance(value, bytes) or len(value) != KEY_SIZE:
                raise ConfigurationError(f"{name} must be exactly {KEY_SIZE} bytes.")

    def __repr__(self) -> str:
        return "KeyPair(encryption_key=<redacted>, signature_key=<redacted>)"


def derive_keys(secret: str) -> KeyPair:
    """Split the SHA-256 digest of the multipass secret into two 16-byte keys.

    The first half encrypts, the second half signs. The secret is hashed as
    given; surrounding whitespace only matters for the blank check.
    """
    if not isinstance(secret, str) or not secret.strip():
        raise ConfigurationError("Invalid multipass secret: expected a non-empty string.")

    try:
        encoded = secret.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ConfigurationError("Invalid multipass secret: not encodable as UTF-8.") from exc

    digest = hashlib.sha256(encoded).digest()
    if len(digest) != DIGEST_SIZE:
        raise ConfigurationError("Unexpected SHA-256 digest length; check the hashlib build.")

    return KeyPair(
        encryption_key=digest[:KEY_SIZE],
        signature_key=digest[KEY_SIZE:],
    )
