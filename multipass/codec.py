from __future__ import annotations

import os
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Union

from . import tokens
from .constants import ENV_SECRET, ENV_STORE_URL, LOGGER
from .errors import EncryptionError, TokenGenerationError, ValidationError
from .keys import KeyPair, derive_keys
from .models import CustomerData
from .urls import build_login_url, parse_store_url

CustomerInput = Union[Mapping[str, Any], CustomerData]


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, ``Z`` suffixed."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _customer_payload(customer_data: CustomerInput) -> dict[str, Any]:
    if isinstance(customer_data, CustomerData):
        return customer_data.to_payload()
    if isinstance(customer_data, Mapping):
        return dict(customer_data)
    raise ValidationError("Invalid customer data: expected a non-null mapping.")


class Multipass:
    """Issues multipass login tokens for one store.

    Both keys are derived once from the shared secret and never change; a
    single instance can be shared freely, including across threads.
    """

    __slots__ = ("_keys", "_store_url")

    def __init__(self, secret: str, store_url: str) -> None:
        keys = derive_keys(secret)
        store_url = parse_store_url(store_url)
        object.__setattr__(self, "_store_url", store_url)
        object.__setattr__(self, "_keys", keys)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(store_url={self._store_url!r})"

    @classmethod
    def from_env(cls) -> "Multipass":
        return cls(os.getenv(ENV_SECRET, ""), os.getenv(ENV_STORE_URL, ""))

    @property
    def keys(self) -> KeyPair:
        return self._keys

    @property
    def encryption_key(self) -> bytes:
        return self._keys.encryption_key

    @property
    def signature_key(self) -> bytes:
        return self._keys.signature_key

    @property
    def store_url(self) -> str:
        return self._store_url

    def encrypt(self, customer_data: Mapping[str, Any]) -> bytes:
        try:
            return tokens.encrypt(customer_data, self.encryption_key)
        except EncryptionError as exc:
            LOGGER.error("Encryption failed: %s", exc)
            raise

    def sign(self, ciphertext: bytes) -> bytes:
        return tokens.sign(ciphertext, self.signature_key)

    def generate_token(self, customer_data: CustomerInput) -> str:
        payload = _customer_payload(customer_data)
        if not payload.get("created_at"):
            payload["created_at"] = utc_timestamp()

        try:
            ciphertext = self.encrypt(payload)
            signature = self.sign(ciphertext)
        except (EncryptionError, ValidationError) as exc:
            LOGGER.error("Error during token generation: %s", exc)
            raise TokenGenerationError() from exc

        return tokens.assemble_token(ciphertext, signature)

    def generate_login_url(self, customer_data: CustomerInput) -> str:
        token = self.generate_token(customer_data)
        return build_login_url(self._store_url, token)

    def decode_token(self, token: str) -> dict[str, Any]:
        return tokens.verify_and_decode(token, self._keys)
