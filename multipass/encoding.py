from __future__ import annotations

import base64
import binascii
import re

from .errors import TokenVerificationError

_URLSAFE_ALPHABET = re.compile(r"^[A-Za-z0-9_-]*$")


def urlsafe_b64encode_nopad(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def urlsafe_b64decode_nopad(value: str) -> bytes:
    if not isinstance(value, str) or not _URLSAFE_ALPHABET.match(value):
        raise TokenVerificationError("Token is not URL-safe base64.")
    if len(value) % 4 == 1:
        raise TokenVerificationError("Token has an impossible base64 length.")

    padded = value + "=" * (-len(value) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as exc:
        raise TokenVerificationError("Token is not URL-safe base64.") from exc
