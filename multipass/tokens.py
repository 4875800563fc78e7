from __future__ import annotations

import hashlib
import hmac
import json
import secrets
from collections.abc import Mapping
from typing import Any

from cryptography.exceptions import InvalidKey, UnsupportedAlgorithm
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .constants import BLOCK_SIZE, IV_SIZE, MIN_TOKEN_BYTES, SIGNATURE_SIZE
from .encoding import urlsafe_b64decode_nopad, urlsafe_b64encode_nopad
from .errors import EncryptionError, TokenVerificationError, ValidationError
from .keys import KeyPair


def serialize_customer_data(data: Mapping[str, Any]) -> bytes:
    # Compact, insertion-ordered, unescaped non-ASCII: the JSON.stringify shape
    # the receiving platform decrypts.
    return json.dumps(
        dict(data),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    ).encode("utf-8")


def encrypt(data: Mapping[str, Any], key: bytes) -> bytes:
    """Return ``IV || AES-128-CBC(canonical JSON)`` under a fresh random IV."""
    if not isinstance(data, Mapping):
        raise ValidationError("Invalid input: customer data must be a mapping.")

    try:
        plaintext = serialize_customer_data(data)
    except (TypeError, ValueError) as exc:
        raise EncryptionError(f"Customer data is not JSON serializable: {exc}") from exc

    iv = secrets.token_bytes(IV_SIZE)
    try:
        padder = padding.PKCS7(BLOCK_SIZE * 8).padder()
        padded = padder.update(plaintext) + padder.finalize()
        encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
        ciphertext = encryptor.update(padded) + encryptor.finalize()
    except (TypeError, ValueError, InvalidKey, UnsupportedAlgorithm) as exc:
        raise EncryptionError(f"AES-CBC encryption failed: {exc}") from exc

    return iv + ciphertext


def decrypt(payload: bytes, key: bytes) -> dict[str, Any]:
    if len(payload) < IV_SIZE + BLOCK_SIZE or (len(payload) - IV_SIZE) % BLOCK_SIZE:
        raise TokenVerificationError("Ciphertext has an invalid length.")

    iv, ciphertext = payload[:IV_SIZE], payload[IV_SIZE:]
    try:
        decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = padding.PKCS7(BLOCK_SIZE * 8).unpadder()
        plaintext = unpadder.update(padded) + unpadder.finalize()
    except ValueError as exc:
        raise TokenVerificationError("Ciphertext could not be decrypted.") from exc

    try:
        data = json.loads(plaintext.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise TokenVerificationError("Decrypted token is not valid JSON.") from exc
    if not isinstance(data, dict):
        raise TokenVerificationError("Decrypted token is not a JSON object.")
    return data


def sign(message: bytes, key: bytes) -> bytes:
    if not isinstance(message, (bytes, bytearray)):
        raise ValidationError("Expected the ciphertext to be bytes.")
    return hmac.new(key, bytes(message), hashlib.sha256).digest()


def assemble_token(ciphertext: bytes, signature: bytes) -> str:
    return urlsafe_b64encode_nopad(ciphertext + signature)


def verify_and_decode(token: str, keys: KeyPair) -> dict[str, Any]:
    raw = urlsafe_b64decode_nopad(token)
    if len(raw) < MIN_TOKEN_BYTES:
        raise TokenVerificationError("Token is too short.")

    payload, actual_sig = raw[:-SIGNATURE_SIZE], raw[-SIGNATURE_SIZE:]
    expected_sig = sign(payload, keys.signature_key)
    if not hmac.compare_digest(expected_sig, actual_sig):
        raise TokenVerificationError("Token signature verification failed.")
    return decrypt(payload, keys.encryption_key)
