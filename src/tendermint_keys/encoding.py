"""Codec adapters for key and hash text encodings."""
from __future__ import annotations

import binascii

from .exceptions import InvalidEncoding
from .zeroize import Zeroizing, scrub_bytes


def _ascii_copy(value: str) -> bytes:
    if not isinstance(value, str):
        raise InvalidEncoding(f"Expected text, got {type(value).__name__}")
    try:
        return value.encode("ascii")
    except UnicodeEncodeError as exc:
        raise InvalidEncoding("Encoded value contains non-ASCII characters") from exc


def b64e(data: bytes | bytearray | memoryview) -> str:
    """Standard base64 encoding with padding"""
    return binascii.b2a_base64(data, newline=False).decode("ascii")


def b64d(value: str) -> bytes:
    """Strict standard base64 decode for public data"""
    encoded = _ascii_copy(value)
    try:
        return binascii.a2b_base64(encoded, strict_mode=True)
    except binascii.Error as exc:
        raise InvalidEncoding("Value is not valid base64") from exc


def b64e_secret(data: memoryview) -> str:
    """Encode secret bytes, scrubbing the codec's intermediate output."""
    encoded = binascii.b2a_base64(data, newline=False)
    try:
        return encoded.decode("ascii")
    finally:
        scrub_bytes(encoded)


def b64d_secret(value: str) -> Zeroizing:
    """Strict base64 decode of secret text into a zeroizing buffer.

    Both temporaries created here (the ASCII copy of ``value`` and the codec's
    decoded output) are wiped before returning or raising.
    """
    encoded = _ascii_copy(value)
    decoded = b""
    try:
        decoded = binascii.a2b_base64(encoded, strict_mode=True)
        return Zeroizing(decoded)
    except binascii.Error as exc:
        raise InvalidEncoding("Value is not valid base64") from exc
    finally:
        scrub_bytes(encoded)
        scrub_bytes(decoded)


def hex_upper(data: bytes | bytearray | memoryview) -> str:
    return bytes(data).hex().upper()


def from_hex(value: str) -> bytes:
    if not isinstance(value, str):
        raise InvalidEncoding(f"Expected hex text, got {type(value).__name__}")
    try:
        return binascii.a2b_hex(value)
    except ValueError as exc:
        raise InvalidEncoding(f"Value is not valid hex: {value!r}") from exc


__all__ = ["b64d", "b64d_secret", "b64e", "b64e_secret", "from_hex", "hex_upper"]
