from __future__ import annotations

"""Central exception hierarchy"""


class TendermintKeysError(Exception):
    """Base exception for all failures"""


class InvalidEncoding(TendermintKeysError):
    """Raised when text is not valid base64 or hex"""


class InvalidLength(TendermintKeysError):
    """Raised when decoded material has the wrong number of bytes"""


class InvalidKeyLength(InvalidLength):
    """Raised when decoded key material is not the size its scheme requires"""


class UnknownScheme(TendermintKeysError):
    """Raised when a tagged key names a type we do not support"""


class MalformedCount(TendermintKeysError):
    """Raised when a part count is not a decimal unsigned 64-bit integer"""


class MalformedDocument(TendermintKeysError):
    """Raised when a tagged JSON document has the wrong shape"""


class KeyMismatch(TendermintKeysError):
    """Raised when a key document disagrees with its own private key"""


class KeyErased(TendermintKeysError):
    """Raised when key material is used after it was zeroized"""


class SignatureError(TendermintKeysError):
    """Raised for signing misuse or failed verification"""


__all__ = [
    "TendermintKeysError",
    "InvalidEncoding",
    "InvalidLength",
    "InvalidKeyLength",
    "UnknownScheme",
    "MalformedCount",
    "MalformedDocument",
    "KeyMismatch",
    "KeyErased",
    "SignatureError",
]
