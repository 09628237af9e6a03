"""Signing-key material and block-parts headers for Tendermint nodes."""
from __future__ import annotations

from .block.parts import PartsHeader
from .crypto.ed25519 import ED25519_KEYPAIR_SIZE, ED25519_SEED_SIZE, Ed25519Keypair, Seed
from .crypto.signing import Ed25519Signer
from .exceptions import (
    InvalidEncoding,
    InvalidKeyLength,
    InvalidLength,
    KeyErased,
    KeyMismatch,
    MalformedCount,
    MalformedDocument,
    SignatureError,
    TendermintKeysError,
    UnknownScheme,
)
from .hash import Hash
from .private_key import KeyScheme, PrivateKey
from .public_key import PublicKey
from .validator_key import PrivValidatorKey

__version__ = "0.1.0"

__all__ = [
    "ED25519_KEYPAIR_SIZE",
    "ED25519_SEED_SIZE",
    "Ed25519Keypair",
    "Ed25519Signer",
    "Hash",
    "InvalidEncoding",
    "InvalidKeyLength",
    "InvalidLength",
    "KeyErased",
    "KeyMismatch",
    "KeyScheme",
    "MalformedCount",
    "MalformedDocument",
    "PartsHeader",
    "PrivValidatorKey",
    "PrivateKey",
    "PublicKey",
    "Seed",
    "SignatureError",
    "TendermintKeysError",
    "UnknownScheme",
    "__version__",
]
