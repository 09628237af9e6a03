from __future__ import annotations

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from tendermint_keys.encoding import b64e

SEED = bytes(range(1, 33))


def expanded_keypair(seed: bytes) -> bytes:
    """Seed followed by its real Ed25519 public key."""
    public = Ed25519PrivateKey.from_private_bytes(seed).public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )
    return seed + public


@pytest.fixture
def keypair_bytes() -> bytes:
    return expanded_keypair(SEED)


@pytest.fixture
def public_bytes(keypair_bytes: bytes) -> bytes:
    return keypair_bytes[32:]


@pytest.fixture
def key_document(keypair_bytes: bytes) -> dict[str, str]:
    return {"type": "tendermint/PrivKeyEd25519", "value": b64e(keypair_bytes)}
