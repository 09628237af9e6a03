from .ed25519 import ED25519_KEYPAIR_SIZE, ED25519_SEED_SIZE, Ed25519Keypair, Seed
from .signing import Ed25519Signer

__all__ = [
    "ED25519_KEYPAIR_SIZE",
    "ED25519_SEED_SIZE",
    "Ed25519Keypair",
    "Ed25519Signer",
    "Seed",
]
