import base64
import copy
import gc
import weakref

import pytest

from tendermint_keys.crypto.ed25519 import ED25519_KEYPAIR_SIZE, Ed25519Keypair, Seed
from tendermint_keys.exceptions import InvalidEncoding, InvalidKeyLength, KeyErased
from tendermint_keys.public_key import PublicKey


def test_public_key_is_last_32_bytes(keypair_bytes: bytes, public_bytes: bytes) -> None:
    keypair = Ed25519Keypair(keypair_bytes)
    first = keypair.public_key()
    second = keypair.public_key()
    assert first == second
    assert first.to_bytes() == public_bytes


def test_public_key_does_not_validate_curve_point() -> None:
    keypair = Ed25519Keypair(bytes(32) + b"\xff" * 32)
    assert keypair.public_key() == PublicKey(b"\xff" * 32)


@pytest.mark.parametrize("size", [0, 32, 63, 65, 96])
def test_constructor_rejects_wrong_size(size: int) -> None:
    with pytest.raises(InvalidKeyLength):
        Ed25519Keypair(b"\x01" * size)


def test_base64_round_trip(keypair_bytes: bytes) -> None:
    encoded = base64.b64encode(keypair_bytes).decode("ascii")
    keypair = Ed25519Keypair.from_base64(encoded)
    assert keypair.to_base64() == encoded
    assert keypair == Ed25519Keypair(keypair_bytes)


@pytest.mark.parametrize(
    "value",
    ["not base64!", "AAAA=AAA", "AAA", "AAAA\n", "ÄÄÄÄ"],
)
def test_from_base64_rejects_invalid_text(value: str) -> None:
    with pytest.raises(InvalidEncoding):
        Ed25519Keypair.from_base64(value)


@pytest.mark.parametrize("size", [0, 32, 63, 65])
def test_from_base64_rejects_wrong_decoded_length(size: int) -> None:
    encoded = base64.b64encode(b"\x07" * size).decode("ascii")
    with pytest.raises(InvalidKeyLength):
        Ed25519Keypair.from_base64(encoded)


def test_to_seed_is_first_32_bytes(keypair_bytes: bytes) -> None:
    keypair = Ed25519Keypair(keypair_bytes)
    with keypair.to_seed() as seed:
        assert isinstance(seed, Seed)
        assert seed == Seed(keypair_bytes[:32])
    assert keypair.to_seed() == keypair.to_seed()


def test_consistency_check(keypair_bytes: bytes) -> None:
    assert Ed25519Keypair(keypair_bytes).is_consistent()
    tampered = keypair_bytes[:32] + bytes(32)
    assert not Ed25519Keypair(tampered).is_consistent()


def test_from_seed_builds_expanded_layout(keypair_bytes: bytes) -> None:
    keypair = Ed25519Keypair.from_seed(Seed(keypair_bytes[:32]))
    assert keypair == Ed25519Keypair(keypair_bytes)


def test_zeroize_wipes_and_blocks_use(keypair_bytes: bytes) -> None:
    keypair = Ed25519Keypair(keypair_bytes)
    backing = keypair._secret._buf
    keypair.zeroize()
    assert backing == bytearray(ED25519_KEYPAIR_SIZE)
    assert keypair.erased
    with pytest.raises(KeyErased):
        keypair.public_key()
    with pytest.raises(KeyErased):
        keypair.to_base64()


def test_memory_scrubbed_after_scope_exit(keypair_bytes: bytes) -> None:
    def use_key() -> bytearray:
        keypair = Ed25519Keypair(keypair_bytes)
        keypair.public_key()
        return keypair._secret._buf

    backing = use_key()
    gc.collect()
    assert keypair_bytes[:32] not in backing
    assert backing == bytearray(ED25519_KEYPAIR_SIZE)


def test_context_manager_scrubs(keypair_bytes: bytes) -> None:
    with Ed25519Keypair(keypair_bytes) as keypair:
        backing = keypair._secret._buf
    assert backing == bytearray(ED25519_KEYPAIR_SIZE)


def test_keypair_cannot_be_shared(keypair_bytes: bytes) -> None:
    keypair = Ed25519Keypair(keypair_bytes)
    with pytest.raises(TypeError):
        copy.copy(keypair)
    with pytest.raises(TypeError):
        weakref.ref(keypair)
    with pytest.raises(TypeError):
        hash(keypair)


def test_repr_does_not_leak(keypair_bytes: bytes) -> None:
    keypair = Ed25519Keypair(keypair_bytes)
    text = repr(keypair)
    assert keypair_bytes.hex() not in text
    assert base64.b64encode(keypair_bytes).decode() not in text
