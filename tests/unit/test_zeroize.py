import copy
import gc
import os
import pickle
import weakref

import pytest

from tendermint_keys.exceptions import KeyErased
from tendermint_keys.zeroize import Zeroizing, scrub_bytes, zeroize


def test_zeroize_overwrites_in_place() -> None:
    buf = bytearray(b"\x01\x02\x03\x04")
    zeroize(buf)
    assert buf == bytearray(4)
    assert len(buf) == 4


def test_zeroize_accepts_writable_memoryview() -> None:
    buf = bytearray(b"secret!!")
    zeroize(memoryview(buf)[2:6])
    assert buf == bytearray(b"se\x00\x00\x00\x00!!")


def test_container_wipes_on_context_exit() -> None:
    with Zeroizing(b"top secret") as secret:
        assert bytes(secret.view()) == b"top secret"
        backing = secret._buf
    assert backing == bytearray(10)
    assert secret.erased


def test_container_wipes_on_error_exit() -> None:
    with pytest.raises(RuntimeError):
        with Zeroizing(b"top secret") as secret:
            backing = secret._buf
            raise RuntimeError("boom")
    assert backing == bytearray(10)


def test_container_wipes_when_dropped() -> None:
    secret = Zeroizing(os.urandom(64))
    backing = secret._buf
    del secret
    gc.collect()
    assert backing == bytearray(64)


def test_view_after_zeroize_is_refused() -> None:
    secret = Zeroizing(b"abc")
    secret.zeroize()
    with pytest.raises(KeyErased):
        secret.view()


def test_view_is_read_only() -> None:
    secret = Zeroizing(b"abc")
    with pytest.raises(TypeError):
        secret.view()[0] = 0


def test_take_wipes_the_source() -> None:
    source = bytearray(b"scratch")
    secret = Zeroizing.take(source)
    assert source == bytearray(7)
    assert bytes(secret.view()) == b"scratch"


def test_container_is_not_copyable_picklable_or_weakrefable() -> None:
    secret = Zeroizing(b"abc")
    with pytest.raises(TypeError):
        copy.copy(secret)
    with pytest.raises(TypeError):
        copy.deepcopy(secret)
    with pytest.raises(TypeError):
        pickle.dumps(secret)
    with pytest.raises(TypeError):
        weakref.ref(secret)


def test_repr_hides_contents() -> None:
    secret = Zeroizing(b"hunter2")
    assert "hunter2" not in repr(secret)
    assert "redacted" in repr(secret)


def test_rejects_integer_size() -> None:
    with pytest.raises(TypeError):
        Zeroizing(64)  # type: ignore[arg-type]


def test_equality_compares_contents() -> None:
    assert Zeroizing(b"abc") == Zeroizing(b"abc")
    assert Zeroizing(b"abc") != Zeroizing(b"abd")


@pytest.mark.skipif(
    __import__("sys").implementation.name != "cpython", reason="CPython object layout"
)
def test_scrub_bytes_wipes_immutable_temporary() -> None:
    data = os.urandom(48)
    scrub_bytes(data)
    assert data == bytes(48)


def test_scrub_bytes_leaves_singletons_alone() -> None:
    single = bytes([7])
    scrub_bytes(single)
    assert single == b"\x07"
