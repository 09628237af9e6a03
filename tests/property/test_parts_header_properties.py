from hypothesis import given, strategies as st

from tendermint_keys.block.parts import PartsHeader
from tendermint_keys.hash import Hash
from tendermint_keys.serializers import U64_MAX

_totals = st.integers(min_value=0, max_value=U64_MAX)
_hashes = st.one_of(st.just(b""), st.binary(min_size=32, max_size=32)).map(Hash)
_headers = st.builds(PartsHeader.new, _totals, _hashes)


@given(_headers)
def test_json_round_trip_preserves_fields(header: PartsHeader) -> None:
    decoded = PartsHeader.from_json(header.to_json())
    assert decoded.total == header.total
    assert decoded.hash == header.hash


@given(_headers, _headers)
def test_ordering_is_total_then_hash_bytes(a: PartsHeader, b: PartsHeader) -> None:
    assert (a < b) == ((a.total, a.hash.digest) < (b.total, b.hash.digest))
