import hashlib

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from edhash.sha3 import Sha3, keccak_f, sha3_256, sha3_384, sha3_512

REFERENCES = {256: hashlib.sha3_256, 384: hashlib.sha3_384, 512: hashlib.sha3_512}


def test_sha3_256_empty_message():
    assert sha3_256(b"").hex() == (
        "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a"
    )


def test_sha3_256_abc():
    assert sha3_256(b"abc").hex() == (
        "3a985da74fe225b2045c172d6bd390bd855f086e3e9d525b46bfe24511431532"
    )


def test_keccak_f_of_zero_state_first_lane():
    assert keccak_f([0] * 25)[0] == 0xF1258F7940E1DDE7


def test_keccak_f_leaves_input_untouched():
    state = list(range(25))
    before = list(state)
    result = keccak_f(state)
    assert state == before
    assert result != before
    assert len(result) == 25


def test_keccak_f_applied_twice_to_zero_state():
    once = keccak_f([0] * 25)
    twice = keccak_f(once)
    assert once[0] == 0xF1258F7940E1DDE7
    assert twice[0] == 0x2D5C954DF96ECB3C


def test_keccak_f_lanes_fit_in_64_bits():
    result = keccak_f([(1 << 64) - 1] * 25)
    assert all(0 <= lane < (1 << 64) for lane in result)


@pytest.mark.parametrize("size", [0, 24, 26])
def test_keccak_f_rejects_wrong_state_size(size):
    with pytest.raises(ValueError):
        keccak_f([0] * size)


@pytest.mark.parametrize("length", [0, 1, 7, 8, 9, 71, 72, 73, 103, 104, 135, 136, 137, 300])
def test_oneshot_matches_reference(length):
    message = bytes((i * 31 + 7) & 0xFF for i in range(length))
    assert sha3_256(message) == hashlib.sha3_256(message).digest()
    assert sha3_384(message) == hashlib.sha3_384(message).digest()
    assert sha3_512(message) == hashlib.sha3_512(message).digest()


@pytest.mark.parametrize("bits, size", [(256, 32), (384, 48), (512, 64)])
def test_digest_and_block_sizes(bits, size):
    hasher = Sha3(bits)
    assert hasher.digest_size == size
    assert hasher.block_size == 200 - 2 * size
    assert len(hasher.finalize()) == size


@pytest.mark.parametrize("bits", [0, 128, 224, 257, 1024])
def test_unsupported_size_rejected(bits):
    with pytest.raises(ValueError):
        Sha3(bits)


def test_default_size_is_256():
    hasher = Sha3()
    hasher.update(b"hello")
    assert hasher.finalize() == hashlib.sha3_256(b"hello").digest()


def test_finalize_resets_state():
    hasher = Sha3(512)
    hasher.update(b"first message")
    first = hasher.finalize()
    hasher.update(b"first message")
    assert hasher.finalize() == first
    assert hasher.finalize() == hashlib.sha3_512(b"").digest()


def test_reset_discards_input():
    hasher = Sha3(384)
    hasher.update(b"discarded" * 50)
    hasher.reset()
    hasher.update(b"kept")
    assert hasher.finalize() == hashlib.sha3_384(b"kept").digest()


def test_update_accepts_bytearray_and_memoryview():
    hasher = Sha3(256)
    hasher.update(bytearray(b"ab"))
    hasher.update(memoryview(b"c"))
    assert hasher.finalize() == sha3_256(b"abc")


def test_update_rejects_text():
    with pytest.raises(TypeError):
        Sha3(256).update("abc")


def test_different_messages_differ():
    assert sha3_256(b"a") != sha3_256(b"b")
    assert sha3_512(b"") != sha3_512(b"\x00")


@settings(max_examples=60, deadline=None)
@given(
    bits=st.sampled_from([256, 384, 512]),
    data=st.binary(max_size=600),
    cuts=st.lists(st.integers(min_value=0, max_value=600), max_size=6),
)
def test_chunked_update_matches_reference(bits, data, cuts):
    points = sorted({min(c, len(data)) for c in cuts} | {0, len(data)})
    hasher = Sha3(bits)
    for start, end in zip(points, points[1:]):
        hasher.update(data[start:end])
    assert hasher.finalize() == REFERENCES[bits](data).digest()


@settings(max_examples=40, deadline=None)
@given(data=st.binary(max_size=400))
def test_oneshot_functions_match_streaming(data):
    for bits, func in ((256, sha3_256), (384, sha3_384), (512, sha3_512)):
        hasher = Sha3(bits)
        for byte in data:
            hasher.update(bytes([byte]))
        assert hasher.finalize() == func(data)