import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dicutil.fxhash import SEED64, FxHasher64, hash_word, write64

u64 = st.integers(min_value=0, max_value=(1 << 64) - 1)


def test_default_state_is_zero():
    assert FxHasher64().finish() == 0


def test_hash_word_of_one_from_zero_is_seed():
    assert hash_word(0, 1) == 0x517CC1B727220A95
    assert SEED64 == 0x517CC1B727220A95


def test_hash_word_zero_stays_zero():
    assert hash_word(0, 0) == 0


@given(u64, u64)
def test_hash_word_stays_in_64_bits(h, w):
    assert 0 <= hash_word(h, w) < (1 << 64)


@given(u64)
def test_write64_empty_is_identity(h):
    assert write64(h, b"") == h


@given(u64, u64)
def test_eight_bytes_equal_one_word(h, word):
    assert write64(h, struct.pack("<Q", word)) == hash_word(h, word)


@given(u64, st.binary(min_size=7, max_size=7))
def test_seven_byte_tail_is_split_4_2_1(h, data):
    expected = hash_word(h, int.from_bytes(data[:4], "little"))
    expected = hash_word(expected, int.from_bytes(data[4:6], "little"))
    expected = hash_word(expected, data[6])
    assert write64(h, data) == expected


@given(u64, st.binary(min_size=8), st.binary(max_size=7))
def test_leading_words_chain(h, head, tail):
    head = head[: len(head) - len(head) % 8]
    assert write64(h, head + tail) == write64(write64(h, head), tail)


@given(st.binary())
def test_hasher_write_matches_write64(data):
    hasher = FxHasher64()
    hasher.write(data)
    assert hasher.finish() == write64(0, data)


@given(st.integers(min_value=0, max_value=255))
def test_all_widths_widen_to_same_word(value):
    results = set()
    for method in ("write_u8", "write_u16", "write_u32", "write_u64", "write_usize"):
        hasher = FxHasher64()
        getattr(hasher, method)(value)
        results.add(hasher.finish())
    assert results == {hash_word(0, value)}


@given(st.integers(min_value=0, max_value=255))
def test_single_byte_write_matches_write_u8(value):
    by_bytes = FxHasher64()
    by_bytes.write(bytes([value]))
    by_int = FxHasher64()
    by_int.write_u8(value)
    assert by_bytes.finish() == by_int.finish()


def test_out_of_range_values_are_rejected():
    hasher = FxHasher64()
    with pytest.raises(ValueError):
        hasher.write_u8(256)
    with pytest.raises(ValueError):
        hasher.write_u16(1 << 16)
    with pytest.raises(ValueError):
        hasher.write_u32(-1)
    with pytest.raises(ValueError):
        hash_word(0, 1 << 64)
    assert hasher.finish() == 0