import pytest

from typeconv.binary import bits

TEST_BIT_DATA = [0, 99, 122, 129, 222, 999, 22322]


@pytest.mark.parametrize("value", TEST_BIT_DATA)
def test_bits_round_trip(value):
    res = bits.encode_bits([], value, 64)
    assert len(res) == 64
    assert bits.decode_bits(res) == value
    assert bits.decode_bits_to_uint(res) == value
    assert bits.decode_bytes_to_bits(bits.encode_bits_to_bytes(res)) == res


def test_encode_bits_most_significant_first():
    assert bits.encode_bits([], 5, 4) == [0, 1, 0, 1]


def test_encode_bits_none_start():
    assert bits.encode_bits_with_uint(None, 3, 3) == [0, 1, 1]


def test_encode_bits_appends():
    assert bits.encode_bits([1], 1, 2) == [1, 0, 1]


def test_encode_bits_truncates_to_length():
    assert bits.encode_bits([], 0b1111, 2) == [1, 1]


def test_encode_bits_negative_length():
    with pytest.raises(ValueError):
        bits.encode_bits([], 1, -1)


def test_negative_value_wraps_to_64_bits():
    res = bits.encode_bits([], -1, 64)
    assert res == [1] * 64
    assert bits.decode_bits(res) == -1
    assert bits.decode_bits_to_uint(res) == (1 << 64) - 1


def test_encode_bits_to_bytes_pads_last_byte():
    assert bits.encode_bits_to_bytes([1, 0, 1]) == b"\xa0"


def test_encode_bits_to_bytes_full_bytes():
    assert bits.encode_bits_to_bytes([1, 1, 1, 1, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 1]) == b"\xff\x01"


def test_decode_bytes_to_bits():
    assert bits.decode_bytes_to_bits(b"\x81") == [1, 0, 0, 0, 0, 0, 0, 1]


def test_decode_bytes_to_bits_empty():
    assert bits.decode_bytes_to_bits(b"") == []


def test_decode_bits_small():
    assert bits.decode_bits([1, 0, 1, 0]) == 10