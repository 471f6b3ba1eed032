import math
from dataclasses import dataclass

import pytest

from typeconv.binary import big


@dataclass
class User:
    name: str
    age: int
    url: str


TYPED_CASES = [
    (big.encode_int8, big.decode_to_int8, -99),
    (big.encode_int16, big.decode_to_int16, 123),
    (big.encode_int16, big.decode_to_int16, 32767),
    (big.encode_int32, big.decode_to_int32, -199),
    (big.encode_int32, big.decode_to_int32, 2147483647),
    (big.encode_int64, big.decode_to_int64, 123),
    (big.encode_uint, big.decode_to_uint, 123),
    (big.encode_uint8, big.decode_to_uint8, 123),
    (big.encode_uint16, big.decode_to_uint16, 9999),
    (big.encode_uint16, big.decode_to_uint16, 65535),
    (big.encode_uint32, big.decode_to_uint32, 123),
    (big.encode_uint64, big.decode_to_uint64, 123),
    (big.encode_float64, big.decode_to_float64, 123.456),
]


@pytest.mark.parametrize("encoder, decoder, value", TYPED_CASES)
def test_typed_round_trip(encoder, decoder, value):
    ve = encoder(value)
    ve1 = big.encode_by_length(len(ve), ve)
    assert decoder(ve) == value
    assert decoder(ve1) == value


@pytest.mark.parametrize(
    "value, decoder",
    [
        (123, big.decode_to_int),
        (127, big.decode_to_int),
        (32767, big.decode_to_int),
        (2147483647, big.decode_to_int),
        (255, big.decode_to_int),
        (65535, big.decode_to_int),
        (True, big.decode_to_bool),
        (False, big.decode_to_bool),
        ("hehe haha", big.decode_to_string),
        (123.456, big.decode_to_float64),
        (3.4028234663852886e38, big.decode_to_float64),
    ],
)
def test_generic_encode_round_trip(value, decoder):
    ve = big.encode(value)
    ve1 = big.encode_by_length(len(ve), value)
    assert decoder(ve) == value
    assert decoder(ve1) == value


def test_bytes_round_trip_through_decode():
    value = b"hehe haha"
    ve = big.encode(value)
    assert big.decode(ve, len(ve)) == (value,)


def test_float32_round_trip():
    assert big.decode_to_float32(big.encode_float32(123.456)) == pytest.approx(123.456, rel=1e-6)
    max32 = 3.4028234663852886e38
    assert big.decode_to_float32(big.encode_float32(max32)) == max32


def test_float32_overflow_becomes_infinity():
    assert big.decode_to_float32(big.encode_float32(1e300)) == math.inf


def test_encode_struct_falls_back_to_text():
    user = User("wenzi1", 999, "www.example.com")
    assert big.decode_to_string(big.encode(user)) == str(user)


def test_fixed_width_byte_layout():
    assert big.encode_int16(1) == b"\x00\x01"
    assert big.encode_uint32(1) == b"\x00\x00\x00\x01"
    assert big.encode_int32(-2) == b"\xff\xff\xff\xfe"
    assert big.encode_float64(1.0) == b"\x3f\xf0\x00\x00\x00\x00\x00\x00"


def test_encode_int_chooses_width():
    assert big.encode_int(300) == b"\x01\x2c"
    assert big.encode_int(-1000) == b"\x18"
    assert len(big.encode_int(1 << 40)) == 8


def test_encode_uint_chooses_width():
    assert big.encode_uint(256) == b"\x01\x00"
    assert len(big.encode_uint(70000)) == 4


def test_encode_stops_at_none():
    assert big.encode("a", None, "b") == b"a"


def test_encode_by_length_pads_at_end():
    assert big.encode_by_length(3, 1) == b"\x01\x00\x00"
    assert big.encode_by_length(1, 300) == b"\x01"


def test_fill_up_size_pads_at_front():
    assert big.fill_up_size(b"\x01", 4) == b"\x00\x00\x00\x01"
    assert big.fill_up_size(b"\x01\x02\x03", 2) == b"\x01\x02"


def test_decode_short_input_is_padded_at_front():
    assert big.decode_to_uint32(b"\x01\x02") == 0x0102
    assert big.decode_to_float64(b"") == 0


def test_decode_to_int_wide_is_signed():
    assert big.decode_to_int(b"\xff" * 8) == -1
    assert big.decode_to_uint(b"\xff" * 8) == (1 << 64) - 1


def test_decode_kinds():
    data = big.encode_uint16(513) + big.encode_int8(-1) + big.encode_float32(2.5)
    assert big.decode(data, "uint16", "int8", "float32") == (513, -1, 2.5)


def test_decode_short_data_raises():
    with pytest.raises(ValueError):
        big.decode(b"\x00", "uint16")


def test_decode_to_uint8_empty_raises():
    with pytest.raises(ValueError):
        big.decode_to_uint8(b"")