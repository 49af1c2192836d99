import pytest

from phistratum.arith import (
    ArithUint256,
    UintError,
    arith_to_uint256,
    decode_compact,
    uint_to_arith256,
)
from phistratum.uint256 import Uint256


def test_compact_documented_examples_encode():
    assert ArithUint256(0x1234560000).get_compact() == 0x05123456
    assert ArithUint256(0xC0DE000000).get_compact() == 0x0600C0DE


def test_compact_documented_examples_decode():
    assert ArithUint256.from_compact(0x05123456) == 0x1234560000
    assert ArithUint256.from_compact(0x0600C0DE) == 0xC0DE000000


def test_decode_compact_flags_clear_for_plain_value():
    value, negative, overflow = decode_compact(0x05123456)
    assert value == 0x1234560000
    assert negative is False
    assert overflow is False


def test_decode_compact_negative_flag():
    value, negative, overflow = decode_compact(0x05923456)
    assert negative is True
    assert overflow is False
    assert value == 0x1234560000


def test_decode_compact_overflow_flag():
    _, _, overflow = decode_compact(0xFF123456)
    assert overflow is True


def test_decode_compact_zero_mantissa_has_no_flags():
    value, negative, overflow = decode_compact(0xFF800000)
    assert value == 0
    assert negative is False
    assert overflow is False


@pytest.mark.parametrize("number", [1, 0x7F, 0x80, 0xFFFF, 0x1234560000, 1 << 200])
def test_compact_round_trip(number):
    value = ArithUint256(number)
    assert ArithUint256.from_compact(value.get_compact()) == value


def test_get_compact_negative_sets_sign_and_decodes_back():
    value = ArithUint256(0x1234560000)
    compact = value.get_compact(True)
    assert compact & 0x00800000
    decoded, negative, _ = decode_compact(compact)
    assert negative is True
    assert decoded == value


def test_get_hex_is_64_digits_most_significant_first():
    assert ArithUint256(1).get_hex() == "0" * 63 + "1"


def test_hex_round_trip():
    text = "00000000ffff0000000000000000000000000000000000000000000000000000"
    value = ArithUint256(text)
    assert value.get_hex() == text


def test_set_hex_accepts_prefix():
    value = ArithUint256()
    value.set_hex("0x1234560000")
    assert value == 0x1234560000


def test_blob_conversion_round_trip():
    value = ArithUint256(0x1234560000)
    blob = arith_to_uint256(value)
    assert uint_to_arith256(blob) == value
    assert blob.get_hex() == value.get_hex()


def test_blob_is_little_endian():
    blob = Uint256(bytes([1]) + bytes(31))
    assert uint_to_arith256(blob) == 1


def test_division_by_zero_raises():
    with pytest.raises(UintError):
        ArithUint256(5) / ArithUint256(0)


def test_subtraction_wraps_around():
    assert ArithUint256(0) - 1 == ~ArithUint256(0)


def test_addition_wraps_around():
    assert ~ArithUint256(0) + 1 == 0


def test_negation_is_twos_complement():
    value = ArithUint256(0x1234560000)
    assert value + (-value) == 0


def test_left_shift_truncates():
    assert ArithUint256(1) << 256 == 0
    assert (ArithUint256(1) << 255) >> 255 == 1


@pytest.mark.parametrize("number", [0, 1, 0x80, 1 << 100, (1 << 256) - 1])
def test_bits_matches_bit_length(number):
    assert ArithUint256(number).bits() == number.bit_length()


def test_division_and_multiplication_invariant():
    a = ArithUint256(0x1234560000)
    b = ArithUint256(0xC0DE)
    quotient = a / b
    assert quotient * b <= a
    assert a - quotient * b < b


def test_low64_and_double():
    value = ArithUint256(0x1234560000)
    assert value.low64() == 0x1234560000
    assert value.get_double() == float(0x1234560000)


...