import pytest

from phistratum.uint256 import (
    Uint160,
    Uint256,
    Uint512,
    hex_str,
    timing_resistant_equal,
    uint256_from_hex,
)

SAMPLE = "645cf20198c2f3861e947d4f67e3ab63b7b2e24dcc9095bd9123e7b33371f6cc"


def test_default_blob_is_null():
    blob = Uint256()
    assert blob.is_null()
    assert bytes(blob) == bytes(32)


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        Uint256(b"\x00" * 31)


def test_hex_round_trip():
    assert uint256_from_hex(SAMPLE).get_hex() == SAMPLE
    assert str(uint256_from_hex("0x" + SAMPLE)) == SAMPLE


def test_storage_is_reversed_hex():
    blob = uint256_from_hex(SAMPLE)
    assert bytes(blob) == bytes(reversed(bytes.fromhex(SAMPLE)))


def test_whitespace_and_upper_prefix():
    assert uint256_from_hex("  \t0X" + SAMPLE.upper()) == uint256_from_hex(SAMPLE)


def test_short_value_padded():
    blob = uint256_from_hex("0x01")
    assert blob.get_hex() == "00" * 31 + "01"


def test_odd_digit_count():
    assert uint256_from_hex("abc") == uint256_from_hex("0abc")
    assert uint256_from_hex("abc").get_hex().endswith("0abc")


def test_parse_stops_at_non_hex():
    assert uint256_from_hex("12zz34") == uint256_from_hex("12")


def test_overlong_keeps_trailing_digits():
    assert uint256_from_hex("ff" + SAMPLE) == uint256_from_hex(SAMPLE)


def test_set_null_clears():
    blob = uint256_from_hex(SAMPLE)
    assert not blob.is_null()
    blob.set_null()
    assert blob.is_null()


def test_compare_follows_stored_bytes():
    low_first = Uint256(b"\x01" + bytes(31))
    high_first = Uint256(bytes(31) + b"\x01")
    assert low_first.compare(high_first) == 1
    assert high_first.compare(low_first) == -1
    assert high_first < low_first
    assert low_first.compare(Uint256(b"\x01" + bytes(31))) == 0


def test_compare_rejects_other_widths():
    with pytest.raises(TypeError):
        Uint256().compare(Uint160())


def test_get_uint64():
    blob = uint256_from_hex("0x1234")
    assert blob.get_uint64(0) == 0x1234
    assert blob.get_uint64(3) == 0
    with pytest.raises(IndexError):
        blob.get_uint64(4)


def test_get_nibble_matches_hex():
    blob = uint256_from_hex(SAMPLE)
    assert [blob.get_nibble(i) for i in range(64)] == [int(c, 16) for c in SAMPLE]
    with pytest.raises(IndexError):
        blob.get_nibble(64)


def test_uint160_width():
    blob = Uint160()
    blob.set_hex(SAMPLE)
    assert len(blob.get_hex()) == 40
    assert blob.get_hex() == SAMPLE[-40:]


def test_uint512_trim256():
    wide = Uint512()
    wide.set_hex(SAMPLE + "00" * 32)
    assert wide.trim256().is_null()
    wide.set_hex("00" * 32 + SAMPLE)
    assert wide.trim256() == uint256_from_hex(SAMPLE)


def test_hex_str():
    assert hex_str(b"\x01\xab") == "01ab"
    assert hex_str([1, 171], spaces=True) == "01 ab"
    assert hex_str([]) == ""


def test_timing_resistant_equal():
    assert timing_resistant_equal(b"secret", b"secret")
    assert not timing_resistant_equal(b"secret", b"secreT")
    assert not timing_resistant_equal(b"abc", b"abcabc")
    assert timing_resistant_equal(b"", b"")
    assert not timing_resistant_equal(b"a", b"")
    assert timing_resistant_equal("token", "token")