import pytest

from resource_id.checksum import (
    CHECKSUM_ALPHABET,
    CHECKSUM_MODULUS,
    calculate_checksum,
    checksum_character,
    checksum_for,
    checksum_matches,
)

from .conftest import KNOWN_HEX


def test_alphabet_has_37_distinct_case_insensitive_symbols():
    assert CHECKSUM_ALPHABET == "0123456789ABCDEFGHJKMNPQRSTVWXYZ*~$=U"
    assert CHECKSUM_MODULUS == 37
    assert len(set(CHECKSUM_ALPHABET.lower())) == 37


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"", 0),
        (b"\x00", 0),
        (b"\x24", 36),
        (b"\x25", 0),
        (b"\xff", 33),
        (b"\x01\x00", 256 % 37),
        (bytes.fromhex(KNOWN_HEX), 9),
    ],
)
def test_calculate_checksum(data, expected):
    assert calculate_checksum(data) == expected


def test_leading_zero_bytes_do_not_change_checksum():
    assert calculate_checksum(b"\x00\x00\x2a") == calculate_checksum(b"\x2a")


def test_checksum_character_mapping():
    assert checksum_character(0) == "0"
    assert checksum_character(9) == "9"
    assert checksum_character(32) == "*"
    assert checksum_character(33) == "~"
    assert checksum_character(34) == "$"
    assert checksum_character(35) == "="
    assert checksum_character(36) == "U"


@pytest.mark.parametrize("value", [-1, 37, 100])
def test_checksum_character_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        checksum_character(value)


def test_checksum_for():
    assert checksum_for(b"\xff") == "~"


def test_checksum_matches_is_case_insensitive():
    assert checksum_matches(b"\x24", "U")
    assert checksum_matches(b"\x24", "u")
    assert not checksum_matches(b"\x24", "0")


def test_checksum_matches_rejects_non_ascii_look_alikes():
    # 0x19 == 25 -> "S"; U+017F uppercases to "S"
    assert checksum_matches(b"\x19", "s")
    assert not checksum_matches(b"\x19", "ſ")
