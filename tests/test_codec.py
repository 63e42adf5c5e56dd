"""Tests for the friendly Crockford Base32 codec."""

import math
import secrets

import pytest

from resource_id import codec
from resource_id.exceptions import DecodingError

from .conftest import KNOWN_HEX, KNOWN_VALUE


def test_encode_known_value():
    assert codec.encode(bytes.fromhex(KNOWN_HEX)) == KNOWN_VALUE


def test_decode_known_value():
    assert codec.decode(KNOWN_VALUE) == bytes.fromhex(KNOWN_HEX)


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x00", "00"),
        (b"\xff", "ZW"),
        (b"\x24", "4G"),
        (b"\x00\x00\x00\x00\x00", "00000000"),
    ],
)
def test_encode_small_values(data, expected):
    assert codec.encode(data) == expected


def test_encoded_length_has_no_padding():
    for size in range(1, 17):
        encoded = codec.encode(b"\xa5" * size)
        assert "=" not in encoded
        assert len(encoded) == math.ceil(size * 8 / 5)


def test_decode_is_left_inverse_of_encode():
    for size in (1, 2, 3, 4, 5, 8, 16, 33, 64):
        data = secrets.token_bytes(size)
        assert codec.decode(codec.encode(data)) == data


def test_encoded_values_avoid_ambiguous_letters():
    encoded = codec.encode(secrets.token_bytes(256))
    assert not set(encoded) & set("ILOU")


def test_normalize_strips_hyphens_and_uppercases():
    assert codec.normalize("bkb3-xyt4-65kz-6") == KNOWN_VALUE


def test_normalize_maps_look_alike_letters():
    assert codec.normalize("oIlL") == "0111"


def test_decode_tolerates_case_and_hyphens():
    expected = bytes.fromhex(KNOWN_HEX)
    assert codec.decode("bkb3xyt465kz6") == expected
    assert codec.decode("BKB3-XYT4-65KZ-6") == expected
    assert codec.decode("bkb3-xyt4-65kz-6") == expected


@pytest.mark.parametrize("text", ["", "-", "---"])
def test_decode_rejects_empty(text):
    with pytest.raises(DecodingError, match="cannot be empty"):
        codec.decode(text)


@pytest.mark.parametrize("text", ["BKBU", "BK!B", "BK B", "BKB3_XYT"])
def test_decode_rejects_invalid_symbols(text):
    with pytest.raises(DecodingError, match="Invalid symbol"):
        codec.decode(text)


@pytest.mark.parametrize("text", ["B", "BKB", "BKB3XY"])
def test_decode_rejects_impossible_lengths(text):
    with pytest.raises(DecodingError, match="Invalid length"):
        codec.decode(text)


def test_decode_rejects_non_zero_trailing_bits():
    # "ZW" is the canonical form of 0xff; "ZX" sets an unused bit
    with pytest.raises(DecodingError, match="Non-canonical"):
        codec.decode("ZX")


def test_decoding_error_is_value_error():
    with pytest.raises(ValueError):
        codec.decode("U")


@pytest.mark.parametrize(
    "text",
    [
        "ſK6CſK6C",  # long s, uppercases to S
        "ıK6C1K6C",  # dotless i, uppercases to I
        "ßK6CSK6",  # sharp s, uppercases to SS
        "ﬀK6CSK6",  # ff ligature, uppercases to FF
    ],
)
def test_decode_rejects_non_ascii_case_mappings(text):
    with pytest.raises(DecodingError, match="Non-ASCII"):
        codec.decode(text)
