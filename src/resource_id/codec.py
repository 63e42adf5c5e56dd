"""
Friendly Crockford Base32 codec for identifier values.

Bytes are grouped five bits at a time exactly as RFC 4648 does, but written
with Crockford's alphabet (no I, L, O or U) and without '=' padding, so
8 bytes encode to 13 symbols.

Decoding is forgiving about formatting: hyphens are ignored, lowercase is
accepted, and the look-alike letters I/L and O are read as 1 and 0. Anything
else outside the alphabet is rejected.
"""

import base64
import binascii

from .exceptions import DecodingError

CROCKFORD_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
RFC4648_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

_TO_CROCKFORD = str.maketrans(RFC4648_ALPHABET, CROCKFORD_ALPHABET)
_FROM_CROCKFORD = str.maketrans(CROCKFORD_ALPHABET, RFC4648_ALPHABET)
_FRIENDLY = str.maketrans({"-": None, "I": "1", "L": "1", "O": "0"})

# Unpadded symbol counts that no byte length can produce (mod 8)
_IMPOSSIBLE_REMAINDERS = (1, 3, 6)


def encode(data: bytes) -> str:
    """Encode bytes as unpadded, uppercase Crockford Base32."""
    encoded = base64.b32encode(bytes(data)).decode("ascii")
    return encoded.rstrip("=").translate(_TO_CROCKFORD)


def normalize(text: str) -> str:
    """Strip hyphens, uppercase, and resolve Crockford look-alike letters."""
    return text.upper().translate(_FRIENDLY)


def decode(text: str) -> bytes:
    """
    Decode a Crockford Base32 value back into bytes.

    Args:
        text: Encoded value, optionally lowercase or broken up with hyphens.

    Returns:
        The decoded bytes.

    Raises:
        DecodingError: If the value is empty, contains symbols outside the
            alphabet, has a length no byte sequence encodes to, or carries
            non-zero bits in its final padding positions.
    """
    # str.upper() maps some non-ASCII letters (e.g. U+017F) onto the alphabet
    if not text.isascii():
        raise DecodingError(f"Non-ASCII symbol(s) in encoded value {text!r}")

    normalized = normalize(text)
    if not normalized:
        raise DecodingError("Encoded value cannot be empty.")

    invalid = sorted(set(normalized) - set(CROCKFORD_ALPHABET))
    if invalid:
        raise DecodingError(
            f"Invalid symbol(s) {''.join(invalid)!r} in encoded value {text!r}"
        )

    if len(normalized) % 8 in _IMPOSSIBLE_REMAINDERS:
        raise DecodingError(
            f"Invalid length {len(normalized)} for encoded value {text!r}"
        )

    padded = normalized.translate(_FROM_CROCKFORD) + "=" * (-len(normalized) % 8)
    try:
        data = base64.b32decode(padded)
    except binascii.Error as e:
        raise DecodingError(f"Invalid encoded value {text!r}: {e}") from e

    # Trailing pad bits must be zero, otherwise two spellings map to one value
    if encode(data) != normalized:
        raise DecodingError(f"Non-canonical encoded value {text!r}")

    return data
