"""
Modulo-37 check characters.

The payload bytes are read as one big-endian unsigned integer and reduced
mod 37. Because 37 is prime, every single-symbol substitution and most
adjacent transpositions in the encoded value change the remainder.
"""

CHECKSUM_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ*~$=U"
CHECKSUM_MODULUS = len(CHECKSUM_ALPHABET)


def calculate_checksum(data: bytes) -> int:
    """Calculate the checksum value (0-36) of the raw bytes."""
    return int.from_bytes(data, "big") % CHECKSUM_MODULUS


def checksum_character(value: int) -> str:
    """Map a checksum value (0-36) to its character."""
    if not 0 <= value < CHECKSUM_MODULUS:
        raise ValueError(f"Checksum value must be in [0, 36], got {value}")
    return CHECKSUM_ALPHABET[value]


def checksum_for(data: bytes) -> str:
    return checksum_character(calculate_checksum(data))


def checksum_matches(data: bytes, char: str) -> bool:
    """Check a checksum character against the bytes it should describe.

    Comparison is case-insensitive.
    """
    return char.isascii() and checksum_for(data) == char.upper()
