"""
resource_id - Typo-resistant, hierarchical resource identifiers.

Identifiers look like "books/BKB3XYT465KZ69": a collection name, a Crockford
Base32 encoded random payload, and a mod-37 check character that catches
mistyped identifiers before they reach a database lookup.

Example Usage:
    from resource_id import ResourceId, ChecksumMismatchError

    book = ResourceId.generate("books")
    page = ResourceId.generate("pages", parent=book)
    print(page)  # books/BKB3XYT465KZ69/pages/4GU

    try:
        ResourceId.parse("books/BKB3XYT465KZ68")
    except ChecksumMismatchError as e:
        print(e)  # Invalid identifier: Checksum mismatch ... Possible typo.
"""

from .checksum import CHECKSUM_ALPHABET, CHECKSUM_MODULUS
from .codec import CROCKFORD_ALPHABET
from .config import DEFAULT_SIZE_IN_BYTES
from .exceptions import (
    ChecksumMismatchError,
    DecodingError,
    FormatError,
    FormatErrorKind,
    IdentifierOverflowError,
    InvalidArgumentError,
    ResourceIdError,
)
from .identifier import ResourceId
from .log import setup_logging

__version__ = "0.1.0"

__all__ = [
    "ResourceId",
    # Errors
    "ResourceIdError",
    "InvalidArgumentError",
    "IdentifierOverflowError",
    "DecodingError",
    "FormatError",
    "FormatErrorKind",
    "ChecksumMismatchError",
    # Constants
    "CHECKSUM_ALPHABET",
    "CHECKSUM_MODULUS",
    "CROCKFORD_ALPHABET",
    "DEFAULT_SIZE_IN_BYTES",
    "setup_logging",
]
