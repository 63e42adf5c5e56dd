"""
Exceptions raised by the resource_id package.

Two families exist. Construction-argument errors (InvalidArgumentError and
IdentifierOverflowError) come from generate() and the from_* reconstruction
methods. FormatError and its ChecksumMismatchError subclass come from parse().
"""

from enum import Enum
from typing import Any, Optional


class ResourceIdError(Exception):
    """Base exception for all resource identifier errors"""

    pass


class InvalidArgumentError(ResourceIdError, ValueError):
    """Raised when a caller-supplied argument violates a precondition."""

    def __init__(self, name: str, value: Any, message: str):
        self.name = name
        self.value = value
        super().__init__(f"Invalid argument {name}={value!r}: {message}")


class IdentifierOverflowError(InvalidArgumentError, OverflowError):
    """Raised when an integer needs more bytes than the requested size."""

    pass


class DecodingError(ResourceIdError, ValueError):
    """Raised by the codec for text that is not a valid encoded value."""

    pass


class FormatErrorKind(str, Enum):
    EMPTY_INPUT = "empty_input"
    MALFORMED_PATH = "malformed_path"
    TRUNCATED_ID = "truncated_id"
    INVALID_ENCODING = "invalid_encoding"
    CHECKSUM_MISMATCH = "checksum_mismatch"


class FormatError(ResourceIdError, ValueError):
    """
    Raised when an identifier string cannot be parsed.

    Attributes:
        kind: The FormatErrorKind describing what went wrong.
        segment: The offending path segment, when one can be named.
        expected: The expected checksum character (checksum mismatches only).
        actual: The checksum character found in the input.
    """

    def __init__(
        self,
        kind: FormatErrorKind,
        message: str,
        segment: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[str] = None,
    ):
        self.kind = kind
        self.segment = segment
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class ChecksumMismatchError(FormatError):
    """
    The identifier is well formed but its checksum character is wrong.

    This almost always means the identifier was mistyped, as opposed to
    referring to a resource that does not exist.
    """

    def __init__(self, segment: str, expected: str, actual: str):
        super().__init__(
            FormatErrorKind.CHECKSUM_MISMATCH,
            f"Invalid identifier: Checksum mismatch in '{segment}' "
            f"(expected '{expected}', got '{actual}'). Possible typo.",
            segment=segment,
            expected=expected,
            actual=actual,
        )
