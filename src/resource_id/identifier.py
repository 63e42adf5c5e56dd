"""
Immutable, self-validating resource identifiers.

A ResourceId pairs a collection name ("books") with random payload bytes and
renders as "books/BKB3XYT465KZ69": the Crockford Base32 encoding of the bytes
followed by a single mod-37 check character. Identifiers nest, so a page of a
book renders as "books/BKB3XYT465KZ69/pages/4GU".

Construction paths:
- ResourceId.generate(): new identifier from a secure random source
- ResourceId.parse(): validate a full path string, including every checksum
- ResourceId.from_bytes() / from_int() / from_value(): rebuild an identifier
  from the forms it is usually stored in (BINARY, BIGINT, plain string)

Equality and hashing use the canonical rendering, so identifiers parsed from
"books/bkb3-xyt4-65kz-69" and "books/BKB3XYT465KZ69" compare equal.
"""

from __future__ import annotations

import secrets
from typing import Any, Optional

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import PydanticCustomError, core_schema

from . import codec
from .checksum import checksum_for, checksum_matches
from .config import DEFAULT_SIZE_IN_BYTES, PATH_SEPARATOR
from .exceptions import (
    ChecksumMismatchError,
    DecodingError,
    FormatError,
    FormatErrorKind,
    IdentifierOverflowError,
    InvalidArgumentError,
)
from .log import get_logger, log

_logger = get_logger("identifier")


def _check_size(size_in_bytes: Any) -> int:
    if isinstance(size_in_bytes, bool) or not isinstance(size_in_bytes, int):
        raise InvalidArgumentError("size_in_bytes", size_in_bytes, "Must be an integer")
    if size_in_bytes < 1:
        raise InvalidArgumentError("size_in_bytes", size_in_bytes, "Must be at least 1")
    return size_in_bytes


class ResourceId:
    """
    An immutable resource identifier with an optional parent.

    Prefer the generate(), parse() and from_* class methods over calling the
    constructor directly; the constructor wraps the given bytes verbatim.

    Attributes:
        resource_type: The collection name for this resource (e.g. "books").
        parent: The parent ResourceId for hierarchical resources, or None.
    """

    __slots__ = ("_resource_type", "_bytes", "_parent")

    def __init__(
        self,
        resource_type: str,
        data: bytes,
        parent: Optional[ResourceId] = None,
    ):
        if not isinstance(resource_type, str) or not resource_type:
            raise InvalidArgumentError(
                "resource_type", resource_type, "Must be a non-empty string"
            )
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidArgumentError("bytes", data, "Must be a bytes-like object")
        data = bytes(data)
        if not data:
            raise InvalidArgumentError(
                "bytes", data, "Cannot be empty. Must contain at least 1 byte."
            )
        if parent is not None and not isinstance(parent, ResourceId):
            raise InvalidArgumentError("parent", parent, "Must be a ResourceId or None")

        object.__setattr__(self, "_resource_type", resource_type)
        object.__setattr__(self, "_bytes", data)
        object.__setattr__(self, "_parent", parent)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._resource_type, self._bytes, self._parent))

    # --- Construction ---

    @classmethod
    def generate(
        cls,
        resource_type: str,
        parent: Optional[ResourceId] = None,
        size_in_bytes: int = DEFAULT_SIZE_IN_BYTES,
    ) -> ResourceId:
        """
        Generate a new identifier from a cryptographically secure source.

        Args:
            resource_type: The collection name (e.g. "books").
            parent: Optional parent identifier for hierarchical resources.
            size_in_bytes: Payload size. The default of 8 bytes (64 bits)
                fits a BIGINT column; use 15 or 16 bytes for identifiers
                that must be globally unique.

        Raises:
            InvalidArgumentError: If size_in_bytes is less than 1.
        """
        _check_size(size_in_bytes)
        resource_id = cls(resource_type, secrets.token_bytes(size_in_bytes), parent)
        log(
            _logger,
            "debug",
            "Generated resource id",
            resource_type=resource_type,
            size_in_bytes=size_in_bytes,
            nested=parent is not None,
        )
        return resource_id

    @classmethod
    def parse(cls, text: str) -> ResourceId:
        """
        Parse and validate a full identifier path such as "books/BKB3XYT465KZ69".

        Every "type/value" pair is decoded and checksum-verified, outermost
        ancestor first. Values may be lowercase or contain hyphens.

        Raises:
            FormatError: If the text is empty, the path is malformed, an id
                segment is too short, or a value is not valid Base32.
            ChecksumMismatchError: If a value decodes but its check character
                is wrong, which usually means a typo.
            InvalidArgumentError: If text is not a string.
        """
        if not isinstance(text, str):
            raise InvalidArgumentError("text", text, "Must be a string")

        try:
            return cls._parse_path(text)
        except FormatError as e:
            log(_logger, "debug", "Rejected resource id", kind=e.kind.value, text=text)
            raise

    @classmethod
    def _parse_path(cls, text: str) -> ResourceId:
        if not text:
            raise FormatError(
                FormatErrorKind.EMPTY_INPUT, "Identifier cannot be empty."
            )

        parts = text.split(PATH_SEPARATOR)
        if len(parts) < 2 or any(not part for part in parts):
            raise FormatError(
                FormatErrorKind.MALFORMED_PATH,
                f"Invalid ID format {text!r}. Must be at least 'resourceType/id' "
                "with no empty segments.",
                segment=text,
            )
        if len(parts) % 2:
            # An odd segment count leaves the outermost ancestor without a value
            raise FormatError(
                FormatErrorKind.MALFORMED_PATH,
                f"Invalid ID format {text!r}. Segment {parts[0]!r} has no id.",
                segment=parts[0],
            )

        resource_id = None
        for i in range(0, len(parts), 2):
            resource_id = cls._parse_segment(parts[i], parts[i + 1], resource_id)
        return resource_id

    @classmethod
    def _parse_segment(
        cls, resource_type: str, id_with_checksum: str, parent: Optional[ResourceId]
    ) -> ResourceId:
        if len(id_with_checksum) < 2:
            raise FormatError(
                FormatErrorKind.TRUNCATED_ID,
                f"Invalid ID {id_with_checksum!r}: Missing value or checksum.",
                segment=id_with_checksum,
            )

        encoded_value = id_with_checksum[:-1]
        checksum_char = id_with_checksum[-1]

        try:
            data = codec.decode(encoded_value)
        except DecodingError as e:
            raise FormatError(
                FormatErrorKind.INVALID_ENCODING,
                f"Invalid Base32 format in {id_with_checksum!r}: {e}",
                segment=id_with_checksum,
            ) from e

        if not checksum_matches(data, checksum_char):
            raise ChecksumMismatchError(
                id_with_checksum, checksum_for(data), checksum_char
            )

        return cls(resource_type, data, parent)

    @classmethod
    def from_bytes(
        cls,
        resource_type: str,
        data: bytes,
        parent: Optional[ResourceId] = None,
    ) -> ResourceId:
        """
        Rebuild an identifier from its raw bytes, e.g. a BINARY/BLOB column.

        Raises:
            InvalidArgumentError: If data is empty.
        """
        return cls(resource_type, data, parent)

    @classmethod
    def from_int(
        cls,
        resource_type: str,
        value: int,
        size_in_bytes: int,
        parent: Optional[ResourceId] = None,
    ) -> ResourceId:
        """
        Rebuild an identifier from its integer form, e.g. a BIGINT column.

        Converting bytes to an integer drops leading zero bytes, so b"\\x00\\x01"
        and b"\\x01" both become 1. The original size_in_bytes must be passed
        back in to restore them. Keep one fixed size per resource type:

            USER_ID_SIZE = 8
            stored = ResourceId.generate("users", size_in_bytes=USER_ID_SIZE).as_int
            ResourceId.from_int("users", stored, size_in_bytes=USER_ID_SIZE)

        Raises:
            InvalidArgumentError: If size_in_bytes is less than 1 or value is
                negative.
            IdentifierOverflowError: If value does not fit in size_in_bytes.
        """
        _check_size(size_in_bytes)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError("value", value, "Must be an integer")
        if value < 0:
            raise InvalidArgumentError("value", value, "Must be non-negative")

        try:
            data = value.to_bytes(size_in_bytes, "big")
        except OverflowError as e:
            needed = (value.bit_length() + 7) // 8
            raise IdentifierOverflowError(
                "value",
                value,
                f"Too large for sizeInBytes={size_in_bytes} (needs {needed} bytes)",
            ) from e

        return cls(resource_type, data, parent)

    @classmethod
    def from_value(
        cls,
        resource_type: str,
        value: str,
        parent: Optional[ResourceId] = None,
    ) -> ResourceId:
        """
        Rebuild an identifier from its bare encoded value (see `value`).

        The value carries no check character, so nothing is verified beyond
        the Base32 decoding itself.

        Raises:
            InvalidArgumentError: If value is empty.
            DecodingError: If value is not valid Base32.
        """
        if not isinstance(value, str) or not value:
            raise InvalidArgumentError("value", value, "Can not be empty")
        return cls(resource_type, codec.decode(value), parent)

    # --- Accessors ---

    @property
    def resource_type(self) -> str:
        return self._resource_type

    @property
    def parent(self) -> Optional[ResourceId]:
        return self._parent

    @property
    def bytes(self) -> bytes:
        """The raw payload bytes."""
        return self._bytes

    @property
    def size_in_bytes(self) -> int:
        return len(self._bytes)

    @property
    def value(self) -> str:
        """
        The Base32 encoded payload without type prefix or checksum.

        Useful as a key-value store key; rebuild with from_value().
        """
        return codec.encode(self._bytes)

    @property
    def checksum(self) -> str:
        return checksum_for(self._bytes)

    @property
    def as_int(self) -> int:
        """
        The payload as a big-endian unsigned integer.

        Rebuilding with from_int() needs the original size_in_bytes.
        """
        return int.from_bytes(self._bytes, "big")

    # --- Rendering ---

    def _segment(self) -> str:
        return f"{self._resource_type}{PATH_SEPARATOR}{self.value}{self.checksum}"

    def __str__(self) -> str:
        segments = []
        node = self
        while node is not None:
            segments.append(node._segment())
            node = node._parent
        return PATH_SEPARATOR.join(reversed(segments))

    def to_json(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ResourceId):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    # --- pydantic integration ---

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source: type[Any],
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str,
                info_arg=False,
                return_schema=core_schema.str_schema(),
                when_used="json",
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        schema: core_schema.CoreSchema,
        handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {"type": "string", "format": "resource-id"}

    @classmethod
    def _validate(cls, value: Any) -> ResourceId:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise PydanticCustomError(
                "resource_id_type", "Resource id must be given as a string"
            )
        try:
            return cls.parse(value)
        except FormatError as e:
            raise PydanticCustomError(
                e.kind.value, "Invalid resource id: {reason}", {"reason": str(e)}
            ) from e
