"""Content metadata record carried by object storage requests and responses."""

from dataclasses import dataclass, fields, replace
from datetime import datetime

# Canonical header names, in the order the codec emits them
CONTENT_TYPE = "Content-Type"
CONTENT_DISPOSITION = "Content-Disposition"
CONTENT_ENCODING = "Content-Encoding"
CONTENT_LANGUAGE = "Content-Language"
CONTENT_LENGTH = "Content-Length"
CONTENT_MD5 = "Content-MD5"
EXPIRES = "Expires"

HTTP_HEADERS = (
    CONTENT_TYPE,
    CONTENT_DISPOSITION,
    CONTENT_ENCODING,
    CONTENT_LANGUAGE,
    CONTENT_LENGTH,
    CONTENT_MD5,
    EXPIRES,
)

MAX_CONTENT_LENGTH = 2**63 - 1


@dataclass
class ContentMetadata:
    """Metadata describing a piece of content.

    Every field is optional; None means "not specified".

    Example:
        md = ContentMetadata(content_type="text/plain", content_length=5)
        headers = codec.encode(md)
    """

    content_type: str | None = None
    content_disposition: str | None = None
    content_encoding: str | None = None
    content_language: str | None = None
    content_length: int | None = None
    content_md5: bytes | None = None
    expires: datetime | None = None

    def __post_init__(self) -> None:
        if self.content_length is not None:
            check_content_length(self.content_length)
        if self.content_md5 is not None:
            self.content_md5 = bytes(self.content_md5)

    def is_empty(self) -> bool:
        """Return True if no field is populated."""
        return all(getattr(self, f.name) is None for f in fields(self))

    def copy(self) -> "ContentMetadata":
        return replace(self)


def check_content_length(length: int) -> int:
    """Validate a byte count, returning it unchanged."""
    if isinstance(length, bool) or not isinstance(length, int):
        msg = f"Content length must be an int, got {type(length).__name__}"
        raise TypeError(msg)
    if length < 0:
        msg = f"Content length must be non-negative, got {length}"
        raise ValueError(msg)
    if length > MAX_CONTENT_LENGTH:
        msg = f"Content length {length} does not fit in 64 bits"
        raise ValueError(msg)
    return length
