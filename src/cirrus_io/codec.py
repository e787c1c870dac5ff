"""Codec between ContentMetadata and HTTP headers.

Follows HTTP/1.1: a chunked Transfer-Encoding overrides any declared
Content-Length, and an unparseable Expires value means "already expired".
"""

import base64
import binascii
import logging
import re
from datetime import datetime
from typing import Protocol

from cirrus_io.config import CodecConfig
from cirrus_io.dates import DateCodec
from cirrus_io.errors import MalformedHeaderError
from cirrus_io.headers import HeaderItems, header_items
from cirrus_io.metadata import (
    CONTENT_DISPOSITION,
    CONTENT_ENCODING,
    CONTENT_LANGUAGE,
    CONTENT_LENGTH,
    CONTENT_MD5,
    CONTENT_TYPE,
    EXPIRES,
    MAX_CONTENT_LENGTH,
    ContentMetadata,
    check_content_length,
)

TRANSFER_ENCODING = "Transfer-Encoding"
CHUNKED = "chunked"

# HTTP 1*DIGIT; int() alone also takes "1_000" and non-ASCII digits
_DIGITS = re.compile(r"[0-9]+")

# Headers copied verbatim, keyed by lowercased name
_STRING_FIELDS = {
    CONTENT_TYPE.lower(): "content_type",
    CONTENT_DISPOSITION.lower(): "content_disposition",
    CONTENT_ENCODING.lower(): "content_encoding",
    CONTENT_LANGUAGE.lower(): "content_language",
}


class ContentMetadataCodec(Protocol):
    """Protocol for translating content metadata to and from headers."""

    def encode(self, metadata: ContentMetadata) -> list[tuple[str, str]]:
        """Generate standard HTTP headers for the populated fields."""
        ...

    def decode(
        self, headers: HeaderItems, target: ContentMetadata
    ) -> ContentMetadata:
        """Set the fields of target from recognised headers."""
        ...

    def parse_expires(self, value: str | None) -> datetime | None:
        """Parse an Expires value; invalid values are already expired."""
        ...


def is_chunked(headers: list[tuple[str, str]]) -> bool:
    """Return True if any Transfer-Encoding header says "chunked"."""
    return any(
        name.lower() == TRANSFER_ENCODING.lower() and value.strip().lower() == CHUNKED
        for name, value in headers
    )


def parse_content_length(value: str) -> int:
    text = value.strip()
    if text.startswith("-") and _DIGITS.fullmatch(text[1:]):
        raise MalformedHeaderError(CONTENT_LENGTH, value, "negative length")
    if not _DIGITS.fullmatch(text):
        raise MalformedHeaderError(CONTENT_LENGTH, value, "not an integer")
    length = int(text)
    if length > MAX_CONTENT_LENGTH:
        raise MalformedHeaderError(CONTENT_LENGTH, value, "exceeds 64 bits")
    return length


def parse_content_md5(value: str) -> bytes:
    try:
        return base64.b64decode(value.strip(), validate=True)
    except (binascii.Error, ValueError):
        raise MalformedHeaderError(CONTENT_MD5, value, "invalid base64") from None


class DefaultContentMetadataCodec:
    """HTTP/1.1 implementation of ContentMetadataCodec.

    Holds only configuration, so one instance can be shared freely.

    Example:
        codec = DefaultContentMetadataCodec()
        headers = codec.encode(ContentMetadata(content_type="text/plain"))
        md = codec.read(response.headers)
    """

    def __init__(
        self,
        config: CodecConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config or CodecConfig()
        self._log = logger or logging.getLogger(self._config.logger_name)

    @property
    def expires_date_codec(self) -> DateCodec:
        """Date codec for the Expires header. Override to change the format."""
        return self._config.date_codec

    def encode(self, metadata: ContentMetadata) -> list[tuple[str, str]]:
        """Generate headers for the populated fields.

        Raises ValueError if content_length was set to a negative or
        oversized value after construction.
        """
        headers: list[tuple[str, str]] = []
        if metadata.content_type is not None:
            headers.append((CONTENT_TYPE, metadata.content_type))
        if metadata.content_disposition is not None:
            headers.append((CONTENT_DISPOSITION, metadata.content_disposition))
        if metadata.content_encoding is not None:
            headers.append((CONTENT_ENCODING, metadata.content_encoding))
        if metadata.content_language is not None:
            headers.append((CONTENT_LANGUAGE, metadata.content_language))
        if metadata.content_length is not None:
            length = check_content_length(metadata.content_length)
            headers.append((CONTENT_LENGTH, str(length)))
        if metadata.content_md5 is not None:
            md5 = base64.b64encode(metadata.content_md5).decode("ascii")
            headers.append((CONTENT_MD5, md5))
        if metadata.expires is not None:
            expires = self.expires_date_codec.to_string(metadata.expires)
            headers.append((EXPIRES, expires))
        return headers

    def decode(
        self, headers: HeaderItems, target: ContentMetadata
    ) -> ContentMetadata:
        """Set the fields of target from recognised headers.

        Unrecognised headers are ignored and a repeated header overwrites
        the earlier value. Raises MalformedHeaderError for an invalid
        Content-Length or Content-MD5; fields set before the bad header
        keep their new values.
        """
        items = header_items(headers)
        chunked = is_chunked(items)

        for name, value in items:
            key = name.lower()
            if key == CONTENT_LENGTH.lower():
                if not chunked:
                    target.content_length = parse_content_length(value)
            elif key == CONTENT_MD5.lower():
                target.content_md5 = parse_content_md5(value)
            elif key in _STRING_FIELDS:
                setattr(target, _STRING_FIELDS[key], value)
            elif key == EXPIRES.lower():
                target.expires = self.parse_expires(value)
        return target

    def read(self, headers: HeaderItems) -> ContentMetadata:
        """Decode headers into a new ContentMetadata."""
        return self.decode(headers, ContentMetadata())

    def parse_expires(self, value: str | None) -> datetime | None:
        if value is None:
            return None
        try:
            return self.expires_date_codec.to_datetime(value)
        except ValueError as e:
            self._log.debug(
                "Invalid Expires header (%s); should be in RFC-1123 format; "
                "treating as already expired: %s",
                value,
                e,
            )
            return self._config.expired_sentinel
