"""cirrus-io: content metadata codec for HTTP object storage clients."""

from cirrus_io.codec import ContentMetadataCodec, DefaultContentMetadataCodec
from cirrus_io.config import CodecConfig
from cirrus_io.dates import EPOCH, DateCodec, RFC1123DateCodec
from cirrus_io.errors import ContentMetadataError, MalformedHeaderError
from cirrus_io.headers import HeaderItems
from cirrus_io.metadata import HTTP_HEADERS, ContentMetadata

__version__ = "0.1.0"

__all__ = [
    # metadata
    "ContentMetadata",
    "HTTP_HEADERS",
    # codec
    "ContentMetadataCodec",
    "DefaultContentMetadataCodec",
    "CodecConfig",
    "HeaderItems",
    # dates
    "DateCodec",
    "RFC1123DateCodec",
    "EPOCH",
    # errors
    "ContentMetadataError",
    "MalformedHeaderError",
]
