"""Configuration for the content metadata codec."""

from dataclasses import dataclass, field
from datetime import datetime

from cirrus_io.dates import EPOCH, DateCodec, RFC1123DateCodec

DEFAULT_LOGGER_NAME = "cirrus_io.codec"


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for DefaultContentMetadataCodec."""

    date_codec: DateCodec = field(default_factory=RFC1123DateCodec)
    """Format of the Expires header."""

    expired_sentinel: datetime = EPOCH
    """Returned for an Expires value that cannot be parsed."""

    logger_name: str = DEFAULT_LOGGER_NAME
    """Logger used when no logger is passed to the codec."""
