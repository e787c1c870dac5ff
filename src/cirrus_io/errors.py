"""Errors raised while decoding content metadata."""


class ContentMetadataError(ValueError):
    """Base class for content metadata errors."""


class MalformedHeaderError(ContentMetadataError):
    """A recognised header carried a value that cannot be decoded."""

    def __init__(self, header: str, value: str, reason: str) -> None:
        self.header = header
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {header} header ({value!r}): {reason}")
