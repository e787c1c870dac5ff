"""Tests for ContentMetadata."""

import pytest

from cirrus_io import HTTP_HEADERS, ContentMetadata


class TestContentMetadata:
    def test_fields_default_to_none(self) -> None:
        """A new record has no populated fields."""
        md = ContentMetadata()
        assert md.content_type is None
        assert md.content_length is None
        assert md.content_md5 is None
        assert md.expires is None
        assert md.is_empty()

    def test_any_field_makes_it_non_empty(self) -> None:
        """Zero and other set values count as populated."""
        assert not ContentMetadata(content_language="en").is_empty()
        assert not ContentMetadata(content_length=0).is_empty()

    def test_negative_length_rejected(self) -> None:
        """Negative byte counts fail at construction."""
        with pytest.raises(ValueError, match="non-negative"):
            ContentMetadata(content_length=-1)

    def test_oversized_length_rejected(self) -> None:
        """Byte counts beyond 64 bits fail at construction."""
        with pytest.raises(ValueError, match="64 bits"):
            ContentMetadata(content_length=2**63)

    def test_non_int_length_rejected(self) -> None:
        """Booleans are not accepted as byte counts."""
        with pytest.raises(TypeError):
            ContentMetadata(content_length=True)

    def test_md5_coerced_to_bytes(self) -> None:
        """Bytes-like digests are stored as bytes."""
        md = ContentMetadata(content_md5=bytearray(b"\x01\x02"))
        assert md.content_md5 == b"\x01\x02"
        assert isinstance(md.content_md5, bytes)

    def test_copy_is_independent(self) -> None:
        """Changing a copy leaves the original untouched."""
        original = ContentMetadata(content_type="text/plain")
        clone = original.copy()
        clone.content_type = "text/html"

        assert original.content_type == "text/plain"
        assert clone == ContentMetadata(content_type="text/html")


def test_http_headers_are_canonical() -> None:
    """Header names are listed in encode order with canonical case."""
    assert HTTP_HEADERS == (
        "Content-Type",
        "Content-Disposition",
        "Content-Encoding",
        "Content-Language",
        "Content-Length",
        "Content-MD5",
        "Expires",
    )
