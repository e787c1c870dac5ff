"""Adapters between ContentMetadata and httpx / starlette messages."""

import httpx
from starlette.requests import Request
from starlette.responses import Response

from cirrus_io.codec import ContentMetadataCodec, DefaultContentMetadataCodec
from cirrus_io.metadata import ContentMetadata


def _codec(codec: ContentMetadataCodec | None) -> ContentMetadataCodec:
    return codec or DefaultContentMetadataCodec()


def to_httpx_headers(
    metadata: ContentMetadata,
    codec: ContentMetadataCodec | None = None,
) -> httpx.Headers:
    """Encode metadata as headers for an outgoing httpx request.

    Example:
        headers = to_httpx_headers(ContentMetadata(content_type="text/plain"))
        await client.put("/bucket/key", content=b"hello", headers=headers)
    """
    return httpx.Headers(_codec(codec).encode(metadata))


def from_httpx_response(
    response: httpx.Response,
    codec: ContentMetadataCodec | None = None,
) -> ContentMetadata:
    """Decode the content metadata of an httpx response."""
    return _codec(codec).decode(response.headers, ContentMetadata())


def from_starlette_request(
    request: Request,
    codec: ContentMetadataCodec | None = None,
) -> ContentMetadata:
    """Decode the content metadata of an incoming starlette request."""
    return _codec(codec).decode(request.headers, ContentMetadata())


def metadata_response(
    content: bytes,
    metadata: ContentMetadata,
    *,
    status_code: int = 200,
    codec: ContentMetadataCodec | None = None,
) -> Response:
    """Build a starlette response carrying the encoded metadata.

    Starlette only fills in Content-Type and Content-Length when the
    metadata leaves them unset.
    """
    headers = dict(_codec(codec).encode(metadata))
    return Response(content=content, status_code=status_code, headers=headers)
