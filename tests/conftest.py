"""Test fixtures for cirrus-io."""

import pytest

from cirrus_io import DefaultContentMetadataCodec


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def codec() -> DefaultContentMetadataCodec:
    return DefaultContentMetadataCodec()
