"""Normalisation of the header collections accepted by the codec."""

from collections.abc import Iterable, Mapping
from typing import Protocol


class _MultiItems(Protocol):
    def multi_items(self) -> list[tuple[str, str]]: ...


# dict, starlette Headers, httpx.Headers, or (name, value) pairs
HeaderItems = Mapping[str, str] | _MultiItems | Iterable[tuple[str, str]]


def header_items(headers: HeaderItems) -> list[tuple[str, str]]:
    """Flatten a header collection into ordered (name, value) pairs.

    httpx.Headers is read through multi_items() so repeated headers are
    kept apart instead of being joined with commas.
    """
    multi_items = getattr(headers, "multi_items", None)
    if callable(multi_items):
        return list(multi_items())
    if isinstance(headers, Mapping):
        return list(headers.items())
    return [(name, value) for name, value in headers]

