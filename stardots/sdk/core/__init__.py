"""Core components."""

from .exceptions import (
    DecodingError,
    EncodingError,
    InvalidResponseError,
    InvalidURLError,
    NetworkError,
    StarDotsError,
)

__all__ = [
    "StarDotsError",
    "InvalidURLError",
    "InvalidResponseError",
    "NetworkError",
    "DecodingError",
    "EncodingError",
]
