"""Request signing.

Every call carries five headers derived from the client credentials, the
current time and a random draw:

    x-stardots-timestamp  Unix time in whole seconds
    x-stardots-nonce      Unix time in milliseconds followed by 10000 + rand[0, 10000)
    x-stardots-key        client key
    x-stardots-sign       upper-case hex MD5 of "{timestamp}|{clientSecret}|{nonce}"
    x-stardots-extra      compact JSON identifying the SDK build

MD5 is what the StarDots server verifies; it is reproduced exactly.

Nonce uniqueness is probabilistic only: two calls in the same millisecond
with the same random draw produce the same nonce.
"""

from __future__ import annotations

import hashlib
import json
import random
import time
from collections.abc import Callable
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from ..config import (
    HEADER_EXTRA,
    HEADER_KEY,
    HEADER_NONCE,
    HEADER_SIGN,
    HEADER_TIMESTAMP,
    SDK_LANGUAGE,
    SDK_VERSION,
    get_arch_tag,
    get_os_tag,
)


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class Credentials(BaseModel):
    """Client credentials, fixed for the lifetime of a client."""

    client_key: str
    client_secret: str = Field(..., repr=False)

    model_config = ConfigDict(frozen=True)


class SignedHeaders(BaseModel):
    """Authentication headers for a single request."""

    timestamp: str
    nonce: str
    key: str
    sign: str
    extra: str

    model_config = ConfigDict(frozen=True)

    def as_headers(self) -> dict[str, str]:
        """Return the wire header mapping."""
        return {
            HEADER_TIMESTAMP: self.timestamp,
            HEADER_NONCE: self.nonce,
            HEADER_KEY: self.key,
            HEADER_SIGN: self.sign,
            HEADER_EXTRA: self.extra,
        }


_system_random = random.SystemRandom()


def compute_sign(timestamp: str, client_secret: str, nonce: str) -> str:
    """Upper-case hex MD5 digest of ``"{timestamp}|{client_secret}|{nonce}"``."""
    pre_image = f"{timestamp}|{client_secret}|{nonce}".encode()
    return hashlib.md5(pre_image, usedforsecurity=False).hexdigest().upper()


def make_nonce(now: float, random_source: RandomSource) -> str:
    return str(int(now * 1000)) + str(10000 + random_source.randrange(10000))


def build_extra(version: str = SDK_VERSION) -> str:
    """Compact JSON identification metadata for the x-stardots-extra header."""
    info = {
        "sdk": "true",
        "language": SDK_LANGUAGE,
        "version": version,
        "os": get_os_tag(),
        "arch": get_arch_tag(),
    }
    return json.dumps(info, separators=(",", ":"))


def sign_request(
    credentials: Credentials,
    now: float | None = None,
    random_source: RandomSource | None = None,
) -> SignedHeaders:
    """Sign a request.

    Args:
        credentials: Client key and secret
        now: Unix time in seconds; defaults to the wall clock
        random_source: Object with ``randrange``; defaults to ``random.SystemRandom``

    Returns:
        Fresh SignedHeaders for one call
    """
    if now is None:
        now = time.time()
    if random_source is None:
        random_source = _system_random

    timestamp = str(int(now))
    nonce = make_nonce(now, random_source)
    return SignedHeaders(
        timestamp=timestamp,
        nonce=nonce,
        key=credentials.client_key,
        sign=compute_sign(timestamp, credentials.client_secret, nonce),
        extra=build_extra(),
    )


class RequestSigner:
    """Binds credentials to a clock and random source."""

    def __init__(
        self,
        credentials: Credentials,
        clock: Callable[[], float] = time.time,
        random_source: RandomSource | None = None,
    ) -> None:
        self.credentials = credentials
        self._clock = clock
        self._random_source = random_source

    def sign(self) -> SignedHeaders:
        return sign_request(self.credentials, self._clock(), self._random_source)

    def headers(self) -> dict[str, str]:
        return self.sign().as_headers()
