"""Unit tests for request body encoding."""

import json

import pytest

from stardots.sdk.core import EncodingError
from stardots.sdk.models import DeleteSpaceRequest
from stardots.sdk.runtime.rest import encode_request_body


def test_encode_model_compact():
    assert encode_request_body(DeleteSpaceRequest(space="demo")) == b'{"space":"demo"}'


def test_encode_mapping():
    raw = encode_request_body({"space": "démo", "public": True})
    assert json.loads(raw) == {"space": "démo", "public": True}
    assert b" " not in raw


def test_encode_unrepresentable_fails():
    with pytest.raises(EncodingError):
        encode_request_body({"space": object()})
    with pytest.raises(EncodingError):
        encode_request_body({"ratio": float("nan")})
