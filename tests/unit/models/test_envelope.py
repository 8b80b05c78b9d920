"""Unit tests for envelope decoding and narrowing."""

import pytest

from stardots.sdk.core import DecodingError
from stardots.sdk.models import (
    Envelope,
    FileAccessTicketResponse,
    JsonNumber,
    JsonObject,
    SpaceFileListResponse,
    SpaceListResponse,
)
from stardots.sdk.runtime.rest import decode_envelope

OK_BODY = b'{"code":0,"message":"ok","requestId":"r1","success":true,"timestamp":1,"data":{"x":1}}'


def test_decode_success_with_object_data():
    """Test envelope decoding narrows data to an object."""
    envelope = decode_envelope(OK_BODY)
    assert envelope.code == 0
    assert envelope.message == "ok"
    assert envelope.request_id == "r1"
    assert envelope.success is True
    assert envelope.timestamp == 1
    assert isinstance(envelope.data, JsonObject)
    assert envelope.data.as_object()["x"] == JsonNumber(1)
    assert envelope.data.get("x").as_number() == 1


def test_decode_missing_code_fails():
    with pytest.raises(DecodingError):
        decode_envelope(b'{"message":"ok","requestId":"r1","success":true,"timestamp":1}')


def test_decode_wrong_type_fails():
    """Test required fields are not coerced."""
    with pytest.raises(DecodingError):
        decode_envelope(b'{"code":"0","message":"ok","requestId":"r1","success":true,"timestamp":1}')
    with pytest.raises(DecodingError):
        decode_envelope(b'{"code":0,"message":"ok","requestId":"r1","success":"yes","timestamp":1}')


def test_decode_invalid_json_fails():
    with pytest.raises(DecodingError) as exc_info:
        decode_envelope(b"<html>bad gateway</html>")
    assert exc_info.value.detail


def test_absent_and_null_data():
    """Test absent or null data both decode to None."""
    base = '"code":0,"message":"ok","requestId":"r","success":true,"timestamp":5'
    assert decode_envelope(("{" + base + "}").encode()).data is None
    assert decode_envelope(("{" + base + ',"data":null}').encode()).data is None


def test_decode_array_and_scalar_data():
    base = '"code":0,"message":"ok","requestId":"r","success":true,"timestamp":5'
    array = decode_envelope(("{" + base + ',"data":[1,2]}').encode())
    assert array.data.to_python() == [1, 2]
    scalar = decode_envelope(("{" + base + ',"data":"text"}').encode())
    assert scalar.data.as_str() == "text"


def test_business_failure_is_a_value():
    """Test success=false decodes normally."""
    envelope = decode_envelope(
        b'{"code":40001,"message":"invalid sign","requestId":"r","success":false,"timestamp":9}'
    )
    assert envelope.success is False
    assert envelope.code == 40001
    assert not envelope.ok


def test_envelope_frozen():
    envelope = decode_envelope(OK_BODY)
    with pytest.raises(Exception):  # ValidationError
        envelope.code = 1


class TestTypedNarrowing:
    """Test CommonResponse.from_envelope for endpoint shapes."""

    def test_space_list(self):
        envelope = Envelope.model_validate(
            {
                "code": 0,
                "message": "ok",
                "requestId": "r",
                "success": True,
                "timestamp": 1,
                "data": [{"name": "demo", "public": True, "createdAt": 100, "fileCount": 2}],
            }
        )
        response = SpaceListResponse.from_envelope(envelope)
        assert response.request_id == "r"
        assert response.data[0].name == "demo"
        assert response.data[0].is_public is True
        assert response.data[0].file_count == 2

    def test_file_list(self):
        envelope = Envelope.model_validate(
            {
                "code": 0,
                "message": "ok",
                "requestId": "r",
                "success": True,
                "timestamp": 1,
                "data": {
                    "list": [
                        {
                            "name": "1.png",
                            "byteSize": 1024,
                            "size": "1 KB",
                            "uploadedAt": 1700000000,
                            "url": "https://cdn.example/1.png",
                        }
                    ]
                },
            }
        )
        response = SpaceFileListResponse.from_envelope(envelope)
        assert response.data.files[0].byte_size == 1024

    def test_business_failure_without_data(self):
        envelope = Envelope.model_validate(
            {"code": 1, "message": "denied", "requestId": "r", "success": False, "timestamp": 1}
        )
        response = FileAccessTicketResponse.from_envelope(envelope)
        assert response.data is None
        assert response.message == "denied"

    def test_shape_mismatch_raises_decoding_error(self):
        envelope = Envelope.model_validate(
            {
                "code": 0,
                "message": "ok",
                "requestId": "r",
                "success": True,
                "timestamp": 1,
                "data": "not a ticket",
            }
        )
        with pytest.raises(DecodingError):
            FileAccessTicketResponse.from_envelope(envelope)


def test_decode_invalid_utf8_fails():
    with pytest.raises(DecodingError):
        decode_envelope(b"\xff\xfe")
