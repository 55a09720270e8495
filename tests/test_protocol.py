import json

import pytest

from odoo_jsonrpc.models.response import RpcFailure, RpcMalformed, RpcSuccess
from odoo_jsonrpc.protocol import (
    create_request,
    deserialize_response,
    is_authenticate_path,
    normalize_host,
    serialize_request,
)


def test_serialize_request_omits_session_when_logged_out() -> None:
    request = create_request("r0", {"db": "demo"}, session_id="")
    assert json.loads(serialize_request(request)) == {
        "jsonrpc": "2.0",
        "method": "call",
        "params": {"db": "demo"},
        "id": "r0",
    }


def test_serialize_request_carries_session_when_logged_in() -> None:
    request = create_request("r5", None, session_id="abc")
    body = json.loads(serialize_request(request))
    assert body["session_id"] == "abc"
    assert body["params"] == {}


def test_serialize_request_keeps_non_ascii_text() -> None:
    request = create_request("r0", {"name": "Société Générale"})
    assert "Société Générale".encode("utf-8") in serialize_request(request)


def test_deserialize_success() -> None:
    decoded = deserialize_response('{"jsonrpc": "2.0", "id": "r0", "result": [1, 2]}')
    assert isinstance(decoded, RpcSuccess)
    assert decoded.result == [1, 2]


def test_deserialize_null_result_is_success() -> None:
    decoded = deserialize_response('{"result": null}')
    assert isinstance(decoded, RpcSuccess)
    assert decoded.result is None


def test_deserialize_failure_keeps_payload() -> None:
    decoded = deserialize_response('{"error": {"code": 100, "message": "Odoo Session Expired"}}')
    assert isinstance(decoded, RpcFailure)
    assert decoded.error == {"code": 100, "message": "Odoo Session Expired"}


@pytest.mark.parametrize("body", ["", "not json", "{\"result\": ", "42", "null", "true", "\"text\""])
def test_deserialize_unparseable_or_scalar(body: str) -> None:
    decoded = deserialize_response(body)
    assert isinstance(decoded, RpcMalformed)
    assert decoded.parse_error


def test_deserialize_missing_result() -> None:
    decoded = deserialize_response('{"jsonrpc": "2.0", "id": "r0"}')
    assert isinstance(decoded, RpcMalformed)
    assert not decoded.parse_error
    assert decoded.reason == "no result in data received"


@pytest.mark.parametrize("path, expected", [
    ("/web/session/authenticate", True),
    ("/odoo/web/session/authenticate", True),
    ("/web/session/authenticate/extra", False),
    ("/web/session/get_session_info", False),
])
def test_is_authenticate_path(path: str, expected: bool) -> None:
    assert is_authenticate_path(path) is expected


@pytest.mark.parametrize("host, expected", [
    ("localhost:8069", "http://localhost:8069"),
    ("http://odoo.test", "http://odoo.test"),
    ("https://odoo.test", "https://odoo.test"),
    ("ftp://odoo.test", "http://ftp://odoo.test"),
])
def test_normalize_host(host: str, expected: str) -> None:
    assert normalize_host(host) == expected


@pytest.mark.parametrize("body", ["[]", "[1, 2, 3]", "[{\"result\": 1}]"])
def test_deserialize_array_has_no_result(body: str) -> None:
    decoded = deserialize_response(body)
    assert isinstance(decoded, RpcMalformed)
    assert not decoded.parse_error
    assert decoded.reason == "no result in data received"
