"""JSON-RPC envelope handling for Odoo's ``/web`` controllers."""

import json
import re
from typing import Any, Dict, Optional

from .models.request import Request
from .models.response import DecodedResponse, RpcFailure, RpcMalformed, RpcSuccess
from .utils.logger import get_logger


CONTENT_TYPE = "application/json; charset=UTF-8"

AUTHENTICATE_PATH_RE = re.compile(r"/web/session/authenticate$")


def create_request(request_id: str, params: Optional[Dict[str, Any]] = None,
                   session_id: Optional[str] = None) -> Request:
    """
    Create a request envelope.

    Args:
        request_id: Unique request identifier
        params: Optional controller parameters
        session_id: Current session token; omitted from the envelope when empty

    Returns:
        Request object
    """
    return Request(
        id=request_id,
        params=params or {},
        session_id=session_id or None
    )


def serialize_request(request: Request) -> bytes:
    """
    Serialize a request envelope to the UTF-8 JSON request body.

    Args:
        request: Request object to serialize

    Returns:
        Encoded body
    """
    json_dict = request.model_dump(exclude_none=True)
    return json.dumps(json_dict, ensure_ascii=False).encode("utf-8")


def deserialize_response(body: str) -> DecodedResponse:
    """
    Classify a response body into success, remote failure or malformed.

    ``error`` takes precedence over ``result`` when both are present.

    Args:
        body: Raw response text

    Returns:
        One of RpcSuccess, RpcFailure or RpcMalformed
    """
    logger = get_logger()

    try:
        data = json.loads(body)
    except ValueError as e:
        logger.debug(f"Response is not valid JSON: {e}")
        return RpcMalformed(reason=str(e), parse_error=True)

    # Arrays have neither member; scalars and null cannot be inspected at all
    if isinstance(data, list):
        return RpcMalformed(reason="no result in data received")

    if not isinstance(data, dict):
        return RpcMalformed(reason=f"expected a JSON object, got {type(data).__name__}", parse_error=True)

    if "error" in data:
        return RpcFailure(error=data["error"])

    if "result" not in data:
        return RpcMalformed(reason="no result in data received")

    return RpcSuccess(result=data["result"])


def is_authenticate_path(path: str) -> bool:
    """Whether a request path targets the login controller."""
    return AUTHENTICATE_PATH_RE.search(path) is not None


def normalize_host(host: str) -> str:
    """Prefix ``http://`` unless the host already names http or https."""
    if re.match(r"^https?://", host) is None:
        host = "http://" + host
    return host
