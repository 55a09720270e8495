"""Exception types raised by the Odoo JSON-RPC client."""

from typing import Any, Optional

from pydantic import ValidationError

from .models.response import ErrorDetail


class OdooRpcError(Exception):
    """Base class for every error raised by this package."""
    pass


class TransportError(OdooRpcError):
    """HTTP round trip failed or returned a status other than 200/201."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ProtocolError(OdooRpcError):
    """Response body could not be interpreted as a JSON-RPC envelope."""
    pass


class RemoteError(OdooRpcError):
    """
    Error reported by the server in the ``error`` member of the response.

    The server's payload is kept untouched on ``error``.
    """

    def __init__(self, error: Any):
        self.error = error
        super().__init__(_describe_remote_error(error))


class AuthError(OdooRpcError):
    """Login was rejected by the server (``uid`` is ``false``)."""
    pass


class NotFoundError(OdooRpcError):
    """No record matched a lookup by id."""
    pass


def _describe_remote_error(error: Any) -> str:
    if not isinstance(error, dict):
        return f"Odoo server error: {error!r}"

    try:
        detail = ErrorDetail.model_validate(error)
    except ValidationError:
        return f"Odoo server error: {error!r}"

    data_message = detail.data.get("message") if isinstance(detail.data, dict) else None
    if data_message and data_message != detail.message:
        return f"{detail.message} (code: {detail.code}): {data_message}"
    return f"{detail.message} (code: {detail.code})"
