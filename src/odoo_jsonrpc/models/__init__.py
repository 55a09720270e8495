"""Pydantic models for envelopes and client state."""

from .request import Request
from .response import DecodedResponse, ErrorDetail, RpcFailure, RpcMalformed, RpcSuccess
from .state import ClientState

__all__ = [
    "ClientState",
    "DecodedResponse",
    "ErrorDetail",
    "Request",
    "RpcFailure",
    "RpcMalformed",
    "RpcSuccess",
]
