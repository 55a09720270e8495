"""Asynchronous client for Odoo's JSON-RPC web API."""

from .api import EndpointGroup, OdooJsonRpc
from .errors import (
    AuthError,
    NotFoundError,
    OdooRpcError,
    ProtocolError,
    RemoteError,
    TransportError,
)
from .http_client import JsonRpcClient
from .models.state import ClientState
from .utils.config import Config
from .utils.logger import get_logger, setup_logger

__version__ = "0.1.0"

__all__ = [
    "AuthError",
    "ClientState",
    "Config",
    "EndpointGroup",
    "JsonRpcClient",
    "NotFoundError",
    "OdooJsonRpc",
    "OdooRpcError",
    "ProtocolError",
    "RemoteError",
    "TransportError",
    "get_logger",
    "setup_logger",
]
