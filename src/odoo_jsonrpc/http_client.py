"""HTTP client for communicating with an Odoo server over JSON-RPC."""

from typing import Any, Dict, Optional

import httpx

from .errors import AuthError, ProtocolError, RemoteError, TransportError
from .models.response import RpcFailure, RpcMalformed
from .models.state import ClientState
from .protocol import (
    CONTENT_TYPE,
    create_request,
    deserialize_response,
    is_authenticate_path,
    normalize_host,
    serialize_request,
)
from .utils.config import Config
from .utils.logger import get_logger


SESSION_COOKIE = "session_id"

SUCCESS_STATUSES = (200, 201)


class JsonRpcClient:
    """JSON-RPC client bound to one Odoo server and one session."""

    def __init__(
        self,
        host: str = "",
        *,
        state: Optional[ClientState] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
        verify_ssl: bool = True
    ):
        """
        Initialize the JSON-RPC client.

        Args:
            host: Odoo server host; ``http://`` is assumed when no scheme is given
            state: Shared client state (a fresh one is created when omitted)
            http_client: HTTP client to send requests with; owned and closed by
                this instance only when omitted
            timeout: HTTP timeout in seconds, used for the owned HTTP client
            verify_ssl: Verify TLS certificates, used for the owned HTTP client
        """
        self.state = state if state is not None else ClientState()
        self.logger = get_logger()

        self._owns_http_client = http_client is None
        self._http_client = http_client if http_client is not None else httpx.AsyncClient(
            timeout=timeout,
            verify=verify_ssl,
            follow_redirects=True
        )

        if host:
            self.set_host(host)

    @classmethod
    def from_config(cls, config: Config, **kwargs: Any) -> "JsonRpcClient":
        """Create a client from a Config instance."""
        return cls(
            host=config.host,
            timeout=config.timeout,
            verify_ssl=config.verify_ssl,
            **kwargs
        )

    @property
    def host(self) -> str:
        return self.state.host

    @property
    def session_id(self) -> str:
        return self.state.session_id

    @property
    def request_counter(self) -> int:
        return self.state.request_counter

    def set_host(self, host: str) -> "JsonRpcClient":
        """
        Define the Odoo server to talk to.

        Args:
            host: Host name, optionally with an ``http://`` or ``https://`` scheme

        Returns:
            This client, for chaining
        """
        self.state.host = normalize_host(host)
        self.logger.debug(f"Host set to {self.state.host}")
        return self

    async def call(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Send one JSON-RPC request and return its result.

        Args:
            path: Controller path relative to the host (e.g. ``/web/dataset/call_kw``)
            params: Optional controller parameters

        Returns:
            The ``result`` member of the response

        Raises:
            TransportError: If the request fails or the status is not 200/201
            ProtocolError: If the body is not a valid response envelope
            RemoteError: If the server answers with an ``error`` member
            AuthError: If a login is rejected
        """
        session_id = self.state.session_id
        # Reserved before the first await: concurrent calls never share an id
        request_id = self.state.next_request_id()
        credentialed = bool(session_id)

        request = create_request(request_id, params, session_id)
        http_request = self._http_client.build_request(
            "POST",
            self.state.host + path,
            content=serialize_request(request),
            headers={"Content-Type": CONTENT_TYPE}
        )
        if credentialed:
            http_request.headers["Cookie"] = _with_session_cookie(http_request.headers.get("Cookie", ""), session_id)
        elif "Cookie" in http_request.headers:
            del http_request.headers["Cookie"]

        self.logger.debug(f"Sending request: {path} (ID: {request_id}, credentialed: {credentialed})")

        try:
            response = await self._http_client.send(http_request, follow_redirects=True)
        except httpx.RequestError as e:
            self.logger.error(f"Request {request_id} to {path} failed: {e}")
            raise TransportError(f"Fail to get {path}") from e

        if response.status_code not in SUCCESS_STATUSES:
            self.logger.error(f"Request {request_id} to {path} returned HTTP {response.status_code}")
            raise TransportError(f"Fail to get {path}", status_code=response.status_code)

        decoded = deserialize_response(response.text)

        if isinstance(decoded, RpcMalformed):
            self.logger.error(f"Malformed response to {request_id}: {decoded.reason}")
            if decoded.parse_error:
                raise ProtocolError(f"Odoo Exception : {decoded.reason}")
            raise ProtocolError(decoded.reason)

        if isinstance(decoded, RpcFailure):
            error = RemoteError(decoded.error)
            self.logger.warning(f"Server error for {request_id}: {error}")
            raise error

        if is_authenticate_path(path):
            self._capture_session(decoded.result, response)

        self.logger.debug(f"Response to {request_id} contains result: {type(decoded.result).__name__}")
        return decoded.result

    def _capture_session(self, result: Any, response: httpx.Response) -> None:
        """Store the session token carried by a successful login response."""
        if not isinstance(result, dict):
            self.logger.error(f"Login result is not an object: {type(result).__name__}")
            raise ProtocolError(f"Odoo Exception : login result is not an object ({type(result).__name__})")

        if result.get("uid") is False:
            self.logger.warning("Login rejected: bad database, login or password")
            raise AuthError("Fail to login in database")

        # Odoo >= 12 stops echoing the token in the result and only sets the cookie
        session_id = result.get("session_id") or response.cookies.get(SESSION_COOKIE) or ""
        self.state.session_id = session_id
        self.logger.info(f"Logged in as uid {result.get('uid')}")

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http_client.aclose()
            self.logger.debug("HTTP client closed")

    async def __aenter__(self) -> "JsonRpcClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.aclose()


def _with_session_cookie(cookie_header: str, session_id: str) -> str:
    """Keep the jar's cookies and make ``session_id`` carry the current token."""
    cookies = [
        cookie for cookie in (part.strip() for part in cookie_header.split(";"))
        if cookie and not cookie.startswith(f"{SESSION_COOKIE}=")
    ]
    cookies.append(f"{SESSION_COOKIE}={session_id}")
    return "; ".join(cookies)
