"""High-level entry point binding every endpoint to one client."""

import functools
from typing import Any, Callable, Dict, Optional

from .endpoints import auth, database, model, session
from .http_client import JsonRpcClient
from .utils.config import Config
from .utils.logger import get_logger


logger = get_logger()


class EndpointGroup:
    """Exposes a handler mapping as methods bound to a client."""

    def __init__(self, name: str, client: JsonRpcClient, handlers: Dict[str, Callable[..., Any]]):
        self.name = name
        self._client = client
        self._handlers = dict(handlers)

    def __getattr__(self, item: str) -> Callable[..., Any]:
        handlers = self.__dict__.get("_handlers", {})
        if item not in handlers:
            raise AttributeError(f"'{self.name}' has no endpoint '{item}'")
        return functools.partial(handlers[item], self._client)

    def __dir__(self):
        return sorted(set(super().__dir__()) | set(self._handlers))

    def names(self) -> list[str]:
        """Names of the endpoints in this group."""
        return list(self._handlers)


class OdooJsonRpc:
    """
    Odoo JSON-RPC API.

    Usage::

        async with OdooJsonRpc(host="localhost:8069") as odoo:
            await odoo.login("database", "admin", "admin")
            partner = await odoo.model.find("res.partner", 1, ["name"])
    """

    def __init__(self, client: Optional[JsonRpcClient] = None, host: Optional[str] = None):
        """
        Initialize the API.

        Args:
            client: JSON-RPC client instance (a new one is created when omitted)
            host: Odoo server host, applied to the client when given
        """
        self.client = client if client is not None else JsonRpcClient()
        if host:
            self.client.set_host(host)

        self.database = EndpointGroup("database", self.client, database.ENDPOINT_HANDLERS)
        self.session = EndpointGroup("session", self.client, session.ENDPOINT_HANDLERS)
        self.model = EndpointGroup("model", self.client, model.ENDPOINT_HANDLERS)
        self._auth = EndpointGroup("auth", self.client, auth.ENDPOINT_HANDLERS)

        for group in (self.database, self.session, self.model, self._auth):
            logger.debug(f"Loaded {len(group.names())} {group.name} endpoints")

    @classmethod
    def from_config(cls, config: Config) -> "OdooJsonRpc":
        """Create the API from a Config instance."""
        return cls(client=JsonRpcClient.from_config(config))

    def set_host(self, host: str) -> "OdooJsonRpc":
        """Define the Odoo server to talk to; returns self for chaining."""
        self.client.set_host(host)
        return self

    async def login(self, db: str, username: str, password: str) -> Dict[str, Any]:
        """Log into ``db``; the session is kept for the following calls."""
        return await self._auth.login(db, username, password)

    async def aclose(self) -> None:
        """Close the underlying client and the HTTP client it owns."""
        await self.client.aclose()

    async def __aenter__(self) -> "OdooJsonRpc":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.aclose()
