"""Login endpoint."""

from typing import Any, Dict

from ..http_client import JsonRpcClient
from . import paths


async def login(client: JsonRpcClient, db: str, username: str, password: str) -> Dict[str, Any]:
    """
    Log into an Odoo database.

    On success the client keeps the returned session and sends it with every
    following request.

    Args:
        client: JSON-RPC client instance
        db: Database name
        username: Login of the user
        password: Password of the user

    Returns:
        Session information (uid, user context, ...)

    Raises:
        AuthError: If the credentials are rejected
    """
    return await client.call(paths.AUTHENTICATE, {
        "db": db,
        "login": username,
        "password": password
    })


# Endpoint handler mapping
ENDPOINT_HANDLERS = {
    "login": login,
}
