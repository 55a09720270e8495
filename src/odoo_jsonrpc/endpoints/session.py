"""Session endpoints."""

from typing import Any

from ..http_client import JsonRpcClient
from . import form_fields, paths


async def get_session_info(client: JsonRpcClient) -> Any:
    """Get information about the current session."""
    return await client.call(paths.SESSION_INFO)


async def change_password(client: JsonRpcClient, old_password: str, new_password: str) -> Any:
    """
    Change the password of the logged-in user.

    The confirmation field is filled with ``new_password``.
    """
    return await client.call(paths.SESSION_CHANGE_PASSWORD, form_fields(
        ("old_pwd", old_password),
        ("new_password", new_password),
        ("confirm_pwd", new_password),
    ))


async def get_languages(client: JsonRpcClient) -> Any:
    """Get the list of available languages."""
    return await client.call(paths.SESSION_LANGUAGES)


async def get_modules(client: JsonRpcClient) -> Any:
    """Get the list of installed modules."""
    return await client.call(paths.SESSION_MODULES)


# Endpoint handler mapping
ENDPOINT_HANDLERS = {
    "get_infos": get_session_info,
    "change_password": change_password,
    "get_languages": get_languages,
    "get_modules": get_modules,
}
