"""Database management endpoints."""

from typing import Any

from ..http_client import JsonRpcClient
from . import form_fields, paths


async def list_databases(client: JsonRpcClient) -> Any:
    """List the databases available on the server."""
    return await client.call(paths.DATABASE_LIST)


async def create_database(client: JsonRpcClient, name: str, master_password: str,
                          demo: bool, language: str, admin_password: str) -> Any:
    """
    Create a new database.

    Args:
        client: JSON-RPC client instance
        name: Name of the database to create
        master_password: Server master password (from the Odoo config file)
        demo: Load demonstration data
        language: Language code to install (e.g. ``en_US``)
        admin_password: Password of the initial admin user
    """
    return await client.call(paths.DATABASE_CREATE, form_fields(
        ("super_admin_pwd", master_password),
        ("db_name", name),
        ("demo_data", demo),
        ("db_lang", language),
        ("create_admin_pwd", admin_password),
    ))


async def duplicate_database(client: JsonRpcClient, source_name: str, destination_name: str,
                             master_password: str) -> Any:
    """Copy ``source_name`` into a new database called ``destination_name``."""
    return await client.call(paths.DATABASE_DUPLICATE, form_fields(
        ("super_admin_pwd", master_password),
        ("db_original_name", source_name),
        ("db_name", destination_name),
    ))


async def drop_database(client: JsonRpcClient, name: str, master_password: str) -> Any:
    """Drop a database."""
    return await client.call(paths.DATABASE_DROP, form_fields(
        ("drop_pwd", master_password),
        ("drop_db", name),
    ))


# Endpoint handler mapping
ENDPOINT_HANDLERS = {
    "list": list_databases,
    "create": create_database,
    "duplicate": duplicate_database,
    "drop": drop_database,
}
