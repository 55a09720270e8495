"""Model (ORM) endpoints."""

from typing import Any, Dict, List, Optional

from ..errors import NotFoundError
from ..http_client import JsonRpcClient
from ..utils.logger import get_logger
from . import paths


logger = get_logger()


async def search_read(client: JsonRpcClient, model: str, domain: List[Any], fields: List[str]) -> Any:
    """
    Search a model and read the matching records.

    Args:
        client: JSON-RPC client instance
        model: Odoo model name (e.g. ``res.partner``)
        domain: Search criteria (e.g. ``[["is_company", "=", True]]``)
        fields: Fields to read

    Returns:
        ``{"length": int, "records": [...]}``
    """
    return await client.call(paths.SEARCH_READ, {
        "model": model,
        "domain": domain,
        "fields": fields
    })


async def find(client: JsonRpcClient, model: str, record_id: int,
               fields: Optional[List[str]] = None) -> Dict[str, Any]:
    """
    Read a single record by id.

    Args:
        client: JSON-RPC client instance
        model: Odoo model name
        record_id: Id of the record
        fields: Fields to read (all fields when omitted)

    Returns:
        The record

    Raises:
        NotFoundError: If no record has this id
    """
    domain = [["id", "=", record_id]]
    result = await search_read(client, model, domain, fields if fields is not None else [])

    # Emptiness is judged on the reported length, not on the records themselves
    if not isinstance(result, dict) or not result.get("length"):
        logger.debug(f"No {model} record with id {record_id}")
        raise NotFoundError("No result found")

    records = result.get("records") or []
    if not records:
        logger.warning(f"search_read on {model} reported length {result['length']} without records")
        raise NotFoundError("No result found")

    return records[0]


async def invoke(client: JsonRpcClient, model: str, method: str,
                 args: Optional[Any] = None, kwargs: Optional[Dict[str, Any]] = None) -> Any:
    """
    Call a public method of a model.

    Args:
        client: JSON-RPC client instance
        model: Odoo model name
        method: Method name (e.g. ``name_search``)
        args: Positional arguments (defaults to ``{}``)
        kwargs: Keyword arguments (defaults to ``{}``)

    Returns:
        Whatever the method returns
    """
    return await client.call(paths.CALL_KW, {
        "model": model,
        "method": method,
        "args": args if args is not None else {},
        "kwargs": kwargs if kwargs is not None else {}
    })


async def create(client: JsonRpcClient, model: str, values: Dict[str, Any]) -> Any:
    """Create a record and return its id."""
    return await invoke(client, model, "create", [values])


async def update(client: JsonRpcClient, model: str, record_id: int, values: Dict[str, Any]) -> Any:
    """Write ``values`` on an existing record."""
    return await invoke(client, model, "write", [record_id, values])


async def remove(client: JsonRpcClient, model: str, record_id: int) -> Any:
    """Delete a record."""
    return await invoke(client, model, "unlink", [record_id])


# Endpoint handler mapping
ENDPOINT_HANDLERS = {
    "search_read": search_read,
    "find": find,
    "invoke": invoke,
    "create": create,
    "update": update,
    "remove": remove,
}
