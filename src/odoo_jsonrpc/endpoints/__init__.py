"""Convenience operations mapped onto ``JsonRpcClient.call``."""

from typing import Any, Dict, List, Tuple


def form_fields(*pairs: Tuple[str, Any]) -> Dict[str, List[Dict[str, Any]]]:
    """
    Shape name/value pairs the way Odoo's form-based controllers read them.

    Args:
        pairs: (name, value) tuples, in submission order

    Returns:
        ``{"fields": [{"name": ..., "value": ...}, ...]}``
    """
    return {"fields": [{"name": name, "value": value} for name, value in pairs]}
