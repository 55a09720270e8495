"""Request envelope model for Odoo JSON-RPC communication."""

from typing import Any, Dict, Literal, Optional
from pydantic import BaseModel, Field


class Request(BaseModel):
    """JSON-RPC request envelope as expected by Odoo's ``/web`` controllers."""
    
    jsonrpc: Literal["2.0"] = Field("2.0", description="JSON-RPC protocol version")
    method: Literal["call"] = Field("call", description="Odoo routes every controller through the 'call' method")
    params: Dict[str, Any] = Field(default_factory=dict, description="Controller parameters as a JSON object")
    id: str = Field(..., description="Per-call identifier ('r' followed by the request counter)")
    session_id: Optional[str] = Field(None, description="Session token, only sent once logged in")
    
    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "jsonrpc": "2.0",
                "method": "call",
                "params": {
                    "model": "res.partner",
                    "domain": [["id", "=", 1]],
                    "fields": ["name"]
                },
                "id": "r3",
                "session_id": "8f2a4c1e0d"
            }
        }
