"""Response models for Odoo JSON-RPC communication."""

from typing import Any, Dict, Optional, Union
from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """
    Readable view over the ``error`` member of an Odoo response.
    
    Only used to describe an error; callers always receive the raw payload.
    """
    
    code: Optional[int] = Field(None, description="Error code")
    message: str = Field("Odoo Server Error", description="Human-readable error message")
    data: Optional[Dict[str, Any]] = Field(None, description="Exception details (name, debug, arguments)")
    
    class Config:
        """Pydantic configuration."""
        extra = "allow"


class RpcSuccess(BaseModel):
    """Body carried a ``result`` member."""
    
    result: Any = Field(None, description="Result object, may legitimately be null or false")


class RpcFailure(BaseModel):
    """Body carried an ``error`` member."""
    
    error: Any = Field(..., description="Error payload exactly as sent by the server")


class RpcMalformed(BaseModel):
    """Body could not be interpreted as a response envelope."""
    
    reason: str = Field(..., description="Why the body was rejected")
    parse_error: bool = Field(False, description="True when the body was not valid JSON at all")


DecodedResponse = Union[RpcSuccess, RpcFailure, RpcMalformed]
