"""Mutable state shared by every call issued through one client."""

from pydantic import BaseModel, Field


class ClientState(BaseModel):
    """Target host, current session and request counter of a client."""
    
    host: str = Field("", description="Base URL of the Odoo server, scheme included")
    session_id: str = Field("", description="Session token from the last successful login, empty when logged out")
    request_counter: int = Field(0, ge=0, description="Number of requests issued so far")
    
    def next_request_id(self) -> str:
        """Reserve the next request id and advance the counter."""
        request_id = f"r{self.request_counter}"
        self.request_counter += 1
        return request_id
