"""
Location model describing where a sub-trace was executed.
"""

from typing import Optional
from pydantic import BaseModel, Field


class Location(BaseModel):
    """Execution context of a sub-trace."""
    host: Optional[str] = Field(None, description="Host name or address")
    runtime_environment: Optional[str] = Field(None, description="Runtime identifier, e.g. a process or JVM id")
    application: Optional[str] = Field(None, description="Application name")
    business_transaction: Optional[str] = Field(None, description="Business transaction name")
    node_type: Optional[str] = Field(None, description="Type of the executing node")

    class Config:
        """Pydantic configuration."""
        frozen = True
        extra = "allow"

    def __str__(self) -> str:
        parts = [self.host, self.runtime_environment, self.application, self.business_transaction, self.node_type]
        return "/".join(part or "-" for part in parts)
