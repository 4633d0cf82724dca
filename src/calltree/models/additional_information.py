"""
Additional information models attachable to call nodes.

Each concrete kind carries a ``kind`` tag so it can be queried either by
model class or by tag.
"""

from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field


class AdditionalInformation(BaseModel):
    """Base class for metadata attached to a call node."""
    kind: str = Field("custom", description="Tag identifying the kind of information")

    class Config:
        """Pydantic configuration."""
        extra = "allow"


class HTTPRequestData(AdditionalInformation):
    """An HTTP request served or issued by the invocation."""
    kind: Literal["http_request"] = "http_request"
    url: str = Field(..., description="Request URL")
    request_method: str = Field("GET", description="HTTP method")
    query_parameters: Dict[str, str] = Field(default_factory=dict, description="Query string parameters")
    headers: Dict[str, str] = Field(default_factory=dict, description="Request headers")
    session_attributes: Dict[str, str] = Field(default_factory=dict, description="Session attributes")


class SQLStatementData(AdditionalInformation):
    """A database statement executed by the invocation."""
    kind: Literal["sql_statement"] = "sql_statement"
    sql_statement: str = Field(..., description="Executed SQL")
    is_prepared: bool = Field(False, description="Whether the statement is a prepared statement")
    bound_values: List[str] = Field(default_factory=list, description="Values bound to a prepared statement")
    database_product: Optional[str] = Field(None, description="Database product name")


class LoggingData(AdditionalInformation):
    """A log record written during the invocation."""
    kind: Literal["logging"] = "logging"
    logger_name: Optional[str] = Field(None, description="Name of the emitting logger")
    level: str = Field("INFO", description="Log level")
    message: str = Field(..., description="Logged message")


class ExceptionData(AdditionalInformation):
    """An exception thrown by the invocation."""
    kind: Literal["exception"] = "exception"
    exception_class: str = Field(..., description="Fully qualified exception class")
    message: Optional[str] = Field(None, description="Exception message")
    stack_trace: Optional[str] = Field(None, description="Rendered stack trace")
    is_error: bool = Field(False, description="Whether the exception is an error rather than a handled exception")
