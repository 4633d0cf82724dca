"""
Call Tree - an in-memory model of captured execution traces.

This package provides:
- Call nodes linked into call trees with incrementally maintained descendant counts
- Sub-traces grouping the nodes of one execution context, and traces grouping sub-traces
- Deduplicating repositories interning method signatures and labels per trace
- Pluggable additional information attached to call nodes, queried by type or tag
- Traversal and debug rendering helpers
"""

__version__ = "0.1.0"

from .models import (
    Signature,
    Location,
    CallNode,
    SubTrace,
    Trace,
    AdditionalInformation,
    HTTPRequestData,
    SQLStatementData,
    LoggingData,
    ExceptionData
)
from .repositories import SignatureRepository, StringConstantRepository
from .config import TraceConfig
from .exceptions import (
    CallTreeError,
    InvariantViolationError,
    UnknownSignatureError,
    UnknownStringConstantError,
    SignatureNotSetError,
    DetachedNodeError,
    InvalidStateError
)
from .utils import iter_call_nodes, get_string_representation, render_call_tree

__all__ = [
    "Signature",
    "Location",
    "CallNode",
    "SubTrace",
    "Trace",
    "SignatureRepository",
    "StringConstantRepository",
    "TraceConfig",
    "iter_call_nodes",
    "get_string_representation",
    "render_call_tree",
    # Additional information
    "AdditionalInformation",
    "HTTPRequestData",
    "SQLStatementData",
    "LoggingData",
    "ExceptionData",
    # Errors
    "CallTreeError",
    "InvariantViolationError",
    "UnknownSignatureError",
    "UnknownStringConstantError",
    "SignatureNotSetError",
    "DetachedNodeError",
    "InvalidStateError",
]
