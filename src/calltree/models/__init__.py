"""
Core data models for call tree traces.
"""

from .signature import Signature
from .location import Location
from .additional_information import (
    AdditionalInformation,
    HTTPRequestData,
    SQLStatementData,
    LoggingData,
    ExceptionData
)
from .sub_trace import SubTrace
from .call_node import CallNode
from .trace import Trace

__all__ = [
    "Signature",
    "Location",
    "CallNode",
    "SubTrace",
    "Trace",
    # Additional information
    "AdditionalInformation",
    "HTTPRequestData",
    "SQLStatementData",
    "LoggingData",
    "ExceptionData",
]
