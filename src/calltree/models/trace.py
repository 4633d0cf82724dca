"""
Trace model representing one captured execution.
"""

from typing import Iterator, List, Optional, Set, Tuple, TYPE_CHECKING
import logging
import uuid

from ..config import TraceConfig
from ..repositories import SignatureRepository, StringConstantRepository
from .location import Location
from .signature import Signature
from .sub_trace import SubTrace

if TYPE_CHECKING:
    from .call_node import CallNode

logger = logging.getLogger(__name__)


class Trace:
    """
    A captured execution made of one or more sub-traces.

    The trace owns the repositories interning signatures and string
    constants for all of its call nodes. It is built by a single producer
    and treated as read-only once capture has finished; no locking is done.
    """

    def __init__(self, trace_id: Optional[str] = None, config: Optional[TraceConfig] = None):
        """
        Initialize the trace.

        Args:
            trace_id: Identifier of the trace, generated when omitted
            config: Time units used by the producer
        """
        self.trace_id = trace_id or uuid.uuid4().hex
        self.config = config or TraceConfig()
        self.signatures = SignatureRepository()
        self.string_constants = StringConstantRepository()
        self._sub_traces: List[SubTrace] = []
        self._sub_trace_ids: Set[str] = set()
        self.logger = logging.getLogger(self.__class__.__name__)
        self.logger.debug(f"Created trace '{self.trace_id}' with {self.config}")

    def create_sub_trace(self, sub_trace_id: Optional[str] = None, parent: Optional[SubTrace] = None,
                         location: Optional[Location] = None) -> SubTrace:
        """
        Create a sub-trace owned by this trace.

        Args:
            sub_trace_id: Identifier of the sub-trace, generated when omitted
            parent: Sub-trace from which the new one was invoked
            location: Where the sub-trace was executed

        Returns:
            The new sub-trace

        Raises:
            ValueError: If the parent belongs to another trace or the id is
                already used in this trace
        """
        return SubTrace(self, sub_trace_id=sub_trace_id, parent=parent, location=location)

    def _add_sub_trace(self, sub_trace: SubTrace) -> None:
        if sub_trace.sub_trace_id is None:
            sub_trace.sub_trace_id = self._next_sub_trace_id()
        elif sub_trace.sub_trace_id in self._sub_trace_ids:
            raise ValueError(f"Trace '{self.trace_id}' already has a sub-trace '{sub_trace.sub_trace_id}'")
        self._sub_trace_ids.add(sub_trace.sub_trace_id)
        self._sub_traces.append(sub_trace)
        self.logger.debug(f"Trace '{self.trace_id}' registered sub-trace '{sub_trace.sub_trace_id}'")

    def _next_sub_trace_id(self) -> str:
        # Position in the trace, skipping ids the caller already chose.
        candidate = len(self._sub_traces)
        while str(candidate) in self._sub_trace_ids:
            candidate += 1
        return str(candidate)

    @property
    def sub_traces(self) -> Tuple[SubTrace, ...]:
        return tuple(self._sub_traces)

    @property
    def root(self) -> Optional[SubTrace]:
        """The first sub-trace created for this trace."""
        return self._sub_traces[0] if self._sub_traces else None

    @property
    def size(self) -> int:
        """Total number of call nodes across all sub-traces."""
        return sum(sub_trace.size for sub_trace in self._sub_traces)

    def __iter__(self) -> Iterator["CallNode"]:
        for sub_trace in self._sub_traces:
            yield from sub_trace

    # Repository access used by call nodes

    def register_signature(self, signature: Signature) -> int:
        return self.signatures.register(signature)

    def get_signature(self, signature_id: int) -> Signature:
        return self.signatures.resolve(signature_id)

    def register_string_constant(self, value: str) -> int:
        return self.string_constants.register(value)

    def get_string_constant(self, constant_id: int) -> str:
        return self.string_constants.resolve(constant_id)

    def contains_string_constant(self, value: str) -> bool:
        return self.string_constants.contains(value)

    def __repr__(self) -> str:
        return f"Trace(id={self.trace_id!r}, sub_traces={len(self._sub_traces)}, size={self.size})"
