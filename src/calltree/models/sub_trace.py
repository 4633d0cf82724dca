"""
Sub-trace model representing one contiguous execution context of a trace.
"""

from typing import Iterator, List, Optional, Tuple, TYPE_CHECKING
import logging

from ..utils import UNSET, iter_call_nodes
from .location import Location

if TYPE_CHECKING:
    from .call_node import CallNode
    from .trace import Trace

logger = logging.getLogger(__name__)


class SubTrace:
    """
    The call nodes recorded in one execution context, e.g. one thread.

    A sub-trace references its root-level nodes, which own their subtrees,
    and points back to the trace containing it. Sub-traces invoked from this
    one are listed in ``sub_traces``.
    """

    def __init__(self, containing_trace: Optional["Trace"] = None, sub_trace_id: Optional[str] = None,
                 parent: Optional["SubTrace"] = None, location: Optional[Location] = None):
        """
        Initialize the sub-trace and register it with its trace and parent.

        Args:
            containing_trace: Trace owning this sub-trace
            sub_trace_id: Identifier of the sub-trace within its trace,
                assigned by the trace when omitted
            parent: Sub-trace from which this one was invoked
            location: Where the sub-trace was executed

        Raises:
            ValueError: If the parent belongs to another trace or the id is
                already used in the trace
        """
        if parent is not None and parent.containing_trace is not containing_trace:
            raise ValueError(f"Parent sub-trace {parent.sub_trace_id!r} belongs to another trace")
        self.sub_trace_id = sub_trace_id
        self.location = location or Location()
        self._trace = containing_trace
        self._parent = parent
        self._roots: List["CallNode"] = []
        self._sub_traces: List["SubTrace"] = []
        if containing_trace is not None:
            containing_trace._add_sub_trace(self)
        if parent is not None:
            parent._sub_traces.append(self)

    @property
    def containing_trace(self) -> Optional["Trace"]:
        return self._trace

    @property
    def parent(self) -> Optional["SubTrace"]:
        return self._parent

    @property
    def sub_traces(self) -> Tuple["SubTrace", ...]:
        """Sub-traces invoked from this one."""
        return tuple(self._sub_traces)

    @property
    def roots(self) -> Tuple["CallNode", ...]:
        return tuple(self._roots)

    @property
    def root(self) -> Optional["CallNode"]:
        return self._roots[0] if self._roots else None

    def _add_root(self, node: "CallNode") -> None:
        self._roots.append(node)
        logger.debug(f"Sub-trace {self.sub_trace_id!r} received root node #{len(self._roots)}")

    @property
    def response_time(self) -> int:
        """Response time of the root node, -1 without a root."""
        root = self.root
        return root.response_time if root is not None else UNSET

    @property
    def size(self) -> int:
        """Total number of call nodes in this sub-trace."""
        return sum(root.child_count + 1 for root in self._roots)

    def __iter__(self) -> Iterator["CallNode"]:
        for root in self._roots:
            yield from iter_call_nodes(root)

    def __repr__(self) -> str:
        return f"SubTrace(id={self.sub_trace_id!r}, location={self.location}, size={self.size})"
