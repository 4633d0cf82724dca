"""
Call node model representing one invocation in a call tree.
"""

from typing import Iterator, List, Optional, Sequence, Tuple, Type, Union, TYPE_CHECKING

from ..config import TraceConfig
from ..exceptions import DetachedNodeError, InvalidStateError, SignatureNotSetError
from ..utils import UNSET, convert_duration, get_string_representation, iter_call_nodes
from .additional_information import AdditionalInformation
from .signature import Signature

if TYPE_CHECKING:
    from .sub_trace import SubTrace
    from .trace import Trace

_DEFAULT_CONFIG = TraceConfig()

Capability = Union[Type[AdditionalInformation], str]


class CallNode:
    """
    One recorded invocation and its position in the call tree.

    A node is created with its caller (or None for a root) and the sub-trace
    containing it. Creating a node adds it to the caller's callees and raises
    the descendant count of every ancestor, so ``child_count`` is always the
    number of nodes below this one.

    Signatures and labels are interned in the repositories of the containing
    trace; the node only keeps their ids.
    """

    # Traces can hold very large numbers of nodes, so no per-instance __dict__.
    __slots__ = (
        "_parent", "_children", "_sub_trace", "_entry_time", "_execution_time", "_response_time",
        "_cpu_time", "_signature_id", "_label_ids", "_additional_information",
        "_is_sub_trace_invocation", "_is_async_invocation", "_invoked_sub_trace", "_child_count",
    )

    def __init__(self, parent: Optional["CallNode"] = None, containing_sub_trace: Optional["SubTrace"] = None):
        """
        Initialize the node and link it into the tree.

        Args:
            parent: Node that invoked this one, None for a root
            containing_sub_trace: Sub-trace this node belongs to; a root node
                is registered as one of its roots. Defaults to the parent's
                sub-trace when a parent is given.

        Raises:
            ValueError: If the parent belongs to a different sub-trace
        """
        if parent is not None:
            if containing_sub_trace is None:
                containing_sub_trace = parent.containing_sub_trace
            elif containing_sub_trace is not parent.containing_sub_trace:
                raise ValueError("A call node must belong to the same sub-trace as its parent")
        self._parent = parent
        self._children: Optional[List["CallNode"]] = None
        self._sub_trace = containing_sub_trace
        self._entry_time = UNSET
        self._execution_time = UNSET
        self._response_time = UNSET
        self._cpu_time = UNSET
        self._signature_id: Optional[int] = None
        self._label_ids: Optional[List[int]] = None
        self._additional_information: Optional[List[AdditionalInformation]] = None
        self._is_sub_trace_invocation = False
        self._is_async_invocation = False
        self._invoked_sub_trace: Optional["SubTrace"] = None
        self._child_count = 0

        if parent is not None:
            parent._add_callee(self)
        elif containing_sub_trace is not None:
            containing_sub_trace._add_root(self)

    # Tree structure

    @property
    def parent(self) -> Optional["CallNode"]:
        return self._parent

    @property
    def callees(self) -> Tuple["CallNode", ...]:
        """Nodes directly invoked by this node, in invocation order."""
        if not self._children:
            return ()
        return tuple(self._children)

    @property
    def containing_sub_trace(self) -> Optional["SubTrace"]:
        return self._sub_trace

    @property
    def child_count(self) -> int:
        """Total number of nodes below this node, not only direct callees."""
        return self._child_count

    def _add_callee(self, callee: "CallNode") -> None:
        if self._children is None:
            self._children = []
        self._children.append(callee)
        self._update_child_count(callee.child_count + 1)

    def _update_child_count(self, increase: int) -> None:
        node = self
        while node is not None:
            node._child_count += increase
            node = node._parent

    def __iter__(self) -> Iterator["CallNode"]:
        return iter_call_nodes(self)

    # Timings

    @property
    def entry_time(self) -> int:
        return self._entry_time

    @entry_time.setter
    def entry_time(self, value: int) -> None:
        self._entry_time = value

    @property
    def execution_time(self) -> int:
        """Exclusive duration, not counting time spent in callees."""
        return self._execution_time

    @execution_time.setter
    def execution_time(self, value: int) -> None:
        self._execution_time = value

    @property
    def response_time(self) -> int:
        """Inclusive duration."""
        return self._response_time

    @response_time.setter
    def response_time(self, value: int) -> None:
        self._response_time = value

    @property
    def cpu_time(self) -> int:
        return self._cpu_time

    @cpu_time.setter
    def cpu_time(self, value: int) -> None:
        self._cpu_time = value

    @property
    def exit_time(self) -> int:
        """
        Entry time plus response time, in the unit of the entry time.

        The response time is converted with the time units configured on the
        containing trace and rounded half up.
        """
        config = self._config()
        return self._entry_time + convert_duration(
            self._response_time, config.duration_unit_nanos, config.entry_time_unit_nanos
        )

    # Signature

    def set_signature(self, return_type: str, package_name: str, class_name: str, method_name: str,
                      parameter_types: Optional[Sequence[str]] = None) -> int:
        """
        Intern a signature in the containing trace and assign it to this node.

        Args:
            return_type: Fully qualified return type
            package_name: Full package name
            class_name: Simple class name
            method_name: Simple method name
            parameter_types: Fully qualified parameter types

        Returns:
            The interned signature id
        """
        signature = Signature(
            return_type=return_type,
            package_name=package_name,
            class_name=class_name,
            method_name=method_name,
            parameter_types=parameter_types or (),
        )
        self.signature = signature
        return self._signature_id

    @property
    def signature(self) -> Signature:
        if self._signature_id is None:
            raise SignatureNotSetError()
        return self._trace().get_signature(self._signature_id)

    @signature.setter
    def signature(self, signature: Signature) -> None:
        self._signature_id = self._trace().register_signature(signature)

    @property
    def signature_id(self) -> Optional[int]:
        return self._signature_id

    @property
    def has_signature(self) -> bool:
        return self._signature_id is not None

    @property
    def method_name(self) -> str:
        return self.signature.method_name

    @property
    def class_name(self) -> str:
        return self.signature.class_name

    @property
    def package_name(self) -> str:
        return self.signature.package_name

    @property
    def parameter_types(self) -> Tuple[str, ...]:
        return self.signature.parameter_types

    @property
    def return_type(self) -> str:
        return self.signature.return_type

    @property
    def is_constructor(self) -> bool:
        return self.signature.is_constructor

    # Labels

    def attach_label(self, label: str) -> int:
        """
        Intern a label in the containing trace and attach it to this node.

        Attaching the same label twice keeps both occurrences.

        Returns:
            The interned label id
        """
        label_id = self._trace().register_string_constant(label)
        if self._label_ids is None:
            self._label_ids = []
        self._label_ids.append(label_id)
        return label_id

    def has_label(self, label: str) -> bool:
        if not self._label_ids:
            return False
        label_id = self._trace().string_constants.id_of(label)
        return label_id is not None and label_id in self._label_ids

    @property
    def label_ids(self) -> Tuple[int, ...]:
        return tuple(self._label_ids or ())

    @property
    def labels(self) -> Tuple[str, ...]:
        """Resolved labels in attachment order."""
        if not self._label_ids:
            return ()
        trace = self._trace()
        return tuple(trace.get_string_constant(label_id) for label_id in self._label_ids)

    # Additional information

    def attach_additional_information(self, info: AdditionalInformation) -> None:
        if self._additional_information is None:
            self._additional_information = []
        self._additional_information.append(info)

    def get_additional_information(self, capability: Optional[Capability] = None) -> Tuple[AdditionalInformation, ...]:
        """
        Get the attached additional information.

        Args:
            capability: Optional filter, either an AdditionalInformation
                subclass or a ``kind`` tag

        Returns:
            Matching information objects in attachment order, possibly empty
        """
        infos = self._additional_information or ()
        if capability is None:
            return tuple(infos)
        if isinstance(capability, str):
            return tuple(info for info in infos if info.kind == capability)
        return tuple(info for info in infos if isinstance(info, capability))

    # Sub-trace invocations

    @property
    def is_sub_trace_invocation(self) -> bool:
        return self._is_sub_trace_invocation

    @is_sub_trace_invocation.setter
    def is_sub_trace_invocation(self, value: bool) -> None:
        self._is_sub_trace_invocation = value
        if not value:
            self._invoked_sub_trace = None
            self._is_async_invocation = False

    @property
    def invoked_sub_trace(self) -> Optional["SubTrace"]:
        return self._invoked_sub_trace

    @invoked_sub_trace.setter
    def invoked_sub_trace(self, sub_trace: Optional["SubTrace"]) -> None:
        if not self._is_sub_trace_invocation:
            raise InvalidStateError(
                "Cannot set the invoked sub-trace of a node that is not a sub-trace invocation. "
                "Set is_sub_trace_invocation to True first."
            )
        self._invoked_sub_trace = sub_trace

    @property
    def is_async_invocation(self) -> bool:
        return self._is_async_invocation

    @is_async_invocation.setter
    def is_async_invocation(self, value: bool) -> None:
        if not self._is_sub_trace_invocation:
            raise InvalidStateError(
                "Cannot set the asynchronous invocation flag of a node that is not a sub-trace invocation. "
                "Set is_sub_trace_invocation to True first."
            )
        self._is_async_invocation = value

    # Containing trace

    def _trace(self) -> "Trace":
        sub_trace = self._sub_trace
        trace = sub_trace.containing_trace if sub_trace is not None else None
        if trace is None:
            raise DetachedNodeError("Call node is not contained in a trace; cannot resolve interned values")
        return trace

    def _config(self) -> TraceConfig:
        sub_trace = self._sub_trace
        if sub_trace is None or sub_trace.containing_trace is None:
            return _DEFAULT_CONFIG
        return sub_trace.containing_trace.config

    def __str__(self) -> str:
        return get_string_representation(self)

    __repr__ = __str__
