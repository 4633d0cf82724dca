"""
Utility functions for traversing and rendering call trees.
"""

from typing import Iterator, List, TYPE_CHECKING
import logging

if TYPE_CHECKING:
    from .models.call_node import CallNode

logger = logging.getLogger(__name__)

UNSET = -1


def iter_call_nodes(root: "CallNode") -> Iterator["CallNode"]:
    """
    Lazily walk a subtree depth first.

    Nodes are yielded in pre-order: a node before its callees, callees in the
    order they were added. An explicit stack is used so arbitrarily deep trees
    do not hit the recursion limit.

    Args:
        root: Node the walk starts from

    Returns:
        Iterator over the root and all its descendants
    """
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        callees = node.callees
        stack.extend(reversed(callees))


def convert_duration(duration: int, duration_unit_nanos: int, target_unit_nanos: int) -> int:
    """
    Rescale a duration into another time unit.

    The result is rounded to the nearest integer with halves rounded up,
    using integer arithmetic only.

    Args:
        duration: Duration expressed in the source unit
        duration_unit_nanos: Nanoseconds per source unit
        target_unit_nanos: Nanoseconds per target unit

    Returns:
        The duration in the target unit
    """
    numerator = duration * duration_unit_nanos
    return (2 * numerator + target_unit_nanos) // (2 * target_unit_nanos)


def get_string_representation(node: "CallNode") -> str:
    """
    Render a single node for logging and diagnostics.

    The output is meant for humans and is not a stable format.

    Args:
        node: Node to render

    Returns:
        One line describing the node
    """
    if node.has_signature:
        description = str(node.signature)
    else:
        description = "<no signature>"

    details = [f"response_time={node.response_time}", f"execution_time={node.execution_time}"]
    if node.cpu_time != UNSET:
        details.append(f"cpu_time={node.cpu_time}")
    if node.child_count:
        details.append(f"descendants={node.child_count}")
    labels = node.labels
    if labels:
        details.append(f"labels={list(labels)}")
    if node.is_sub_trace_invocation:
        target = node.invoked_sub_trace
        marker = "async" if node.is_async_invocation else "sync"
        target_id = target.sub_trace_id if target is not None else None
        details.append(f"invokes={target_id} ({marker})")
    return f"{description} [{', '.join(details)}]"


def render_call_tree(root: "CallNode", indent: str = "  ") -> str:
    """
    Render a subtree as indented lines, one node per line.

    Args:
        root: Node to start from
        indent: String repeated once per depth level

    Returns:
        Multi-line rendering of the subtree
    """
    lines: List[str] = []
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        lines.append(f"{indent * depth}{get_string_representation(node)}")
        stack.extend((callee, depth + 1) for callee in reversed(node.callees))
    return "\n".join(lines)
