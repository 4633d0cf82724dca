"""
Shared fixtures for call tree tests.
"""

import pytest

from calltree import CallNode, Trace


@pytest.fixture
def trace():
    """Create an empty trace."""
    return Trace(trace_id="trace-1")


@pytest.fixture
def sub_trace(trace):
    """Create a sub-trace owned by the trace fixture."""
    return trace.create_sub_trace()


@pytest.fixture
def sample_tree(sub_trace):
    """
    Build root R with callees A and B, where A calls C.

    Returns:
        Dict mapping the node names to the nodes
    """
    root = CallNode(None, sub_trace)
    a = CallNode(root, sub_trace)
    c = CallNode(a, sub_trace)
    b = CallNode(root, sub_trace)
    root.set_signature("void", "com.shop", "Checkout", "process", ["java.lang.String"])
    a.set_signature("int", "com.shop", "Cart", "total")
    b.set_signature("void", "com.shop", "Mailer", "send")
    c.set_signature("", "com.shop", "Price", "<init>", ["long"])
    return {"R": root, "A": a, "B": b, "C": c}
