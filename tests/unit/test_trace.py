"""
Unit tests for the Trace and SubTrace containers.
"""

import pytest

from calltree import CallNode, Location, SubTrace, Trace, TraceConfig
from calltree.exceptions import UnknownSignatureError, UnknownStringConstantError
from calltree.models.signature import Signature


class TestTrace:
    """Test cases for Trace."""

    def test_generated_trace_id(self):
        """Test that traces get distinct ids when none is given."""
        assert Trace().trace_id != Trace().trace_id
        assert Trace(trace_id="abc").trace_id == "abc"

    def test_default_config(self):
        """Test that a trace without config uses the default units."""
        assert Trace().config == TraceConfig()

    def test_create_sub_traces(self, trace):
        """Test sub-trace creation and enumeration."""
        first = trace.create_sub_trace()
        second = trace.create_sub_trace("worker", parent=first, location=Location(host="db-1"))

        assert trace.sub_traces == (first, second)
        assert trace.root is first
        assert first.sub_trace_id == "0"
        assert second.parent is first
        assert first.sub_traces == (second,)
        assert second.containing_trace is trace
        assert second.location.host == "db-1"

    def test_parent_from_other_trace_rejected(self, trace):
        """Test that a sub-trace cannot be parented across traces."""
        foreign = Trace().create_sub_trace()

        with pytest.raises(ValueError):
            trace.create_sub_trace(parent=foreign)

    def test_empty_trace(self):
        """Test an empty trace."""
        trace = Trace()

        assert trace.root is None
        assert trace.size == 0
        assert list(trace) == []

    def test_size_and_iteration_span_sub_traces(self, trace, sample_tree):
        """Test that the trace walks every node of every sub-trace."""
        worker = trace.create_sub_trace("worker")
        remote_root = CallNode(None, worker)
        CallNode(remote_root, worker)

        assert trace.size == 6
        nodes = list(trace)
        assert nodes[:4] == [sample_tree["R"], sample_tree["A"], sample_tree["C"], sample_tree["B"]]
        assert nodes[4] is remote_root

    def test_default_id_skips_explicit_ids(self, trace):
        """Test that generated sub-trace ids never repeat an id chosen by the caller."""
        explicit = trace.create_sub_trace("1")
        first = trace.create_sub_trace()
        second = trace.create_sub_trace()

        ids = [sub_trace.sub_trace_id for sub_trace in (explicit, first, second)]
        assert len(set(ids)) == 3
        assert first.sub_trace_id == "2"

    def test_duplicate_id_rejected(self, trace):
        """Test that an id already used in the trace cannot be reused."""
        original = trace.create_sub_trace("worker")

        with pytest.raises(ValueError):
            trace.create_sub_trace("worker", parent=original)

        assert trace.sub_traces == (original,)
        assert original.sub_traces == ()

    def test_repository_delegates(self, trace):
        """Test signature and string constant access through the trace."""
        signature = Signature(class_name="Cart", method_name="total")

        signature_id = trace.register_signature(signature)
        label_id = trace.register_string_constant("slow")

        assert trace.get_signature(signature_id) == signature
        assert trace.get_string_constant(label_id) == "slow"
        assert trace.contains_string_constant("slow")
        with pytest.raises(UnknownSignatureError):
            trace.get_signature(signature_id + 1)
        with pytest.raises(UnknownStringConstantError):
            trace.get_string_constant(label_id + 1)

    def test_traces_do_not_share_repositories(self):
        """Test that each trace interns its own values."""
        first = Trace()
        second = Trace()
        first.register_string_constant("a")

        assert not second.contains_string_constant("a")


class TestSubTrace:
    """Test cases for SubTrace."""

    def test_response_time_from_root(self, sub_trace, sample_tree):
        """Test that the sub-trace response time is the root's."""
        sample_tree["R"].response_time = 1234

        assert sub_trace.response_time == 1234

    def test_empty_sub_trace(self, sub_trace):
        """Test a sub-trace without nodes."""
        assert sub_trace.root is None
        assert sub_trace.roots == ()
        assert sub_trace.response_time == -1
        assert sub_trace.size == 0
        assert list(sub_trace) == []

    def test_multiple_roots(self, sub_trace):
        """Test a sub-trace with several root-level nodes."""
        first = CallNode(None, sub_trace)
        CallNode(first, sub_trace)
        second = CallNode(None, sub_trace)

        assert sub_trace.roots == (first, second)
        assert sub_trace.root is first
        assert sub_trace.size == 3
        assert list(sub_trace)[-1] is second

    def test_default_location(self, sub_trace):
        """Test that a sub-trace without location gets an empty one."""
        assert sub_trace.location == Location()
        assert str(sub_trace.location) == "-/-/-/-/-"

    def test_direct_construction_registers_with_trace(self, trace):
        """Test that a sub-trace built with its constructor is owned by the trace."""
        sub_trace = SubTrace(trace, "direct")
        CallNode(None, sub_trace)

        assert sub_trace.containing_trace is trace
        assert trace.sub_traces == (sub_trace,)
        assert trace.size == 1
        assert list(trace) == [sub_trace.root]

    def test_direct_construction_with_foreign_parent_rejected(self, trace):
        """Test that the constructor rejects a parent from another trace."""
        foreign = Trace().create_sub_trace()

        with pytest.raises(ValueError):
            SubTrace(trace, "child", parent=foreign)

        assert trace.sub_traces == ()
        assert foreign.sub_traces == ()
