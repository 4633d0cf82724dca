"""
Unit tests for the interning repositories.
"""

import pytest

from calltree.exceptions import InvariantViolationError, UnknownSignatureError, UnknownStringConstantError
from calltree.models.signature import Signature
from calltree.repositories import SignatureRepository, StringConstantRepository


class TestSignatureRepository:
    """Test cases for SignatureRepository."""

    def test_register_same_value_twice_returns_same_id(self):
        """Test that registering an equal signature returns the existing id."""
        repository = SignatureRepository()

        first = repository.register(Signature(return_type="int", class_name="Cart", method_name="total"))
        second = repository.register(Signature(return_type="int", class_name="Cart", method_name="total"))

        assert first == second
        assert len(repository) == 1

    def test_different_values_get_sequential_ids(self):
        """Test that ids follow registration order."""
        repository = SignatureRepository()

        ids = [repository.register(Signature(method_name=name)) for name in ("a", "b", "c")]

        assert ids == [0, 1, 2]

    def test_resolve_returns_registered_value(self):
        """Test that resolve returns the value stored under an id."""
        repository = SignatureRepository()
        signature = Signature(package_name="com.shop", class_name="Cart", method_name="total")

        signature_id = repository.register(signature)

        assert repository.resolve(signature_id) == signature
        assert signature in repository

    @pytest.mark.parametrize("unknown_id", [0, 5, -1, None])
    def test_resolve_unknown_id_fails(self, unknown_id):
        """Test that resolving an unregistered id raises."""
        repository = SignatureRepository()

        with pytest.raises(UnknownSignatureError) as excinfo:
            repository.resolve(unknown_id)

        assert excinfo.value.signature_id == unknown_id
        assert isinstance(excinfo.value, InvariantViolationError)
        assert isinstance(excinfo.value, LookupError)


class TestStringConstantRepository:
    """Test cases for StringConstantRepository."""

    def test_register_is_idempotent(self):
        """Test that a string registered twice keeps its id."""
        repository = StringConstantRepository()

        assert repository.register("slow") == repository.register("slow")
        assert len(repository) == 1

    def test_colliding_hashes_get_distinct_ids(self):
        """Test that strings with equal hash codes are still kept apart."""
        repository = StringConstantRepository()

        # "Aa" and "BB" share a hash code under the classic 31-multiplier string hash.
        first = repository.register("Aa")
        second = repository.register("BB")

        assert first != second
        assert repository.resolve(first) == "Aa"
        assert repository.resolve(second) == "BB"

    def test_contains(self):
        """Test membership checks on registered and unregistered strings."""
        repository = StringConstantRepository()
        repository.register("x")

        assert repository.contains("x")
        assert not repository.contains("y")
        assert "x" in repository

    def test_id_of(self):
        """Test id lookup without registering."""
        repository = StringConstantRepository()
        label_id = repository.register("x")

        assert repository.id_of("x") == label_id
        assert repository.id_of("y") is None
        assert len(repository) == 1

    def test_resolve_unknown_id_fails(self):
        """Test that resolving an unregistered id raises."""
        repository = StringConstantRepository()

        with pytest.raises(UnknownStringConstantError) as excinfo:
            repository.resolve(3)

        assert excinfo.value.constant_id == 3
