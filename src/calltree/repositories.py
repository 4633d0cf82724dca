"""
Deduplicating repositories owned by a trace.

Both repositories intern values behind small integer ids assigned in
registration order. Ids are stable for the lifetime of the repository and are
never reused for a different value.
"""

from typing import Dict, Generic, Hashable, List, TypeVar
import logging

from .exceptions import UnknownSignatureError, UnknownStringConstantError
from .models.signature import Signature

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)


class _InterningRepository(Generic[V]):
    """Insertion-ordered value to id mapping with an id-indexed inverse."""

    def __init__(self):
        self._ids: Dict[V, int] = {}
        self._values: List[V] = []
        self.logger = logging.getLogger(self.__class__.__name__)

    def register(self, value: V) -> int:
        """
        Intern a value.

        Args:
            value: Value to intern

        Returns:
            The id of an equal value registered earlier, or a newly assigned id
        """
        existing = self._ids.get(value)
        if existing is not None:
            return existing
        new_id = len(self._values)
        self._ids[value] = new_id
        self._values.append(value)
        self.logger.debug(f"Registered {value!r} under id {new_id}")
        return new_id

    def _lookup(self, value_id: int) -> V:
        if not isinstance(value_id, int) or isinstance(value_id, bool) or not 0 <= value_id < len(self._values):
            raise KeyError(value_id)
        return self._values[value_id]

    def id_of(self, value: V):
        """Return the id of a registered value, or None."""
        return self._ids.get(value)

    def contains(self, value: V) -> bool:
        return value in self._ids

    def __contains__(self, value) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return len(self._values)


class SignatureRepository(_InterningRepository[Signature]):
    """Interns method signatures for all nodes of one trace."""

    def resolve(self, signature_id: int) -> Signature:
        """
        Get the signature registered under an id.

        Raises:
            UnknownSignatureError: If the id was never registered
        """
        try:
            return self._lookup(signature_id)
        except KeyError:
            raise UnknownSignatureError(signature_id) from None


class StringConstantRepository(_InterningRepository[str]):
    """
    Interns string constants, such as labels, for all nodes of one trace.

    Strings are keyed by their exact value, so two distinct strings never
    share an id.
    """

    def resolve(self, constant_id: int) -> str:
        """
        Get the string registered under an id.

        Raises:
            UnknownStringConstantError: If the id was never registered
        """
        try:
            return self._lookup(constant_id)
        except KeyError:
            raise UnknownStringConstantError(constant_id) from None
