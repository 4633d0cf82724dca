"""
Exception types raised by the call tree model.

Every error here signals a defect in the code producing the trace, not a
transient condition, so none of them is caught inside the package.
"""

from typing import Optional


class CallTreeError(RuntimeError):
    """Base exception for all call tree model failures."""


class InvariantViolationError(CallTreeError):
    """Raised when the object graph is inconsistent with what was registered."""


class UnknownSignatureError(InvariantViolationError, LookupError):
    """Raised when resolving a signature id that was never registered."""

    def __init__(self, signature_id: Optional[int]):
        self.signature_id = signature_id
        super().__init__(f"No signature registered under id {signature_id!r}")


class UnknownStringConstantError(InvariantViolationError, LookupError):
    """Raised when resolving a string constant id that was never registered."""

    def __init__(self, constant_id: Optional[int]):
        self.constant_id = constant_id
        super().__init__(f"No string constant registered under id {constant_id!r}")


class SignatureNotSetError(InvariantViolationError):
    """Raised when reading the signature of a node that never had one."""

    def __init__(self, message: str = "Signature has not been specified yet"):
        super().__init__(message)


class DetachedNodeError(InvariantViolationError):
    """Raised when a node without a containing trace needs the trace repositories."""


class InvalidStateError(CallTreeError):
    """Raised when a property is set on a node whose state does not allow it."""


__all__ = [
    "CallTreeError",
    "InvariantViolationError",
    "UnknownSignatureError",
    "UnknownStringConstantError",
    "SignatureNotSetError",
    "DetachedNodeError",
    "InvalidStateError",
]
