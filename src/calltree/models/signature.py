"""
Signature model describing the identity of an invoked method.
"""

from typing import Tuple
from pydantic import BaseModel, Field

CONSTRUCTOR_METHOD_NAME = "<init>"


class Signature(BaseModel):
    """Immutable description of a method: return type, location, name and parameters."""
    return_type: str = Field("", description="Fully qualified return type, empty for constructors")
    package_name: str = Field("", description="Full package name")
    class_name: str = Field("", description="Simple class name")
    method_name: str = Field(..., description="Simple method name")
    parameter_types: Tuple[str, ...] = Field(
        default_factory=tuple,
        description="Fully qualified parameter types in declaration order"
    )

    class Config:
        """Pydantic configuration."""
        frozen = True

    @property
    def is_constructor(self) -> bool:
        return self.method_name == CONSTRUCTOR_METHOD_NAME or (
            bool(self.class_name) and self.method_name == self.class_name
        )

    @property
    def qualified_method_name(self) -> str:
        parts = [part for part in (self.package_name, self.class_name, self.method_name) if part]
        return ".".join(parts)

    def __str__(self) -> str:
        rendered = f"{self.qualified_method_name}({', '.join(self.parameter_types)})"
        if self.is_constructor or not self.return_type:
            return rendered
        return f"{self.return_type} {rendered}"
