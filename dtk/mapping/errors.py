"""Exceptions raised while building and applying maps."""

from __future__ import annotations

from typing import Any


class DataTransformError(Exception):
    """Base exception for all mapping errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class InvalidReferenceKindError(DataTransformError):
    """Raised when a reference kind outside ReferenceKind is configured."""

    def __init__(self, kind: Any) -> None:
        super().__init__(
            f"Invalid reference kind: {kind!r}. "
            "Expected one of: array, object_properties, object_mutators",
            {"kind": repr(kind)},
        )
        self.kind = kind


class BuilderSealedError(DataTransformError):
    """Raised when a builder is modified after build() without reset()."""


class ReferenceAccessError(DataTransformError):
    """A Reference could not read or write its field."""

    def __init__(self, message: str, field: str, container: Any) -> None:
        container_type = type(container).__name__
        super().__init__(message, {"field": field, "container_type": container_type})
        self.field = field
        self.container_type = container_type


class InaccessibleMemberError(ReferenceAccessError):
    """The attribute or accessor method is missing or not public."""


class UndefinedSourceFieldError(ReferenceAccessError):
    """The key is not present in an associative container."""


UndefinedKeyError = UndefinedSourceFieldError


class IncompatibleContainerError(ReferenceAccessError):
    """The container does not support the reference's addressing."""


class MappingError(DataTransformError):
    """Wraps the failure of a single mapping step."""

    def __init__(self, field: str, cause: BaseException) -> None:
        cause_message = getattr(cause, "message", None) or str(cause)
        super().__init__(
            f"Mapping to '{field}' failed: {cause_message}",
            {"field": field, "cause": type(cause).__name__},
        )
        self.field = field
        self.cause = cause


class MapConfigError(DataTransformError):
    """A declarative map configuration is invalid."""
