"""Mapping steps: the rules moving one value into one destination field."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from typing import Any, Callable, TYPE_CHECKING

from ..errors import MappingError
from ..models import ReferenceKind
from .references import Reference
from .value_resolution import ValueResolver

if TYPE_CHECKING:
    from .map import Map


class Mapping(ABC):
    """Base class for mapping steps.

    Failures while reading, resolving or writing are raised as MappingError
    with the original exception as ``cause``.
    """

    destination_ref: Reference

    @property
    def field_name(self) -> str:
        return self.destination_ref.field_name

    @abstractmethod
    def apply(self, destination: Any, source: Any) -> Any:
        """Return the updated destination."""
        raise NotImplementedError


@dataclasses.dataclass(frozen=True)
class DirectMapping(Mapping):
    """Copies one source field into one destination field."""

    destination_ref: Reference
    source_ref: Reference

    def apply(self, destination: Any, source: Any) -> Any:
        try:
            value = self.source_ref.read(source)
            return self.destination_ref.write(destination, value)
        except Exception as exc:
            raise MappingError(self.field_name, exc) from exc


@dataclasses.dataclass(frozen=True)
class EmbeddedMapping(Mapping):
    """Maps a nested structure of the source through its own Map.

    The nested Map runs against a fresh destination: ``factory()`` when given,
    an empty dict when the nested Map writes array references, otherwise a new
    instance of the outer destination's type.
    """

    destination_ref: Reference
    source_ref: Reference
    nested_map: Map
    factory: Callable[[], Any] | None = None

    def apply(self, destination: Any, source: Any) -> Any:
        try:
            nested_source = self.source_ref.read(source)
            nested_destination = self._fresh_destination(destination)
        except Exception as exc:
            raise MappingError(self.field_name, exc) from exc

        try:
            value = self.nested_map.apply(nested_destination, nested_source)
        except MappingError as exc:
            raise MappingError(f"{self.field_name}.{exc.field}", exc.cause) from exc
        except Exception as exc:
            raise MappingError(self.field_name, exc) from exc

        try:
            return self.destination_ref.write(destination, value)
        except Exception as exc:
            raise MappingError(self.field_name, exc) from exc

    def _fresh_destination(self, destination: Any) -> Any:
        if self.factory is not None:
            return self.factory()
        if self.nested_map.destination_kind is ReferenceKind.ARRAY:
            return {}
        return type(destination)()


@dataclasses.dataclass(frozen=True)
class ResolverMapping(Mapping):
    """Writes the value computed by a ValueResolver."""

    destination_ref: Reference
    resolver: ValueResolver

    def apply(self, destination: Any, source: Any) -> Any:
        try:
            value = self.resolver.resolve(source, destination)
            return self.destination_ref.write(destination, value)
        except Exception as exc:
            raise MappingError(self.field_name, exc) from exc
