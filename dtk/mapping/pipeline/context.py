"""Contexts: named owners of one Map."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .builder import MapBuilder
from .map import Map


@runtime_checkable
class Context(Protocol):
    """Anything that hands out the Map of one mapping use case."""

    def get_map(self) -> Map: ...


@dataclass(frozen=True)
class StaticContext:
    """Context wrapping an already built Map."""

    name: str
    map: Map

    def get_map(self) -> Map:
        return self.map


class MappingContext(ABC):
    """Context declaring its Map through a MapBuilder.

    Subclasses implement ``configure``; the Map is built once, when the
    context is created, and shared by every later ``get_map`` call.

    Example::

        class UserContext(MappingContext):
            def configure(self, builder):
                builder.set_destination_kind("object_properties")
                builder.add("firstName", "first_name")
    """

    def __init__(self, name: str | None = None) -> None:
        self.name = name or type(self).__name__
        builder = MapBuilder()
        self.configure(builder)
        self._map = builder.build()

    @abstractmethod
    def configure(self, builder: MapBuilder) -> None:
        raise NotImplementedError

    def get_map(self) -> Map:
        return self._map
