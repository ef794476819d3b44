"""Fluent assembly of maps."""

from __future__ import annotations

from typing import Any, Callable

from ..errors import BuilderSealedError
from ..models import ReferenceKind
from .map import Map
from .references import make_reference
from .steps import DirectMapping, EmbeddedMapping, Mapping, ResolverMapping
from .value_resolution import CallableResolver, ValueResolver


class MapBuilder:
    """Accumulates mappings and compiles them into a Map.

    ``add``, ``add_embedded`` and ``add_resolver`` create references of the
    kinds configured at the time of the call (ARRAY for both by default).
    Every mutator returns the builder, so calls can be chained::

        person_map = (
            MapBuilder()
            .set_destination_kind("object_properties")
            .add("firstName", "first_name")
            .add("lastName", "last_name")
            .build()
        )

    A builder is single use: after ``build()`` it refuses further changes
    until ``reset()`` is called.
    """

    def __init__(self) -> None:
        self._source_kind = ReferenceKind.ARRAY
        self._destination_kind = ReferenceKind.ARRAY
        self._mappings: list[Mapping] = []
        self._sealed = False

    @property
    def source_kind(self) -> ReferenceKind:
        return self._source_kind

    @property
    def destination_kind(self) -> ReferenceKind:
        return self._destination_kind

    @property
    def sealed(self) -> bool:
        return self._sealed

    def set_source_kind(self, kind: ReferenceKind | str) -> MapBuilder:
        self._ensure_open()
        self._source_kind = ReferenceKind.coerce(kind)
        return self

    def set_destination_kind(self, kind: ReferenceKind | str) -> MapBuilder:
        self._ensure_open()
        self._destination_kind = ReferenceKind.coerce(kind)
        return self

    def add(self, destination_field: str, source_field: str | None = None) -> MapBuilder:
        """Copy ``source_field`` (defaults to ``destination_field``)."""
        self._ensure_open()
        self._mappings.append(
            DirectMapping(
                make_reference(self._destination_kind, destination_field),
                make_reference(
                    self._source_kind,
                    destination_field if source_field is None else source_field,
                ),
            )
        )
        return self

    def add_embedded(
        self,
        destination_field: str,
        nested_map: Map,
        source_field: str | None = None,
        factory: Callable[[], Any] | None = None,
    ) -> MapBuilder:
        """Map the nested structure at ``source_field`` through ``nested_map``.

        The nested map keeps the reference kinds it was built with.
        """
        self._ensure_open()
        if not isinstance(nested_map, Map):
            raise TypeError(f"Expected a Map, got {type(nested_map).__name__}")
        self._mappings.append(
            EmbeddedMapping(
                make_reference(self._destination_kind, destination_field),
                make_reference(
                    self._source_kind,
                    destination_field if source_field is None else source_field,
                ),
                nested_map,
                factory,
            )
        )
        return self

    def add_resolver(
        self,
        destination_field: str,
        resolver: ValueResolver | Callable[[Any, Any], Any],
    ) -> MapBuilder:
        """Write the value computed by ``resolver``; plain functions are wrapped."""
        self._ensure_open()
        if not isinstance(resolver, ValueResolver):
            resolver = CallableResolver(resolver)
        self._mappings.append(
            ResolverMapping(make_reference(self._destination_kind, destination_field), resolver)
        )
        return self

    def add_mapping(self, mapping: Mapping) -> MapBuilder:
        """Append a hand-built mapping as is."""
        self._ensure_open()
        if not isinstance(mapping, Mapping):
            raise TypeError(f"Expected a Mapping, got {type(mapping).__name__}")
        self._mappings.append(mapping)
        return self

    def build(self) -> Map:
        self._sealed = True
        return Map(self._mappings, self._destination_kind)

    def reset(self) -> MapBuilder:
        self._source_kind = ReferenceKind.ARRAY
        self._destination_kind = ReferenceKind.ARRAY
        self._mappings = []
        self._sealed = False
        return self

    def __len__(self) -> int:
        return len(self._mappings)

    def _ensure_open(self) -> None:
        if self._sealed:
            raise BuilderSealedError(
                "MapBuilder was already built; call reset() before adding mappings"
            )
