"""Ordered collection of mapping steps."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator

from ..models import ReferenceKind
from .steps import Mapping

logger = logging.getLogger(__name__)


class Map:
    """Immutable, ordered sequence of mappings applied to one source/destination pair.

    Each mapping receives the destination returned by the previous one, so
    copy-on-write updates of dict destinations accumulate and object
    destinations keep their identity.
    """

    __slots__ = ("_mappings", "_destination_kind")

    def __init__(
        self,
        mappings: Iterable[Mapping] = (),
        destination_kind: ReferenceKind | str = ReferenceKind.ARRAY,
    ) -> None:
        items = tuple(mappings)
        for mapping in items:
            if not isinstance(mapping, Mapping):
                raise TypeError(f"Expected a Mapping, got {type(mapping).__name__}")
        self._mappings = items
        self._destination_kind = ReferenceKind.coerce(destination_kind)

    @property
    def mappings(self) -> tuple[Mapping, ...]:
        return self._mappings

    @property
    def destination_kind(self) -> ReferenceKind:
        return self._destination_kind

    def apply(self, destination: Any, source: Any) -> Any:
        logger.debug(
            "Applying %d mapping(s) onto %s", len(self._mappings), type(destination).__name__
        )
        for mapping in self._mappings:
            destination = mapping.apply(destination, source)
        return destination

    def __len__(self) -> int:
        return len(self._mappings)

    def __iter__(self) -> Iterator[Mapping]:
        return iter(self._mappings)

    def __add__(self, other: Map) -> Map:
        if not isinstance(other, Map):
            return NotImplemented
        return Map(self._mappings + other._mappings, self._destination_kind)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Map):
            return NotImplemented
        return (
            self._mappings == other._mappings
            and self._destination_kind is other._destination_kind
        )

    def __hash__(self) -> int:
        return hash((self._mappings, self._destination_kind))

    def __repr__(self) -> str:
        fields = ", ".join(mapping.field_name for mapping in self._mappings)
        return f"Map([{fields}], destination_kind={self._destination_kind.value})"
