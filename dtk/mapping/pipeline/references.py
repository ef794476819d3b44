"""Field addressing for associative containers and objects."""

from __future__ import annotations

import dataclasses
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping, MutableMapping
from operator import attrgetter
from typing import Any, Callable

import pandas as pd

from ..errors import (
    IncompatibleContainerError,
    InaccessibleMemberError,
    UndefinedSourceFieldError,
)
from ..models import ReferenceKind


_WORD_SPLIT_RE = re.compile(r"[_\-\s]+")


def pascal_case(name: str) -> str:
    """``first_name`` and ``firstName`` both become ``FirstName``."""
    return "".join(part[:1].upper() + part[1:] for part in _WORD_SPLIT_RE.split(name) if part)


class Reference(ABC):
    """Reads and writes one named field of a container."""

    kind: ReferenceKind
    field_name: str

    @abstractmethod
    def read(self, container: Any) -> Any:
        raise NotImplementedError

    @abstractmethod
    def write(self, container: Any, value: Any) -> Any:
        """Return the updated container."""
        raise NotImplementedError


@dataclasses.dataclass(frozen=True)
class ArrayReference(Reference):
    """Key of a dict-like container (or a pandas row).

    Writes never touch the given container: a shallow copy holding the new
    value is returned. A missing key on read raises UndefinedSourceFieldError.
    """

    field_name: str
    kind = ReferenceKind.ARRAY

    def read(self, container: Any) -> Any:
        self._ensure_addressable(container)
        if self.field_name not in container:
            raise UndefinedSourceFieldError(
                f"Undefined field '{self.field_name}'", self.field_name, container
            )
        return container[self.field_name]

    def write(self, container: Any, value: Any) -> Any:
        self._ensure_addressable(container)
        updated = self._copy_container(container)
        updated[self.field_name] = value
        return updated

    @staticmethod
    def _copy_container(container: Any) -> Any:
        if isinstance(container, (dict, pd.Series)):
            return container.copy()
        if isinstance(container, MutableMapping):
            try:
                updated = type(container)()
            except TypeError:
                # constructor needs arguments (e.g. os.environ)
                return dict(container)
            updated.update(container)
            return updated
        # read-only mappings (e.g. MappingProxyType) come back as dicts
        return dict(container)

    def _ensure_addressable(self, container: Any) -> None:
        if not isinstance(container, (Mapping, pd.Series)):
            raise IncompatibleContainerError(
                f"Cannot address key '{self.field_name}' in {type(container).__name__}",
                self.field_name,
                container,
            )


@dataclasses.dataclass(frozen=True)
class PropertyReference(Reference):
    """Public attribute of an object, mutated in place on write."""

    field_name: str
    kind = ReferenceKind.OBJECT_PROPERTIES

    def read(self, container: Any) -> Any:
        self._ensure_public(container)
        try:
            return getattr(container, self.field_name)
        except AttributeError as exc:
            raise InaccessibleMemberError(
                f"{type(container).__name__} has no field '{self.field_name}'",
                self.field_name,
                container,
            ) from exc

    def write(self, container: Any, value: Any) -> Any:
        self._ensure_public(container)
        if not hasattr(container, self.field_name):
            raise InaccessibleMemberError(
                f"{type(container).__name__} has no field '{self.field_name}'",
                self.field_name,
                container,
            )
        try:
            setattr(container, self.field_name, value)
        except AttributeError as exc:
            raise InaccessibleMemberError(
                f"Field '{self.field_name}' of {type(container).__name__} is not writable",
                self.field_name,
                container,
            ) from exc
        return container

    def _ensure_public(self, container: Any) -> None:
        if self.field_name.startswith("_"):
            raise InaccessibleMemberError(
                f"Field '{self.field_name}' is not public", self.field_name, container
            )


@dataclasses.dataclass(frozen=True)
class MutatorReference(Reference):
    """Getter/setter pair of an object.

    Accessor names default to ``get<Field>``/``set<Field>`` in PascalCase and
    can be overridden with ``getter``/``setter``.
    """

    field_name: str
    getter: str | None = None
    setter: str | None = None
    kind = ReferenceKind.OBJECT_MUTATORS

    _get_method: Callable[[Any], Any] = dataclasses.field(
        init=False, repr=False, compare=False
    )
    _set_method: Callable[[Any], Any] = dataclasses.field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        suffix = pascal_case(self.field_name)
        getter = self.getter or f"get{suffix}"
        setter = self.setter or f"set{suffix}"
        object.__setattr__(self, "getter", getter)
        object.__setattr__(self, "setter", setter)
        object.__setattr__(self, "_get_method", attrgetter(getter))
        object.__setattr__(self, "_set_method", attrgetter(setter))

    def read(self, container: Any) -> Any:
        getter = self._accessor(container, self.getter, self._get_method)
        return getter()

    def write(self, container: Any, value: Any) -> Any:
        setter = self._accessor(container, self.setter, self._set_method)
        setter(value)
        return container

    def _accessor(
        self,
        container: Any,
        method_name: str,
        lookup: Callable[[Any], Any],
    ) -> Callable[..., Any]:
        if method_name.startswith("_"):
            raise InaccessibleMemberError(
                f"Method '{method_name}' is not public", self.field_name, container
            )
        try:
            method = lookup(container)
        except AttributeError as exc:
            raise InaccessibleMemberError(
                f"{type(container).__name__} has no method '{method_name}'",
                self.field_name,
                container,
            ) from exc
        if not callable(method):
            raise InaccessibleMemberError(
                f"'{method_name}' of {type(container).__name__} is not callable",
                self.field_name,
                container,
            )
        return method


_REFERENCE_TYPES: dict[ReferenceKind, type[Reference]] = {
    ReferenceKind.ARRAY: ArrayReference,
    ReferenceKind.OBJECT_PROPERTIES: PropertyReference,
    ReferenceKind.OBJECT_MUTATORS: MutatorReference,
}


def make_reference(kind: ReferenceKind | str, field_name: str) -> Reference:
    """Build the reference class registered for ``kind``."""
    reference_type = _REFERENCE_TYPES[ReferenceKind.coerce(kind)]
    return reference_type(field_name)
