"""Resolvers computing destination values from the whole source and destination."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable
import re

import pandas as pd

from ..errors import ReferenceAccessError
from ..models import ReferenceKind
from .references import make_reference

_PLACEHOLDER_RE = re.compile(r"{(.*?)}")


class ValueResolver(ABC):
    """Computes one value for a destination field.

    ``resolve`` receives the destination as it stands when the owning mapping
    runs, so values written by earlier mappings of the same map are visible.
    """

    @abstractmethod
    def resolve(self, source: Any, destination: Any) -> Any:
        raise NotImplementedError


class CallableResolver(ValueResolver):
    """Adapts a plain ``(source, destination) -> value`` function."""

    def __init__(self, function: Callable[[Any, Any], Any]) -> None:
        if not callable(function):
            raise TypeError(f"Expected a callable, got {type(function).__name__}")
        self.function = function

    def resolve(self, source: Any, destination: Any) -> Any:
        return self.function(source, destination)

    def __repr__(self) -> str:
        name = getattr(self.function, "__qualname__", repr(self.function))
        return f"CallableResolver({name})"


class ConstantResolver(ValueResolver):
    """Always yields the same value."""

    def __init__(self, value: Any) -> None:
        self.value = value

    def resolve(self, source: Any, destination: Any) -> Any:
        return self.value

    def __repr__(self) -> str:
        return f"ConstantResolver({self.value!r})"


class TemplateResolver(ValueResolver):
    """Renders ``{field}`` placeholders with values read from the source.

    Strings are stripped; missing fields, None and NaN render as "".
    """

    def __init__(
        self,
        template: str,
        source_kind: ReferenceKind | str = ReferenceKind.ARRAY,
    ) -> None:
        self.template = template
        self.source_kind = ReferenceKind.coerce(source_kind)
        self._references = {
            column: make_reference(self.source_kind, column)
            for column in self.extract_fields(template)
        }

    def resolve(self, source: Any, destination: Any) -> str:
        rendered = {}
        for column, reference in self._references.items():
            try:
                value = reference.read(source)
            except ReferenceAccessError:
                value = None
            rendered[column] = self._render_value(value)
        # rendered values are not rescanned for placeholders
        return _PLACEHOLDER_RE.sub(lambda match: rendered[match.group(1)], self.template)

    @staticmethod
    def _render_value(value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        if pd.api.types.is_scalar(value) and pd.isna(value):
            return ""
        return str(value)

    @staticmethod
    def extract_fields(template: str) -> list[str]:
        if not template or "{" not in template:
            return []
        return list(dict.fromkeys(_PLACEHOLDER_RE.findall(template)))

    def __repr__(self) -> str:
        return f"TemplateResolver({self.template!r})"
