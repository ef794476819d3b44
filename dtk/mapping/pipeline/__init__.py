"""Composable building blocks of the mapping engine."""

from .references import (
    Reference,
    ArrayReference,
    PropertyReference,
    MutatorReference,
    make_reference,
)
from .value_resolution import (
    ValueResolver,
    CallableResolver,
    ConstantResolver,
    TemplateResolver,
)
from .steps import Mapping, DirectMapping, EmbeddedMapping, ResolverMapping
from .map import Map
from .builder import MapBuilder
from .context import Context, StaticContext, MappingContext

__all__ = [
    "Reference",
    "ArrayReference",
    "PropertyReference",
    "MutatorReference",
    "make_reference",
    "ValueResolver",
    "CallableResolver",
    "ConstantResolver",
    "TemplateResolver",
    "Mapping",
    "DirectMapping",
    "EmbeddedMapping",
    "ResolverMapping",
    "Map",
    "MapBuilder",
    "Context",
    "StaticContext",
    "MappingContext",
]
