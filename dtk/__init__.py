"""
Data Transform Kit - copy and reshape fields between dicts and objects.

Rules are declared as maps (built fluently with MapBuilder or loaded from
YAML files) and executed against one source/destination pair at a time by
the Mapper.
"""

from dtk.mapping import (
    ReferenceKind,
    MapBuilder,
    Map,
    Mapper,
    MappingContext,
    StaticContext,
    CallableResolver,
    TemplateResolver,
    ValueResolver,
    MappingProcessor,
    DataTransformError,
    MappingError,
)

__version__ = "0.1.0"

__all__ = [
    "ReferenceKind",
    "MapBuilder",
    "Map",
    "Mapper",
    "MappingContext",
    "StaticContext",
    "CallableResolver",
    "TemplateResolver",
    "ValueResolver",
    "MappingProcessor",
    "DataTransformError",
    "MappingError",
]
