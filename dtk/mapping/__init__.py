"""Mapping layer for copying and reshaping fields between containers.

This module provides functionality to:
- Address fields of dicts, public object attributes and getter/setter pairs
- Compose field rules (direct, embedded, resolver-backed) into maps
- Assemble maps fluently with MapBuilder
- Load declarative maps from YAML files
"""

from .errors import (
    DataTransformError,
    InvalidReferenceKindError,
    BuilderSealedError,
    ReferenceAccessError,
    InaccessibleMemberError,
    UndefinedSourceFieldError,
    UndefinedKeyError,
    IncompatibleContainerError,
    MappingError,
    MapConfigError,
)
from .models import (
    ReferenceKind,
    FieldMapping,
    MapDefinition,
    MappingConfig,
)
from .pipeline import (
    Reference,
    ArrayReference,
    PropertyReference,
    MutatorReference,
    make_reference,
    ValueResolver,
    CallableResolver,
    ConstantResolver,
    TemplateResolver,
    Mapping,
    DirectMapping,
    EmbeddedMapping,
    ResolverMapping,
    Map,
    MapBuilder,
    Context,
    StaticContext,
    MappingContext,
)
from .mapper import Mapper
from .processor import MappingProcessor

__all__ = [
    # Errors
    "DataTransformError",
    "InvalidReferenceKindError",
    "BuilderSealedError",
    "ReferenceAccessError",
    "InaccessibleMemberError",
    "UndefinedSourceFieldError",
    "UndefinedKeyError",
    "IncompatibleContainerError",
    "MappingError",
    "MapConfigError",
    # Models
    "ReferenceKind",
    "FieldMapping",
    "MapDefinition",
    "MappingConfig",
    # Pipeline
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
    # Entry points
    "Mapper",
    "MappingProcessor",
]
