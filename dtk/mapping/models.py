from __future__ import annotations
from typing import List, Any
from pydantic import BaseModel, Field, field_validator, model_validator
from enum import Enum

from .errors import InvalidReferenceKindError


class ReferenceKind(str, Enum):
    """How a field is addressed inside a container."""
    ARRAY = "array"
    OBJECT_PROPERTIES = "object_properties"
    OBJECT_MUTATORS = "object_mutators"

    @classmethod
    def coerce(cls, kind: Any) -> ReferenceKind:
        """Accept a member, its value or its name; raise on anything else."""
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            normalized = kind.strip().lower()
            for member in cls:
                if normalized in (member.value, member.name.lower()):
                    return member
        raise InvalidReferenceKindError(kind)


class FieldMapping(BaseModel):
    """One destination field and where its value comes from.

    Exactly one value origin is allowed:
    - source: copy a source field (defaults to the destination name)
    - template: render "{field}" placeholders against the source
    - value: write a literal
    - embedded: apply another named map to the source field (``source``
      locates the substructure and defaults to the destination name)
    """
    destination: str = Field(..., description="Destination field name")
    source: str | None = Field(None, description="Source field name")
    template: str | None = Field(None, description="Template rendered from source fields")
    value: Any = Field(None, description="Literal value")
    embedded: str | None = Field(None, description="Name of a nested map")

    @model_validator(mode="after")
    def _check_origin(self) -> FieldMapping:
        origins = [
            name
            for name in ("template", "value", "embedded")
            if name in self.model_fields_set
        ]
        if len(origins) > 1:
            raise ValueError(
                f"Field '{self.destination}' mixes {', '.join(origins)}; pick one"
            )
        if self.source is not None and origins and origins[0] != "embedded":
            raise ValueError(
                f"Field '{self.destination}' cannot combine source with {origins[0]}"
            )
        return self

    @property
    def has_value(self) -> bool:
        return "value" in self.model_fields_set


class MapDefinition(BaseModel):
    name: str = Field(..., description="Map (context) name")
    source_kind: ReferenceKind | None = None
    destination_kind: ReferenceKind | None = None
    mappings: List[FieldMapping] = Field(default_factory=list)

    @field_validator("source_kind", "destination_kind", mode="before")
    @classmethod
    def _coerce_kind(cls, value: Any) -> ReferenceKind | None:
        if value is None:
            return None
        try:
            return ReferenceKind.coerce(value)
        except InvalidReferenceKindError as exc:
            raise ValueError(exc.message) from exc


class MappingConfig(BaseModel):
    name: str
    maps: List[MapDefinition]

    @model_validator(mode="after")
    def _unique_names(self) -> MappingConfig:
        seen: set[str] = set()
        for definition in self.maps:
            if definition.name in seen:
                raise ValueError(f"Duplicate map name: {definition.name}")
            seen.add(definition.name)
        return self

    def find_map(self, name: str) -> MapDefinition | None:
        for definition in self.maps:
            if definition.name == name:
                return definition
        return None
