"""Builds maps from YAML map files and applies them."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, TYPE_CHECKING

import yaml
from pydantic import ValidationError

from dtk.mapping.errors import MapConfigError
from dtk.mapping.models import FieldMapping, MapDefinition, MappingConfig
from .mapper import Mapper
from .pipeline import (
    ConstantResolver,
    Map,
    MapBuilder,
    StaticContext,
    TemplateResolver,
)

if TYPE_CHECKING:
    from dtk.config.settings import Settings

logger = logging.getLogger(__name__)


class MappingProcessor:
    """Turns a mapping config into named contexts and maps single documents."""

    def __init__(self, settings: Settings | None = None) -> None:
        if settings is None:
            from dtk.config.settings import get_settings

            settings = get_settings()
        self.settings = settings
        self.mapper = Mapper()

    def load(self, mapping_path: str | Path) -> MappingConfig:
        mapping_file = Path(mapping_path)
        if not mapping_file.exists():
            raise FileNotFoundError(f"Mapping file not found: {mapping_path}")

        with open(mapping_file, "r", encoding="utf-8") as file_handle:
            try:
                mapping_data = yaml.safe_load(file_handle)
            except yaml.YAMLError as exc:
                raise MapConfigError(f"Invalid YAML in {mapping_path}: {exc}") from exc

        if not isinstance(mapping_data, dict):
            raise MapConfigError(f"Mapping file {mapping_path} must contain a mapping")

        try:
            config = MappingConfig(**mapping_data)
        except ValidationError as exc:
            raise MapConfigError(
                f"Invalid mapping config {mapping_path}: {exc}",
                {"errors": exc.errors(include_url=False)},
            ) from exc

        logger.info("Loaded %d map(s) from %s", len(config.maps), mapping_file)
        return config

    def build_contexts(self, config: MappingConfig) -> dict[str, StaticContext]:
        """Compile every map of ``config``; embedded maps are built once and shared."""
        built: dict[str, Map] = {}

        def build(name: str, chain: tuple[str, ...]) -> Map:
            if name in built:
                return built[name]
            if name in chain:
                cycle = " -> ".join(chain + (name,))
                raise MapConfigError(f"Embedded maps reference each other: {cycle}")
            definition = config.find_map(name)
            if definition is None:
                raise MapConfigError(
                    f"Unknown map '{name}'",
                    {"referenced_by": chain[-1] if chain else None},
                )
            built[name] = self._build_map(
                definition, lambda nested: build(nested, chain + (name,))
            )
            return built[name]

        return {
            definition.name: StaticContext(definition.name, build(definition.name, ()))
            for definition in config.maps
        }

    def get_context(self, mapping_path: str | Path, name: str) -> StaticContext:
        contexts = self.build_contexts(self.load(mapping_path))
        if name not in contexts:
            supported = ", ".join(sorted(contexts))
            raise MapConfigError(f"Unknown map '{name}'. Available maps: {supported}")
        return contexts[name]

    def process(
        self,
        mapping_path: str | Path,
        name: str,
        source: Any,
        destination: Any = None,
    ) -> Any:
        """Map one source document; the destination defaults to an empty dict."""
        context = self.get_context(mapping_path, name)
        if destination is None:
            destination = {}
        return self.mapper.map(destination, source, context)

    def _build_map(self, definition: MapDefinition, resolve_nested) -> Map:
        builder = (
            MapBuilder()
            .set_source_kind(definition.source_kind or self.settings.default_source_kind)
            .set_destination_kind(
                definition.destination_kind or self.settings.default_destination_kind
            )
        )
        for field_mapping in definition.mappings:
            self._add_field(builder, field_mapping, resolve_nested)
        return builder.build()

    @staticmethod
    def _add_field(builder: MapBuilder, field_mapping: FieldMapping, resolve_nested) -> None:
        if field_mapping.embedded is not None:
            builder.add_embedded(
                field_mapping.destination,
                resolve_nested(field_mapping.embedded),
                field_mapping.source,
            )
        elif field_mapping.template is not None:
            builder.add_resolver(
                field_mapping.destination,
                TemplateResolver(field_mapping.template, builder.source_kind),
            )
        elif field_mapping.has_value:
            builder.add_resolver(field_mapping.destination, ConstantResolver(field_mapping.value))
        else:
            builder.add(field_mapping.destination, field_mapping.source)
