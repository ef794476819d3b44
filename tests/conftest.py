"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from dtk.config.settings import Settings
from dtk.mapping import MapBuilder, Mapper, MappingProcessor


class PublicUser:
    """Destination with public fields."""

    def __init__(self) -> None:
        self.firstName = None
        self.lastName = None


class AccessorUser:
    """Object exposing getter/setter pairs and counting their calls."""

    def __init__(self, first_name: str | None = None) -> None:
        self._first_name = first_name
        self.get_calls = 0
        self.set_calls = 0

    def getFirstName(self) -> str | None:
        self.get_calls += 1
        return self._first_name

    def setFirstName(self, value: str | None) -> None:
        self.set_calls += 1
        self._first_name = value


@pytest.fixture
def mapper() -> Mapper:
    """Provide a Mapper instance."""
    return Mapper()


@pytest.fixture
def builder() -> MapBuilder:
    """Provide a fresh MapBuilder for each test."""
    return MapBuilder()


@pytest.fixture
def settings() -> Settings:
    """Settings with the built-in defaults, independent of the environment."""
    return Settings(default_source_kind="array", default_destination_kind="array")


@pytest.fixture
def processor(settings: Settings) -> MappingProcessor:
    """Provide a MappingProcessor using default settings."""
    return MappingProcessor(settings=settings)
