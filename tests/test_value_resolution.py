"""Tests for value resolvers."""

from __future__ import annotations

import math

import pandas as pd
import pytest

from dtk.mapping import CallableResolver, ConstantResolver, TemplateResolver

from conftest import PublicUser


class TestCallableResolver:
    """Test the CallableResolver."""

    def test_receives_source_and_destination(self) -> None:
        """Test that the wrapped function sees both containers."""
        seen = []

        def resolve(source, destination):
            seen.append((source, destination))
            return source["a"] + destination["b"]

        resolver = CallableResolver(resolve)

        assert resolver.resolve({"a": 1}, {"b": 2}) == 3
        assert seen == [({"a": 1}, {"b": 2})]

    def test_rejects_non_callable(self) -> None:
        """Test that only callables can be wrapped."""
        with pytest.raises(TypeError):
            CallableResolver("not callable")


class TestConstantResolver:
    """Test the ConstantResolver."""

    def test_returns_value(self) -> None:
        """Test that the constant is returned regardless of input."""
        resolver = ConstantResolver({"kind": "person"})

        assert resolver.resolve({}, {}) == {"kind": "person"}
        assert resolver.resolve(None, None) == {"kind": "person"}


class TestTemplateResolver:
    """Test the TemplateResolver."""

    def test_renders_fields(self) -> None:
        """Test placeholder substitution with stripped strings."""
        resolver = TemplateResolver("{first_name} {last_name}")

        result = resolver.resolve({"first_name": " Ada ", "last_name": "Lovelace"}, {})

        assert result == "Ada Lovelace"

    def test_missing_and_na_values_render_empty(self) -> None:
        """Test that missing fields, None and NaN become empty strings."""
        resolver = TemplateResolver("[{a}|{b}|{c}|{d}]")

        result = resolver.resolve({"b": None, "c": math.nan, "d": 7}, {})

        assert result == "[|||7]"

    def test_placeholders_in_values_stay_literal(self) -> None:
        """Test that braces inside source values are not substituted."""
        resolver = TemplateResolver("{a}|{b}")

        assert resolver.resolve({"a": "{b}", "b": "X"}, {}) == "{b}|X"

    def test_repeated_placeholder(self) -> None:
        """Test that a field used twice is rendered in both places."""
        resolver = TemplateResolver("{a}-{a}")

        assert resolver.resolve({"a": "x"}, {}) == "x-x"

    def test_pandas_row(self) -> None:
        """Test rendering from a pandas row."""
        resolver = TemplateResolver("School from the {district} district")
        row = pd.Series({"district": "LOS ANDES", "code": 12})

        assert resolver.resolve(row, {}) == "School from the LOS ANDES district"

    def test_object_source(self) -> None:
        """Test rendering from public object fields."""
        user = PublicUser()
        user.firstName = "Grace"
        user.lastName = "Hopper"
        resolver = TemplateResolver("{lastName}, {firstName}", source_kind="object_properties")

        assert resolver.resolve(user, {}) == "Hopper, Grace"

    def test_extract_fields(self) -> None:
        """Test placeholder extraction keeps order and drops duplicates."""
        assert TemplateResolver.extract_fields("{a}-{b}-{a}") == ["a", "b"]
        assert TemplateResolver.extract_fields("plain text") == []

    def test_template_without_placeholders(self) -> None:
        """Test that a plain template is returned unchanged."""
        assert TemplateResolver("static").resolve({}, {}) == "static"
