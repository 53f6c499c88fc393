"""Tests for the compdocs.components registry and schemas."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from compdocs.components.registry import ComponentRegistry
from compdocs.components.schemas import ComponentSpec, ComponentType, Status
from compdocs.fields.schemas import FieldKind

CACHE_DEFINITION = """
name: memory
type: cache
summary: Stores key/value pairs in a map held in memory.
config:
  type: object
  children:
    - name: default_ttl
      type: string
      default: 5m
"""

OUTPUT_DEFINITION = """
name: stdout
type: output
status: experimental
config_example:
  codec: lines
"""


@pytest.fixture
def definitions(tmp_path: Path) -> Path:
    """A definitions directory with two valid components."""

    (tmp_path / "memory_cache.yaml").write_text(CACHE_DEFINITION)
    (tmp_path / "stdout_output.yaml").write_text(OUTPUT_DEFINITION)
    return tmp_path


class TestComponentSpec:
    """Tests for ComponentSpec model."""

    def test_defaults(self) -> None:
        """A minimal spec is stable with an empty object config."""
        spec = ComponentSpec(name="noop", type="processor")
        assert spec.type is ComponentType.PROCESSOR
        assert spec.status is Status.STABLE
        assert spec.config.children == []
        assert spec.key == ("processor", "noop")

    def test_invalid_type(self) -> None:
        """Unknown component types are rejected."""
        with pytest.raises(ValueError):
            ComponentSpec(name="noop", type="widget")

    def test_full_example_prefers_declared(self) -> None:
        """A declared config example wins over field defaults."""
        spec = ComponentSpec.model_validate(
            {
                "name": "x",
                "type": "input",
                "config": {"type": "object", "children": [{"name": "a", "default": 1}]},
                "config_example": {"a": 2},
            }
        )
        assert spec.full_example() == {"a": 2}
        assert spec.model_copy(update={"config_example": None}).full_example() == {"a": 1}


class TestComponentRegistry:
    """Tests for ComponentRegistry."""

    def test_load(self, definitions: Path) -> None:
        """All definition files are loaded and keyed by type and name."""
        registry = ComponentRegistry(definitions)
        assert registry.count() == 2
        assert registry.list_keys() == [("cache", "memory"), ("output", "stdout")]

    def test_get(self, definitions: Path) -> None:
        """Components are looked up by type and name."""
        registry = ComponentRegistry(definitions)
        spec = registry.get("cache", "memory")
        assert spec is not None
        assert spec.config.children[0].default == "5m"
        assert registry.get(ComponentType.CACHE, "memory") is spec
        assert registry.get("output", "memory") is None

    def test_get_unknown_type(self, definitions: Path) -> None:
        """Asking for an unknown component type is an error."""
        with pytest.raises(ValueError):
            ComponentRegistry(definitions).get("widget", "memory")

    def test_for_type(self, definitions: Path) -> None:
        """Components can be listed per type."""
        registry = ComponentRegistry(definitions)
        assert [c.name for c in registry.for_type("output")] == ["stdout"]
        assert registry.for_type("input") == []

    def test_list_summaries(self, definitions: Path) -> None:
        """Summaries carry identity, status and field counts."""
        summaries = ComponentRegistry(definitions).list_summaries()
        assert [(s.name, s.status, s.field_count) for s in summaries] == [
            ("memory", Status.STABLE, 1),
            ("stdout", Status.EXPERIMENTAL, 0),
        ]

    def test_invalid_definition_skipped(self, definitions: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Files that fail validation are logged and skipped."""
        (definitions / "broken.yaml").write_text("name: broken\ntype: widget\n")
        (definitions / "empty.yaml").write_text("")
        with caplog.at_level(logging.ERROR, logger="compdocs.components.registry"):
            registry = ComponentRegistry(definitions)
            assert registry.count() == 2
        assert "broken.yaml" in caplog.text

    def test_missing_directory(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """A missing definitions directory yields an empty registry."""
        with caplog.at_level(logging.WARNING, logger="compdocs.components.registry"):
            registry = ComponentRegistry(tmp_path / "missing")
            assert registry.list_all() == []
        assert "not found" in caplog.text

    def test_reload(self, definitions: Path) -> None:
        """Reloading picks up new files."""
        registry = ComponentRegistry(definitions)
        assert registry.count() == 2
        (definitions / "other.yaml").write_text("name: other\ntype: cache\n")
        assert registry.count() == 2
        registry.reload()
        assert registry.count() == 3

    def test_bundled_definitions(self, definitions_dir: Path) -> None:
        """The bundled definitions load cleanly."""
        registry = ComponentRegistry(definitions_dir)
        spec = registry.get("input", "http_server")
        assert spec is not None
        assert spec.status is Status.BETA
        verbs = spec.config.get_child("allowed_verbs")
        assert verbs is not None
        assert verbs.kind is FieldKind.ARRAY
