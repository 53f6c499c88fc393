"""Tests for the compdocs.docs.registry module."""

from __future__ import annotations

from pathlib import Path

from compdocs.docs.registry import TemplateRegistry, get_template_registry


class TestTemplateRegistry:
    """Tests for TemplateRegistry."""

    def test_bundled_templates(self, template_registry: TemplateRegistry) -> None:
        """The bundled page and field docs templates are available."""
        assert sorted(template_registry.list_templates()) == ["component", "field_docs"]
        source = template_registry.get_template("component")
        assert source is not None
        assert source.startswith('{% from "field_docs" import field_docs %}')

    def test_unknown_template(self, template_registry: TemplateRegistry) -> None:
        """Unknown names return None."""
        assert template_registry.get_template("missing") is None

    def test_custom_directory_and_reload(self, tmp_path: Path) -> None:
        """Templates are read from the given directory and reloaded on demand."""
        (tmp_path / "component.md.j2").write_text("# {{ name }}\n")
        (tmp_path / "notes.txt").write_text("ignored")
        registry = TemplateRegistry(tmp_path)
        assert registry.list_templates() == ["component"]

        (tmp_path / "component.md.j2").write_text("## {{ name }}\n")
        assert registry.get_template("component") == "# {{ name }}\n"
        registry.reload()
        assert registry.get_template("component") == "## {{ name }}\n"

    def test_missing_directory(self, tmp_path: Path) -> None:
        """A missing directory yields no templates."""
        assert TemplateRegistry(tmp_path / "missing").list_templates() == []

    def test_singleton(self) -> None:
        """The global registry is created once."""
        assert get_template_registry() is get_template_registry()
