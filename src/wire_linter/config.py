"""
Project layout configuration.

Settings are read from the `[tool.wire-linter]` table of the checked
project's `pyproject.toml`. Every key is optional:

    [tool.wire-linter]
    component-dirs = ["app/components", "app/wire"]
    source-roots = ["", "src"]
    views-dir = "templates"
    view-group = "wire"
    template-suffix = ".html"
    component-bases = ["wire.Component"]
    ignore-methods = ["refresh_cache"]
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .vocabulary import DEFAULT_COMPONENT_BASES

TOOL_TABLE = "wire-linter"


class ConfigError(ValueError):
    """Raised when a configuration file is present but malformed."""


@dataclass(frozen=True, slots=True)
class LinterConfig:
    component_dirs: tuple[str, ...] = ("app/components", "app/wire")
    views_dir: str = "templates"
    view_group: str = "wire"
    template_suffix: str = ".html"
    component_bases: tuple[str, ...] = DEFAULT_COMPONENT_BASES
    ignore_methods: frozenset[str] = frozenset()
    # Directories that import names are resolved against; "" is the project root.
    source_roots: tuple[str, ...] = ("", "src")

    def component_roots(self, project_root: Path) -> list[Path]:
        return [project_root / d for d in self.component_dirs]

    def views_root(self, project_root: Path) -> Path:
        return project_root / self.views_dir

    def search_roots(self, project_root: Path) -> list[Path]:
        return [project_root / r for r in self.source_roots]


def _str(table: dict[str, Any], key: str, default: str) -> str:
    value = table.get(key, default)
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _str_list(table: dict[str, Any], key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = table.get(key, list(default))
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return tuple(value)


def config_from_table(table: dict[str, Any]) -> LinterConfig:
    defaults = LinterConfig()
    suffix = _str(table, "template-suffix", defaults.template_suffix)
    if suffix and not suffix.startswith("."):
        suffix = f".{suffix}"
    return LinterConfig(
        component_dirs=_str_list(table, "component-dirs", defaults.component_dirs),
        views_dir=_str(table, "views-dir", defaults.views_dir),
        view_group=_str(table, "view-group", defaults.view_group),
        template_suffix=suffix,
        component_bases=_str_list(
            table, "component-bases", defaults.component_bases
        ),
        ignore_methods=frozenset(_str_list(table, "ignore-methods", ())),
        source_roots=_str_list(table, "source-roots", defaults.source_roots),
    )


def load_config(project_root: Path, path: Path | None = None) -> LinterConfig:
    """
    Load configuration for a project.

    With no explicit `path`, `<project_root>/pyproject.toml` is used when it
    exists. A missing file or missing table yields the defaults.
    """
    explicit = path is not None
    if path is None:
        path = project_root / "pyproject.toml"
    if not path.is_file():
        if explicit:
            raise ConfigError(f"Config file not found: {path}")
        return LinterConfig()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    table = data.get("tool", {}).get(TOOL_TABLE, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.{TOOL_TABLE}] in {path} must be a table")
    return config_from_table(table)
