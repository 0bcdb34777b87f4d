"""
Project-wide binding check.

Orchestrates discovery, introspection, template location, extraction and
validation. Each component's chain is independent; the result order is
discovery order, then template candidate order, then order of appearance.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import LinterConfig
from ..discovery.files import iter_component_files
from ..discovery.locator import locate_templates
from ..introspection.api import introspect_component
from ..introspection.hierarchy import ClassIndex
from ..template_syntax.bindings import extract_template_bindings
from ..types import CheckResult
from ..types import Component
from ..types import ErrorRecord
from .references import validate_reference

logger = logging.getLogger(__name__)


def validate_component_templates(
    component: Component, templates: list[Path]
) -> list[ErrorRecord]:
    errors: list[ErrorRecord] = []
    for template in templates:
        for ref in extract_template_bindings(template):
            error = validate_reference(ref, component, template)
            if error is not None:
                errors.append(error)
    return errors


class WireBindingChecker:
    """Run the `wire:` / `$wire` binding check over one project."""

    def __init__(self, project_root: Path, config: LinterConfig | None = None) -> None:
        self.project_root = project_root
        self.config = config or LinterConfig()

    def discover(self) -> list[Component]:
        search_roots = self.config.search_roots(self.project_root)
        index = ClassIndex(search_roots)
        components: list[Component] = []
        for root, path in iter_component_files(
            self.config.component_roots(self.project_root)
        ):
            components.append(
                introspect_component(
                    path,
                    self.project_root,
                    source_root=root,
                    module_roots=search_roots,
                    index=index,
                    markers=self.config.component_bases,
                    ignore_methods=self.config.ignore_methods,
                )
            )
        return components

    def check(self) -> CheckResult:
        result = CheckResult()
        for component in self.discover():
            result.components.append(component)
            if component.identity is None:
                continue
            templates = locate_templates(
                component.identity, self.project_root, self.config
            )
            if not templates:
                logger.debug("No templates for %s", component.identity.qualname)
                continue
            if not component.is_component:
                logger.info(
                    "%s has templates but no component API; all bindings will be reported",
                    component.identity.qualname,
                )
            result.templates.extend(templates)
            result.errors.extend(validate_component_templates(component, templates))
        return result


def check_project(
    project_root: Path, config: LinterConfig | None = None
) -> list[ErrorRecord]:
    """Check a project and return its ordered error list."""
    return WireBindingChecker(project_root, config).check().errors
