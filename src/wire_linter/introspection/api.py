"""Introspection entry points.

Turns a component source file into a `Component` with its public binding
surface. Never raises for a bad file: anything that cannot be read, parsed or
recognised as a component yields an empty API.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..types import Component
from ..types import ComponentIdentity
from ..types import ComponentKind
from ..vocabulary import DEFAULT_COMPONENT_BASES
from .hierarchy import ClassIndex
from .hierarchy import ClassRef
from .identity import read_identity
from .members import ClassMembers
from .members import collect_class_members

logger = logging.getLogger(__name__)


def component_api(
    path: Path,
    identity: ComponentIdentity,
    index: ClassIndex,
    *,
    markers: tuple[str, ...] = DEFAULT_COMPONENT_BASES,
    ignore_methods: frozenset[str] = frozenset(),
) -> Component:
    """
    Parse the module and collect the declared class's public API.

    Raises on unreadable or unparseable source; `introspect_component()` is
    the lenient wrapper.
    """
    empty = Component(path=path, identity=identity)
    module = index.parse(path, identity.module)
    node = module.classes.get(identity.name)
    if node is None:
        logger.debug("%s: class %s not found at top level", path, identity.name)
        return empty

    ancestry = index.walk_ancestry(ClassRef(module, node), markers)
    if ancestry.kind != ComponentKind.COMPONENT:
        logger.debug("%s: %s is not a component", path, identity.qualname)
        return empty

    members = ClassMembers()
    for ref in ancestry.chain:
        members.extend(collect_class_members(ref.node, ignore_methods))

    return Component(
        path=path,
        identity=identity,
        kind=ComponentKind.COMPONENT,
        properties=frozenset(members.properties),
        methods=frozenset(members.methods),
    )


def introspect_component(
    path: Path,
    project_root: Path,
    *,
    source_root: Path | None = None,
    module_roots: list[Path] | None = None,
    index: ClassIndex | None = None,
    markers: tuple[str, ...] = DEFAULT_COMPONENT_BASES,
    ignore_methods: frozenset[str] = frozenset(),
) -> Component:
    """
    Extract a component's identity and public API from a source file.

    `module_roots` are the directories module names are relative to (the
    project root when omitted); they also seed the default class index.
    """
    identity = read_identity(path, project_root, source_root, module_roots)
    if identity is None:
        logger.debug("%s: no class declaration", path)
        return Component(path=path)

    if index is None:
        index = ClassIndex(module_roots or [project_root])
    try:
        return component_api(
            path,
            identity,
            index,
            markers=markers,
            ignore_methods=ignore_methods,
        )
    except Exception as e:
        # A single broken component must not abort the scan of the others.
        logger.debug("Cannot introspect %s: %s", path, e)
        return Component(path=path, identity=identity)
