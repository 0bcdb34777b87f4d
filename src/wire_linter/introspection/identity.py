"""
Component identity from a minimal textual scan.

The scan does not parse the file, so a component whose module has a syntax
error still gets an identity (and therefore still gets its templates
located and checked).
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from ..types import ComponentIdentity

logger = logging.getLogger(__name__)

# First top-level class declaration. Known limitation: a docstring line that
# starts with `class ` also matches, and then wins over the real declaration.
CLASS_DECL_RE = re.compile(r"^class\s+([A-Za-z_]\w*)", re.MULTILINE)


def module_name_for(
    path: Path,
    project_root: Path,
    module_roots: list[Path] | None = None,
) -> str:
    """
    Dotted module name for a source file, relative to the deepest module root
    containing it (the project root when none is given).

    `app/components/counter.py` -> `app.components.counter`; with a `src`
    root, `src/myapp/counter.py` -> `myapp.counter`. Package `__init__.py`
    files map to the package itself.
    """
    resolved = path.resolve()
    rel: Path | None = None
    for root in module_roots or [project_root]:
        try:
            candidate = resolved.relative_to(root.resolve())
        except ValueError:
            continue
        if rel is None or len(candidate.parts) < len(rel.parts):
            rel = candidate
    if rel is None:
        return path.stem
    parts = list(rel.with_suffix("").parts)
    if parts and parts[-1] == "__init__":
        parts.pop()
    return ".".join(parts)


def subpath_for(path: Path, source_root: Path) -> tuple[str, ...]:
    try:
        rel = path.resolve().relative_to(source_root.resolve())
    except ValueError:
        return ()
    return tuple(rel.parent.parts)


def declared_class_name(source: str) -> str | None:
    match = CLASS_DECL_RE.search(source)
    return match.group(1) if match else None


def read_identity(
    path: Path,
    project_root: Path,
    source_root: Path | None = None,
    module_roots: list[Path] | None = None,
) -> ComponentIdentity | None:
    """Return the identity of the first class declared in `path`, if any."""
    try:
        source = path.read_text(encoding="utf-8-sig", errors="replace")
    except OSError as e:
        logger.debug("Cannot read %s: %s", path, e)
        return None

    name = declared_class_name(source)
    if name is None:
        return None
    return ComponentIdentity(
        module=module_name_for(path, project_root, module_roots),
        name=name,
        subpath=subpath_for(path, source_root) if source_root is not None else (),
    )
