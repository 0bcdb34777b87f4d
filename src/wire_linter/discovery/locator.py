"""
Template location by naming convention.

A component `UserTable` in `app/components/admin/user_table.py` is rendered
by the first existing of (with the default layout):

    templates/wire/user-table.html
    templates/wire/admin/user-table.html
    templates/user-table.html

Every existing candidate is checked, in that order, once.
"""

from __future__ import annotations

import re
from pathlib import Path

from ..config import LinterConfig
from ..types import ComponentIdentity

# Known limitation: only a lowercase->uppercase transition starts a new word,
# so acronyms and digits are not split (`HTMLEditor` -> `htmleditor`,
# `Step2Form` -> `step2form`).
_WORD_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")


def view_name(class_name: str) -> str:
    """`UserTable` -> `user-table`."""
    return _WORD_BOUNDARY_RE.sub(r"\1-\2", class_name).lower()


def template_candidates(
    identity: ComponentIdentity,
    project_root: Path,
    config: LinterConfig | None = None,
) -> list[Path]:
    """Candidate template paths in priority order (may contain duplicates)."""
    config = config or LinterConfig()
    views = config.views_root(project_root)
    filename = view_name(identity.name) + config.template_suffix
    group = views / config.view_group if config.view_group else views
    return [
        group / filename,
        group.joinpath(*identity.subpath, filename),
        views / filename,
    ]


def locate_templates(
    identity: ComponentIdentity,
    project_root: Path,
    config: LinterConfig | None = None,
) -> list[Path]:
    """Existing candidate templates, in priority order, without duplicates."""
    seen: set[Path] = set()
    out: list[Path] = []
    for path in template_candidates(identity, project_root, config):
        if not path.is_file():
            continue
        try:
            resolved = path.resolve()
        except OSError:
            continue
        if resolved in seen:
            continue
        seen.add(resolved)
        out.append(path)
    return out
