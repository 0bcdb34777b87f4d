"""
Shared file discovery helpers for component sources.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

COMPONENT_SUFFIX = ".py"


def iter_component_files(roots: Iterable[Path]) -> Iterator[tuple[Path, Path]]:
    """
    Yield `(root, path)` for every Python source file under the given roots.

    Roots are walked in the order given, files in sorted order within a root.
    Roots that do not exist are skipped, and a file reachable from two
    overlapping roots is yielded once (for the first root).
    """
    seen: set[Path] = set()
    for root in roots:
        if not root.is_dir():
            logger.debug("Skipping missing component directory %s", root)
            continue
        for path in sorted(root.rglob(f"*{COMPONENT_SUFFIX}")):
            if not path.is_file():
                continue
            resolved = path.resolve()
            if resolved in seen:
                continue
            seen.add(resolved)
            yield root, path
