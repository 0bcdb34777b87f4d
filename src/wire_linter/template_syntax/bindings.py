"""
Binding extraction from template text.

Two independent passes run over every line:

1. Directive attributes: `wire:click="save"`, `wire:model.live='user.name'`.
   The reference kind is the base directive (modifiers are dropped).
2. Inline live bindings: `$wire.save()` (method call) and `$wire.count`
   (property access). Call occurrences are matched first and their spans
   consumed, so the property scan never reports the same occurrence again.

Extraction is purely lexical. Template control flow, comments and
JavaScript string contexts are not understood.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from ..types import BindingReference
from ..vocabulary import DIRECTIVE_PREFIX
from ..vocabulary import DIRECTIVES
from ..vocabulary import SENTINEL
from ..vocabulary import SENTINEL_METHOD_KIND
from ..vocabulary import SENTINEL_PROPERTY_KIND
from .spans import SpanSet

logger = logging.getLogger(__name__)

# Longest first so no directive name is shadowed by a shorter prefix.
_DIRECTIVE_NAMES = sorted(
    (d[len(DIRECTIVE_PREFIX) :] for d in DIRECTIVES), key=len, reverse=True
)

DIRECTIVE_RE = re.compile(
    r"(?<![\w:.-])"
    + re.escape(DIRECTIVE_PREFIX)
    + r"(?P<name>"
    + "|".join(re.escape(n) for n in _DIRECTIVE_NAMES)
    + r")"
    + r"(?:\.[\w-]+)*"  # modifiers: .prevent, .live.debounce.500ms
    + r"\s*=\s*"
    + r"""(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)')"""
)

_SENTINEL = r"(?<![\w$])" + re.escape(SENTINEL)
SENTINEL_CALL_RE = re.compile(_SENTINEL + r"\.(\w+)\s*\(")
SENTINEL_ACCESS_RE = re.compile(_SENTINEL + r"\.(\w+)")
_CALL_FOLLOWS_RE = re.compile(r"\s*\(")


def extract_directive_bindings(
    line: str, line_number: int, path: Path | None = None
) -> list[BindingReference]:
    refs: list[BindingReference] = []
    for match in DIRECTIVE_RE.finditer(line):
        value = match.group("dq")
        if value is None:
            value = match.group("sq")
        target = value.strip()
        if not target:
            continue
        refs.append(
            BindingReference(
                target=target,
                kind=DIRECTIVE_PREFIX + match.group("name"),
                line=line_number,
                template=path,
            )
        )
    return refs


def extract_sentinel_bindings(
    line: str, line_number: int, path: Path | None = None
) -> list[BindingReference]:
    refs: list[BindingReference] = []
    consumed = SpanSet()

    for match in SENTINEL_CALL_RE.finditer(line):
        refs.append(
            BindingReference(
                target=f"{match.group(1)}()",
                kind=SENTINEL_METHOD_KIND,
                line=line_number,
                template=path,
            )
        )
        consumed.add(match.start(), match.end())

    for match in SENTINEL_ACCESS_RE.finditer(line):
        if consumed.overlaps(match.start(), match.end()):
            continue
        # Second chance: a call form the first scan did not consume.
        if _CALL_FOLLOWS_RE.match(line, match.end()):
            continue
        refs.append(
            BindingReference(
                target=match.group(1),
                kind=SENTINEL_PROPERTY_KIND,
                line=line_number,
                template=path,
            )
        )
    return refs


def extract_bindings(template: str, path: Path | None = None) -> list[BindingReference]:
    """
    Extract all binding references from template text, in line order.

    Line numbers are 1-based; within a line, directive references precede
    inline `$wire` references.
    """
    refs: list[BindingReference] = []
    for line_number, line in enumerate(template.split("\n"), start=1):
        refs.extend(extract_directive_bindings(line, line_number, path))
        refs.extend(extract_sentinel_bindings(line, line_number, path))
    return refs


def read_template(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Skipping unreadable template %s: %s", path, e)
        return None


def extract_template_bindings(path: Path) -> list[BindingReference]:
    """Read a template file and extract its bindings; unreadable files yield none."""
    template = read_template(path)
    if template is None:
        return []
    return extract_bindings(template, path)
