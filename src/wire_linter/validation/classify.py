"""
Reference classification: method call vs property path.
"""

from __future__ import annotations

import re

from ..types import BindingReference
from ..types import BindingShape
from ..vocabulary import METHOD_DIRECTIVES
from ..vocabulary import PROPERTY_DIRECTIVES

_CALL_TARGET_RE = re.compile(r"^(\w+)\s*\(\)$")


def classify_target(target: str) -> BindingShape:
    """Generic classification: `name()` is a call, anything else a path."""
    if _CALL_TARGET_RE.match(target):
        return BindingShape.METHOD_CALL
    return BindingShape.PROPERTY_PATH


def classify_reference(ref: BindingReference) -> BindingShape:
    if ref.kind in METHOD_DIRECTIVES:
        return BindingShape.METHOD_CALL
    if ref.kind in PROPERTY_DIRECTIVES:
        return BindingShape.PROPERTY_PATH
    return classify_target(ref.target)


def method_name(target: str) -> str:
    """`save` / `save()` / `add(1, 'x')` -> the bare method name."""
    return target.split("(", 1)[0].strip()


def root_segment(target: str) -> str:
    """`user.name` -> `user`; only the root of a path is ever checked."""
    return target.split(".", 1)[0].strip()
