"""
Single-reference validation against a component's public API.
"""

from __future__ import annotations

from pathlib import Path

from ..types import BindingReference
from ..types import BindingShape
from ..types import Component
from ..types import ErrorKind
from ..types import ErrorRecord
from ..vocabulary import MAGIC_ACTION_PREFIX
from .classify import classify_reference
from .classify import method_name
from .classify import root_segment


def missing_method_message(name: str, kind: str) -> str:
    return f"Method '{name}()' referenced in {kind} does not exist or is not public"


def missing_property_message(name: str, kind: str) -> str:
    return f"Property '{name}' referenced in {kind} does not exist or is not public"


def validate_reference(
    ref: BindingReference,
    component: Component,
    template: Path | None = None,
) -> ErrorRecord | None:
    """
    Check one reference; return an error when its target is not public.

    Method targets must be in `component.methods`. Property targets are
    checked on their root segment only: `user.name` passes whenever `user`
    is a public property. Framework magic actions (`$refresh`, `$set(...)`)
    are never looked up.
    """
    file = template or ref.template or component.path
    shape = classify_reference(ref)

    if shape == BindingShape.METHOD_CALL:
        name = method_name(ref.target)
        if not name or name.startswith(MAGIC_ACTION_PREFIX):
            return None
        if name in component.methods:
            return None
        return ErrorRecord(
            kind=ErrorKind.MISSING_METHOD,
            message=missing_method_message(name, ref.kind),
            file=file,
            line=ref.line,
        )

    name = root_segment(ref.target)
    if not name or name.startswith(MAGIC_ACTION_PREFIX):
        return None
    if name in component.properties:
        return None
    return ErrorRecord(
        kind=ErrorKind.MISSING_PROPERTY,
        message=missing_property_message(name, ref.kind),
        file=file,
        line=ref.line,
    )
