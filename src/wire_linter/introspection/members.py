"""
Public member collection from a class body.

A member is public when its name has no leading underscore (which also
excludes dunders). Class-level names are instance state unless annotated as
`ClassVar`; `staticmethod`/`classmethod` functions are not callable from a
template and are skipped.
"""

from __future__ import annotations

import ast
from collections.abc import Iterable
from dataclasses import dataclass
from dataclasses import field

from ..vocabulary import is_lifecycle_method

PROPERTY_DECORATORS = ("property", "cached_property")
# `@value.setter` and friends re-declare an existing property.
PROPERTY_ACCESSOR_ATTRS = ("setter", "getter", "deleter")
STATIC_DECORATORS = ("staticmethod", "classmethod")

FunctionNode = ast.FunctionDef | ast.AsyncFunctionDef


@dataclass
class ClassMembers:
    properties: list[str] = field(default_factory=list)
    methods: list[str] = field(default_factory=list)

    def add_property(self, name: str) -> None:
        if _is_public(name) and name not in self.properties:
            self.properties.append(name)

    def add_method(self, name: str) -> None:
        if name not in self.methods:
            self.methods.append(name)

    def extend(self, other: ClassMembers) -> None:
        for name in other.properties:
            self.add_property(name)
        for name in other.methods:
            self.add_method(name)


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _decorator_name(dec: ast.expr) -> str | None:
    if isinstance(dec, ast.Call):
        dec = dec.func
    if isinstance(dec, ast.Name):
        return dec.id
    if isinstance(dec, ast.Attribute):
        return dec.attr
    return None


def _is_classvar(annotation: ast.expr) -> bool:
    if isinstance(annotation, ast.Subscript):
        annotation = annotation.value
    if isinstance(annotation, ast.Name):
        return annotation.id == "ClassVar"
    if isinstance(annotation, ast.Attribute):
        return annotation.attr == "ClassVar"
    # String annotations: `"ClassVar[int]"`
    if isinstance(annotation, ast.Constant) and isinstance(annotation.value, str):
        return annotation.value.split("[", 1)[0].strip().endswith("ClassVar")
    return False


def _target_names(target: ast.expr) -> Iterable[str]:
    if isinstance(target, ast.Name):
        yield target.id
    elif isinstance(target, (ast.Tuple, ast.List)):
        for elt in target.elts:
            yield from _target_names(elt)


def _self_attribute_names(func: FunctionNode) -> Iterable[str]:
    """Names assigned as `self.<name> = ...` anywhere in a method body."""
    if not func.args.args:
        return
    self_name = func.args.args[0].arg
    for node in ast.walk(func):
        targets: list[ast.expr] = []
        if isinstance(node, ast.Assign):
            targets = node.targets
        elif isinstance(node, (ast.AnnAssign, ast.AugAssign)):
            targets = [node.target]
        for target in targets:
            if (
                isinstance(target, ast.Attribute)
                and isinstance(target.value, ast.Name)
                and target.value.id == self_name
            ):
                yield target.attr


def collect_class_members(
    node: ast.ClassDef, ignore_methods: frozenset[str] = frozenset()
) -> ClassMembers:
    """Collect public properties and bindable methods declared on `node`."""
    members = ClassMembers()
    for stmt in node.body:
        if isinstance(stmt, ast.Assign):
            for target in stmt.targets:
                for name in _target_names(target):
                    members.add_property(name)
        elif isinstance(stmt, ast.AnnAssign):
            if _is_classvar(stmt.annotation):
                continue
            for name in _target_names(stmt.target):
                members.add_property(name)
        elif isinstance(stmt, (ast.FunctionDef, ast.AsyncFunctionDef)):
            decorators = [_decorator_name(d) for d in stmt.decorator_list]
            if any(d in PROPERTY_DECORATORS for d in decorators) or any(
                d in PROPERTY_ACCESSOR_ATTRS for d in decorators
            ):
                members.add_property(stmt.name)
                continue
            if stmt.name == "__init__":
                for name in _self_attribute_names(stmt):
                    members.add_property(name)
                continue
            if any(d in STATIC_DECORATORS for d in decorators):
                continue
            if not _is_public(stmt.name):
                continue
            if is_lifecycle_method(stmt.name, ignore_methods):
                continue
            members.add_method(stmt.name)
    return members
