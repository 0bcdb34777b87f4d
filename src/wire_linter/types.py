"""
Shared types for discovery, introspection, extraction and validation.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from enum import auto
from pathlib import Path
from typing import Any


class ComponentKind(Enum):
    """Result of the ancestry check for a declared class."""

    COMPONENT = auto()
    NOT_A_COMPONENT = auto()


class BindingShape(Enum):
    """How a binding target is looked up on the component."""

    METHOD_CALL = auto()  # wire:click="save", $wire.save()
    PROPERTY_PATH = auto()  # wire:model="user.name", $wire.count


class ErrorKind(Enum):
    """The only two user-visible error kinds."""

    MISSING_METHOD = "MissingMethod"
    MISSING_PROPERTY = "MissingProperty"

    @property
    def label(self) -> str:
        return {
            ErrorKind.MISSING_METHOD: "Missing Method",
            ErrorKind.MISSING_PROPERTY: "Missing Property",
        }[self]


@dataclass(frozen=True, slots=True)
class ComponentIdentity:
    """
    Where a component lives and what its templates are called.

    `module` is derived from the source path relative to the project root.
    `subpath` holds the package directories between the discovery root and
    the module file (e.g. `("admin",)` for `app/components/admin/users.py`).
    """

    module: str
    name: str
    subpath: tuple[str, ...] = ()

    @property
    def qualname(self) -> str:
        return f"{self.module}.{self.name}" if self.module else self.name


@dataclass(frozen=True)
class Component:
    """A component's public binding surface."""

    path: Path
    identity: ComponentIdentity | None = None
    kind: ComponentKind = ComponentKind.NOT_A_COMPONENT
    properties: frozenset[str] = frozenset()
    methods: frozenset[str] = frozenset()

    @property
    def is_component(self) -> bool:
        return self.kind == ComponentKind.COMPONENT


@dataclass(frozen=True, slots=True)
class BindingReference:
    """A single binding found in a template."""

    target: str
    kind: str  # directive name, or one of the `$wire ...` kinds
    line: int
    template: Path | None = None


@dataclass(frozen=True, slots=True)
class ErrorRecord:
    """A binding that does not resolve to a public component member."""

    kind: ErrorKind
    message: str
    file: Path
    line: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "file": str(self.file),
            "line": self.line,
        }

    def __str__(self) -> str:
        return f"{self.file}:{self.line}: {self.kind.label}: {self.message}"


@dataclass
class CheckResult:
    """Everything a single checker run produced."""

    errors: list[ErrorRecord] = field(default_factory=list)
    components: list[Component] = field(default_factory=list)
    templates: list[Path] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.errors
