"""
Static class hierarchy resolution.

Components are never imported. Instead, modules are parsed on demand and base
class expressions are resolved through each module's import statements into
qualified names. The walk follows project-local ancestors (modules found
under the search roots) and stops at the configured marker base.
"""

from __future__ import annotations

import ast
import logging
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path

from ..types import ComponentKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParsedModule:
    """A parsed source module plus the names bound at its top level."""

    name: str
    path: Path
    classes: dict[str, ast.ClassDef]
    imports: dict[str, str]


@dataclass(frozen=True, slots=True)
class ClassRef:
    module: ParsedModule
    node: ast.ClassDef

    @property
    def qualname(self) -> str:
        return f"{self.module.name}.{self.node.name}"


@dataclass
class Ancestry:
    """
    Result of walking a class's bases.

    `chain` starts with the class itself, followed by every project-local
    ancestor in depth-first, left-to-right order (marker excluded).
    """

    kind: ComponentKind
    chain: list[ClassRef] = field(default_factory=list)


def _resolve_relative(module: str, is_package: bool, level: int, target: str | None) -> str:
    parts = module.split(".") if module else []
    if not is_package:
        parts = parts[:-1]
    if level > 1:
        parts = parts[: len(parts) - (level - 1)] if level - 1 <= len(parts) else []
    if target:
        parts.append(target)
    return ".".join(parts)


def collect_imports(tree: ast.Module, module: str, is_package: bool) -> dict[str, str]:
    """Map names bound by top-level imports to the qualified names they refer to."""
    imports: dict[str, str] = {}
    for node in tree.body:
        if isinstance(node, ast.Import):
            for alias in node.names:
                if alias.asname:
                    imports[alias.asname] = alias.name
                else:
                    head = alias.name.split(".", 1)[0]
                    imports[head] = head
        elif isinstance(node, ast.ImportFrom):
            if node.level:
                source = _resolve_relative(module, is_package, node.level, node.module)
            else:
                source = node.module or ""
            for alias in node.names:
                if alias.name == "*":
                    continue
                bound = alias.asname or alias.name
                imports[bound] = f"{source}.{alias.name}" if source else alias.name
    return imports


def _dotted(node: ast.AST) -> str | None:
    if isinstance(node, ast.Name):
        return node.id
    if isinstance(node, ast.Attribute):
        base = _dotted(node.value)
        if base:
            return f"{base}.{node.attr}"
    return None


def resolve_base(expr: ast.expr, module: ParsedModule) -> str | None:
    """
    Qualified name for a base class expression, or None if it isn't a name.

    `Component` with `from wire import Component` -> `wire.Component`;
    `wire.Component` with `import wire` -> `wire.Component`;
    `Generic[T]` resolves its subscripted value.
    """
    if isinstance(expr, ast.Subscript):
        expr = expr.value
    dotted = _dotted(expr)
    if dotted is None:
        return None
    head, _, rest = dotted.partition(".")
    if not rest and head in module.classes:
        return f"{module.name}.{head}" if module.name else head
    if head in module.imports:
        target = module.imports[head]
        return f"{target}.{rest}" if rest else target
    return dotted


class ClassIndex:
    """
    Lazily parsed project modules, shared across one checker run.

    Modules that fail to read or parse are remembered as missing so each file
    is attempted at most once.
    """

    def __init__(self, search_roots: list[Path]) -> None:
        self.search_roots = search_roots
        self._modules: dict[str, ParsedModule | None] = {}

    def parse(self, path: Path, name: str) -> ParsedModule:
        """
        Parse `path` as module `name` and cache it.

        Raises on unreadable or invalid source; callers decide how lenient to be.
        """
        cached = self._modules.get(name)
        if cached is not None and cached.path == path:
            return cached
        # Bytes, so the parser honours a BOM or a PEP 263 coding cookie.
        tree = ast.parse(path.read_bytes(), filename=str(path))
        is_package = path.name == "__init__.py"
        module = ParsedModule(
            name=name,
            path=path,
            classes={
                node.name: node
                for node in tree.body
                if isinstance(node, ast.ClassDef)
            },
            imports=collect_imports(tree, name, is_package),
        )
        self._modules[name] = module
        return module

    def module_path(self, name: str) -> Path | None:
        """Resolve a dotted module name to a source file under the search roots."""
        if not name:
            return None
        rel = Path(*name.split("."))
        for root in self.search_roots:
            candidate = (root / rel).with_suffix(".py")
            if candidate.is_file():
                return candidate
            pkg_init = root / rel / "__init__.py"
            if pkg_init.is_file():
                return pkg_init
        return None

    def module(self, name: str) -> ParsedModule | None:
        if name in self._modules:
            return self._modules[name]
        path = self.module_path(name)
        if path is None:
            self._modules[name] = None
            return None
        try:
            return self.parse(path, name)
        except (OSError, UnicodeDecodeError, SyntaxError, ValueError, RecursionError) as e:
            logger.debug("Cannot parse ancestor module %s (%s): %s", name, path, e)
            self._modules[name] = None
            return None

    def lookup(self, qualname: str, _seen: set[str] | None = None) -> ClassRef | None:
        """Find a project-local class by qualified name, following re-exports."""
        seen = _seen if _seen is not None else set()
        if qualname in seen:
            return None
        seen.add(qualname)

        module_name, _, class_name = qualname.rpartition(".")
        if not module_name:
            return None
        module = self.module(module_name)
        if module is None:
            return None
        node = module.classes.get(class_name)
        if node is not None:
            return ClassRef(module, node)
        reexport = module.imports.get(class_name)
        if reexport:
            return self.lookup(reexport, seen)
        return None

    def walk_ancestry(self, start: ClassRef, markers: tuple[str, ...]) -> Ancestry:
        """Walk `start`'s bases looking for one of the marker qualified names."""
        chain: list[ClassRef] = []
        visited: set[str] = set()
        found = False

        def visit(ref: ClassRef) -> None:
            nonlocal found
            if ref.qualname in visited:
                return
            visited.add(ref.qualname)
            chain.append(ref)
            for base in ref.node.bases:
                qualified = resolve_base(base, ref.module)
                if qualified is None:
                    continue
                if qualified in markers:
                    found = True
                    continue
                parent = self.lookup(qualified)
                if parent is not None:
                    visit(parent)

        visit(start)
        kind = ComponentKind.COMPONENT if found else ComponentKind.NOT_A_COMPONENT
        return Ancestry(kind=kind, chain=chain)
