from __future__ import annotations

from pathlib import Path

import pytest

from wire_linter.types import BindingReference
from wire_linter.types import BindingShape
from wire_linter.types import Component
from wire_linter.types import ComponentIdentity
from wire_linter.types import ComponentKind
from wire_linter.types import ErrorKind
from wire_linter.validation.classify import classify_reference
from wire_linter.validation.classify import classify_target
from wire_linter.validation.references import validate_reference
from wire_linter.vocabulary import METHOD_DIRECTIVES
from wire_linter.vocabulary import PROPERTY_DIRECTIVES
from wire_linter.vocabulary import SENTINEL_METHOD_KIND
from wire_linter.vocabulary import SENTINEL_PROPERTY_KIND

TEMPLATE = Path("templates/wire/counter.html")

COMPONENT = Component(
    path=Path("app/components/counter.py"),
    identity=ComponentIdentity(module="app.components.counter", name="Counter"),
    kind=ComponentKind.COMPONENT,
    properties=frozenset({"count", "user"}),
    methods=frozenset({"increment", "save"}),
)

EMPTY = Component(path=Path("app/components/broken.py"))


def _ref(target: str, kind: str, line: int = 1) -> BindingReference:
    return BindingReference(target=target, kind=kind, line=line, template=TEMPLATE)


def test_directive_lists_are_disjoint() -> None:
    assert not set(METHOD_DIRECTIVES) & set(PROPERTY_DIRECTIVES)


@pytest.mark.parametrize("kind", METHOD_DIRECTIVES)
def test_method_directives_classify_as_calls(kind: str) -> None:
    assert classify_reference(_ref("user.name", kind)) == BindingShape.METHOD_CALL


@pytest.mark.parametrize("kind", PROPERTY_DIRECTIVES)
def test_property_directives_classify_as_paths(kind: str) -> None:
    assert classify_reference(_ref("save()", kind)) == BindingShape.PROPERTY_PATH


@pytest.mark.parametrize(
    "target,shape",
    [
        ("save()", BindingShape.METHOD_CALL),
        ("save ()", BindingShape.METHOD_CALL),
        ("count", BindingShape.PROPERTY_PATH),
        ("user.name", BindingShape.PROPERTY_PATH),
        ("save(1)", BindingShape.PROPERTY_PATH),
    ],
)
def test_generic_classification(target: str, shape: BindingShape) -> None:
    assert classify_target(target) == shape


@pytest.mark.parametrize(
    "target,kind",
    [
        ("increment", "wire:click"),
        ("increment()", "wire:click"),
        ("save('draft', 1)", "wire:submit"),
        ("count", "wire:model"),
        ("user.name", "wire:model"),
        ("user.address.city", "wire:change"),
        ("save()", SENTINEL_METHOD_KIND),
        ("count", SENTINEL_PROPERTY_KIND),
        ("$refresh", "wire:click"),
        ("$set('count', 0)", "wire:click"),
        ("$parent.count", "wire:model"),
    ],
)
def test_valid_references(target: str, kind: str) -> None:
    assert validate_reference(_ref(target, kind), COMPONENT) is None


def test_missing_method() -> None:
    error = validate_reference(_ref("decrement", "wire:click", line=7), COMPONENT)
    assert error is not None
    assert error.kind == ErrorKind.MISSING_METHOD
    assert error.line == 7
    assert error.file == TEMPLATE
    assert "decrement()" in error.message
    assert "wire:click" in error.message
    assert error.message.startswith("Method ")


def test_missing_property_reports_root_segment() -> None:
    error = validate_reference(_ref("profile.name", "wire:model", line=3), COMPONENT)
    assert error is not None
    assert error.kind == ErrorKind.MISSING_PROPERTY
    assert error.message == (
        "Property 'profile' referenced in wire:model does not exist or is not public"
    )


def test_lookup_is_case_sensitive() -> None:
    assert validate_reference(_ref("Increment", "wire:click"), COMPONENT) is not None
    assert validate_reference(_ref("Count", "wire:model"), COMPONENT) is not None


def test_properties_are_not_methods() -> None:
    error = validate_reference(_ref("count", "wire:click"), COMPONENT)
    assert error is not None
    assert error.kind == ErrorKind.MISSING_METHOD


def test_sentinel_method_message() -> None:
    error = validate_reference(_ref("publish()", SENTINEL_METHOD_KIND), COMPONENT)
    assert error is not None
    assert error.message == (
        "Method 'publish()' referenced in $wire method call does not exist or is not public"
    )


def test_empty_api_reports_every_reference() -> None:
    refs = [
        _ref("increment", "wire:click"),
        _ref("count", "wire:model"),
        _ref("save()", SENTINEL_METHOD_KIND),
    ]
    errors = [validate_reference(ref, EMPTY) for ref in refs]
    assert [e.kind for e in errors if e is not None] == [
        ErrorKind.MISSING_METHOD,
        ErrorKind.MISSING_PROPERTY,
        ErrorKind.MISSING_METHOD,
    ]


def test_error_record_to_dict() -> None:
    error = validate_reference(_ref("nope", "wire:model", line=2), COMPONENT)
    assert error is not None
    assert error.to_dict() == {
        "kind": "MissingProperty",
        "message": "Property 'nope' referenced in wire:model does not exist or is not public",
        "file": str(TEMPLATE),
        "line": 2,
    }
