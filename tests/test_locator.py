from __future__ import annotations

from pathlib import Path

import pytest

from wire_linter.config import LinterConfig
from wire_linter.discovery.locator import locate_templates
from wire_linter.discovery.locator import template_candidates
from wire_linter.discovery.locator import view_name
from wire_linter.types import ComponentIdentity


@pytest.mark.parametrize(
    "class_name,expected",
    [
        ("Counter", "counter"),
        ("UserTable", "user-table"),
        ("ShowPostComments", "show-post-comments"),
        # Single-boundary rule: acronyms and digits are not split.
        ("HTMLEditor", "htmleditor"),
        ("Step2Form", "step2form"),
        ("already_snake", "already_snake"),
    ],
)
def test_view_name(class_name: str, expected: str) -> None:
    assert view_name(class_name) == expected


def test_candidates_order(tmp_path: Path) -> None:
    identity = ComponentIdentity(
        module="app.components.admin.users", name="UserTable", subpath=("admin",)
    )
    views = tmp_path / "templates"
    assert template_candidates(identity, tmp_path) == [
        views / "wire" / "user-table.html",
        views / "wire" / "admin" / "user-table.html",
        views / "user-table.html",
    ]


def test_candidates_follow_config(tmp_path: Path) -> None:
    identity = ComponentIdentity(module="app.live.counter", name="Counter")
    config = LinterConfig(
        views_dir="resources/views", view_group="live", template_suffix=".jinja"
    )
    candidates = template_candidates(identity, tmp_path, config)
    assert candidates[0] == tmp_path / "resources/views/live/counter.jinja"
    assert candidates[-1] == tmp_path / "resources/views/counter.jinja"


def test_locate_returns_existing_in_priority_order(tmp_path: Path) -> None:
    views = tmp_path / "templates"
    (views / "wire" / "admin").mkdir(parents=True)
    (views / "user-table.html").write_text("", encoding="utf-8")
    (views / "wire" / "admin" / "user-table.html").write_text("", encoding="utf-8")

    identity = ComponentIdentity(
        module="app.components.admin.users", name="UserTable", subpath=("admin",)
    )

    assert locate_templates(identity, tmp_path) == [
        views / "wire" / "admin" / "user-table.html",
        views / "user-table.html",
    ]


def test_locate_deduplicates_candidates_resolving_to_same_file(tmp_path: Path) -> None:
    views = tmp_path / "templates"
    (views / "wire").mkdir(parents=True)
    (views / "wire" / "counter.html").write_text("", encoding="utf-8")

    # No sub-package: the nested candidate is the group candidate again.
    identity = ComponentIdentity(module="app.components.counter", name="Counter")

    assert locate_templates(identity, tmp_path) == [views / "wire" / "counter.html"]


def test_locate_without_templates_is_empty(tmp_path: Path) -> None:
    identity = ComponentIdentity(module="app.components.counter", name="Counter")
    assert locate_templates(identity, tmp_path) == []
