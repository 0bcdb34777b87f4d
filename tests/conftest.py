from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

COUNTER_SOURCE = """
from wire import Component


class Counter(Component):
    count: int = 0

    def mount(self):
        self.count = 0

    def increment(self):
        self.count += 1

    def render(self):
        return "wire/counter.html"
"""


class Project:
    """A throwaway project tree under `tmp_path`."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def write(self, relpath: str, content: str) -> Path:
        path = self.root / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
        return path

    def component(self, relpath: str, content: str) -> Path:
        return self.write(f"app/components/{relpath}", content)

    def template(self, relpath: str, content: str) -> Path:
        return self.write(f"templates/{relpath}", content)


@pytest.fixture
def project(tmp_path: Path) -> Project:
    return Project(tmp_path)


@pytest.fixture
def counter_project(project: Project) -> Project:
    project.component("counter.py", COUNTER_SOURCE)
    return project
