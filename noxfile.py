from __future__ import annotations

import nox

nox.options.default_venv_backend = "uv|virtualenv"
nox.options.reuse_existing_virtualenvs = True

PY311 = "3.11"
PY312 = "3.12"
PY313 = "3.13"
PY_VERSIONS = [PY311, PY312, PY313]
PY_DEFAULT = PY_VERSIONS[0]
PY_LATEST = PY_VERSIONS[-1]


@nox.session
def test(session):
    session.notify(f"tests-{PY_DEFAULT}")


@nox.session(python=PY_VERSIONS)
def tests(session):
    session.install("-e", ".[test]")

    command = ["pytest"]

    if session.posargs:
        args = []
        for arg in session.posargs:
            if arg:
                args.extend(arg.split(" "))
        command.extend(args)
    session.run(*command)


@nox.session
def lint(session):
    session.run(
        "uv",
        "run",
        "--no-project",
        "--with",
        "pre-commit-uv",
        "--python",
        PY_LATEST,
        "pre-commit",
        "run",
        "--all-files",
        "--show-diff-on-failure",
        "--color",
        "always",
    )


@nox.session(python=PY_LATEST)
def check(session):
    """Run wire-linter against a project directory (default: cwd)."""
    session.install("-e", ".")
    session.run("wire-linter", *(session.posargs or ["."]))
