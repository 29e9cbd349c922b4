# topmark:header:start
#
#   project      : OutputWriter
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OutputWriter project automation via Nox.

Sessions:
  - `qa`: Per-Python session that runs pytest (fast property profile).
  - `property_test`: Long-running hypothesis property tests (opt-in).
  - `lint`: Ruff lint on the package and tests.
  - `format_check`: Verify formatting with Ruff.

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
"""

from __future__ import annotations

import pathlib
import sys
import tomllib
from typing import Any

import nox

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from `pyproject.toml` classifiers.

    Returns:
        list[str]: Supported versions like ["3.10", "3.11", ...], sorted.
    """
    path: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
    doc: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    prefix = "Programming Language :: Python :: "
    versions: set[str] = set()
    for c in doc.get("project", {}).get("classifiers", []):
        v: str = c.removeprefix(prefix).strip() if c.startswith(prefix) else ""
        parts: list[str] = v.split(".")
        if len(parts) == 2 and all(p.isdigit() for p in parts):
            versions.add(v)
    if not versions:
        return [CURRENT_PYTHON_VERSION]
    return sorted(versions, key=lambda s: tuple(int(p) for p in s.split(".")))


PYTHONS: list[str] = get_supported_pythons()

nox.options.sessions = ["lint", "qa"]


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite."""
    session.install("-e", ".[test]")
    session.run("pytest", "-q", "tests", *session.posargs)


@nox.session(python=CURRENT_PYTHON_VERSION)
def property_test(session: nox.Session) -> None:
    """Run the hypothesis property tests with a large example budget."""
    session.install("-e", ".[test]")
    session.run(
        "pytest",
        "-q",
        "-m",
        "property",
        "--hypothesis-profile",
        "thorough",
        "tests",
        *session.posargs,
    )


@nox.session
def lint(session: nox.Session) -> None:
    """Lint with Ruff."""
    session.install("ruff")
    session.run("ruff", "check", "src", "tests", "noxfile.py")


@nox.session
def format_check(session: nox.Session) -> None:
    """Check formatting with Ruff."""
    session.install("ruff")
    session.run("ruff", "format", "--check", "src", "tests", "noxfile.py")
