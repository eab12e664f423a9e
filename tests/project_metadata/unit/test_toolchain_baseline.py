"""Tests for repository toolchain baseline configuration."""

from __future__ import annotations

import tomllib
from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def _pyproject() -> dict:
    pyproject_path = _project_root() / "pyproject.toml"
    return tomllib.loads(pyproject_path.read_text(encoding="utf-8"))


def test_project_uses_python_311_baseline_in_pyproject() -> None:
    pyproject = _pyproject()

    assert pyproject["project"]["requires-python"] == ">=3.11"
    assert pyproject["tool"]["ruff"]["target-version"] == "py311"
    assert pyproject["tool"]["mypy"]["python_version"] == "3.11"


def test_project_uses_uv_style_metadata_without_poetry() -> None:
    pyproject = _pyproject()
    dev_dependencies = pyproject["dependency-groups"]["dev"]

    assert "black" not in dev_dependencies
    assert "black" not in pyproject["tool"]
    assert "poetry" not in pyproject["tool"]
    assert pyproject["build-system"]["build-backend"] != "poetry.core.masonry.api"


def test_pytest_plugin_and_console_script_are_registered() -> None:
    pyproject = _pyproject()

    assert pyproject["project"]["entry-points"]["pytest11"] == {
        "sdk_response_matcher": "sdk_response_matcher.assertion_integration.pytest_plugin"
    }
    scripts = pyproject["project"]["scripts"]
    assert scripts["sdk-response-matcher"] == "sdk_response_matcher.cli:main"


def test_builtin_schema_catalog_ships_inside_the_package() -> None:
    package_root = _project_root() / "src" / "sdk_response_matcher"
    catalog = package_root / "schema_management" / "builtin_schemas.yaml"

    assert catalog.exists()
    assert _pyproject()["tool"]["hatch"]["build"]["targets"]["wheel"]["packages"] == [
        "src/sdk_response_matcher"
    ]
