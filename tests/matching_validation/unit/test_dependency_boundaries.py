"""Boundary tests for matching_validation internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_matching_core_does_not_import_framework_or_io_layers() -> None:
    matching_dir = _project_root() / "src" / "sdk_response_matcher" / "matching_validation"
    core_modules = (
        matching_dir / "matching_outcomes.py",
        matching_dir / "primitive_rules.py",
        matching_dir / "structural_matcher.py",
    )
    forbidden_import_fragments = (
        "import pytest",
        "sdk_response_matcher.assertion_integration",
        "sdk_response_matcher.configuration",
        "sdk_response_matcher.results_writing",
        "sdk_response_matcher.run_execution",
    )

    for module_path in core_modules:
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"


def test_only_the_plugin_module_imports_pytest() -> None:
    package_dir = _project_root() / "src" / "sdk_response_matcher"
    importing = sorted(
        path.relative_to(package_dir).as_posix()
        for path in package_dir.rglob("*.py")
        if "import pytest" in path.read_text(encoding="utf-8")
    )

    assert importing == ["assertion_integration/pytest_plugin.py"]
