"""Boundary tests for the planning core's internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_planning_core_does_not_import_front_end_modules() -> None:
    package_dir = _project_root() / "src" / "fieldname_access"
    core_packages = ("schema_model", "variant_planning", "dispatch_planning", "generation_plan")
    forbidden_import_fragments = (
        "fieldname_access.configuration",
        "fieldname_access.cli",
        "fieldname_access.runtime_binding",
        "fieldname_access.record_extraction",
        "import click",
        "import yaml",
    )

    for package in core_packages:
        for module_path in (package_dir / package).glob("*.py"):
            text = module_path.read_text(encoding="utf-8")
            for fragment in forbidden_import_fragments:
                assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
