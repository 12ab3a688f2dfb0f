"""Plan document rendering for external code emitters."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from .plan_models import GenerationPlan

PLAN_FORMAT_VERSION = 1


def render_plan_document(plans: Iterable[GenerationPlan]) -> str:
    """Render plans as deterministic JSON text ending with a newline."""
    document = {
        "format_version": PLAN_FORMAT_VERSION,
        "records": [plan.to_document() for plan in plans],
    }
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def write_plan_document(plans: Iterable[GenerationPlan], output_path: Path | str) -> Path:
    """Write the plan document and return the resolved destination path.

    Raises:
      OSError: If writing the document fails.
    """
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(render_plan_document(plans), encoding="utf-8")
    return destination.resolve()
