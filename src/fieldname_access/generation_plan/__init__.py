"""Generation plan exports."""

from .plan_assembly import (
    FIELD_ENUM_SUFFIX,
    MUTABLE_ENUM_SUFFIX,
    assemble_generation_plan,
    generate_plan,
    resolve_record_config,
)
from .plan_document import PLAN_FORMAT_VERSION, render_plan_document, write_plan_document
from .plan_models import GenerationPlan, TaggedUnionShape

__all__ = [
    "GenerationPlan",
    "TaggedUnionShape",
    "FIELD_ENUM_SUFFIX",
    "MUTABLE_ENUM_SUFFIX",
    "PLAN_FORMAT_VERSION",
    "assemble_generation_plan",
    "generate_plan",
    "render_plan_document",
    "resolve_record_config",
    "write_plan_document",
]
