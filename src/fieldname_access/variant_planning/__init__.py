"""Variant planning exports."""

from .variant_models import VariantClass
from .variant_planner import VariantNameCollision, default_variant_name, plan_variants

__all__ = [
    "VariantClass",
    "VariantNameCollision",
    "default_variant_name",
    "plan_variants",
]
