"""Dispatch planning exports."""

from .dispatch_models import DispatchEntry, DispatchTable, Mutability
from .dispatch_planner import build_dispatch_table, build_dispatch_tables

__all__ = [
    "DispatchEntry",
    "DispatchTable",
    "Mutability",
    "build_dispatch_table",
    "build_dispatch_tables",
]
