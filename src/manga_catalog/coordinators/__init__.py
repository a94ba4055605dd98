"""Coordinators layer - reconciliation and the catalog run pipeline."""

from .catalog_assembler import CatalogAssembler
from .catalog_generator import CatalogGenerator, GenerationReport
from .catalog_reconciler import CatalogReconciler, ReconcileResult

__all__ = [
    "CatalogAssembler",
    "CatalogGenerator",
    "CatalogReconciler",
    "GenerationReport",
    "ReconcileResult",
]
