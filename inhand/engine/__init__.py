"""
engine/__init__.py — public surface of the tax engine.

Consumers (tables, charts, reports, routes) import from here so the slab
formula has exactly one home: tax_engine.calculate_slab_breakdown.
"""
from inhand.engine.schemas import PfPolicy, SlabContribution, TaxInputs, TaxResults
from inhand.engine.tax_engine import (
    calculate_slab_breakdown,
    calculate_tax,
    calculate_tax_for_inputs,
)

__all__ = [
    "PfPolicy",
    "SlabContribution",
    "TaxInputs",
    "TaxResults",
    "calculate_slab_breakdown",
    "calculate_tax",
    "calculate_tax_for_inputs",
]
