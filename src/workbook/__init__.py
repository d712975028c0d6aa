"""
Workbook model: tree flattening and extractors.

The flattened item list is the input of every validation suite.
"""

from .extract import extract_charts, extract_formatters, extract_parameters, extract_queries
from .tree import collect_all_items

__all__ = [
    "collect_all_items",
    "extract_queries",
    "extract_charts",
    "extract_parameters",
    "extract_formatters",
]
