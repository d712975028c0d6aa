"""
Core layer: inputs, configuration, report persistence.

Everything that touches the filesystem lives here; suites only see
parsed, read-only data.
"""

from .config import ValidatorConfig, load_config
from .files import atomic_write_text
from .loader import LoadedDocuments, load_documents, parse_workbook

__all__ = [
    # config
    "ValidatorConfig",
    "load_config",
    # loader
    "LoadedDocuments",
    "load_documents",
    "parse_workbook",
    # files
    "atomic_write_text",
]
