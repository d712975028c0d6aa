"""Domain layer: errors and schemas."""

from .errors import ConfigError, ReportParseError, ValidatorError, WorkbookLoadError
from .schemas import (
    AssertionRecord,
    ChartRecord,
    ItemType,
    QueryRecord,
    TestReport,
    WorkbookItem,
)

__all__ = [
    "ValidatorError",
    "WorkbookLoadError",
    "ConfigError",
    "ReportParseError",
    "ItemType",
    "WorkbookItem",
    "QueryRecord",
    "ChartRecord",
    "AssertionRecord",
    "TestReport",
]
