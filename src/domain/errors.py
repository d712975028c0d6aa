"""
Error definitions for the validator.

Only precondition failures are exceptions:
- missing/unparsable workbook or changelog → WorkbookLoadError
- malformed default.yaml → ConfigError
- unreadable report in the summary step → ReportParseError

A failed structural check is never an exception; it is an AssertionRecord.
"""

from typing import Any


class ValidatorError(Exception):
    """
    Fatal validator error carrying a code and context.

    Usage:
        raise WorkbookLoadError(ErrorCodes.WORKBOOK_NOT_FOUND, path=str(path))
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """For logging / JSON output."""
        return {
            "code": self.code,
            **self.context,
        }


class WorkbookLoadError(ValidatorError):
    """Workbook JSON or changelog could not be loaded."""


class ConfigError(ValidatorError):
    """Validator configuration is invalid."""


class ReportParseError(ValidatorError):
    """A persisted test report could not be parsed."""


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """Error code constants."""

    # === Load ===
    WORKBOOK_NOT_FOUND = "WORKBOOK_NOT_FOUND"
    WORKBOOK_PARSE_ERROR = "WORKBOOK_PARSE_ERROR"
    WORKBOOK_INVALID = "WORKBOOK_INVALID"  # parsed, but root is not an object
    README_NOT_FOUND = "README_NOT_FOUND"
    FILE_UNREADABLE = "FILE_UNREADABLE"

    # === Config ===
    CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"
    CONFIG_INVALID = "CONFIG_INVALID"
    UNKNOWN_RULE = "UNKNOWN_RULE"

    # === Report ===
    REPORT_PARSE_ERROR = "REPORT_PARSE_ERROR"
