"""
Document loading: workbook JSON + README changelog.

Rules:
- Both documents are loaded once per run and never mutated
- Any load problem is fatal (WorkbookLoadError); no partial result
- The raw workbook text is kept next to the parsed tree for the
  raw-text checks (version banner, hardcoded GUID scan, file size)
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from src.domain.errors import ErrorCodes, WorkbookLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedDocuments:
    """Inputs of one validation run."""
    workbook: dict[str, Any]
    workbook_raw: str
    readme: str
    workbook_path: Path
    readme_path: Path

    @property
    def root_dir(self) -> Path:
        """Directory holding the workbook (companion docs live here)."""
        return self.workbook_path.parent


def _read_text(path: Path, missing_code: str) -> str:
    if not path.is_file():
        raise WorkbookLoadError(missing_code, path=str(path))
    try:
        # CRLF kept as stored
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise WorkbookLoadError(ErrorCodes.FILE_UNREADABLE, path=str(path), cause=str(e)) from e


def parse_workbook(raw: str, source: str = "<string>") -> dict[str, Any]:
    """
    Parse workbook JSON text.

    Args:
        raw: Workbook JSON text
        source: Path or label used in error context

    Returns:
        Parsed workbook mapping

    Raises:
        WorkbookLoadError: Invalid JSON or non-object root
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise WorkbookLoadError(
            ErrorCodes.WORKBOOK_PARSE_ERROR,
            path=source,
            line=e.lineno,
            column=e.colno,
            cause=e.msg,
        ) from e

    if not isinstance(data, dict):
        raise WorkbookLoadError(
            ErrorCodes.WORKBOOK_INVALID,
            path=source,
            root_type=type(data).__name__,
        )
    return data


def load_documents(workbook_path: Path, readme_path: Path) -> LoadedDocuments:
    """
    Load the workbook and its README.

    Args:
        workbook_path: Workbook JSON file
        readme_path: README (changelog) file

    Returns:
        LoadedDocuments

    Raises:
        WorkbookLoadError: Either file is missing/unreadable or JSON is invalid
    """
    workbook_raw = _read_text(workbook_path, ErrorCodes.WORKBOOK_NOT_FOUND)
    workbook = parse_workbook(workbook_raw, source=str(workbook_path))
    readme = _read_text(readme_path, ErrorCodes.README_NOT_FOUND)

    logger.debug(
        "Loaded %s (%d bytes) and %s",
        workbook_path,
        len(workbook_raw.encode("utf-8")),
        readme_path,
    )

    return LoadedDocuments(
        workbook=workbook,
        workbook_raw=workbook_raw,
        readme=readme,
        workbook_path=workbook_path,
        readme_path=readme_path,
    )
