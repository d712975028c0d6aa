#!/usr/bin/env python3
"""
generate_summary.py - Markdown summary of the NUnit report

Reads test-results/nunit.xml and writes a Markdown table to stdout, for
CI job summaries.

Exit code:
    0: summary written, or no report exists yet (warning line only)
    1: report exists but cannot be parsed

Usage:
    python scripts/generate_summary.py >> $GITHUB_STEP_SUMMARY
    python scripts/generate_summary.py --report out/nunit.xml
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.domain.constants import REPORT_FILENAME, REPORT_NAMESPACE, RESULTS_DIRNAME
from src.domain.errors import ReportParseError
from src.testing.workbook_tests.summary import generate_summary

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_REPORT = PROJECT_ROOT / RESULTS_DIRNAME / REPORT_FILENAME


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Render the NUnit report as Markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--report",
        type=str,
        help=f"NUnit XML path (default: {RESULTS_DIRNAME}/{REPORT_FILENAME})",
    )
    parser.add_argument(
        "--namespace",
        type=str,
        default=REPORT_NAMESPACE,
        help=f"Report namespace stripped from suite names (default: {REPORT_NAMESPACE})",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    report_path = Path(args.report) if args.report else DEFAULT_REPORT
    if not report_path.exists():
        shown = args.report or f"{RESULTS_DIRNAME}/{REPORT_FILENAME}"
        print(f"⚠️ No test results found at {shown}")
        return 0

    try:
        markdown = generate_summary(report_path.read_text(encoding="utf-8"), namespace=args.namespace)
    except (ReportParseError, OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read report {report_path}: {e}")
        return 1

    sys.stdout.write(markdown)
    return 0


if __name__ == "__main__":
    exit(main())
