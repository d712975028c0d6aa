"""
Workbook validation suites.

Flow:
    SuiteContext.from_documents(...) → SuiteRunner.run_all(SUITES)
    → TestReport → write_report (NUnit XML) → generate_summary (Markdown)
"""

from .assertions import AssertionEngine, stringify
from .context import SuiteContext
from .nunit import generate_nunit_xml, write_report
from .rules import RULES, apply_rule
from .runner import SUITE_ERROR_CHECK, Suite, SuiteRunner
from .suites import SUITES
from .summary import generate_summary, parse_report

__all__ = [
    # Engine
    "AssertionEngine",
    "stringify",
    # Runner
    "Suite",
    "SuiteRunner",
    "SuiteContext",
    "SUITES",
    "SUITE_ERROR_CHECK",
    # Rules
    "RULES",
    "apply_rule",
    # Reports
    "generate_nunit_xml",
    "write_report",
    "generate_summary",
    "parse_report",
]
