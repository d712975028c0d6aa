"""
Pytest fixtures for the workbook validator tests.

The `workbook` fixture is a synthetic LENS workbook that passes every
check with the default configuration; tests break one thing at a time.
"""

import io
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from src.core.config import ValidatorConfig
from src.domain.schemas import TestReport
from src.testing.workbook_tests.assertions import AssertionEngine
from src.testing.workbook_tests.context import SuiteContext
from src.testing.workbook_tests.runner import SuiteBody, SuiteRunner

WORKBOOK_VERSION = "1.2.3"

TABS = [
    "Azure Local Instances",
    "System Health",
    "Update Progress",
    "Azure Local Machines",
    "ARB Status",
    "Azure Local VMs",
    "AKS Arc Clusters",
]

CLUSTER_QUERY = (
    "resources\n"
    "| where type =~ 'microsoft.azurestackhci/clusters'\n"
    "| where resourceGroup matches regex '{ResourceGroupFilter}' or '{ResourceGroupFilter}' == ''\n"
    "| extend clusterIdEncoded = replace_string(id, '/', '%2F')\n"
    "| extend portalLink = strcat('https://portal.azure.com/#@/resource/resourceId/', clusterIdEncoded)\n"
    "| order by name asc"
)

CHART_QUERY = (
    "resources\n"
    "| where type =~ 'microsoft.azurestackhci/clusters'\n"
    "| summarize count_ = count() by status = tostring(properties.status)\n"
    "| order by count_ desc"
)

UPDATE_ATTEMPTS_QUERY = (
    "extensibilityresources\n"
    "| where type =~ 'microsoft.azurestackhci/clusters/updates/updateruns'\n"
    "| extend updateName = tostring(split(id, '/updates/')[1])\n"
    "| summarize Succeeded = countif(state == 'Succeeded'), Failed = countif(state == 'Failed'), "
    "InProgress = countif(state == 'InProgress') by TimeLabel\n"
    "| order by TimeLabel asc"
)

SUBSCRIPTIONS_QUERY = (
    "resourcecontainers | where type == 'microsoft.resources/subscriptions' | project value = id"
)

README = f"""# Azure Local LENS

## Latest Version: v{WORKBOOK_VERSION}

## Recent Changes (v{WORKBOOK_VERSION})
- Faster cluster overview

## How to Import the Workbook
Import the JSON through the Azure portal.

## Prerequisites
Reader access to the subscriptions.

## Features
Fleet-wide health, updates and inventory.

## Contributing
See CONTRIBUTING.md.

## License
MIT

## Appendix: Previous Version Changes
- v1.2.2: initial tabs
"""

CONTRIBUTING = """# Contributing

## Reporting Issues
Open a GitHub issue.

## Submitting Pull Requests
Fork, branch, open a PR.
"""


# =============================================================================
# Workbook Builders
# =============================================================================

def query_item(name: str, query: str, **content: Any) -> dict[str, Any]:
    """Type 3 item scoped to {Subscriptions}."""
    return {
        "type": 3,
        "name": name,
        "content": {
            "version": "KqlItem/1.0",
            "query": query,
            "queryType": 1,
            "resourceType": "microsoft.resourcegraph/resources",
            "crossComponentResources": ["{Subscriptions}"],
            **content,
        },
    }


def chart_item(name: str, query: str = CHART_QUERY, **chart_settings: Any) -> dict[str, Any]:
    settings = {"xAxis": "status", "yAxis": ["count_"], **chart_settings}
    return query_item(name, query, visualization="barchart", chartSettings=settings)


def grid_item(name: str, query: str = CLUSTER_QUERY, row_limit: int = 2000) -> dict[str, Any]:
    return query_item(
        name,
        query,
        visualization="table",
        gridSettings={
            "rowLimit": row_limit,
            "formatters": [
                {"columnMatch": "clusterIdEncoded", "formatter": 5},
                {
                    "columnMatch": "name",
                    "formatter": 7,
                    "formatOptions": {"linkTarget": "Url", "linkColumn": "clusterIdEncoded"},
                },
            ],
        },
    )


def markdown_item(name: str, text: str) -> dict[str, Any]:
    return {"type": 1, "name": name, "content": {"json": text}}


def update_attempts_chart() -> dict[str, Any]:
    return chart_item(
        "update-attempts-by-day-chart",
        UPDATE_ATTEMPTS_QUERY,
        xAxis="TimeLabel",
        yAxis=["Succeeded", "Failed", "InProgress"],
    )


def build_workbook() -> dict[str, Any]:
    """A workbook passing every check with the default configuration."""
    groups = []
    for n, tab in enumerate(TABS, start=1):
        children = [markdown_item(f"tab{n}-note-{k}", f"### {tab} note {k}") for k in range(10)]
        children += [chart_item(f"tab{n}-chart-{k}") for k in range(5)]
        children += [grid_item(f"tab{n}-grid-{k}") for k in range(13)]
        if tab == "Update Progress":
            children.append(update_attempts_chart())

        groups.append({
            "type": 12,
            "name": f"tab-group-{n}",
            "conditionalVisibility": {
                "parameterName": "selectedTab",
                "comparison": "isEqualTo",
                "value": f"tab{n}",
            },
            "content": {
                "version": "NotebookGroup/1.0",
                "groupType": "editable",
                "title": tab,
                "items": children,
            },
        })

    return {
        "version": "Notebook/1.0",
        "items": [
            markdown_item(
                "version-banner",
                f"# Azure Local LENS\n\nWorkbook Version: v{WORKBOOK_VERSION} | "
                "[Check for updates](https://aka.ms/AzureLocalLENS)",
            ),
            {
                "type": 9,
                "name": "global-parameters",
                "content": {
                    "version": "KqlParameterItem/1.0",
                    "parameters": [
                        {"name": "Subscriptions", "type": 6, "query": SUBSCRIPTIONS_QUERY},
                        {"name": "ResourceGroupFilter", "type": 1},
                        {"name": "ClusterTagName", "type": 1},
                        {"name": "ClusterTagValue", "type": 1},
                    ],
                },
            },
            {
                "type": 11,
                "name": "tabs",
                "content": {
                    "version": "LinkItem/1.0",
                    "links": [
                        {
                            "cellValue": "selectedTab",
                            "linkTarget": "parameter",
                            "linkLabel": tab,
                            "subTarget": f"tab{n}",
                        }
                        for n, tab in enumerate(TABS, start=1)
                    ],
                },
            },
            *groups,
        ],
        "fallbackResourceIds": ["Azure Monitor"],
    }


def write_repo(root: Path, workbook: dict[str, Any], readme: str = README) -> Path:
    """Lay out workbook, README and companion docs under `root`."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "AzureLocal-LENS-Workbook.json").write_text(json.dumps(workbook, indent=2), encoding="utf-8")
    (root / "README.md").write_text(readme, encoding="utf-8")
    (root / "CONTRIBUTING.md").write_text(CONTRIBUTING, encoding="utf-8")
    (root / "SECURITY.md").write_text("# Security\n", encoding="utf-8")
    (root / "LICENSE").write_text("MIT License\n", encoding="utf-8")
    return root


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """Project root."""
    return Path(__file__).parent.parent


@pytest.fixture
def workbook() -> dict[str, Any]:
    """Fresh passing workbook (safe to mutate)."""
    return build_workbook()


@pytest.fixture
def readme_text() -> str:
    return README


@pytest.fixture
def repo_dir(tmp_path: Path, workbook: dict[str, Any]) -> Path:
    """Directory with a passing workbook, README and companion docs."""
    return write_repo(tmp_path / "repo", workbook)


@pytest.fixture
def make_context(repo_dir: Path) -> Callable[..., SuiteContext]:
    """
    SuiteContext factory.

    Usage:
        ctx = make_context(workbook)
        ctx = make_context(workbook, readme="", root_dir=tmp_path)
    """
    def _make(
        workbook: dict[str, Any],
        readme: str = README,
        root_dir: Path | None = None,
        config: ValidatorConfig | None = None,
        raw: str | None = None,
    ) -> SuiteContext:
        return SuiteContext.build(
            workbook=workbook,
            workbook_raw=raw if raw is not None else json.dumps(workbook, indent=2),
            readme=readme,
            root_dir=root_dir or repo_dir,
            config=config,
        )

    return _make


@pytest.fixture
def run_suite() -> Callable[[SuiteContext, SuiteBody], TestReport]:
    """Run a single suite body with console output captured in memory."""
    def _run(context: SuiteContext, body: SuiteBody, name: str = "Suite") -> TestReport:
        runner = SuiteRunner(context, AssertionEngine(stream=io.StringIO()))
        runner.run_suite(name, body)
        return runner.engine.report

    return _run
