"""
Validator configuration: default.yaml

Every threshold, allow-list, file name and rule toggle the suites use lives
here. default.yaml overlays the dataclass defaults section by section; keys
it does not mention keep their defaults.

default.yaml layout:
    paths:       workbook, readme, results_dir, report
    report:      namespace
    thresholds:  Thresholds fields
    workbook:    WorkbookPolicy fields
    readme:      required_sections (list of {heading, description})
    documentation: DocumentationPolicy fields
    rules:       {rule_name: bool}
"""

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from src.domain import constants as C
from src.domain.errors import ConfigError, ErrorCodes

logger = logging.getLogger(__name__)

# =============================================================================
# Sections
# =============================================================================


@dataclass
class PathsConfig:
    """File names, relative to the project root."""
    workbook: str = C.WORKBOOK_FILENAME
    readme: str = C.README_FILENAME
    results_dir: str = C.RESULTS_DIRNAME
    report: str = C.REPORT_FILENAME


@dataclass
class ReportConfig:
    namespace: str = C.REPORT_NAMESPACE


@dataclass
class Thresholds:
    """Numeric limits."""
    max_duplicate_names: int = C.MAX_DUPLICATE_NAMES
    min_row_limit: int = C.MIN_ROW_LIMIT
    max_file_size_bytes: int = C.MAX_FILE_SIZE_BYTES
    min_pipe_percentage: int = C.MIN_PIPE_PERCENTAGE
    portal_guid_scan_window: int = C.PORTAL_GUID_SCAN_WINDOW
    min_items: int = C.MIN_ITEMS
    min_queries: int = C.MIN_QUERIES
    min_charts: int = C.MIN_CHARTS


@dataclass
class WorkbookPolicy:
    """Allow-lists and well-known names of the workbook."""
    notebook_version: str = C.EXPECTED_NOTEBOOK_VERSION
    valid_item_types: list[int] = field(default_factory=lambda: list(C.VALID_ITEM_TYPES))
    expected_tabs: list[str] = field(default_factory=lambda: [
        "Azure Local Instances",
        "System Health",
        "Update Progress",
        "Azure Local Machines",
        "ARB Status",
        "Azure Local VMs",
        "AKS Arc Clusters",
    ])
    required_parameters: list[str] = field(default_factory=lambda: [
        "Subscriptions",
        "ResourceGroupFilter",
        "ClusterTagName",
        "ClusterTagValue",
    ])
    builtin_parameters: list[str] = field(default_factory=lambda: ["TimeRange", "Subscriptions"])
    tab_parameter_name: str = "selectedTab"
    visualizations: list[str] = field(default_factory=lambda: [
        "barchart", "piechart", "table", "tiles", "graph", "map",
        "linechart", "areachart", "scatter", "categoricalbar",
    ])
    # categoricalbar configures its axes itself
    axis_visualizations: list[str] = field(default_factory=lambda: ["barchart", "linechart", "areachart"])
    resource_types: list[str] = field(default_factory=lambda: [
        "microsoft.resourcegraph/resources",
        "microsoft.resources/subscriptions",
        "microsoft.operationalinsights/workspaces",
    ])
    kql_resource_types: list[str] = field(default_factory=lambda: [
        "microsoft.azurestackhci",
        "microsoft.kubernetes",
        "microsoft.resourceconnector",
        "microsoft.hybridcompute",
        "microsoft.hybridcontainerservice",
        "microsoft.azurestackhci/logicalnetworks",
        "microsoft.kubernetesruntime",
        "microsoft.kubernetesconfiguration",
        "extensibilityresources",
    ])
    required_cross_component_resource: str = "{Subscriptions}"
    version_banner_marker: str = "Workbook Version"
    version_banner_link: str = "aka.ms/AzureLocalLENS"


@dataclass
class ReadmeSection:
    heading: str
    description: str


def _default_readme_sections() -> list[ReadmeSection]:
    return [
        ReadmeSection("# Azure Local LENS", "README has main title"),
        ReadmeSection("## How to Import the Workbook", "README has import instructions"),
        ReadmeSection("## Prerequisites", "README has prerequisites section"),
        ReadmeSection("## Features", "README has features section"),
        ReadmeSection("## Appendix: Previous Version Changes", "README has version history appendix"),
        ReadmeSection("## Contributing", "README has contributing section"),
        ReadmeSection("## License", "README has license section"),
    ]


@dataclass
class DocumentationPolicy:
    """Companion documents expected next to the workbook."""
    contributing: str = "CONTRIBUTING.md"
    security: str = "SECURITY.md"
    license: str = "LICENSE"
    issue_section: str = "Reporting Issues"
    pr_sections: list[str] = field(default_factory=lambda: [
        "Submitting Pull Requests",
        "Submitting Changes",
    ])


@dataclass
class ValidatorConfig:
    """Complete validator configuration."""
    paths: PathsConfig = field(default_factory=PathsConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    thresholds: Thresholds = field(default_factory=Thresholds)
    workbook: WorkbookPolicy = field(default_factory=WorkbookPolicy)
    readme_sections: list[ReadmeSection] = field(default_factory=_default_readme_sections)
    documentation: DocumentationPolicy = field(default_factory=DocumentationPolicy)
    rules: dict[str, bool] = field(default_factory=lambda: {name: True for name in C.KNOWN_RULES})

    def rule_enabled(self, name: str) -> bool:
        """Whether a named business rule should run."""
        return self.rules.get(name, True)


# =============================================================================
# Loading
# =============================================================================


def _matches(default: Any, value: Any) -> bool:
    """Whether `value` has the shape of the dataclass default it replaces."""
    if isinstance(default, bool) or isinstance(value, bool):
        return type(default) is type(value)
    if isinstance(default, list):
        if not isinstance(value, list):
            return False
        return not default or all(_matches(default[0], v) for v in value)
    return isinstance(value, type(default))


def _overlay(target: Any, values: Any, section: str) -> None:
    """Copy known keys of `values` onto dataclass `target`."""
    if values is None:
        return
    if not isinstance(values, dict):
        raise ConfigError(ErrorCodes.CONFIG_INVALID, section=section, reason="expected a mapping")

    known = {f.name for f in fields(target)}
    for key, value in values.items():
        if key not in known:
            raise ConfigError(ErrorCodes.CONFIG_INVALID, section=section, key=key)
        default = getattr(target, key)
        if not _matches(default, value):
            raise ConfigError(
                ErrorCodes.CONFIG_INVALID,
                section=section,
                key=key,
                expected=type(default).__name__,
                got=type(value).__name__,
            )
        setattr(target, key, value)


def _parse_readme_sections(values: Any) -> list[ReadmeSection]:
    if not isinstance(values, list):
        raise ConfigError(ErrorCodes.CONFIG_INVALID, section="readme.required_sections")

    sections = []
    for entry in values:
        if not isinstance(entry, dict) or "heading" not in entry:
            raise ConfigError(ErrorCodes.CONFIG_INVALID, section="readme.required_sections", entry=entry)
        heading = str(entry["heading"])
        sections.append(ReadmeSection(heading, str(entry.get("description", f"README has '{heading}'"))))
    return sections


def _parse_rules(values: Any) -> dict[str, bool]:
    rules = {name: True for name in C.KNOWN_RULES}
    if values is None:
        return rules
    if not isinstance(values, dict):
        raise ConfigError(ErrorCodes.CONFIG_INVALID, section="rules")

    for name, enabled in values.items():
        if name not in C.KNOWN_RULES:
            raise ConfigError(ErrorCodes.UNKNOWN_RULE, rule=name, known=list(C.KNOWN_RULES))
        rules[name] = bool(enabled)
    return rules


def config_from_dict(data: dict[str, Any]) -> ValidatorConfig:
    """
    Build a ValidatorConfig from a parsed default.yaml mapping.

    Raises:
        ConfigError: Unknown section key, unknown rule, or wrong shape
    """
    config = ValidatorConfig()

    _overlay(config.paths, data.get("paths"), "paths")
    _overlay(config.report, data.get("report"), "report")
    _overlay(config.thresholds, data.get("thresholds"), "thresholds")
    _overlay(config.workbook, data.get("workbook"), "workbook")
    _overlay(config.documentation, data.get("documentation"), "documentation")

    readme = data.get("readme") or {}
    if not isinstance(readme, dict):
        raise ConfigError(ErrorCodes.CONFIG_INVALID, section="readme")
    if "required_sections" in readme:
        config.readme_sections = _parse_readme_sections(readme["required_sections"])

    config.rules = _parse_rules(data.get("rules"))
    return config


def load_config(config_path: Path | None = None) -> ValidatorConfig:
    """
    Load the validator configuration.

    Args:
        config_path: YAML file (None → default.yaml at the project root)

    Returns:
        ValidatorConfig (defaults when the file does not exist)

    Raises:
        ConfigError: YAML cannot be parsed or has the wrong shape
    """
    if config_path is None:
        config_path = Path(__file__).parent.parent.parent / C.CONFIG_FILENAME

    if not config_path.exists():
        logger.debug("No config at %s, using defaults", config_path)
        return ValidatorConfig()

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(ErrorCodes.CONFIG_PARSE_ERROR, path=str(config_path), cause=str(e)) from e

    if data is None:
        return ValidatorConfig()
    if not isinstance(data, dict):
        raise ConfigError(ErrorCodes.CONFIG_INVALID, path=str(config_path), reason="expected a mapping")

    logger.debug("Loaded config from %s", config_path)
    return config_from_dict(data)
