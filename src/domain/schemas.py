"""
Data schemas for the validator.

Workbook side:
- WorkbookItem wraps one node of the item tree (raw entry + synthetic depth)
- content payloads are a tagged union keyed by ItemType
- QueryRecord / ChartRecord are extractor outputs

Report side:
- AssertionRecord: one named check
- TestReport: ordered records + aggregate counts
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from src.domain import constants as C
from src.domain.constants import DEFAULT_SUITE_NAME, UNNAMED_ITEM

# =============================================================================
# Item Types
# =============================================================================

class ItemType(int, Enum):
    """Workbook item type codes."""
    MARKDOWN = C.ITEM_TYPE_MARKDOWN
    QUERY = C.ITEM_TYPE_QUERY
    PARAMETERS = C.ITEM_TYPE_PARAMETERS
    NOTEBOOK_GROUP = C.ITEM_TYPE_NOTEBOOK_GROUP
    LINKS = C.ITEM_TYPE_LINKS
    GROUP = C.ITEM_TYPE_GROUP

    @classmethod
    def parse(cls, value: Any) -> "ItemType | None":
        """Map a raw type value to ItemType (None when unknown)."""
        # bool is an int subclass; true/false are never valid codes
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


# =============================================================================
# Content Payloads
# =============================================================================

@dataclass
class Parameter:
    """A parameter declared in a parameter set."""
    name: str | None = None
    label: str | None = None
    query: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "Parameter":
        if not isinstance(data, dict):
            return cls()
        return cls(
            name=data.get("name") or None,
            label=data.get("label") or None,
            query=data.get("query") or None,
        )


@dataclass
class Formatter:
    """A grid column formatter (5 = hidden, 7 = link)."""
    formatter: Any = None
    column_match: str | None = None
    link_column: str | None = None
    parent_name: str | None = None  # name of the owning grid item

    @classmethod
    def from_dict(cls, data: Any, parent_name: str | None = None) -> "Formatter":
        if not isinstance(data, dict):
            return cls(parent_name=parent_name)
        options = data.get("formatOptions")
        link_column = options.get("linkColumn") if isinstance(options, dict) else None
        return cls(
            formatter=data.get("formatter"),
            column_match=data.get("columnMatch"),
            link_column=link_column or None,
            parent_name=parent_name,
        )


@dataclass
class ChartSettings:
    """Chart axes configuration."""
    x_axis: Any = None
    y_axis: list[Any] = field(default_factory=list)
    group: Any = None

    @classmethod
    def from_dict(cls, data: Any) -> "ChartSettings":
        if not isinstance(data, dict):
            return cls()
        y_axis = data.get("yAxis")
        return cls(
            x_axis=data.get("xAxis"),
            y_axis=list(y_axis) if isinstance(y_axis, list) else [],
            group=data.get("group"),
        )


@dataclass
class GridSettings:
    """Grid/table configuration."""
    row_limit: Any = None
    formatters: list[Formatter] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, parent_name: str | None = None) -> "GridSettings":
        if not isinstance(data, dict):
            return cls()
        formatters = data.get("formatters")
        return cls(
            row_limit=data.get("rowLimit"),
            formatters=[
                Formatter.from_dict(f, parent_name=parent_name)
                for f in (formatters if isinstance(formatters, list) else [])
            ],
        )


@dataclass
class MarkdownContent:
    """type 1."""
    json: str = ""


@dataclass
class QueryContent:
    """type 3."""
    query: Any = None
    title: str | None = None
    visualization: Any = None
    resource_type: Any = None
    sort_by: Any = None
    chart_settings: ChartSettings | None = None
    grid_settings: GridSettings | None = None


@dataclass
class ParameterSetContent:
    """type 9."""
    parameters: list[Parameter] = field(default_factory=list)


@dataclass
class GroupContent:
    """type 10 / 12."""
    title: str | None = None
    items: list[Any] = field(default_factory=list)


@dataclass
class LinkSetContent:
    """type 11."""
    links: list[Any] = field(default_factory=list)


ItemContent = (
    MarkdownContent
    | QueryContent
    | ParameterSetContent
    | GroupContent
    | LinkSetContent
)


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def build_query_content(content: dict[str, Any], name: str | None = None) -> QueryContent:
    """Query-shaped view of a content mapping (chart and grid settings typed)."""
    chart = content.get("chartSettings")
    grid = content.get("gridSettings")
    return QueryContent(
        query=content.get("query"),
        title=content.get("title") or None,
        visualization=content.get("visualization") or None,
        resource_type=content.get("resourceType"),
        sort_by=content.get("sortBy") or None,
        chart_settings=ChartSettings.from_dict(chart) if chart else None,
        grid_settings=GridSettings.from_dict(grid, parent_name=name) if grid else None,
    )


def parse_content(
    item_type: ItemType | None,
    content: dict[str, Any],
    name: str | None = None,
) -> ItemContent | None:
    """
    Build the typed payload for an item.

    Args:
        item_type: Parsed item type (None for unknown codes)
        content: Raw content mapping
        name: Owning item name (tags grid formatters)

    Returns:
        Typed content variant, or None for unknown item types
    """
    if item_type is ItemType.MARKDOWN:
        text = content.get("json")
        return MarkdownContent(json=text if isinstance(text, str) else "")

    if item_type is ItemType.QUERY:
        return build_query_content(content, name=name)

    if item_type is ItemType.PARAMETERS:
        return ParameterSetContent(
            parameters=[Parameter.from_dict(p) for p in _as_list(content.get("parameters"))],
        )

    if item_type in (ItemType.GROUP, ItemType.NOTEBOOK_GROUP):
        return GroupContent(
            title=content.get("title") or None,
            items=_as_list(content.get("items")),
        )

    if item_type is ItemType.LINKS:
        return LinkSetContent(links=_as_list(content.get("links")))

    return None


# =============================================================================
# Workbook Item
# =============================================================================

@dataclass
class WorkbookItem:
    """
    One node of the workbook item tree.

    `raw` is the entry exactly as parsed (never mutated). It is normally a
    mapping; any other entry (number, string, null) is kept as a node with
    no fields, so presence checks count it as missing type and content.
    `depth` is assigned by the flattener (root items = 0).
    """
    raw: Any
    depth: int = 0

    @property
    def mapping(self) -> dict[str, Any]:
        """The entry as a mapping ({} for non-mapping entries)."""
        return self.raw if isinstance(self.raw, dict) else {}

    @property
    def has_type(self) -> bool:
        return "type" in self.mapping

    @property
    def has_content(self) -> bool:
        return "content" in self.mapping

    @property
    def type(self) -> Any:
        return self.mapping.get("type")

    @property
    def kind(self) -> ItemType | None:
        return ItemType.parse(self.mapping.get("type"))

    @property
    def name(self) -> str | None:
        return self.mapping.get("name") or None

    @property
    def content(self) -> dict[str, Any]:
        """Raw content mapping ({} when absent or not a mapping)."""
        content = self.mapping.get("content")
        return content if isinstance(content, dict) else {}

    @property
    def conditional_visibility(self) -> dict[str, Any] | None:
        visibility = self.mapping.get("conditionalVisibility")
        return visibility if isinstance(visibility, dict) else None

    @property
    def title(self) -> str | None:
        return self.content.get("title") or None

    @property
    def display_name(self) -> str:
        """item.name → content.title → literal fallback."""
        return self.name or self.title or UNNAMED_ITEM

    def typed_content(self) -> ItemContent | None:
        """Typed payload for this item's kind."""
        return parse_content(self.kind, self.content, name=self.name)

    def query_content(self) -> QueryContent:
        """
        Query fields of this item, whatever its kind.

        Charts and grids are recognised by their settings, not by type 3.
        """
        return build_query_content(self.content, name=self.name)

    def grid_settings(self) -> GridSettings | None:
        return self.query_content().grid_settings

    def to_dict(self) -> dict[str, Any]:
        """Raw item with the synthetic `_depth` field."""
        return {**self.mapping, "_depth": self.depth}


# =============================================================================
# Extractor Records
# =============================================================================

@dataclass
class QueryRecord:
    """A query found in an item or in a query-backed parameter."""
    name: str
    query: Any
    type: Any  # item type code, or PARAMETER_QUERY_TYPE
    visualization: str | None = None


@dataclass
class ChartRecord:
    """An item carrying both a visualization and chart settings."""
    name: str
    title: str | None
    visualization: str
    chart_settings: ChartSettings
    sort_by: Any = None
    query: Any = None


# =============================================================================
# Test Report
# =============================================================================

@dataclass
class AssertionRecord:
    """Outcome of a single named check."""
    name: str
    suite: str
    passed: bool
    expected: str
    actual: str
    timestamp: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "suite": self.suite,
            "passed": self.passed,
            "expected": self.expected,
            "actual": self.actual,
            "timestamp": self.timestamp,
        }


@dataclass
class TestReport:
    """
    Ordered assertion records of one run.

    Counts are derived from the records, so they always agree with them.
    """
    __test__ = False  # not a pytest test class

    records: list[AssertionRecord] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.records)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.records if r.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def success(self) -> bool:
        return self.failed == 0

    def failures(self) -> list[AssertionRecord]:
        return [r for r in self.records if not r.passed]

    def by_suite(self) -> dict[str, list[AssertionRecord]]:
        """Records grouped by suite, suites in first-seen order."""
        suites: dict[str, list[AssertionRecord]] = {}
        for record in self.records:
            suites.setdefault(record.suite or DEFAULT_SUITE_NAME, []).append(record)
        return suites
