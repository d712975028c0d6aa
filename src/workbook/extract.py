"""
Extractors: derived views over the flattened item list.

All functions are pure; they never modify the items they read.

- extract_queries: item queries + query-backed parameters
- extract_charts: items with visualization + chartSettings
- extract_parameters: parameters declared by parameter sets (type 9)
- extract_formatters: grid column formatters
"""

from src.domain.constants import PARAMETER_QUERY_TYPE, UNNAMED_PARAMETER
from src.domain.schemas import (
    ChartRecord,
    Formatter,
    ItemType,
    Parameter,
    ParameterSetContent,
    QueryRecord,
    WorkbookItem,
)


def extract_queries(items: list[WorkbookItem]) -> list[QueryRecord]:
    """
    Extract every KQL query of the workbook.

    Two sources, in item order:
    1. content.query of any item (name: item.name → content.title → "unnamed")
    2. parameter.query of every parameter in content.parameters
       (type "parameter", name: parameter.name → parameter.label → "unnamed-param")

    Args:
        items: Flattened items

    Returns:
        List of QueryRecord
    """
    queries: list[QueryRecord] = []

    for item in items:
        content = item.content
        if content.get("query"):
            queries.append(QueryRecord(
                name=item.display_name,
                query=content["query"],
                type=item.type,
                visualization=content.get("visualization"),
            ))

        parameters = content.get("parameters")
        if isinstance(parameters, list):
            for param in map(Parameter.from_dict, parameters):
                if param.query:
                    queries.append(QueryRecord(
                        name=param.name or param.label or UNNAMED_PARAMETER,
                        query=param.query,
                        type=PARAMETER_QUERY_TYPE,
                    ))

    return queries


def extract_charts(items: list[WorkbookItem]) -> list[ChartRecord]:
    """
    Extract chart configurations.

    Args:
        items: Flattened items

    Returns:
        List of ChartRecord for items with both visualization and chartSettings
    """
    charts: list[ChartRecord] = []

    for item in items:
        content = item.query_content()
        if content.visualization and content.chart_settings is not None:
            charts.append(ChartRecord(
                name=item.display_name,
                title=content.title,
                visualization=content.visualization,
                chart_settings=content.chart_settings,
                sort_by=content.sort_by,
                query=content.query,
            ))

    return charts


def extract_parameters(items: list[WorkbookItem]) -> list[Parameter]:
    """Parameters declared by parameter-set items, in item order."""
    parameters: list[Parameter] = []
    for item in items:
        if item.kind is not ItemType.PARAMETERS:
            continue
        content = item.typed_content()
        if isinstance(content, ParameterSetContent):
            parameters.extend(content.parameters)
    return parameters


def extract_formatters(items: list[WorkbookItem]) -> list[Formatter]:
    """Grid formatters of every item with gridSettings, tagged with the item name."""
    formatters: list[Formatter] = []
    for item in items:
        grid = item.grid_settings()
        if grid is not None:
            formatters.extend(grid.formatters)
    return formatters
