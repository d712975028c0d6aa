"""
Workbook item tree flattening.

Groups (type 10/12) carry their children in content.items; checks that
apply to "every item" must see nested items too, so the tree is flattened
once per run in pre-order with the nesting depth attached.
"""

from typing import Any

from src.domain.schemas import WorkbookItem


def collect_all_items(items: Any, depth: int = 0) -> list[WorkbookItem]:
    """
    Flatten the item tree in pre-order.

    Each item is emitted before its nested content.items, which are
    flattened recursively with depth + 1. A missing or non-list items
    field is treated as empty. Entries that are not mappings are
    emitted as field-less nodes and never descended into.

    Args:
        items: Root item sequence (workbook["items"])
        depth: Depth assigned to `items` (root = 0)

    Returns:
        Flat list of WorkbookItem
    """
    all_items: list[WorkbookItem] = []
    if not isinstance(items, list):
        return all_items

    # explicit stack; depth is unbounded
    stack: list[tuple[list[Any], int, int]] = [(items, 0, depth)]
    while stack:
        siblings, index, level = stack.pop()
        if index >= len(siblings):
            continue
        stack.append((siblings, index + 1, level))

        item = WorkbookItem(raw=siblings[index], depth=level)
        all_items.append(item)

        children = item.content.get("items")
        if isinstance(children, list) and children:
            stack.append((children, 0, level + 1))

    return all_items
