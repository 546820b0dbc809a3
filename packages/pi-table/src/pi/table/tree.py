"""Tree prefixes for displaying a flat, ordered list as a (multi-root) tree.

Example::

    items = ["1", "1/2", "1/2/3", "1/4", "5"]
    prefixes = provide_prefix(
        items,
        lambda parent, item: item.startswith(parent)
        and item.count("/") == parent.count("/") + 1,
    )

gives::

     1
     ├─ 1/2
     │  └─ 1/2/3
     └─ 1/4
     5

Zip the prefixes with the items to fill the first column of a table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

_EMPTY = "   "
_EDGE = " └─"
_PIPE = " │ "
_BRANCH = " ├─"


@dataclass
class _Node:
    parent: int | None
    # One flag per ancestor level: is the node on that level the last child?
    level: list[bool] = field(default_factory=list)
    children: list[int] = field(default_factory=list)


def _level_to_string(level: list[bool]) -> str:
    parts: list[str] = []
    last_col = len(level) - 1
    for col, is_last_child in enumerate(level):
        if col == last_col:
            parts.append(_EDGE if is_last_child else _BRANCH)
        else:
            parts.append(_EMPTY if is_last_child else _PIPE)
    return "".join(parts)


def _build_nodes(items: Sequence[T], is_parent_of: Callable[[T, T], bool]) -> list[_Node]:
    nodes: list[_Node] = []
    current: int | None = None
    for i, item in enumerate(items):
        # Walk back up until we find an ancestor of this item
        while current is not None and not is_parent_of(items[current], item):
            current = nodes[current].parent
        if current is not None:
            nodes[current].children.append(i)
        nodes.append(_Node(parent=current))
        current = i
    return nodes


def provide_prefix(items: Sequence[T], is_parent_of: Callable[[T, T], bool]) -> list[str]:
    """Return one tree prefix per item, in input order.

    *items* must already be in display order with parents before their
    children. ``is_parent_of(maybe_parent, item)`` decides the hierarchy.
    """
    nodes = _build_nodes(items, is_parent_of)
    # Parents precede children, so levels can be filled in a single pass
    for node in nodes:
        remaining = len(node.children)
        for child in node.children:
            nodes[child].level = [*node.level, remaining == 1]
            remaining -= 1
    return [_level_to_string(node.level) for node in nodes]
