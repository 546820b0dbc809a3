"""Tests for pi.table.tree -- tree prefixes for flat ordered lists."""

from __future__ import annotations

from pi.table.table import Table
from pi.table.tree import provide_prefix


def _is_parent_of(parent: str, item: str) -> bool:
    return item.startswith(parent + "/")


class TestProvidePrefix:
    def test_multi_root_tree(self) -> None:
        items = ["1/2", "1/2/3", "1/2/3/4", "1/2/5", "6", "7", "7/8", "7/9"]
        prefixes = provide_prefix(items, _is_parent_of)
        text = "".join(f"{prefix} {item}\n" for prefix, item in zip(prefixes, items))
        assert text == (
            " 1/2\n"
            " ├─ 1/2/3\n"
            " │  └─ 1/2/3/4\n"
            " └─ 1/2/5\n"
            " 6\n"
            " 7\n"
            " ├─ 7/8\n"
            " └─ 7/9\n"
        )

    def test_one_prefix_per_item(self) -> None:
        items = ["1", "1/2", "1/2/3", "1/4", "5"]
        assert provide_prefix(items, _is_parent_of) == ["", " ├─", " │  └─", " └─", ""]

    def test_empty_list(self) -> None:
        assert provide_prefix([], _is_parent_of) == []

    def test_flat_list(self) -> None:
        assert provide_prefix(["a", "b"], _is_parent_of) == ["", ""]

    def test_prefixes_fill_a_column(self) -> None:
        items = ["src", "src/main", "docs"]
        prefixes = provide_prefix(items, _is_parent_of)
        table = Table([[f"{p} {item}".strip()] for p, item in zip(prefixes, items)])
        assert table.render_lines()[3] == "| └─ src/main |"
