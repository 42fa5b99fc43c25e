"""Tests for list-region scanning.

Token streams come from a plain markdown-it engine (no plugin), so the
scanner sees exactly what the core rule would see.
"""

from casillas import TaskListConfig, scan_list_items

NESTED = "- a\n  - b\n- c\n"


def _items(plain_md, source, **options):
    tokens = plain_md.parse(source)
    regions = list(scan_list_items(tokens, TaskListConfig(**options)))
    return tokens, regions


def _item_text(tokens, region):
    # Inline token of the item's first paragraph
    return tokens[region.item + 2].content


class TestNestedTracking:
    """Default stack-based tracking."""

    def test_flat_list(self, plain_md) -> None:
        tokens, regions = _items(plain_md, "- a\n- b\n")
        assert [_item_text(tokens, r) for r in regions] == ["a", "b"]
        assert all(r.container == 0 for r in regions)

    def test_nested_items_have_own_container(self, plain_md) -> None:
        tokens, regions = _items(plain_md, NESTED)
        assert [_item_text(tokens, r) for r in regions] == ["a", "b", "c"]
        outer = regions[0].container
        assert regions[2].container == outer
        assert regions[1].container != outer
        assert tokens[regions[1].container].type == "bullet_list_open"

    def test_ordered_lists_skipped_by_default(self, plain_md) -> None:
        _, regions = _items(plain_md, "1. a\n2. b\n")
        assert regions == []

    def test_ordered_lists_when_enabled(self, plain_md) -> None:
        tokens, regions = _items(plain_md, "1. a\n2. b\n", ordered_lists=True)
        assert len(regions) == 2
        assert tokens[regions[0].container].type == "ordered_list_open"

    def test_ordered_list_nested_in_bullets(self, plain_md) -> None:
        """Items are reported only when their direct list is tracked."""
        tokens, regions = _items(plain_md, "- a\n  1. b\n- c\n")
        assert [_item_text(tokens, r) for r in regions] == ["a", "c"]

    def test_outside_lists(self, plain_md) -> None:
        _, regions = _items(plain_md, "# Title\n\nparagraph\n\n> quote\n")
        assert regions == []


class TestFlagTracking:
    """Single inside-list flag (track_nesting=False)."""

    def test_flat_list(self, plain_md) -> None:
        tokens, regions = _items(plain_md, "- a\n- b\n", track_nesting=False)
        assert [_item_text(tokens, r) for r in regions] == ["a", "b"]

    def test_nested_close_ends_region(self, plain_md) -> None:
        """Closing the nested list clears the flag for the outer list too."""
        tokens, regions = _items(plain_md, NESTED, track_nesting=False)
        assert [_item_text(tokens, r) for r in regions] == ["a", "b"]

    def test_container_left_for_backward_lookup(self, plain_md) -> None:
        _, regions = _items(plain_md, NESTED, track_nesting=False)
        assert [r.container for r in regions] == [None, None]

    def test_items_carry_end(self, plain_md) -> None:
        tokens, regions = _items(plain_md, NESTED, track_nesting=False)
        for region in regions:
            assert tokens[region.end].type == "list_item_close"
            assert tokens[region.end].level == tokens[region.item].level


class TestItemEnd:
    """Every region is bounded by the close of its own item."""

    def test_flat_items(self, plain_md) -> None:
        tokens, regions = _items(plain_md, "- a\n- b\n")
        assert [r.end for r in regions] == [5, 10]
        assert all(tokens[r.end].type == "list_item_close" for r in regions)

    def test_outer_item_ends_after_nested_list(self, plain_md) -> None:
        tokens, regions = _items(plain_md, NESTED)
        outer, nested, _ = regions
        assert outer.item < nested.item < nested.end < outer.end
        assert tokens[outer.end].level == tokens[outer.item].level

    def test_unterminated_item(self, task_tokens) -> None:
        tokens = task_tokens("[ ] a")[:4]
        regions = list(scan_list_items(tokens, TaskListConfig()))
        assert [(r.item, r.end) for r in regions] == [(1, 4)]
