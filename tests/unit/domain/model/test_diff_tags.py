"""Unit tests for diff_tags."""

from blog.domain.model import diff_tags


class TestDiffTags:
    """Tests for computing tag changes between two tag lists."""

    def test_no_changes(self):
        changes = diff_tags(["agile", "vue.js"], ["vue.js", "agile"])

        assert changes.is_empty
        assert changes.added == []
        assert changes.removed == []

    def test_added_keeps_caller_order(self):
        """New tags are reported in the order the caller listed them."""
        changes = diff_tags(["agile"], ["zeta", "agile", "alpha"])

        assert changes.added == ["zeta", "alpha"]
        assert changes.removed == []

    def test_removed_keeps_stored_order(self):
        changes = diff_tags(["agile", "javascript", "programming"], ["javascript"])

        assert changes.added == []
        assert changes.removed == ["agile", "programming"]

    def test_clearing_all_tags(self):
        changes = diff_tags(["agile", "javascript"], [])

        assert changes.removed == ["agile", "javascript"]
        assert not changes.is_empty

    def test_from_no_tags(self):
        changes = diff_tags([], ["programming", "C#"])

        assert changes.added == ["programming", "C#"]
        assert changes.removed == []
