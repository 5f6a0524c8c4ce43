"""Unit tests for comment orderings."""

from banter.domain.service import score, sort_comments
from banter.domain.value import SortKind
from tests.conftest import make_comment


class TestSortComments:
    """Tests for sort_comments."""

    def test_new_is_newest_first(self):
        comments = [make_comment("a", 1), make_comment("b", 3), make_comment("c", 2)]

        result = sort_comments(comments, SortKind.NEW)

        assert [c.id for c in result] == ["b", "c", "a"]

    def test_old_is_reverse_of_new(self):
        comments = [make_comment("a", 1), make_comment("b", 3), make_comment("c", 2)]

        newest = sort_comments(comments, SortKind.NEW)
        oldest = sort_comments(comments, SortKind.OLD)

        assert oldest == list(reversed(newest))

    def test_top_breaks_ties_by_newest(self):
        # Arrange
        comments = [
            make_comment("early", timestamp=1, upvotes=5),
            make_comment("low", timestamp=3, upvotes=2),
            make_comment("late", timestamp=2, upvotes=6, downvotes=1),
        ]

        # Act
        result = sort_comments(comments, SortKind.TOP)

        # Assert
        assert [c.id for c in result] == ["late", "early", "low"]

    def test_accepts_raw_strings(self):
        comments = [make_comment("a", 1), make_comment("b", 2)]

        assert [c.id for c in sort_comments(comments, "old")] == ["a", "b"]

    def test_unknown_kind_falls_back_to_new(self):
        comments = [make_comment("a", 1), make_comment("b", 2)]

        assert [c.id for c in sort_comments(comments, "hot")] == ["b", "a"]

    def test_input_not_mutated(self):
        comments = [make_comment("a", 1), make_comment("b", 2)]

        sort_comments(comments, SortKind.NEW)

        assert [c.id for c in comments] == ["a", "b"]

    def test_empty_list(self):
        assert sort_comments([], SortKind.TOP) == []


def test_score_is_net_votes():
    assert score(make_comment("a", upvotes=4, downvotes=6)) == -2
