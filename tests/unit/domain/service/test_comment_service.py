"""Unit tests for CommentService."""

import pytest

from banter.config import CommentSettings
from banter.domain.error import ContentDeletedException, NotFoundError, ValidationError
from banter.domain.service import CommentService
from banter.domain.value import CommentId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

DELETED = CommentSettings().deleted_marker


def fixed_clock() -> int:
    return 1_700_000_000_000


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_root_comment(self, unit_env):
        """Root comment starts with no parent and zero votes."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act
        comment, comments = comment_service.create_comment(
            [], content="Great Pokémon", author="Ash"
        )

        # Assert
        assert comments == [comment]
        assert comment.content == "Great Pokémon"
        assert comment.author == "Ash"
        assert comment.parent_id is None
        assert comment.upvotes == 0
        assert comment.downvotes == 0
        assert comment.id

    def test_create_uses_clock_for_timestamp(self, comment_settings):
        comment_service = CommentService(comment_settings, clock=fixed_clock)

        comment, _ = comment_service.create_comment([], content="Hi")

        assert comment.timestamp == fixed_clock()

    def test_content_is_trimmed(self, comment_settings):
        comment_service = CommentService(comment_settings)

        comment, _ = comment_service.create_comment([], content="  Pika pika  ")

        assert comment.content == "Pika pika"

    @pytest.mark.parametrize("author", [None, "", "   "])
    def test_blank_author_uses_default(self, comment_settings, author):
        comment_service = CommentService(comment_settings)

        comment, _ = comment_service.create_comment([], content="Hi", author=author)

        assert comment.author == "Anonymous"

    @pytest.mark.parametrize("content", ["", "   ", "\n\t"])
    def test_empty_content_rejected(self, comment_settings, content):
        comment_service = CommentService(comment_settings)

        with pytest.raises(ValidationError):
            comment_service.create_comment([], content=content)

    def test_content_over_max_length_rejected(self, comment_settings):
        comment_service = CommentService(comment_settings)

        with pytest.raises(ValidationError):
            comment_service.create_comment([], content="x" * 501)

    def test_content_at_max_length_accepted(self, comment_settings):
        comment_service = CommentService(comment_settings)

        comment, _ = comment_service.create_comment([], content="x" * 500)

        assert len(comment.content) == 500

    def test_deleted_marker_content_rejected(self, comment_settings):
        comment_service = CommentService(comment_settings)

        with pytest.raises(ValidationError):
            comment_service.create_comment([], content=DELETED)

    def test_reply_links_to_parent(self, comment_settings):
        # Arrange
        comment_service = CommentService(comment_settings)
        parent = make_comment("p")

        # Act
        reply, comments = comment_service.create_comment(
            [parent], content="Agreed", parent_id=CommentId("p")
        )

        # Assert
        assert reply.parent_id == "p"
        assert comments == [parent, reply]

    def test_reply_to_unknown_parent_rejected(self, comment_settings):
        comment_service = CommentService(comment_settings)

        with pytest.raises(NotFoundError):
            comment_service.create_comment(
                [], content="Agreed", parent_id=CommentId("missing")
            )

    def test_reply_to_deleted_parent_rejected(self, comment_settings):
        comment_service = CommentService(comment_settings)
        parent = make_comment("p", content=DELETED)

        with pytest.raises(ContentDeletedException):
            comment_service.create_comment(
                [parent], content="Agreed", parent_id=CommentId("p")
            )

    def test_reply_depth_is_capped(self):
        # Arrange: chain c0 <- c1 <- c2, cap at 2
        comment_service = CommentService(CommentSettings(max_reply_depth=2))
        comments = [
            make_comment("c0"),
            make_comment("c1", parent_id="c0"),
            make_comment("c2", parent_id="c1"),
        ]

        # Act
        reply, _ = comment_service.create_comment(
            comments, content="ok", parent_id=CommentId("c1")
        )

        # Assert
        assert reply.parent_id == "c1"
        with pytest.raises(ValidationError):
            comment_service.create_comment(
                comments, content="too deep", parent_id=CommentId("c2")
            )


class TestEditComment:
    """Tests for edit_comment method."""

    def test_edit_changes_only_content_and_author(self, comment_settings):
        # Arrange
        comment_service = CommentService(comment_settings)
        original = make_comment("a", timestamp=42, parent_id=None, upvotes=3)
        reply = make_comment("b", parent_id="a")

        # Act
        edited, comments = comment_service.edit_comment(
            [original, reply], CommentId("a"), content="Edited", author="Misty"
        )

        # Assert
        assert edited.content == "Edited"
        assert edited.author == "Misty"
        assert edited.id == original.id
        assert edited.timestamp == 42
        assert edited.upvotes == 3
        assert comments[1] is reply

    def test_edit_without_author_keeps_author(self, comment_settings):
        comment_service = CommentService(comment_settings)

        edited, _ = comment_service.edit_comment(
            [make_comment("a", author="Brock")], CommentId("a"), content="Edited"
        )

        assert edited.author == "Brock"

    def test_edit_unknown_comment_rejected(self, comment_settings):
        comment_service = CommentService(comment_settings)

        with pytest.raises(NotFoundError):
            comment_service.edit_comment([], CommentId("a"), content="Edited")

    def test_edit_deleted_comment_rejected(self, comment_settings):
        comment_service = CommentService(comment_settings)

        with pytest.raises(ContentDeletedException):
            comment_service.edit_comment(
                [make_comment("a", content=DELETED)], CommentId("a"), content="Back"
            )


class TestTombstoneComment:
    """Tests for tombstone_comment method."""

    def test_tombstone_keeps_row_and_replies(self, comment_settings):
        # Arrange
        comment_service = CommentService(comment_settings)
        comments = [make_comment("A"), make_comment("B", parent_id="A")]

        # Act
        tombstone, result = comment_service.tombstone_comment(comments, CommentId("A"))

        # Assert
        assert tombstone.content == DELETED
        assert [c.id for c in result] == ["A", "B"]
        assert result[1].parent_id == "A"
        assert comment_service.is_deleted(result[0])

    def test_tombstone_twice_is_noop(self, comment_settings):
        comment_service = CommentService(comment_settings)
        comments = [make_comment("A", content=DELETED)]

        tombstone, result = comment_service.tombstone_comment(comments, CommentId("A"))

        assert result == comments
        assert tombstone.content == DELETED

    def test_tombstone_unknown_comment_rejected(self, comment_settings):
        comment_service = CommentService(comment_settings)

        with pytest.raises(NotFoundError):
            comment_service.tombstone_comment([], CommentId("A"))


def test_depth_of_stops_at_cycles(comment_settings):
    comment_service = CommentService(comment_settings)
    comments = [make_comment("a", parent_id="b"), make_comment("b", parent_id="a")]

    assert comment_service.depth_of(comments, CommentId("a")) == 1
