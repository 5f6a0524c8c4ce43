"""Unit tests for VoteService."""

import pytest

from banter.domain.error import ContentDeletedException, NotFoundError
from banter.domain.service import VoteService
from banter.domain.value import CommentId, UserVote
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestCastVote:
    """Tests for cast_vote method."""

    @pytest.mark.asyncio
    async def test_first_upvote(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comments = [make_comment("a")]

        # Act
        outcome = vote_service.cast_vote(comments, {}, CommentId("a"), UserVote.UP)

        # Assert
        assert outcome.previous is None
        assert outcome.current == UserVote.UP
        assert outcome.comment.upvotes == 1
        assert outcome.votes == {CommentId("a"): UserVote.UP}

    @pytest.mark.asyncio
    async def test_repeat_upvote_toggles_off(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        comments = [make_comment("a", upvotes=1)]
        votes = {CommentId("a"): UserVote.UP}

        outcome = vote_service.cast_vote(comments, votes, CommentId("a"), UserVote.UP)

        assert outcome.current is None
        assert outcome.comment.upvotes == 0
        assert outcome.votes == {}

    @pytest.mark.asyncio
    async def test_switch_to_downvote(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        comments = [make_comment("a", upvotes=1)]
        votes = {CommentId("a"): UserVote.UP}

        outcome = vote_service.cast_vote(
            comments, votes, CommentId("a"), UserVote.DOWN
        )

        assert outcome.previous == UserVote.UP
        assert outcome.current == UserVote.DOWN
        assert outcome.comment.upvotes == 0
        assert outcome.comment.downvotes == 1

    @pytest.mark.asyncio
    async def test_unknown_comment_rejected(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError):
            vote_service.cast_vote([], {}, CommentId("a"), UserVote.UP)

    @pytest.mark.asyncio
    async def test_deleted_comment_rejected(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        comments = [make_comment("a", content="{DELETED COMMENT}")]

        with pytest.raises(ContentDeletedException):
            vote_service.cast_vote(comments, {}, CommentId("a"), UserVote.UP)
