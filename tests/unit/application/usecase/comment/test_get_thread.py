"""Unit tests for GetThreadUseCase."""

import pytest

from banter.application.usecase.comment import GetThreadRequest, GetThreadUseCase
from banter.domain.repository import (
    CommentRepository,
    PreferenceRepository,
    VoteRepository,
)
from banter.domain.value import CommentId, SortKind, TopicKey, UserVote
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

PIKACHU = TopicKey("Pikachu")


async def seed(unit_env):
    comment_repo = await unit_env.get(CommentRepository)
    await comment_repo.save_comments(
        PIKACHU,
        [
            make_comment("old", timestamp=1, upvotes=9),
            make_comment("new", timestamp=2),
            make_comment("reply", timestamp=3, parent_id="old"),
        ],
    )


class TestGetThreadUseCase:
    """Tests for reading threads."""

    @pytest.mark.asyncio
    async def test_empty_topic(self, unit_env):
        get_thread = await unit_env.get(GetThreadUseCase)

        thread = await get_thread.execute(GetThreadRequest(topic_key="Pikachu"))

        assert thread.comments == []
        assert thread.total == 0
        assert thread.sort == SortKind.NEW

    @pytest.mark.asyncio
    async def test_explicit_sort(self, unit_env):
        await seed(unit_env)
        get_thread = await unit_env.get(GetThreadUseCase)

        thread = await get_thread.execute(
            GetThreadRequest(topic_key="Pikachu", sort=SortKind.TOP)
        )

        assert [n.comment_id for n in thread.comments] == ["old", "new"]
        assert thread.total == 3

    @pytest.mark.asyncio
    async def test_saved_preference_used_when_no_sort_given(self, unit_env):
        # Arrange
        await seed(unit_env)
        preference_repo = await unit_env.get(PreferenceRepository)
        await preference_repo.save_sort(PIKACHU, SortKind.OLD)
        get_thread = await unit_env.get(GetThreadUseCase)

        # Act
        thread = await get_thread.execute(GetThreadRequest(topic_key="Pikachu"))

        # Assert
        assert thread.sort == SortKind.OLD
        assert [n.comment_id for n in thread.comments] == ["old", "new"]

    @pytest.mark.asyncio
    async def test_default_sort_is_newest_first(self, unit_env):
        await seed(unit_env)
        get_thread = await unit_env.get(GetThreadUseCase)

        thread = await get_thread.execute(GetThreadRequest(topic_key="Pikachu"))

        assert [n.comment_id for n in thread.comments] == ["new", "old"]

    @pytest.mark.asyncio
    async def test_nodes_carry_user_vote_and_score(self, unit_env):
        # Arrange
        await seed(unit_env)
        vote_repo = await unit_env.get(VoteRepository)
        await vote_repo.save_user_votes(PIKACHU, {CommentId("old"): UserVote.UP})
        get_thread = await unit_env.get(GetThreadUseCase)

        # Act
        thread = await get_thread.execute(
            GetThreadRequest(topic_key="Pikachu", sort=SortKind.OLD)
        )

        # Assert
        old, new = thread.comments
        assert old.user_vote == UserVote.UP
        assert old.score == 9
        assert new.user_vote is None
        assert old.children[0].can_reply is True

    @pytest.mark.asyncio
    async def test_long_stored_reply_chain(self, unit_env):
        # Arrange
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save_comments(
            PIKACHU,
            [make_comment("c0")]
            + [
                make_comment(f"c{i}", timestamp=i, parent_id=f"c{i - 1}")
                for i in range(1, 2000)
            ],
        )
        get_thread = await unit_env.get(GetThreadUseCase)

        # Act
        thread = await get_thread.execute(GetThreadRequest(topic_key="Pikachu"))

        # Assert
        assert thread.total == 2000
        node = thread.comments[0]
        while node.children:
            assert len(node.children) == 1
            node = node.children[0]
        assert node.comment_id == "c1999"
        assert node.depth == 1999
        assert node.can_reply is False
