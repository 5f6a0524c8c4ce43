"""Unit tests for UpdateCommentUseCase and DeleteCommentUseCase."""

import pytest

from banter.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetThreadRequest,
    GetThreadUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from banter.domain.error import ContentDeletedException, NotFoundError
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def seed_thread(unit_env):
    """Create root A with reply B on Pikachu; return their ids."""
    create_comment = await unit_env.get(CreateCommentUseCase)
    root = await create_comment.execute(
        CreateCommentRequest(topic_key="Pikachu", content="Great Pokémon", author="Ash")
    )
    reply = await create_comment.execute(
        CreateCommentRequest(
            topic_key="Pikachu",
            content="Agreed!",
            parent_id=root.comment.comment_id,
        )
    )
    return root.comment, reply.comment


class TestUpdateCommentUseCase:
    """Tests for editing comments."""

    @pytest.mark.asyncio
    async def test_edit_content(self, unit_env):
        # Arrange
        root, _ = await seed_thread(unit_env)
        update_comment = await unit_env.get(UpdateCommentUseCase)

        # Act
        response = await update_comment.execute(
            UpdateCommentRequest(
                topic_key="Pikachu",
                comment_id=root.comment_id,
                content="Best Pokémon",
            )
        )

        # Assert
        assert response.comment.content == "Best Pokémon"
        assert response.comment.author == "Ash"
        assert response.comment.timestamp == root.timestamp

    @pytest.mark.asyncio
    async def test_edit_unknown_comment(self, unit_env):
        update_comment = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(NotFoundError):
            await update_comment.execute(
                UpdateCommentRequest(topic_key="Pikachu", comment_id="x", content="Hi")
            )


class TestDeleteCommentUseCase:
    """Tests for tombstoning comments."""

    @pytest.mark.asyncio
    async def test_delete_keeps_replies_attached(self, unit_env):
        # Arrange
        root, reply = await seed_thread(unit_env)
        delete_comment = await unit_env.get(DeleteCommentUseCase)
        get_thread = await unit_env.get(GetThreadUseCase)

        # Act
        response = await delete_comment.execute(
            DeleteCommentRequest(topic_key="Pikachu", comment_id=root.comment_id)
        )

        # Assert
        assert response.comment.is_deleted
        assert response.comment.content == "{DELETED COMMENT}"
        thread = await get_thread.execute(GetThreadRequest(topic_key="Pikachu"))
        assert thread.total == 2
        node = thread.comments[0]
        assert node.is_deleted
        assert node.can_reply is False
        assert node.children[0].comment_id == reply.comment_id
        assert node.children[0].parent_id == root.comment_id

    @pytest.mark.asyncio
    async def test_delete_twice_is_noop(self, unit_env):
        root, _ = await seed_thread(unit_env)
        delete_comment = await unit_env.get(DeleteCommentUseCase)
        request = DeleteCommentRequest(topic_key="Pikachu", comment_id=root.comment_id)

        await delete_comment.execute(request)
        response = await delete_comment.execute(request)

        assert response.comment.is_deleted

    @pytest.mark.asyncio
    async def test_deleted_comment_cannot_be_edited(self, unit_env):
        root, _ = await seed_thread(unit_env)
        delete_comment = await unit_env.get(DeleteCommentUseCase)
        update_comment = await unit_env.get(UpdateCommentUseCase)
        await delete_comment.execute(
            DeleteCommentRequest(topic_key="Pikachu", comment_id=root.comment_id)
        )

        with pytest.raises(ContentDeletedException):
            await update_comment.execute(
                UpdateCommentRequest(
                    topic_key="Pikachu", comment_id=root.comment_id, content="Back"
                )
            )

    @pytest.mark.asyncio
    async def test_deleted_comment_cannot_be_replied_to(self, unit_env):
        root, _ = await seed_thread(unit_env)
        delete_comment = await unit_env.get(DeleteCommentUseCase)
        create_comment = await unit_env.get(CreateCommentUseCase)
        await delete_comment.execute(
            DeleteCommentRequest(topic_key="Pikachu", comment_id=root.comment_id)
        )

        with pytest.raises(ContentDeletedException):
            await create_comment.execute(
                CreateCommentRequest(
                    topic_key="Pikachu", content="Hi", parent_id=root.comment_id
                )
            )
