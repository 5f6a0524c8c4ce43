"""Mutation coordinator.

Applies comment and vote changes optimistically, writes them through to
storage, and rolls back to the last-known-good state when a write fails.
"""

import asyncio
from typing import Callable, TypeVar
from weakref import WeakValueDictionary

import logfire

from banter.domain.error import StorageWriteError
from banter.domain.repository import CommentRepository, VoteRepository
from banter.domain.value import TopicKey

from .cache import TopicState, TopicStateCache

T = TypeVar("T")

Change = Callable[[TopicState], tuple[TopicState, T]]


class MutationCoordinator:
    """Serializes writes per topic and keeps observers consistent with storage."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
        cache: TopicStateCache,
    ) -> None:
        self.comment_repository = comment_repository
        self.vote_repository = vote_repository
        self.cache = cache
        # Locks live only while a mutation holds or awaits them
        self._locks: WeakValueDictionary[TopicKey, asyncio.Lock] = (
            WeakValueDictionary()
        )

    def _lock(self, topic_key: TopicKey) -> asyncio.Lock:
        lock = self._locks.get(topic_key)
        if lock is None:
            lock = self._locks[topic_key] = asyncio.Lock()
        return lock

    async def load(self, topic_key: TopicKey) -> TopicState:
        """Return the current state of a topic.

        Serves the cache when fresh. A storage read that is overtaken by a
        mutation is discarded in favour of the mutation's state.

        Args:
            topic_key: Topic to load

        Returns:
            Comments and votes for the topic
        """
        while True:
            cached = self.cache.get(topic_key)
            if cached is not None:
                return cached

            generation = self.cache.generation(topic_key)
            comments = await self.comment_repository.get_comments(topic_key)
            votes = await self.vote_repository.get_user_votes(topic_key)

            if self.cache.generation(topic_key) == generation:
                state = TopicState(comments=comments, votes=votes)
                self.cache.put(topic_key, state)
                return state

            logfire.info(
                "Discarding superseded read",
                topic_key=topic_key.root,
                generation=generation,
            )

    async def mutate(self, topic_key: TopicKey, change: Change[T]) -> T:
        """Apply a change to a topic and persist it.

        The change runs against the last-known-good state and returns the
        new state plus a result for the caller. Domain errors raised by the
        change leave everything untouched.

        Args:
            topic_key: Topic to change
            change: Pure function from current state to (new state, result)

        Returns:
            The result produced by ``change``

        Raises:
            DomainError: If the change is rejected
            StorageWriteError: If persisting failed; state is rolled back
        """
        async with self._lock(topic_key):
            with logfire.span("coordinator.mutate", topic_key=topic_key.root):
                snapshot = await self.load(topic_key)
                self.cache.advance(topic_key)

                proposed, result = change(snapshot)

                try:
                    self.cache.publish(topic_key, proposed)
                    await self._write_through(topic_key, snapshot, proposed)
                except StorageWriteError as error:
                    logfire.error(
                        "Mutation rolled back",
                        topic_key=topic_key.root,
                        collection=error.collection,
                    )
                    self.cache.publish(topic_key, snapshot)
                    self.cache.report_error(topic_key, error)
                    raise
                except BaseException as error:
                    # Storage may or may not hold the change; re-read it next time
                    logfire.warn(
                        "Mutation abandoned",
                        topic_key=topic_key.root,
                        error=type(error).__name__,
                    )
                    self.cache.invalidate(topic_key)
                    self.cache.notify(topic_key, snapshot)
                    raise

                self.cache.invalidate(topic_key)
                return result

    async def _write_through(
        self, topic_key: TopicKey, snapshot: TopicState, proposed: TopicState
    ) -> None:
        comments_changed = proposed.comments != snapshot.comments
        votes_changed = proposed.votes != snapshot.votes

        if comments_changed:
            saved = await self.comment_repository.save_comments(
                topic_key, proposed.comments
            )
            if not saved:
                raise StorageWriteError(topic_key.root, "comments")

        if votes_changed:
            saved = await self.vote_repository.save_user_votes(
                topic_key, proposed.votes
            )
            if not saved:
                if comments_changed:
                    await self._restore_comments(topic_key, snapshot)
                raise StorageWriteError(topic_key.root, "votes")

    async def _restore_comments(self, topic_key: TopicKey, snapshot: TopicState) -> None:
        restored = await self.comment_repository.save_comments(
            topic_key, snapshot.comments
        )
        if not restored:
            logfire.error(
                "Failed to restore comments after vote write failure",
                topic_key=topic_key.root,
            )
