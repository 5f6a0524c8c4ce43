"""Per-topic state cache with observers.

Holds the last state each topic's readers saw, including optimistic
states published by the mutation coordinator. Entries expire after a
TTL; generations let readers detect that a mutation started while they
were reading.
"""

import time
from collections import defaultdict
from dataclasses import dataclass, field, replace
from typing import Callable, Optional, Protocol

import logfire

from banter.domain.model import Comment
from banter.domain.value import CommentId, TopicKey, UserVote


@dataclass(frozen=True)
class TopicState:
    """Snapshot of one topic's comments and the user's votes."""

    comments: list[Comment] = field(default_factory=list)
    votes: dict[CommentId, UserVote] = field(default_factory=dict)

    def with_comments(self, comments: list[Comment]) -> "TopicState":
        return replace(self, comments=comments)

    def with_votes(self, votes: dict[CommentId, UserVote]) -> "TopicState":
        return replace(self, votes=votes)


class TopicObserver(Protocol):
    """Receives state changes and failures for a topic."""

    def on_state(self, topic_key: TopicKey, state: TopicState) -> None: ...

    def on_error(self, topic_key: TopicKey, error: Exception) -> None: ...


@dataclass
class _Entry:
    state: TopicState
    expires_at: float


class TopicStateCache:
    """In-process cache of topic states.

    Created once per application and injected where needed; nothing here
    lives at module level.
    """

    def __init__(
        self,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize cache.

        Args:
            ttl_seconds: Seconds an entry stays fresh
            clock: Monotonic time source
        """
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self._entries: dict[TopicKey, _Entry] = {}
        self._generations: dict[TopicKey, int] = defaultdict(int)
        self._observers: dict[TopicKey, list[TopicObserver]] = defaultdict(list)

    def get(self, topic_key: TopicKey) -> Optional[TopicState]:
        """Return the cached state, or None if absent or expired."""
        entry = self._entries.get(topic_key)
        if entry is None:
            return None
        if self.clock() >= entry.expires_at:
            del self._entries[topic_key]
            return None
        return entry.state

    def put(self, topic_key: TopicKey, state: TopicState) -> None:
        """Store a state read from storage without notifying observers."""
        self._entries[topic_key] = _Entry(
            state=state, expires_at=self.clock() + self.ttl_seconds
        )

    def publish(self, topic_key: TopicKey, state: TopicState) -> None:
        """Store a state and push it to the topic's observers."""
        self.put(topic_key, state)
        self.notify(topic_key, state)

    def notify(self, topic_key: TopicKey, state: TopicState) -> None:
        """Push a state to the topic's observers without caching it."""
        for observer in list(self._observers.get(topic_key, ())):
            observer.on_state(topic_key, state)

    def report_error(self, topic_key: TopicKey, error: Exception) -> None:
        """Push a failed mutation to the topic's observers."""
        for observer in list(self._observers.get(topic_key, ())):
            observer.on_error(topic_key, error)

    def invalidate(self, topic_key: TopicKey) -> None:
        """Drop a topic's entry so the next read goes to storage."""
        self._entries.pop(topic_key, None)

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()
        logfire.info("Topic state cache cleared")

    def generation(self, topic_key: TopicKey) -> int:
        """Current mutation generation of a topic."""
        return self._generations.get(topic_key, 0)

    def advance(self, topic_key: TopicKey) -> int:
        """Start a new generation; reads begun earlier become stale."""
        self._generations[topic_key] += 1
        return self._generations[topic_key]

    def subscribe(
        self, topic_key: TopicKey, observer: TopicObserver
    ) -> Callable[[], None]:
        """Register an observer for a topic.

        Returns:
            Callable that removes the observer again
        """
        self._observers[topic_key].append(observer)

        def unsubscribe() -> None:
            observers = self._observers.get(topic_key)
            if observers and observer in observers:
                observers.remove(observer)
                if not observers:
                    del self._observers[topic_key]

        return unsubscribe
