"""Topic domain service.

Maps question text to the stable key that partitions all stored state.
"""

import re

import logfire

from banter.domain.value import TopicKey

from .base import Service

# "Who is Ivysaur?" / "what is mr. mime?"
SUBJECT_PATTERN = re.compile(r"(?:Who|What) is\s+(.+?)\?", re.IGNORECASE)

DEFAULT_TOPIC = "default"
DEFAULT_SUBJECT = "Pokémon"
MAX_SLUG_LENGTH = 50
MAX_KEY_LENGTH = 255


class TopicService(Service):
    """Domain service for topic key derivation."""

    def derive_key(self, question: str | None) -> TopicKey:
        """Derive the stable topic key for a question.

        The same text always yields the same key, across sessions.

        Rules:
        - Empty text -> 'default'
        - "Who/What is X?" -> the trimmed subject X
        - Otherwise a slug: lowercase, whitespace runs to hyphens, only
          [a-z0-9-] kept, truncated to 50 characters ('default' if empty)

        Args:
            question: Question text as asked

        Returns:
            Topic key
        """
        if not question:
            return TopicKey(DEFAULT_TOPIC)

        match = SUBJECT_PATTERN.search(question)
        if match and match.group(1).strip():
            return TopicKey(match.group(1).strip()[:MAX_KEY_LENGTH])

        slug = re.sub(r"\s+", "-", question.lower().strip())
        slug = re.sub(r"[^a-z0-9-]", "", slug)[:MAX_SLUG_LENGTH]
        if not slug:
            logfire.info("Question produced an empty slug", question_length=len(question))
            return TopicKey(DEFAULT_TOPIC)
        return TopicKey(slug)

    def subject(self, question: str | None) -> str:
        """Display label for a question's topic ("Who is Blastoise?" -> "Blastoise")."""
        if not question:
            return DEFAULT_SUBJECT
        match = SUBJECT_PATTERN.search(question)
        if match and match.group(1).strip():
            return match.group(1).strip()
        return DEFAULT_SUBJECT
