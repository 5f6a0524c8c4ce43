"""Unit tests for TopicService."""

import pytest

from banter.domain.service import TopicService
from banter.domain.value import TopicKey


class TestDeriveKey:
    """Tests for derive_key method."""

    @pytest.mark.parametrize(
        "question,expected",
        [
            ("Who is Pikachu?", "Pikachu"),
            ("who is  Mr. Mime?", "Mr. Mime"),
            ("WHAT IS Ivysaur? Tell me more", "Ivysaur"),
            ("Tell me about fire types", "tell-me-about-fire-types"),
            ("  Best   starter!!  ", "best-starter"),
        ],
    )
    def test_examples(self, question, expected):
        assert TopicService().derive_key(question) == TopicKey(expected)

    @pytest.mark.parametrize("question", [None, "", "???", "¿¡!"])
    def test_empty_falls_back_to_default(self, question):
        assert TopicService().derive_key(question) == TopicKey("default")

    def test_slug_truncated_to_fifty_characters(self):
        key = TopicService().derive_key("a" * 80)

        assert key.root == "a" * 50

    def test_same_text_same_key(self):
        service = TopicService()

        assert service.derive_key("Who is Eevee?") == service.derive_key("Who is Eevee?")


class TestSubject:
    """Tests for subject method."""

    def test_captured_name(self):
        assert TopicService().subject("Who is Blastoise?") == "Blastoise"

    def test_default_subject(self):
        assert TopicService().subject("Tell me a joke") == "Pokémon"
        assert TopicService().subject(None) == "Pokémon"

    def test_subject_trimmed_like_key(self):
        service = TopicService()
        question = "What is Mr. Mime ?"

        assert service.subject(question) == "Mr. Mime"
        assert service.derive_key(question).root == service.subject(question)
