"""Resolve topic use case."""

from pydantic import BaseModel

from banter.domain.service import TopicService


class ResolveTopicRequest(BaseModel):
    """Resolve topic request."""

    question: str | None = None


class ResolveTopicResponse(BaseModel):
    """Resolve topic response."""

    topic_key: str
    subject: str


class ResolveTopicUseCase:
    """Use case for mapping a question to the topic its comments live under."""

    def __init__(self, topic_service: TopicService) -> None:
        self.topic_service = topic_service

    async def execute(self, request: ResolveTopicRequest) -> ResolveTopicResponse:
        """Derive the topic key and display subject for a question."""
        return ResolveTopicResponse(
            topic_key=self.topic_service.derive_key(request.question).root,
            subject=self.topic_service.subject(request.question),
        )
