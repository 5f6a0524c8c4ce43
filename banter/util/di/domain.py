"""Domain layer DI providers."""

from dishka import Scope, provide

from banter.config import CommentSettings
from banter.domain.service import CommentService, TopicService, VoteService
from banter.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services hold no state, so each request gets fresh instances.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(self, settings: CommentSettings) -> CommentService:
        """Provide comment domain service."""
        return CommentService(settings=settings)

    @provide
    def get_vote_service(self, comment_service: CommentService) -> VoteService:
        """Provide vote domain service."""
        return VoteService(comment_service=comment_service)

    @provide
    def get_topic_service(self) -> TopicService:
        """Provide topic domain service."""
        return TopicService()
