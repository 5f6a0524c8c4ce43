"""Application layer DI providers."""

from dishka import Scope, provide

from banter.application.cache import TopicStateCache
from banter.application.coordinator import MutationCoordinator
from banter.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetThreadUseCase,
    UpdateCommentUseCase,
)
from banter.application.usecase.topic import (
    GetSortPreferenceUseCase,
    ResolveTopicUseCase,
    SetSortPreferenceUseCase,
)
from banter.application.usecase.vote import CastVoteUseCase
from banter.config import CacheSettings, CommentSettings
from banter.domain.repository import (
    CommentRepository,
    PreferenceRepository,
    VoteRepository,
)
from banter.domain.service import CommentService, TopicService, VoteService
from banter.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application provider - concrete, no mocks needed.

    The cache and coordinator live for the whole application so every
    request sees the same topic state and per-topic locks.
    """

    @provide(scope=Scope.APP)
    def get_topic_state_cache(self, settings: CacheSettings) -> TopicStateCache:
        """Provide topic state cache."""
        return TopicStateCache(ttl_seconds=settings.ttl_seconds)

    @provide(scope=Scope.APP)
    def get_mutation_coordinator(
        self,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
        cache: TopicStateCache,
    ) -> MutationCoordinator:
        """Provide mutation coordinator."""
        return MutationCoordinator(
            comment_repository=comment_repository,
            vote_repository=vote_repository,
            cache=cache,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        coordinator: MutationCoordinator,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, coordinator=coordinator
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self,
        comment_service: CommentService,
        coordinator: MutationCoordinator,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service, coordinator=coordinator
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        coordinator: MutationCoordinator,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, coordinator=coordinator
        )

    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(
        self,
        coordinator: MutationCoordinator,
        preference_repository: PreferenceRepository,
        comment_service: CommentService,
        settings: CommentSettings,
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            coordinator=coordinator,
            preference_repository=preference_repository,
            comment_service=comment_service,
            settings=settings,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        vote_service: VoteService,
        coordinator: MutationCoordinator,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service, coordinator=coordinator)

    # Topic use cases
    @provide(scope=Scope.REQUEST)
    def get_resolve_topic_use_case(
        self, topic_service: TopicService
    ) -> ResolveTopicUseCase:
        """Provide resolve topic use case."""
        return ResolveTopicUseCase(topic_service=topic_service)

    @provide(scope=Scope.REQUEST)
    def get_get_sort_preference_use_case(
        self,
        preference_repository: PreferenceRepository,
        settings: CommentSettings,
    ) -> GetSortPreferenceUseCase:
        """Provide get sort preference use case."""
        return GetSortPreferenceUseCase(
            preference_repository=preference_repository, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_set_sort_preference_use_case(
        self, preference_repository: PreferenceRepository
    ) -> SetSortPreferenceUseCase:
        """Provide set sort preference use case."""
        return SetSortPreferenceUseCase(preference_repository=preference_repository)
