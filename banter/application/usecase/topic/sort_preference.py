"""Sort preference use cases."""

import logfire
from pydantic import BaseModel

from banter.config import CommentSettings
from banter.domain.error import StorageWriteError
from banter.domain.repository import PreferenceRepository
from banter.domain.value import SortKind, TopicKey


class GetSortPreferenceRequest(BaseModel):
    """Get sort preference request."""

    topic_key: str


class SetSortPreferenceRequest(BaseModel):
    """Set sort preference request."""

    topic_key: str
    sort: SortKind


class SortPreferenceResponse(BaseModel):
    """Sort preference response."""

    topic_key: str
    sort: SortKind
    is_default: bool  # True when nothing has been saved for the topic


class GetSortPreferenceUseCase:
    """Use case for reading a topic's thread ordering."""

    def __init__(
        self,
        preference_repository: PreferenceRepository,
        settings: CommentSettings,
    ) -> None:
        self.preference_repository = preference_repository
        self.settings = settings

    async def execute(self, request: GetSortPreferenceRequest) -> SortPreferenceResponse:
        """Return the saved ordering, or the configured default."""
        topic_key = TopicKey(request.topic_key)
        saved = await self.preference_repository.get_sort(topic_key)
        return SortPreferenceResponse(
            topic_key=topic_key.root,
            sort=saved or SortKind.parse(self.settings.default_sort),
            is_default=saved is None,
        )


class SetSortPreferenceUseCase:
    """Use case for saving a topic's thread ordering."""

    def __init__(self, preference_repository: PreferenceRepository) -> None:
        self.preference_repository = preference_repository

    async def execute(self, request: SetSortPreferenceRequest) -> SortPreferenceResponse:
        """Persist the ordering for a topic.

        Raises:
            StorageWriteError: If the preference could not be saved
        """
        topic_key = TopicKey(request.topic_key)
        if not await self.preference_repository.save_sort(topic_key, request.sort):
            logfire.error(
                "Sort preference not saved",
                topic_key=topic_key.root,
                sort=request.sort.value,
            )
            raise StorageWriteError(topic_key.root, "sort")

        return SortPreferenceResponse(
            topic_key=topic_key.root,
            sort=request.sort,
            is_default=False,
        )
