"""Topic use cases."""

from .resolve_topic import (
    ResolveTopicRequest,
    ResolveTopicResponse,
    ResolveTopicUseCase,
)
from .sort_preference import (
    GetSortPreferenceRequest,
    GetSortPreferenceUseCase,
    SetSortPreferenceRequest,
    SetSortPreferenceUseCase,
    SortPreferenceResponse,
)

__all__ = [
    "GetSortPreferenceRequest",
    "GetSortPreferenceUseCase",
    "ResolveTopicRequest",
    "ResolveTopicResponse",
    "ResolveTopicUseCase",
    "SetSortPreferenceRequest",
    "SetSortPreferenceUseCase",
    "SortPreferenceResponse",
]
