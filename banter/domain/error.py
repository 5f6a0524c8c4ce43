"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised for invalid mutation input before anything reaches storage.
    """

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ContentDeletedException(DomainError):
    """Raised when attempting to reply to, edit or vote on deleted content."""

    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"Cannot modify deleted {resource} {resource_id}")


class StorageWriteError(DomainError):
    """Raised when a durable write fails and the mutation was rolled back.

    Recoverable: the caller may retry once storage has room again.
    """

    def __init__(self, topic_key: str, collection: str):
        self.topic_key = topic_key
        self.collection = collection
        super().__init__(f"Failed to save {collection} for topic {topic_key}")
