"""Persistence layer errors."""


class PersistenceError(Exception):
    """Base persistence error."""

    pass


class StorageQuotaExceededError(PersistenceError):
    """Raised when a write would push the store past its byte quota."""

    def __init__(self, key: str, required_bytes: int, quota_bytes: int):
        self.key = key
        self.required_bytes = required_bytes
        self.quota_bytes = quota_bytes
        super().__init__(
            f"Writing {key} needs {required_bytes} bytes, quota is {quota_bytes}"
        )
