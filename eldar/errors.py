class EldarError(Exception):
    """Base exception for eldar."""


class StorageError(EldarError):
    """The local key-value store failed."""


class DirectoryUnavailableError(StorageError):
    """The storage directory cannot be resolved, created or accessed."""


class StoreOpenError(StorageError):
    """The store file exists (or was requested) but cannot be opened."""


class StoreClosedError(StorageError):
    """The store was used before it was opened or after it was closed."""


class BucketMissingError(StorageError):
    """A bucket expected to exist is absent."""

    def __init__(self, bucket: str):
        super().__init__(f"{bucket} bucket does not exist")
        self.bucket = bucket


class BucketCreateError(StorageError):
    """A bucket could not be created."""


class WriteFailureError(StorageError):
    """A write transaction failed and was rolled back."""


class RepositoryError(EldarError):
    """A repository load/save/clear failed; the storage cause is chained."""


class UnreachablePageError(EldarError):
    """Navigation reached a page value outside AppPage."""

    def __init__(self, page: object):
        super().__init__(f"Unknown AppPage: {page!r}")
        self.page = page
