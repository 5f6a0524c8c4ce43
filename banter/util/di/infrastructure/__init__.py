"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider, RepositoryProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "RepositoryProvider",
]
