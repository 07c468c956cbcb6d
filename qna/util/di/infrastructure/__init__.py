"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider
from .profanity import ProfanityProvider

# Import implementations (needed for __subclasses__())
from .persistence import LocalPersistenceProvider, ProdPersistenceProvider  # noqa: F401
from .profanity import LocalProfanityProvider, ProdProfanityProvider  # noqa: F401

__all__ = [
    "LocalPersistenceProvider",
    "LocalProfanityProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdProfanityProvider",
    "ProfanityProvider",
]
