"""Infrastructure providers."""

# Import bases
from .clients import ClientAggregatorProvider
from .gemini import GeminiProvider
from .naver import NaverProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .gemini import ProdGeminiProvider  # noqa: F401
from .naver import ProdNaverProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "ClientAggregatorProvider",
    "GeminiProvider",
    "NaverProvider",
    "PersistenceProvider",
    "ProdGeminiProvider",
    "ProdNaverProvider",
    "ProdPersistenceProvider",
]
