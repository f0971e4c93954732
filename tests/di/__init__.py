"""Mock providers for testing."""

from .gemini import MockGeminiProvider
from .naver import MockNaverProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockGeminiProvider",
    "MockNaverProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
