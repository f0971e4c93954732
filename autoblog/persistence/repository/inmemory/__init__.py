"""In-memory repository implementations for testing."""

from .identity import InMemoryAuthIdentityRepository
from .message import InMemoryMessageRepository
from .profile import InMemoryProfileRepository

__all__ = [
    "InMemoryAuthIdentityRepository",
    "InMemoryMessageRepository",
    "InMemoryProfileRepository",
]
