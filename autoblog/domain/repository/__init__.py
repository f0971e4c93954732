"""Repository interfaces for the AutoBlog domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from autoblog.domain.repository.identity import AuthIdentityRepository
from autoblog.domain.repository.message import MessageRepository
from autoblog.domain.repository.profile import ProfileRepository

__all__ = [
    "AuthIdentityRepository",
    "MessageRepository",
    "ProfileRepository",
]
