"""PostgreSQL repository implementations."""

from autoblog.persistence.repository.identity import PostgresAuthIdentityRepository
from autoblog.persistence.repository.message import PostgresMessageRepository
from autoblog.persistence.repository.profile import PostgresProfileRepository

__all__ = [
    "PostgresAuthIdentityRepository",
    "PostgresMessageRepository",
    "PostgresProfileRepository",
]
