"""Strongly typed identifiers for AutoBlog domain entities.

Profiles are keyed by the identity key owned by the auth system
(e.g. ``naver:12345``), so ``UserId`` wraps a string rather than a UUID.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", str)
MessageId = NewType("MessageId", UUID)
