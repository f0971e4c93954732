"""User profile aggregate root.

The profile is the unit of consistency for the credit ledger: every write
bumps ``revision`` so that concurrent writers can detect lost updates.
"""

from datetime import datetime, timezone
from typing import Any, Optional

import pydantic
from pydantic import Field

from autoblog.domain.error import BusinessRuleViolationError
from autoblog.domain.model.common import DomainModel
from autoblog.domain.value import UserId


class WritingStyle(DomainModel):
    """A saved writing-style sample the user can ask the model to imitate."""

    id: str = Field(min_length=1, max_length=64)
    title: str = Field(min_length=1, max_length=100)
    content: str = Field(max_length=5000)


# Fields a caller may change through ``with_changes``
MUTABLE_FIELDS = frozenset(
    {
        "email",
        "credit_balance",
        "unlimited",
        "email_verified_reward_granted",
        "writing_styles",
        "linked_provider_id",
    }
)


class UserProfile(DomainModel):
    """Per-user document keyed by the identity key."""

    id: UserId
    email: str
    credit_balance: int = Field(default=0, ge=0)
    unlimited: bool = False
    email_verified_reward_granted: bool = False
    writing_styles: list[WritingStyle] = Field(default_factory=list)
    linked_provider_id: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    revision: int = Field(default=0, ge=0)

    def with_changes(self, changes: dict[str, Any]) -> "UserProfile":
        """Return the next revision of this profile with ``changes`` applied.

        Raises:
            BusinessRuleViolationError: If the change touches an unknown field,
                drives the balance negative, revokes the email reward, or
                relinks an already linked provider account
        """
        unknown = set(changes) - MUTABLE_FIELDS
        if unknown:
            raise BusinessRuleViolationError(
                f"Profile fields cannot be changed: {sorted(unknown)}"
            )

        if (
            self.email_verified_reward_granted
            and changes.get("email_verified_reward_granted", True) is False
        ):
            raise BusinessRuleViolationError("Email reward flag cannot be revoked")

        if (
            self.linked_provider_id is not None
            and "linked_provider_id" in changes
            and changes["linked_provider_id"] != self.linked_provider_id
        ):
            raise BusinessRuleViolationError("Linked provider id is immutable")

        data = self.model_dump()
        data.update(changes)
        data["revision"] = self.revision + 1
        data["updated_at"] = datetime.now(timezone.utc)

        try:
            return UserProfile.model_validate(data)
        except pydantic.ValidationError as e:
            raise BusinessRuleViolationError(f"Invalid profile change: {e}") from e
