"""Credit ledger domain service.

All balance mutations go through a read-decide-write cycle on a single
profile document. The write is conditional on the revision read in the same
cycle; when another writer got there first the cycle is repeated with the
fresh document, up to ``max_attempts`` times.
"""

from typing import Any, Callable, Optional

import logfire

from autoblog.domain.error import (
    ConcurrencyConflictError,
    NotFoundError,
    RevisionConflictError,
    ValidationError,
)
from autoblog.domain.model import UserProfile
from autoblog.domain.repository import ProfileRepository
from autoblog.domain.value import UserId
from autoblog.domain.value.common import ValueObject

from .base import Service

# Returns the fields to write, or None to leave the document untouched
Decision = Callable[[UserProfile], Optional[dict[str, Any]]]


class DebitReceipt(ValueObject):
    """What a reservation actually took from a balance.

    ``charged`` is 0 when the profile was unlimited at debit time.
    """

    user_id: UserId
    charged: int


class CreditLedger(Service):
    """Domain service owning every change to credit balances."""

    def __init__(
        self, profile_repository: ProfileRepository, max_attempts: int = 5
    ) -> None:
        """Initialize credit ledger.

        Args:
            profile_repository: Profile store
            max_attempts: Compare-and-swap attempts before giving up
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.profile_repository = profile_repository
        self.max_attempts = max_attempts

    async def _apply(
        self, user_id: UserId, decide: Decision
    ) -> tuple[UserProfile, bool]:
        """Run one atomic read-modify-write on a profile.

        Returns:
            The resulting profile and whether a write happened

        Raises:
            NotFoundError: If the profile does not exist
            ConcurrencyConflictError: If every attempt lost the race
        """
        for attempt in range(1, self.max_attempts + 1):
            profile = await self.profile_repository.find_by_id(user_id)
            if profile is None:
                raise NotFoundError("Profile", user_id)

            changes = decide(profile)
            if changes is None:
                return profile, False

            try:
                updated = await self.profile_repository.update(
                    user_id, changes, expected_revision=profile.revision
                )
                return updated, True
            except RevisionConflictError:
                logfire.warn(
                    "Ledger write lost compare-and-swap, retrying",
                    user_id=user_id,
                    attempt=attempt,
                    revision=profile.revision,
                )

        logfire.error(
            "Ledger write gave up after repeated conflicts",
            user_id=user_id,
            attempts=self.max_attempts,
        )
        raise ConcurrencyConflictError(user_id, self.max_attempts)

    @staticmethod
    def _require_positive(name: str, value: int) -> None:
        if value <= 0:
            raise ValidationError(f"{name} must be positive, got {value}")

    async def get_balance(self, user_id: UserId) -> int:
        """Current balance of a profile.

        Raises:
            NotFoundError: If the profile does not exist
        """
        profile = await self.profile_repository.find_by_id(user_id)
        if profile is None:
            raise NotFoundError("Profile", user_id)
        return profile.credit_balance

    async def reserve(self, user_id: UserId, cost: int = 1) -> Optional[DebitReceipt]:
        """Take ``cost`` credits for an operation and record what was taken.

        Unlimited profiles succeed without a write and get a receipt that
        charged nothing. Otherwise the balance is decremented only if it
        covers the cost.

        Args:
            user_id: Identity key
            cost: Credits to take

        Returns:
            Receipt for ``release``, or None on insufficient credit

        Raises:
            ValidationError: If cost is not positive
            NotFoundError: If the profile does not exist
            ConcurrencyConflictError: If the write kept conflicting
        """
        self._require_positive("cost", cost)

        def decide(profile: UserProfile) -> Optional[dict[str, Any]]:
            if profile.unlimited or profile.credit_balance < cost:
                return None
            return {"credit_balance": profile.credit_balance - cost}

        with logfire.span("credit_ledger.debit", user_id=user_id, cost=cost):
            profile, written = await self._apply(user_id, decide)
            if written:
                logfire.info(
                    "Credits debited",
                    user_id=user_id,
                    cost=cost,
                    balance=profile.credit_balance,
                )
                return DebitReceipt(user_id=user_id, charged=cost)
            if profile.unlimited:
                logfire.info("Debit skipped for unlimited profile", user_id=user_id)
                return DebitReceipt(user_id=user_id, charged=0)
            logfire.info(
                "Insufficient credits",
                user_id=user_id,
                cost=cost,
                balance=profile.credit_balance,
            )
            return None

    async def debit(self, user_id: UserId, cost: int = 1) -> bool:
        """Reserve ``cost`` credits for an operation.

        Returns:
            True if the operation may proceed, False on insufficient credit
        """
        return await self.reserve(user_id, cost) is not None

    async def release(self, receipt: DebitReceipt) -> int:
        """Give back exactly what a reservation took.

        Nothing is written when the reservation charged nothing, and the
        charged amount is returned even if the profile has since become
        unlimited.

        Returns:
            Balance after the release
        """
        if receipt.charged == 0:
            logfire.info("Nothing to release", user_id=receipt.user_id)
            return await self.get_balance(receipt.user_id)

        def decide(profile: UserProfile) -> dict[str, Any]:
            return {"credit_balance": profile.credit_balance + receipt.charged}

        with logfire.span(
            "credit_ledger.release", user_id=receipt.user_id, amount=receipt.charged
        ):
            profile, _ = await self._apply(receipt.user_id, decide)
            logfire.info(
                "Reserved credits released",
                user_id=receipt.user_id,
                amount=receipt.charged,
                balance=profile.credit_balance,
            )
            return profile.credit_balance

    async def refund(self, user_id: UserId, amount: int = 1) -> int:
        """Give back credits taken by a failed operation.

        A no-op for unlimited profiles, mirroring ``debit``.

        Returns:
            Balance after the refund
        """
        self._require_positive("amount", amount)

        def decide(profile: UserProfile) -> Optional[dict[str, Any]]:
            if profile.unlimited:
                return None
            return {"credit_balance": profile.credit_balance + amount}

        with logfire.span("credit_ledger.refund", user_id=user_id, amount=amount):
            profile, written = await self._apply(user_id, decide)
            if written:
                logfire.info(
                    "Credits refunded",
                    user_id=user_id,
                    amount=amount,
                    balance=profile.credit_balance,
                )
            return profile.credit_balance

    async def grant(self, user_id: UserId, amount: int) -> int:
        """Add credits unconditionally (admin top-up).

        Applies even to unlimited profiles so the balance is right if the
        flag is later turned off.

        Returns:
            Balance after the grant
        """
        self._require_positive("amount", amount)

        def decide(profile: UserProfile) -> dict[str, Any]:
            return {"credit_balance": profile.credit_balance + amount}

        with logfire.span("credit_ledger.grant", user_id=user_id, amount=amount):
            profile, _ = await self._apply(user_id, decide)
            logfire.info(
                "Credits granted",
                user_id=user_id,
                amount=amount,
                balance=profile.credit_balance,
            )
            return profile.credit_balance

    async def set_unlimited(self, user_id: UserId, flag: bool) -> bool:
        """Turn unlimited mode on or off.

        Returns:
            The new flag value
        """

        def decide(profile: UserProfile) -> Optional[dict[str, Any]]:
            if profile.unlimited == flag:
                return None
            return {"unlimited": flag}

        with logfire.span("credit_ledger.set_unlimited", user_id=user_id, flag=flag):
            profile, written = await self._apply(user_id, decide)
            if written:
                logfire.info("Unlimited mode changed", user_id=user_id, flag=flag)
            return profile.unlimited

    async def grant_email_verified_reward(self, user_id: UserId, amount: int) -> int:
        """Grant the one-time reward for a verified email.

        The reward flag and the balance change are written together, so the
        reward can never be paid twice.

        Returns:
            Balance after the call
        """
        self._require_positive("amount", amount)

        def decide(profile: UserProfile) -> Optional[dict[str, Any]]:
            if profile.email_verified_reward_granted:
                return None
            return {
                "email_verified_reward_granted": True,
                "credit_balance": profile.credit_balance + amount,
            }

        with logfire.span(
            "credit_ledger.grant_email_verified_reward", user_id=user_id
        ):
            profile, written = await self._apply(user_id, decide)
            if written:
                logfire.info(
                    "Email verification reward granted",
                    user_id=user_id,
                    amount=amount,
                    balance=profile.credit_balance,
                )
            else:
                logfire.info("Email verification reward already granted", user_id=user_id)
            return profile.credit_balance
