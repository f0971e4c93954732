"""Live profile change feed.

Repositories publish every committed profile write here; any number of
listeners can attach to a profile id. Ordering is per document: a
subscription drops any event whose revision is not newer than the last
one it delivered, so a listener never observes an older state after a
newer one even if publishers race.
"""

import asyncio
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Optional

import logfire

from autoblog.domain.model.profile import UserProfile
from autoblog.domain.value import UserId


@dataclass(frozen=True)
class ProfileChanged:
    """New state of a profile document."""

    profile: UserProfile

    @property
    def revision(self) -> int:
        return self.profile.revision


class ProfileSubscription:
    """Listener attached to a single profile document."""

    def __init__(
        self,
        feed: "ProfileChangeFeed",
        user_id: UserId,
        on_change: Optional[Callable[[ProfileChanged], None]] = None,
    ) -> None:
        self.feed = feed
        self.user_id = user_id
        self.on_change = on_change
        self.last_revision = -1
        self._queue: asyncio.Queue[ProfileChanged] = asyncio.Queue()

    def offer(self, event: ProfileChanged) -> bool:
        """Deliver an event unless it is stale.

        Returns:
            True if the event was delivered
        """
        if event.revision <= self.last_revision:
            return False
        self.last_revision = event.revision
        self._queue.put_nowait(event)
        if self.on_change is not None:
            self.on_change(event)
        return True

    async def next(self) -> ProfileChanged:
        """Wait for the next delivered event."""
        return await self._queue.get()

    def pending(self) -> list[ProfileChanged]:
        """Drain events delivered but not yet consumed."""
        events = []
        while not self._queue.empty():
            events.append(self._queue.get_nowait())
        return events

    def close(self) -> None:
        self.feed.unsubscribe(self)

    def __aiter__(self) -> "ProfileSubscription":
        return self

    async def __anext__(self) -> ProfileChanged:
        return await self.next()


class ProfileChangeFeed:
    """In-process observer channel for profile documents."""

    def __init__(self) -> None:
        self._subscriptions: dict[UserId, list[ProfileSubscription]] = defaultdict(
            list
        )

    def subscribe(
        self,
        user_id: UserId,
        on_change: Optional[Callable[[ProfileChanged], None]] = None,
    ) -> ProfileSubscription:
        """Attach a listener to a profile.

        Args:
            user_id: Profile to watch
            on_change: Optional callback invoked for every delivered event

        Returns:
            Subscription; call ``close()`` to detach
        """
        subscription = ProfileSubscription(self, user_id, on_change)
        self._subscriptions[user_id].append(subscription)
        logfire.debug("Profile subscription opened", user_id=user_id)
        return subscription

    def unsubscribe(self, subscription: ProfileSubscription) -> None:
        listeners = self._subscriptions.get(subscription.user_id)
        if not listeners:
            return
        if subscription in listeners:
            listeners.remove(subscription)
        if not listeners:
            del self._subscriptions[subscription.user_id]
        logfire.debug("Profile subscription closed", user_id=subscription.user_id)

    def subscriber_count(self, user_id: UserId) -> int:
        return len(self._subscriptions.get(user_id, []))

    def publish(self, profile: UserProfile) -> None:
        """Push a committed profile state to its listeners.

        A failing callback is logged and does not stop delivery to the others.
        """
        event = ProfileChanged(profile=profile)
        for subscription in list(self._subscriptions.get(profile.id, [])):
            try:
                subscription.offer(event)
            except Exception:
                logfire.exception(
                    "Profile listener failed",
                    user_id=profile.id,
                    revision=profile.revision,
                )
