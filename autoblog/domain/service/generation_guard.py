"""Single-flight guard for generation attempts."""

import threading
from contextlib import contextmanager
from typing import Iterator, Optional

import logfire

from autoblog.domain.error import GenerationInProgressError


class GenerationGuard:
    """Tracks wizard sessions that have a generation outstanding.

    A wizard session may only have one attempt in flight; the slot is
    released once the attempt settles, successfully or not. Slots live in
    process memory and are only seen by requests served by the same worker.
    """

    def __init__(self) -> None:
        self._in_flight: set[str] = set()
        self._lock = threading.Lock()

    def is_running(self, wizard_session_id: str) -> bool:
        return wizard_session_id in self._in_flight

    @contextmanager
    def hold(self, wizard_session_id: Optional[str]) -> Iterator[None]:
        """Occupy the slot for a wizard session for the duration of the block.

        Requests without a session id are not tracked.

        Raises:
            GenerationInProgressError: If the session already holds the slot
        """
        if wizard_session_id is None:
            yield
            return

        with self._lock:
            if wizard_session_id in self._in_flight:
                logfire.warn(
                    "Duplicate generation rejected",
                    wizard_session_id=wizard_session_id,
                )
                raise GenerationInProgressError(wizard_session_id)
            self._in_flight.add(wizard_session_id)

        try:
            yield
        finally:
            with self._lock:
                self._in_flight.discard(wizard_session_id)
