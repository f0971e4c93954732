"""Unit tests for GenerationGuard."""

import pytest

from autoblog.domain.error import GenerationInProgressError
from autoblog.domain.service import GenerationGuard


class TestGenerationGuard:
    """Tests for GenerationGuard.hold."""

    def test_second_hold_for_same_session_is_rejected(self):
        guard = GenerationGuard()

        with guard.hold("wizard-1"):
            assert guard.is_running("wizard-1")
            with pytest.raises(GenerationInProgressError):
                with guard.hold("wizard-1"):
                    pass

    def test_other_sessions_are_independent(self):
        guard = GenerationGuard()

        with guard.hold("wizard-1"):
            with guard.hold("wizard-2"):
                assert guard.is_running("wizard-2")

    def test_slot_is_released_after_failure(self):
        guard = GenerationGuard()

        with pytest.raises(RuntimeError):
            with guard.hold("wizard-1"):
                raise RuntimeError("model exploded")

        assert not guard.is_running("wizard-1")
        with guard.hold("wizard-1"):
            pass

    def test_requests_without_session_are_not_tracked(self):
        guard = GenerationGuard()

        with guard.hold(None):
            with guard.hold(None):
                pass
