"""Shared pytest fixtures for test modules."""

from __future__ import annotations

import pytest

from tests.helpers import CallRecorder


@pytest.fixture
def recorder() -> CallRecorder:
    """A callback that counts how often it is invoked.

    Usage:
        def test_not_called(recorder: CallRecorder) -> None:
            none().map(recorder)
            assert recorder.call_count == 0
    """
    return CallRecorder()
