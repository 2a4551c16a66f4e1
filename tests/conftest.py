"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from modelkit import MemoryAdapter, Model


@pytest.fixture
def model_cls():
    """Fresh model type, isolated from other tests' registrations."""
    return Model.extend("TestModel")


@pytest.fixture
def adapter():
    """Empty in-memory adapter."""
    return MemoryAdapter()


class Recorder:
    """Listener recording (event, args) in call order."""

    def __init__(self):
        self.calls = []

    def listener(self, event):
        def record(model, *args):
            self.calls.append((event, args))

        return record

    @property
    def events(self):
        return [event for event, _ in self.calls]


@pytest.fixture
def recorder():
    return Recorder()
