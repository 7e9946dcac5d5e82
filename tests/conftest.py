"""Shared fixtures for the numint test suite."""

import pytest

from numint.utils.config import reset_config


@pytest.fixture(autouse=True)
def default_config():
    """Each test starts from (and leaves behind) the default configuration."""
    reset_config()
    yield
    reset_config()


class FixedVector:
    """Container with indexed access and a length but no way to resize."""

    def __init__(self, values):
        self._values = list(values)

    def __getitem__(self, i):
        return self._values[i]

    def __setitem__(self, i, value):
        self._values[i] = value

    def __len__(self):
        return len(self._values)

    def __repr__(self):
        return f"FixedVector({self._values})"


class RecordingObserver:
    """Observer that keeps every (state, time) sample it sees."""

    def __init__(self):
        self.times = []
        self.states = []

    def __call__(self, state, time):
        self.times.append(time)
        self.states.append(list(state))
