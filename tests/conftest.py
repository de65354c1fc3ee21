"""Shared fixtures: a headless pygame and a recording drawing context."""
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pytest


class RecordingContext:
    """Canvas-style context that records every call instead of painting."""

    def __init__(self) -> None:
        self.calls = []
        self._fill_style = None

    @property
    def fill_style(self):
        return self._fill_style

    @fill_style.setter
    def fill_style(self, value) -> None:
        self._fill_style = value
        self.calls.append(("fill_style", value))

    def __getattr__(self, name):
        def record(*args):
            self.calls.append((name, *args))
        return record

    def names(self):
        return [call[0] for call in self.calls]

    def find(self, name):
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def context() -> RecordingContext:
    return RecordingContext()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)
