"""Shared fixtures: deterministic random providers for the fairness engine."""

import pytest

from fairdice.services.fairness_service import FairnessEngine


class FixedProvider:
    """Returns scripted indices and a constant key."""

    def __init__(self, indices, key=b"\x01" * 32):
        self.indices = list(indices)
        self.key = key
        self.calls = 0

    def randbelow(self, n):
        index = self.indices[self.calls % len(self.indices)]
        self.calls += 1
        return index

    def token_bytes(self, n):
        return self.key


class BrokenProvider:
    """Simulates an OS without a usable entropy source."""

    def randbelow(self, n):
        raise NotImplementedError("no entropy source")

    def token_bytes(self, n):
        raise OSError("no entropy source")


@pytest.fixture
def fixed_engine():
    """Engine factory taking the scripted indices."""
    def make(*indices, key=b"\x01" * 32):
        return FairnessEngine(provider=FixedProvider(indices, key=key))
    return make


@pytest.fixture
def broken_engine():
    return FairnessEngine(provider=BrokenProvider())
