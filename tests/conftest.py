"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from classdefaults import CloneSettings, Record


@pytest.fixture
def settings():
    """Settings with library defaults, independent of the environment."""
    return CloneSettings(_env_file=None)


@pytest.fixture
def unshared_settings():
    """Settings that release registry entries as soon as a subtree is done."""
    return CloneSettings(_env_file=None, preserve_shared_references=False)


class FixturePoint:
    """Plain class with a zero-arg constructor."""

    def __init__(self, x=0, y=0):
        self.x = x
        self.y = y


class FixtureSlotted:
    __slots__ = ("a", "__hidden")

    def __init__(self):
        self.a = 1
        self.__hidden = 2


@pytest.fixture
def point_cls():
    return FixturePoint


@pytest.fixture
def slotted_cls():
    return FixtureSlotted


@pytest.fixture
def record():
    """Empty Record."""
    return Record()
