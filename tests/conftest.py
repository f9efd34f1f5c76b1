"""Pytest fixtures for atch tests."""

import pytest

from atch.lib.events import Emitter
from atch.lib.token import Token

EVENT_TYPE = Token("eventType")


@pytest.fixture
def registry():
    """An empty registry shared with the emitter under test."""
    return {}


@pytest.fixture
def emitter(registry):
    """Create an Emitter over the shared registry fixture."""
    return Emitter(registry)


@pytest.fixture
def event_type():
    """A token event type distinct from every string key."""
    return EVENT_TYPE
