from __future__ import annotations

from atch.constants import WILDCARD
from atch.lib.events import (
    Emitter,
    EventHandlerMap,
    EventType,
    Handler,
    WildcardHandler,
)
from atch.lib.subscription import Subscription
from atch.lib.token import Token
from atch.version import __version__

PACKAGE = __package__
VERSION = __version__


def create_emitter(
    registry: EventHandlerMap | None = None,
    wildcard: EventType = WILDCARD,
) -> Emitter:
    """Create an Emitter, optionally over an existing registry."""
    return Emitter(registry, wildcard=wildcard)


__all__ = [
    "VERSION",
    "PACKAGE",
    "WILDCARD",
    "EventHandlerMap",
    "EventType",
    "Handler",
    "WildcardHandler",
    Emitter.__name__,
    Subscription.__name__,
    Token.__name__,
    create_emitter.__name__,
]
