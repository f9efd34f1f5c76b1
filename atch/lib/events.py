"""Tiny functional event emitter / pubsub."""

from __future__ import annotations

import functools
import logging
from concurrent.futures import Future
from typing import Any, Callable, Hashable

from atch.constants import WILDCARD
from atch.lib.subscription import Subscription

EventType = Hashable
Handler = Callable[[Any], None]
WildcardHandler = Callable[[EventType, Any], None]
EventHandlerMap = dict[EventType, list[Callable[..., None]]]


def _handler_name(handler: Callable) -> str:
    return getattr(handler, "__name__", repr(handler))


class Emitter:
    """Synchronous event emitter over a single shared handler registry.

    Handlers are called synchronously in registration order, followed by the
    wildcard handlers. Exceptions raised by a handler bubble up to the caller
    of ``emit`` and skip the handlers that have not run yet.
    """

    def __init__(self, registry: EventHandlerMap | None = None, wildcard: EventType = WILDCARD):
        """Initialize with an optional pre-populated registry.

        Args:
            registry: Mapping of event types to handler lists. Used as-is, not copied.
            wildcard: Key whose handlers receive every emission as (type, payload).
        """
        self.registry: EventHandlerMap = registry if registry is not None else {}
        self._wildcard = wildcard

    @property
    def wildcard(self) -> EventType:
        return self._wildcard

    def on(self, event_type: EventType, handler: Callable[..., None]) -> Subscription:
        """Register a handler for an event type, or the wildcard for all events.

        Returns a Subscription that undoes this registration when called.
        """
        handlers = self.registry.get(event_type)
        if handlers is None:
            self.registry[event_type] = [handler]
        else:
            handlers.append(handler)
        logging.debug(f"Registered handler {_handler_name(handler)} for event {event_type!r}")
        return Subscription(self, event_type, handler)

    def once(self, event_type: EventType, handler: Callable[..., None]) -> Subscription:
        """Register a handler that is removed before its first invocation."""

        @functools.wraps(handler)
        def once_handler(*args: Any) -> None:
            subscription.remove()
            handler(*args)

        subscription = self.on(event_type, once_handler)
        return subscription

    def wait_for(self, event_type: EventType) -> Future:
        """Return a future resolved with the payload of the next emission of event_type.

        The future never resolves if the event is not emitted. Asyncio code can
        await it through ``asyncio.wrap_future``. Waiting on the wildcard
        resolves with the payload of the next emission of any type, not with
        its event type.
        """
        future: Future = Future()

        def resolve(*args: Any) -> None:
            # Wildcard handlers get (type, payload); the payload is always last
            if not future.done():
                future.set_result(args[-1])

        self.once(event_type, resolve)
        return future

    def off(self, event_type: EventType, handler: Callable[..., None] | None = None) -> None:
        """Remove a handler for an event type.

        If handler is omitted, all handlers of the given type are removed and
        an empty list is left in the registry.
        """
        if handler is None:
            self.registry[event_type] = []
            logging.debug(f"Cleared handlers for event {event_type!r}")
            return

        handlers = self.registry.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)
            logging.debug(f"Removed handler {_handler_name(handler)} from event {event_type!r}")

    def emit(self, event_type: EventType, payload: Any = None) -> None:
        """Call all handlers for event_type, then the wildcard handlers.

        Each handler list is copied before dispatch, so registrations made by a
        handler only apply to later emissions.
        """
        if event_type == self._wildcard:
            raise ValueError(f"Cannot emit the wildcard event type {event_type!r} directly")

        for handler in list(self.registry.get(event_type) or ()):
            handler(payload)

        for handler in list(self.registry.get(self._wildcard) or ()):
            handler(event_type, payload)
