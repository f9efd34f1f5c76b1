"""Handle returned by Emitter.on/once that undoes a single registration."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Hashable

if TYPE_CHECKING:
    from atch.lib.events import Emitter


class Subscription:
    """Remover for one handler registration.

    Calling the subscription (or its ``remove`` method) detaches the handler
    the first time; any later call is a no-op, so a duplicate registration of
    the same handler is never removed by accident.
    """

    def __init__(self, emitter: Emitter, event_type: Hashable, handler: Callable[..., Any]) -> None:
        self._emitter = emitter
        self.type = event_type
        self.handler = handler
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def remove(self) -> None:
        if not self._active:
            return
        self._active = False
        self._emitter.off(self.type, self.handler)

    def __call__(self) -> None:
        self.remove()

    def __repr__(self) -> str:
        state = "active" if self._active else "removed"
        return f"<Subscription {self.type!r} {state}>"
