"""Opaque event type keys."""

from __future__ import annotations


class Token:
    """Unique event type key that only ever equals itself.

    Two tokens with the same description are still different keys, and a
    token never equals a string, so tokens work as collision-free private
    event types.
    """

    __slots__ = ("description",)

    def __init__(self, description: str = "") -> None:
        self.description = description

    def __repr__(self) -> str:
        return f"Token({self.description!r})"
