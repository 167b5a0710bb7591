# groupie/tracker/contracts/render.py
"""
Render tree contracts.

The detail renderer produces an immutable tree of :class:`Element`,
:class:`Text` and :class:`Placeholder` nodes. Placeholders do not hold their
resolved content themselves: each one points at a slot of a
:class:`PlaceholderArena`, and the link resolver only ever writes to that
slot. The markup serializer reads the slot state when it meets a placeholder.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Text:
    """Text content. Escaped when serialized."""

    value: str


@dataclass(frozen=True)
class Element:
    tag: str
    children: tuple[Node, ...] = ()
    attrs: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True)
class Placeholder:
    """A URL pending asynchronous resolution, bound to arena slot ``slot``."""

    slot: int
    url: str
    label: str = "Loading…"


Node = Union[Element, Text, Placeholder]


def element(tag: str, *children: Node, **attrs: str) -> Element:
    """Shorthand for building elements. ``class_`` maps to ``class``."""
    return Element(
        tag=tag,
        children=tuple(children),
        attrs=tuple((k.rstrip("_"), v) for k, v in attrs.items()),
    )


class SlotState(str, Enum):
    LOADING = "loading"
    LIST = "list"
    SUMMARY = "summary"
    PREFORMATTED = "preformatted"
    TEXT = "text"
    LINK = "link"


class SlotAlreadySettled(RuntimeError):
    """Raised when a slot that already reached a terminal state is settled again."""

    def __init__(self, index: int, state: SlotState):
        self.index = index
        self.state = state
        super().__init__(f"Placeholder slot {index} already settled as '{state.value}'")


@dataclass
class PlaceholderSlot:
    """Mutable resolution state of one placeholder.

    Attributes:
        index: Position in the arena (document order).
        url: URL to resolve.
        state: ``LOADING`` until settled, then one terminal state forever.
        content: Render tree shown once settled.
    """

    index: int
    url: str
    state: SlotState = SlotState.LOADING
    content: Node | None = None
    _arena: PlaceholderArena | None = field(default=None, repr=False, compare=False)

    @property
    def settled(self) -> bool:
        return self.state is not SlotState.LOADING

    def settle(self, state: SlotState, content: Node) -> None:
        if state is SlotState.LOADING:
            raise ValueError("A slot cannot be settled back to 'loading'")
        if self.settled:
            raise SlotAlreadySettled(self.index, self.state)
        if self._arena is not None and self._arena.closed:
            logger.debug("Discarding late result for slot %d (%s)", self.index, self.url)
            return
        self.state = state
        self.content = content


class PlaceholderArena:
    """Owns every placeholder slot of a single render pass."""

    def __init__(self) -> None:
        self._slots: list[PlaceholderSlot] = []
        self._closed = False

    def allocate(self, url: str, label: str = "Loading…") -> Placeholder:
        slot = PlaceholderSlot(index=len(self._slots), url=url, _arena=self)
        self._slots.append(slot)
        return Placeholder(slot=slot.index, url=url, label=label)

    def truncate(self, size: int) -> None:
        """Forget slots allocated after the arena held ``size`` slots."""
        del self._slots[size:]

    def close(self) -> None:
        """Mark the view as detached; later results are dropped."""
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def pending(self) -> list[PlaceholderSlot]:
        return [s for s in self._slots if not s.settled]

    def get(self, index: int) -> PlaceholderSlot | None:
        if 0 <= index < len(self._slots):
            return self._slots[index]
        return None

    def __getitem__(self, index: int) -> PlaceholderSlot:
        return self._slots[index]

    def __iter__(self) -> Iterator[PlaceholderSlot]:
        return iter(self._slots)

    def __len__(self) -> int:
        return len(self._slots)
