"""Outside-click handling for transient overlays (dropdown menus).

A dropdown holds a ``mousedown`` listener on the shared event registry only
while it is open. Closing, unmounting or leaving :meth:`DropdownMenu.scoped`
through an exception all release it.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)

MOUSEDOWN = "mousedown"

Listener = Callable[[Any], None]


@dataclass(eq=False)
class Element:
    """A node in the rendered tree; only the parent link matters here."""

    name: str
    parent: Optional["Element"] = None

    def contains(self, other: Optional["Element"]) -> bool:
        node = other
        while node is not None:
            if node is self:
                return True
            node = node.parent
        return False


class DocumentEvents:
    """Global listener registry, the stand-in for ``document``."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = {}

    def add_listener(self, event_type: str, listener: Listener) -> None:
        self._listeners.setdefault(event_type, []).append(listener)

    def remove_listener(self, event_type: str, listener: Listener) -> None:
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)

    def listener_count(self, event_type: Optional[str] = None) -> int:
        if event_type is not None:
            return len(self._listeners.get(event_type, []))
        return sum(len(v) for v in self._listeners.values())

    def dispatch(self, event_type: str, target: Optional[Element] = None) -> None:
        # Copy: a listener may close its menu and unregister mid-dispatch.
        for listener in list(self._listeners.get(event_type, [])):
            listener(target)


class DropdownMenu:
    def __init__(self, root: Element, events: DocumentEvents):
        self.root = root
        self.events = events
        self.is_open = False
        self._listener: Optional[Listener] = None

    def _on_mousedown(self, target: Optional[Element]) -> None:
        if not self.root.contains(target):
            self.close()

    def open(self) -> None:
        if self.is_open:
            return
        self._listener = self._on_mousedown
        self.events.add_listener(MOUSEDOWN, self._listener)
        self.is_open = True

    def close(self) -> None:
        if self._listener is not None:
            self.events.remove_listener(MOUSEDOWN, self._listener)
            self._listener = None
        self.is_open = False

    def toggle(self) -> None:
        if self.is_open:
            self.close()
        else:
            self.open()

    def unmount(self) -> None:
        if self.is_open:
            logger.debug("Releasing outside-click listener for %s", self.root.name)
        self.close()

    @contextmanager
    def scoped(self) -> Iterator["DropdownMenu"]:
        self.open()
        try:
            yield self
        finally:
            self.unmount()
