from __future__ import annotations

import threading
from typing import Iterator, Union


class Marker:
    """
    Named tag attached to a log record.

    A marker may reference other markers; `contains()` checks the whole
    reference graph. Markers compare and hash by name.
    """

    __slots__ = ("name", "_references", "_lock")

    def __init__(self, name: str) -> None:
        if not name:
            raise ValueError("Marker name must not be empty")
        self.name = name
        self._references: tuple[Marker, ...] = ()
        self._lock = threading.Lock()

    def add(self, reference: Marker) -> None:
        if reference is None:
            raise ValueError("A null value cannot be added to a Marker as reference.")
        with self._lock:
            # Adding a marker that already reaches us would create a cycle.
            if self.contains(reference) or reference.contains(self):
                return
            self._references = self._references + (reference,)

    def remove(self, reference: Marker) -> bool:
        with self._lock:
            if reference not in self._references:
                return False
            self._references = tuple(r for r in self._references if r != reference)
            return True

    def has_references(self) -> bool:
        return bool(self._references)

    def contains(self, other: Union[Marker, str]) -> bool:
        name = other.name if isinstance(other, Marker) else other
        if self.name == name:
            return True
        return any(ref.contains(name) for ref in self._references)

    def __iter__(self) -> Iterator[Marker]:
        return iter(self._references)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Marker):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        if not self._references:
            return self.name
        return f"{self.name} [ {', '.join(str(ref) for ref in self._references)} ]"

    def __repr__(self) -> str:
        return f"Marker({self.name!r})"


_markers: dict[str, Marker] = {}
_lock = threading.Lock()


def get_marker(name: str) -> Marker:
    """Return the registered marker for `name`, creating it on first use."""
    if not name:
        raise ValueError("Marker name must not be empty")
    with _lock:
        marker = _markers.get(name)
        if marker is None:
            marker = _markers[name] = Marker(name)
        return marker


def get_detached_marker(name: str) -> Marker:
    return Marker(name)


def exists(name: str) -> bool:
    with _lock:
        return name in _markers
