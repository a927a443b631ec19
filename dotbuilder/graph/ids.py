"""Identifier allocation for graph entities."""
from __future__ import annotations

import itertools
import threading
from typing import Optional


class IdAllocator:
    """Issue strictly increasing integer identifiers starting at ``0``.

    Every entity draws its identifier once, at construction.  The counter is
    guarded by a lock so entities created from several threads still receive
    distinct values.
    """

    def __init__(self) -> None:
        self._counter = itertools.count()
        self._lock = threading.Lock()

    def allocate(self) -> int:
        """Return the next unused identifier."""

        with self._lock:
            return next(self._counter)


DEFAULT_ALLOCATOR = IdAllocator()


def allocate(allocator: Optional[IdAllocator] = None) -> int:
    """Return an identifier from ``allocator``, or from :data:`DEFAULT_ALLOCATOR`."""

    return (allocator or DEFAULT_ALLOCATOR).allocate()
