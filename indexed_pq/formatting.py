"""
Text dumps for debugging.

These helpers only read from the structures they print:
- `format_levels` / `format_heap` render a heap level by level.
- `format_buckets` lists every bucket of a hash index.
"""

from __future__ import annotations
from typing import Any, Iterable, Tuple

from .datastructures import HashIndex, IndexedMinHeap


def format_levels(pairs: Iterable[Tuple[int, Any]]) -> str:
    """Render (key, payload) pairs in array order, one heap level per line.

    Level sizes are 1, 2, 4, ... Elements on a level are separated by a
    single space and every level, including a partial last one, ends with
    a newline. No pairs gives an empty string.

    Example:
        (18,1)
        (27,1) (20,1)
        (34,1)
    """
    lines = []
    level = []
    width = 1
    for key, payload in pairs:
        level.append(f"({key},{payload})")
        if len(level) == width:
            lines.append(" ".join(level) + "\n")
            level = []
            width *= 2
    if level:
        lines.append(" ".join(level) + "\n")
    return "".join(lines)


def format_heap(heap: IndexedMinHeap[Any]) -> str:
    return format_levels(heap)


def format_buckets(index: HashIndex[Any]) -> str:
    """One line per bucket: ``Bucket i: key -> value`` or ``Bucket i: (empty)``."""
    lines = []
    for i, entry in enumerate(index.buckets()):
        if entry is None:
            lines.append(f"Bucket {i}: (empty)\n")
        else:
            key, value = entry
            lines.append(f"Bucket {i}: {key} -> {value}\n")
    return "".join(lines)
