"""
Indexed min-priority-queue.

A bounded binary min-heap paired with an open-addressing hash index, so
elements can be found, re-keyed or removed by key in logarithmic time.

Example:
    from indexed_pq import IndexedMinHeap
    pq = IndexedMinHeap(14)
    pq.insert(18, "a")
    pq.decrease_key(18, 10)
"""

import logging

from .datastructures import HashIndex, IndexedMinHeap, InvalidCapacityError
from .formatting import format_buckets, format_heap, format_levels

# Library logging: silent unless the application configures handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "HashIndex",
    "IndexedMinHeap",
    "InvalidCapacityError",
    "format_buckets",
    "format_heap",
    "format_levels",
]
