from __future__ import annotations
import copy
import logging
from typing import Generic, Iterator, Optional, Tuple, TypeVar

from .exceptions import InvalidCapacityError
from .hash_index import HashIndex
from .primes import next_prime
from .slot_array import SlotArray

V = TypeVar("V")

logger = logging.getLogger(__name__)


class HeapNode(Generic[V]):
    """A (key, payload) pair living in one heap slot."""

    __slots__ = ("key", "payload")

    def __init__(self, key: int, payload: V) -> None:
        self.key = key
        self.payload = payload

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"HeapNode({self.key!r}, {self.payload!r})"


class IndexedMinHeap(Generic[V]):
    """A bounded binary min-heap keyed by unique non-negative ints.

    A HashIndex maps each key to the slot its node currently occupies, so
    lookup, re-keying and removal by key cost O(1) + O(log n) instead of a
    linear search.

    Slots are 1-based: parent(i) = i // 2, children 2i and 2i + 1. Every
    node write goes through `_place`, which updates the array and the index
    together; after each public call `index.get(heap[i].key) == i` for all
    live slots.

    Failures (full, duplicate key, missing key, bad change) return False or
    None and leave the heap untouched.
    """

    __slots__ = ("_heap", "_index", "_max_size", "_count")

    def __init__(self, max_size: int) -> None:
        if max_size <= 0:
            raise InvalidCapacityError(f"max_size must be >= 1, got {max_size}")
        self._max_size: int = max_size
        self._count: int = 0
        self._heap: SlotArray[Optional[HeapNode[V]]] = SlotArray(max_size + 1)  # slot 0 unused
        self._index: HashIndex[int] = HashIndex(next_prime(max_size))

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _place(self, node: HeapNode[V], slot: int) -> None:
        """Put `node` in `slot` and record that slot in the index."""
        self._heap[slot] = node
        if not self._index.update(node.key, slot):
            self._index.insert(node.key, slot)

    def _sift_up(self, slot: int) -> int:
        """Move the node at `slot` toward the root; return where it settles."""
        heap = self._heap
        node = heap[slot]
        while slot > 1:
            parent = heap[slot // 2]
            if parent.key <= node.key:
                break
            self._place(parent, slot)
            slot //= 2
        self._place(node, slot)
        return slot

    def _sift_down(self, slot: int) -> int:
        """Move the node at `slot` toward the leaves; return where it settles."""
        heap = self._heap
        node = heap[slot]
        n = self._count
        while True:
            left = 2 * slot
            right = left + 1
            if left > n:
                break
            child = left
            # Right child wins ties.
            if right <= n and heap[right].key <= heap[left].key:
                child = right
            if heap[child].key >= node.key:
                break
            self._place(heap[child], slot)
            slot = child
        self._place(node, slot)
        return slot

    def _pop_last(self) -> HeapNode[V]:
        """Detach the node in the last live slot and shrink the heap by one."""
        last = self._heap[self._count]
        self._heap[self._count] = None
        self._count -= 1
        return last

    def _rekey(self, key: int, new_key: int) -> int:
        """Change a node's key in place and re-index it; return its slot."""
        slot = self._index.get(key)
        self._index.remove(key)
        node = self._heap[slot]
        node.key = new_key
        self._index.insert(new_key, slot)
        return slot

    def _can_rekey(self, key: int, change: int, new_key: int) -> bool:
        if change <= 0:
            logger.debug("key change rejected: change must be positive, got %d", change)
            return False
        if key not in self._index:
            logger.debug("key change rejected: key %d not found", key)
            return False
        if new_key in self._index:
            logger.debug("key change rejected: key %d already present", new_key)
            return False
        return True

    # -----------------------------
    # Public API
    # -----------------------------
    def insert(self, key: int, payload: V) -> bool:
        """Add a new (key, payload) node (O(log n)).

        Keys must be non-negative ints; anything else is rejected.
        """
        if not isinstance(key, int) or key < 0:
            logger.debug("insert rejected: key %r is not a non-negative int", key)
            return False
        if self._count >= self._max_size:
            logger.debug("insert rejected: heap full (%d)", self._max_size)
            return False
        if key in self._index:
            logger.debug("insert rejected: key %d already present", key)
            return False
        self._count += 1
        self._place(HeapNode(key, payload), self._count)
        self._sift_up(self._count)
        return True

    def peek_min_key(self) -> Optional[int]:
        """Return the smallest key without removing it, or None if empty (O(1))."""
        return self._heap[1].key if self._count else None

    def peek_min_value(self) -> Optional[V]:
        """Return the payload of the smallest key, or None if empty (O(1))."""
        return self._heap[1].payload if self._count else None

    def delete_min(self) -> bool:
        """Remove the root (O(log n)). Returns False if the heap is empty."""
        if not self._count:
            return False
        self._index.remove(self._heap[1].key)
        last = self._pop_last()
        if self._count:
            self._place(last, 1)
            self._sift_down(1)
        return True

    def get(self, key: int) -> Optional[V]:
        """Return the payload stored under `key`, or None (O(1) amortized)."""
        slot = self._index.get(key)
        return None if slot is None else self._heap[slot].payload

    def decrease_key(self, key: int, change: int) -> bool:
        """Subtract `change` from a node's key and sift it up.

        Keys are not clamped at zero: decreasing past it gives a negative key.
        """
        if not self._can_rekey(key, change, key - change):
            return False
        self._sift_up(self._rekey(key, key - change))
        return True

    def increase_key(self, key: int, change: int) -> bool:
        """Add `change` to a node's key and sift it down."""
        if not self._can_rekey(key, change, key + change):
            return False
        self._sift_down(self._rekey(key, key + change))
        return True

    def remove(self, key: int) -> bool:
        """Remove the node with `key` (O(log n)).

        The last node fills the hole and is sifted down, or up if it did not
        move down.
        """
        slot = self._index.get(key)
        if slot is None:
            logger.debug("remove rejected: key %d not found", key)
            return False
        self._index.remove(key)
        last = self._pop_last()
        if slot <= self._count:
            self._place(last, slot)
            if self._sift_down(slot) == slot:
                self._sift_up(slot)
        return True

    def check_invariants(self) -> bool:
        """Verify heap order and the key <-> slot bijection. O(n), for tests."""
        heap = self._heap
        if len(self._index) != self._count:
            return False
        for i in range(1, self._count + 1):
            node = heap[i]
            if node is None or self._index.get(node.key) != i:
                return False
            if i > 1 and heap[i // 2].key > node.key:
                return False
        return all(heap[i] is None for i in range(self._count + 1, len(heap)))

    # -----------------------------
    # Ownership
    # -----------------------------
    def clone(self) -> IndexedMinHeap[V]:
        """Deep copy: same max size, same slots, payloads deep-copied."""
        other = self.__class__.__new__(self.__class__)
        other._max_size = self._max_size
        other._count = self._count
        other._heap = SlotArray(len(self._heap))
        for i in range(1, self._count + 1):
            node = self._heap[i]
            other._heap[i] = HeapNode(node.key, copy.deepcopy(node.payload))
        other._index = self._index.clone()
        return other

    def take(self) -> IndexedMinHeap[V]:
        """Move storage into a new heap; this one is left empty with max_size 0."""
        other = self.__class__.__new__(self.__class__)
        other._max_size, other._count, other._heap = self._max_size, self._count, self._heap
        other._index = self._index.take()
        self._max_size = 0
        self._count = 0
        self._heap = SlotArray(1)
        return other

    # -----------------------------
    # Read-only views
    # -----------------------------
    @property
    def max_size(self) -> int:
        return self._max_size

    def keys(self) -> Iterator[int]:
        for k, _ in self:
            yield k

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._count != 0

    def __contains__(self, key: int) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[Tuple[int, V]]:
        # Array order (level by level), not sorted order.
        for i in range(1, self._count + 1):
            node = self._heap[i]
            yield (node.key, node.payload)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"IndexedMinHeap({list(self)!r}, max_size={self._max_size})"
