from __future__ import annotations
import copy
import logging
from typing import Generic, Iterator, Optional, Tuple, TypeVar

from .exceptions import InvalidCapacityError
from .primes import is_prime, next_prime
from .slot_array import SlotArray

V = TypeVar("V")

logger = logging.getLogger(__name__)


class _Slot(Generic[V]):
    """One bucket of a HashIndex.

    Removal only clears `occupied`; there are no tombstones.
    """

    __slots__ = ("key", "value", "occupied")

    def __init__(self, key: int = 0, value: Optional[V] = None, occupied: bool = False) -> None:
        self.key = key
        self.value = value
        self.occupied = occupied


class HashIndex(Generic[V]):
    """An open-addressing hash table mapping non-negative int keys to values.

    - Hash function: ``key % table_size``; the table size is always prime.
    - Collisions: quadratic probing, ``(home + i*i) % table_size``.
    - Growth: before an insert that would bring the load factor to
      ``max_load_factor`` or above, the table is rebuilt at the smallest prime
      >= twice its size. Entries move over in bucket order, then the pending
      entry is placed.
    - Keys are unique. Failed operations return False/None and change nothing.
    """

    __slots__ = ("_table", "_size", "_max_load")

    MAX_LOAD_FACTOR = 0.5

    def __init__(self, table_size: int, max_load_factor: float = MAX_LOAD_FACTOR) -> None:
        if table_size <= 0 or not is_prime(table_size):
            raise InvalidCapacityError(f"table size must be a positive prime, got {table_size}")
        # Quadratic probing only guarantees a free slot below half load.
        if not (0.0 < max_load_factor <= self.MAX_LOAD_FACTOR):
            raise ValueError("max_load_factor must be in (0.0, 0.5]")
        self._table: SlotArray[_Slot[V]] = self._allocate(table_size)
        self._size: int = 0
        self._max_load: float = max_load_factor

    # -----------------------------
    # Internal helpers
    # -----------------------------
    @staticmethod
    def _allocate(table_size: int) -> SlotArray[_Slot[V]]:
        return SlotArray(table_size, (_Slot() for _ in range(table_size)))

    def _probe(self, key: int) -> Iterator[int]:
        """Yield bucket indices along the quadratic probe sequence of `key`.

        i*i and (n-i)*(n-i) hit the same bucket mod n, so i in [0, n//2]
        covers every bucket the full sequence can reach.
        """
        n = len(self._table)
        if n == 0:
            return
        home = key % n
        for i in range(n // 2 + 1):
            yield (home + i * i) % n

    def _find(self, key: int) -> Optional[_Slot[V]]:
        # Empty buckets do not end the search: removals can break probe chains.
        for idx in self._probe(key):
            slot = self._table[idx]
            if slot.occupied and slot.key == key:
                return slot
        return None

    def _place(self, key: int, value: V) -> bool:
        """Write into the first free bucket on the probe path. Does not count."""
        for idx in self._probe(key):
            slot = self._table[idx]
            if not slot.occupied:
                slot.key, slot.value, slot.occupied = key, value, True
                return True
        return False

    def _needs_rehash(self) -> bool:
        """Would one more entry bring the load factor to the maximum?"""
        return (self._size + 1) / len(self._table) >= self._max_load

    def _rehash(self) -> None:
        """Grow to the next prime >= 2x and reinsert entries in bucket order."""
        pairs = list(self.items())
        old_size = len(self._table)
        self._table = self._allocate(next_prime(2 * old_size))
        for k, v in pairs:
            if not self._place(k, v):
                logger.warning("rehash dropped key %d: no free bucket on its probe path", k)
                self._size -= 1
        logger.debug("rehashed %d entries: %d -> %d buckets", len(pairs), old_size, len(self._table))

    # -----------------------------
    # Core operations
    # -----------------------------
    def insert(self, key: int, value: V) -> bool:
        """Insert a new key. Returns False, changing nothing, if `key` exists."""
        if self._find(key) is not None:
            logger.debug("insert rejected: key %d already present", key)
            return False
        if len(self._table) == 0:
            logger.debug("insert rejected: table has been taken")
            return False
        while self._needs_rehash():
            self._rehash()
        if not self._place(key, value):
            logger.warning("insert failed: no free bucket on the probe path of key %d", key)
            return False
        self._size += 1
        return True

    def get(self, key: int) -> Optional[V]:
        """Return the value for `key`, or None if absent."""
        slot = self._find(key)
        return None if slot is None else slot.value

    def update(self, key: int, new_value: V) -> bool:
        """Overwrite the value for an existing key in place."""
        slot = self._find(key)
        if slot is None:
            return False
        slot.value = new_value
        return True

    def remove(self, key: int) -> bool:
        slot = self._find(key)
        if slot is None:
            return False
        slot.occupied = False
        slot.value = None
        self._size -= 1
        return True

    def remove_all_by_value(self, value: V) -> int:
        """Remove every entry whose value equals `value`; return how many. O(n)."""
        removed = 0
        for slot in self._table:
            if slot.occupied and slot.value == value:
                slot.occupied = False
                slot.value = None
                removed += 1
        self._size -= removed
        return removed

    # -----------------------------
    # Ownership
    # -----------------------------
    def clone(self) -> HashIndex[V]:
        """Deep copy with the same bucket layout and table size."""
        other = self.__class__.__new__(self.__class__)
        other._table = SlotArray(
            len(self._table),
            (_Slot(s.key, copy.deepcopy(s.value), s.occupied) for s in self._table),
        )
        other._size = self._size
        other._max_load = self._max_load
        return other

    def take(self) -> HashIndex[V]:
        """Move this table's storage into a new HashIndex.

        Afterwards this table has zero buckets: lookups miss and inserts fail.
        """
        other = self.__class__.__new__(self.__class__)
        other._table, other._size, other._max_load = self._table, self._size, self._max_load
        self._table = SlotArray(0)
        self._size = 0
        return other

    # -----------------------------
    # Iteration helpers
    # -----------------------------
    def items(self) -> Iterator[Tuple[int, V]]:
        """Yield (key, value) pairs in bucket order."""
        for slot in self._table:
            if slot.occupied:
                yield (slot.key, slot.value)  # type: ignore[misc]

    def keys(self) -> Iterator[int]:
        for k, _ in self.items():
            yield k

    def values(self) -> Iterator[V]:
        for _, v in self.items():
            yield v

    def buckets(self) -> Iterator[Optional[Tuple[int, V]]]:
        """Yield one entry per bucket: (key, value), or None when empty."""
        for slot in self._table:
            yield (slot.key, slot.value) if slot.occupied else None  # type: ignore[misc]

    @property
    def table_size(self) -> int:
        """Number of buckets (occupied or not)."""
        return len(self._table)

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: int) -> bool:
        return self._find(key) is not None

    def __iter__(self) -> Iterator[int]:  # pragma: no cover - simple
        return self.keys()

    def __eq__(self, other: object) -> bool:
        """Same (key, value) pairs, whatever the layout or table size."""
        if not isinstance(other, HashIndex):
            return NotImplemented
        if len(self) != len(other):
            return False
        for k, v in self.items():
            slot = other._find(k)
            if slot is None or slot.value != v:
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: HashIndex[V]) -> HashIndex[V]:
        """Clone of self with every entry of `other` inserted, in bucket order.

        On a key present in both, the left-hand value is kept and the
        right-hand entry is dropped.
        """
        if not isinstance(other, HashIndex):
            return NotImplemented
        merged = self.clone()
        for k, v in other.items():
            merged.insert(k, v)
        return merged

    def __repr__(self) -> str:  # pragma: no cover - trivial
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"HashIndex({{{pairs}}}, table_size={self.table_size})"
