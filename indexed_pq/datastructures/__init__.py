from .slot_array import SlotArray
from .hash_index import HashIndex
from .indexed_heap import HeapNode, IndexedMinHeap
from .exceptions import InvalidCapacityError
from .primes import is_prime, next_prime

__all__ = [
    "SlotArray",
    "HashIndex",
    "HeapNode",
    "IndexedMinHeap",
    "InvalidCapacityError",
    "is_prime",
    "next_prime",
]
