from __future__ import annotations
import ctypes
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class SlotArray(Generic[T]):
    """A fixed-length array of object references backed by a ctypes buffer.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` (not Python's built-in list).
    • The length is chosen once; "growing" means allocating a new SlotArray.
    • Every slot starts out holding `None`.
    • Indices are absolute positions: negative or out-of-range indices raise
      IndexError instead of wrapping around.
    """

    __slots__ = ("_buf", "_length")

    def __init__(self, length: int, it: Optional[Iterable[T]] = None) -> None:
        if length < 0:
            raise ValueError("length must be >= 0")
        self._length = length
        self._buf = self._make_array(length)

        # Fill from the front; the iterable must not be longer than the array.
        if it is not None:
            for i, v in enumerate(it):
                self[i] = v

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(length: int):
        """Allocate a raw ctypes array of `length` py_object slots, all None."""
        buf = (max(length, 1) * ctypes.py_object)()  # never allocate zero-length
        for i in range(len(buf)):
            buf[i] = None
        return buf

    def _check_index(self, idx: int) -> int:
        if idx < 0 or idx >= self._length:
            raise IndexError(f"slot {idx} out of range [0, {self._length})")
        return idx

    # --------------------------------- API -----------------------------------

    def __len__(self) -> int:
        """Number of slots. O(1)."""
        return self._length

    def __getitem__(self, idx: int) -> T:
        return self._buf[self._check_index(idx)]  # type: ignore[return-value]

    def __setitem__(self, idx: int, value: T) -> None:
        self._buf[self._check_index(idx)] = value

    def __iter__(self) -> Iterator[T]:
        """Yield slot contents from left to right, empty slots included."""
        for i in range(self._length):
            yield self._buf[i]  # type: ignore[misc]

    def to_list(self) -> List[T]:
        return list(self)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"SlotArray({self.to_list()!r})"
