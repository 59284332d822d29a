"""Double-ended queue backed by a single circular array.

Elements occupy the run ``left .. right`` (mod capacity). ``dequeue`` and
``enqueue_back`` work at ``left``; ``enqueue`` and ``dequeue_back`` work at
``right``. A full array is replaced by a larger one (twice the size unless a
different growth function is given) with the run copied to its right end:

    capacity 6, left = 3, right = 2
    | 4 5 6 1 2 3 |

    capacity 12, left = 6, right = 11
    | _ _ _ _ _ _ 1 2 3 4 5 6 |

All operations run in amortized O(1). Capacity never shrinks.
"""

import logging
import operator
from typing import Any, Callable, Generic, List, Optional, TypeVar

T = TypeVar('T')

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 8

# Free-slot marker, so that None can be stored like any other value.
_EMPTY: Any = object()


def double_capacity(capacity: int) -> int:
    return capacity * 2


DEFAULT_GROWTH = double_capacity


class EmptyCollectionError(IndexError):
    """Raised when an element is requested from an empty dequeue."""


class CircularDequeue(Generic[T]):
    def __init__(
        self,
        growth: Optional[Callable[[int], int]] = None,
        initial_capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        if (not isinstance(initial_capacity, int) or isinstance(initial_capacity, bool)
                or initial_capacity <= 0):
            raise ValueError("initial_capacity must be a positive integer")
        if growth is None:
            growth = DEFAULT_GROWTH
        elif not callable(growth):
            raise ValueError("growth must be callable")
        self._growth = growth
        self._capacity = initial_capacity
        self._data: List[Any] = [_EMPTY] * initial_capacity
        self._left = 0
        self._right = initial_capacity - 1
        self._size = 0

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def capacity(self) -> int:
        return self._capacity

    def enqueue(self, item: T) -> None:
        """Insert ``item`` at the back, the end read by ``dequeue_back``."""
        if self._size == self._capacity:
            self._grow()
        self._right = (self._right + 1) % self._capacity
        self._data[self._right] = item
        self._size += 1

    def dequeue(self) -> T:
        """Remove and return the element at the front."""
        item = self._data[self._left]
        if item is _EMPTY:
            raise EmptyCollectionError("dequeue from empty dequeue")
        self._data[self._left] = _EMPTY
        self._left = (self._left + 1) % self._capacity
        self._size -= 1
        return item

    def enqueue_back(self, item: T) -> None:
        """Insert ``item`` at the front, the end read by ``dequeue``."""
        if self._size == self._capacity:
            self._grow()
        self._left = (self._left - 1) % self._capacity
        self._data[self._left] = item
        self._size += 1

    def dequeue_back(self) -> T:
        """Remove and return the element at the back."""
        item = self._data[self._right]
        if item is _EMPTY:
            raise EmptyCollectionError("dequeue_back from empty dequeue")
        self._data[self._right] = _EMPTY
        self._right = (self._right - 1) % self._capacity
        self._size -= 1
        return item

    def front(self) -> T:
        item = self._data[self._left]
        if item is _EMPTY:
            raise EmptyCollectionError("front from empty dequeue")
        return item

    def back(self) -> T:
        item = self._data[self._right]
        if item is _EMPTY:
            raise EmptyCollectionError("back from empty dequeue")
        return item

    def clear(self) -> None:
        self._data = [_EMPTY] * self._capacity
        self._left = 0
        self._right = self._capacity - 1
        self._size = 0

    def copy(self) -> 'CircularDequeue[T]':
        """Return a shallow copy with its own backing array."""
        clone: CircularDequeue[T] = CircularDequeue(self._growth, self._capacity)
        clone._data = self._data.copy()
        clone._left = self._left
        clone._right = self._right
        clone._size = self._size
        return clone

    def _grow(self) -> None:
        grown = self._growth(self._capacity)
        try:
            new_capacity = operator.index(grown)
        except TypeError:
            raise ValueError(
                f"growth must return an integer, got {grown!r}"
            ) from None
        if new_capacity <= self._capacity:
            raise ValueError(
                f"growth must return an integer larger than {self._capacity}, "
                f"got {new_capacity!r}"
            )
        new_data = [_EMPTY] * new_capacity
        new_left = new_capacity - self._size
        for i in range(self._size):
            new_data[new_left + i] = self._data[(self._left + i) % self._capacity]
        logger.debug(
            "Growing dequeue from %d to %d slots (%d elements moved)",
            self._capacity, new_capacity, self._size,
        )
        self._data = new_data
        self._capacity = new_capacity
        self._left = new_left
        self._right = (new_left + self._size - 1) % new_capacity

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"CircularDequeue(size={self._size}, capacity={self._capacity})"
