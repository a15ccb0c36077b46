from typing import Generic, Iterator, TypeVar, final

from loguru import logger

from . import config
from .item import ABSENT, HeapItem
from .priority import CheckPriorityMethod, Comparer, KeyFunc, PriorityStrategy, make_strategy

T = TypeVar("T", bound=HeapItem)


@final
class Heap(Generic[T]):
    """
    Max-priority queue over items that track their own slot.

    Every item keeps `position` (its index in the backing list, -1 when absent) and
    `arrival_sequence` (set on first insertion, breaks priority ties in favour of the
    earlier arrival). Because the item knows where it is, `remove` and priority updates
    are O(log n) without searching.

    To change an item's priority, mutate whatever the strategy looks at and call
    `enqueue` on it again. Mutating it without doing so, or handing in a comparer that is
    not a consistent ordering, silently breaks the heap. An item must not be in two heaps
    at once.
    """

    def __init__(
        self,
        method: CheckPriorityMethod | int | str = CheckPriorityMethod.GREATER,
        comparer: Comparer | None = None,
        key: KeyFunc | None = None,
        debug: bool | None = None,
    ):
        self.data: list[T] = []
        self.item_ever_enqueued = 0
        self.strategy: PriorityStrategy[T] = make_strategy(method, comparer, key)
        self.debug = config.DEBUG if debug is None else debug
        logger.debug(f"Heap created with {self.strategy!r}, debug={self.debug}")

    @property
    def method(self) -> CheckPriorityMethod:
        return self.strategy.method

    @property
    def size(self) -> int:
        return len(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __bool__(self) -> bool:
        return len(self.data) > 0

    def __contains__(self, item: T | None) -> bool:
        if item is None:
            return False
        return self._valid_index(item.position) and self.data[item.position] is item

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __repr__(self) -> str:
        return f"Heap(method={self.method.name}, size={len(self.data)})"

    def peek(self) -> T | None:
        if self.data:
            return self.data[0]
        return None

    def enqueue(self, item: T | None) -> None:
        """
        Insert `item`, or fix its slot if it is already in the heap.
        """
        if item is None:
            return
        if item.position < 0:
            self.data.append(item)
            item.position = len(self.data) - 1
            self.item_ever_enqueued += 1
            item.arrival_sequence = self.item_ever_enqueued
        self._update_priority_by_index(item.position)
        self._self_check("enqueue")

    def dequeue(self) -> T | None:
        item = self._remove_by_index(0)
        self._self_check("dequeue")
        return item

    def remove(self, item: T | None) -> None:
        if item is not None and item.position >= 0:
            self._remove_by_index(item.position)
            self._self_check("remove")

    def clear(self) -> None:
        for item in self.data:
            item.position = ABSENT
        logger.debug(f"Heap cleared, {len(self.data)} items released")
        self.data.clear()

    def validate(self) -> list[str]:
        """
        Check the heap property and position bookkeeping of every slot.

        Returns one message per violation, empty when the heap is consistent. O(n), meant
        for tests and the PRIOHEAP_DEBUG mode.
        """
        errors = []
        for i, item in enumerate(self.data):
            if item.position != i:
                errors.append(f"slot {i} holds an item with position {item.position}")
            parent = self._parent(i)
            if self._valid_index(parent) and self.strategy.has_higher_priority(item, self.data[parent]):
                errors.append(f"slot {i} outranks its parent at slot {parent}")
        return errors

    def _self_check(self, op: str):
        if not self.debug:
            return
        for error in self.validate():
            logger.error(f"Heap corrupted after {op}: {error}")

    def _remove_by_index(self, hi: int) -> T | None:
        if not self._valid_index(hi):
            return None
        item = self.data[hi]
        item.position = ABSENT
        last = self.data.pop()
        if hi < len(self.data):
            last.position = hi
            self.data[hi] = last
            self._update_priority_by_index(hi)
        return item

    def _update_priority_by_index(self, hi: int):
        parent = self._parent(hi)
        if self._valid_index(parent) and self.strategy.has_higher_priority(self.data[hi], self.data[parent]):
            self._cascade_up(hi)
        else:
            self._cascade_down(hi)

    def _swap(self, i: int, j: int):
        item_i, item_j = self.data[i], self.data[j]
        self.data[i], self.data[j] = item_j, item_i
        item_i.position = j
        item_j.position = i

    def _cascade_up(self, hi: int):
        parent = self._parent(hi)
        while self._valid_index(parent) and self.strategy.has_higher_priority(self.data[hi], self.data[parent]):
            self._swap(hi, parent)
            hi = parent
            parent = self._parent(hi)

    def _cascade_down(self, hi: int):
        higher = self.strategy.has_higher_priority
        while True:
            best = hi
            left, right = self._left(hi), self._right(hi)
            if self._valid_index(left) and higher(self.data[left], self.data[best]):
                best = left
            if self._valid_index(right) and higher(self.data[right], self.data[best]):
                best = right
            if best == hi:
                break
            self._swap(hi, best)
            hi = best

    @staticmethod
    def _parent(hi: int) -> int:
        return (hi - 1) // 2

    @staticmethod
    def _left(hi: int) -> int:
        return 2 * hi + 1

    @staticmethod
    def _right(hi: int) -> int:
        return 2 * hi + 2

    def _valid_index(self, hi: int) -> bool:
        return 0 <= hi < len(self.data)
