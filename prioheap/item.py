from typing import Protocol, runtime_checkable

ABSENT = -1


@runtime_checkable
class HeapItem(Protocol):
    """
    Anything a `Heap` can hold.

    `position` is owned by the heap while the item is enqueued and must be -1 before the
    first enqueue. `arrival_sequence` is written once by the heap on first insertion.
    """

    position: int
    arrival_sequence: int


class HeapNode:
    """
    Base class filling in the `HeapItem` fields.
    """

    def __init__(self):
        self.position: int = ABSENT
        self.arrival_sequence: int = 0

    @property
    def in_heap(self) -> bool:
        return self.position >= 0
