from enum import Enum
from typing import Any, Callable, Generic, Protocol, TypeVar

from loguru import logger

from .item import HeapItem


class SupportsOrdering(Protocol):
    def __lt__(self, value: Any, /) -> bool: ...

    def __gt__(self, value: Any, /) -> bool: ...


T = TypeVar("T", bound=HeapItem)

Comparer = Callable[[T, T], int]
KeyFunc = Callable[[T], SupportsOrdering]


class CheckPriorityMethod(Enum):
    CUSTOM = 1
    GREATER = 2
    LESS = 3

    @classmethod
    def parse(cls, method: "CheckPriorityMethod | int | str") -> "CheckPriorityMethod":
        if isinstance(method, cls):
            return method
        if isinstance(method, str):
            try:
                return cls[method.upper()]
            except KeyError:
                raise ValueError(f"Unknown priority method: {method}") from None
        try:
            return cls(method)
        except ValueError:
            raise ValueError(f"Unknown priority method: {method}") from None


class PriorityStrategy(Generic[T]):
    """
    Decides which of two items comes out of the heap first.

    Subclasses only provide the raw three-way comparison; equal raw priority is always
    resolved by arrival order, so the resulting relation never reports two distinct items
    as equal.
    """

    method: CheckPriorityMethod

    def compare(self, a: T, b: T) -> int:
        raise NotImplementedError

    def has_higher_priority(self, higher: T, lower: T) -> bool:
        result = self.compare(higher, lower)
        if result > 0:
            return True
        elif result < 0:
            return False
        else:
            return higher.arrival_sequence < lower.arrival_sequence

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class _NaturalPriority(PriorityStrategy[T]):
    def __init__(self, key: KeyFunc | None = None):
        self.key = key

    def _values(self, a: T, b: T) -> tuple[Any, Any]:
        if self.key is None:
            return a, b
        return self.key(a), self.key(b)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"


class GreaterPriority(_NaturalPriority[T]):
    method = CheckPriorityMethod.GREATER

    def compare(self, a: T, b: T) -> int:
        x, y = self._values(a, b)
        if x > y:
            return 1
        elif x < y:
            return -1
        return 0


class LessPriority(_NaturalPriority[T]):
    method = CheckPriorityMethod.LESS

    def compare(self, a: T, b: T) -> int:
        x, y = self._values(a, b)
        if x < y:
            return 1
        elif x > y:
            return -1
        return 0


class ComparerPriority(PriorityStrategy[T]):
    method = CheckPriorityMethod.CUSTOM

    def __init__(self, comparer: Comparer):
        self.comparer = comparer

    def compare(self, a: T, b: T) -> int:
        return self.comparer(a, b)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(comparer={self.comparer!r})"


def make_strategy(
    method: CheckPriorityMethod | int | str = CheckPriorityMethod.GREATER,
    comparer: Comparer | None = None,
    key: KeyFunc | None = None,
) -> PriorityStrategy:
    """
    Build the strategy a `Heap` compares with.

    An unknown `method` raises `ValueError` rather than falling back to GREATER, and
    CUSTOM without a `comparer` raises as well.
    """
    method = CheckPriorityMethod.parse(method)
    if method is CheckPriorityMethod.CUSTOM:
        if comparer is None:
            raise ValueError("CUSTOM priority method requires a comparer")
        if key is not None:
            logger.warning("key is ignored by the CUSTOM priority method")
        return ComparerPriority(comparer)
    if comparer is not None:
        logger.warning(f"comparer is ignored by the {method.name} priority method")
    if method is CheckPriorityMethod.GREATER:
        return GreaterPriority(key)
    return LessPriority(key)
