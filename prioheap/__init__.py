import importlib.metadata

__version__ = importlib.metadata.version("prioheap")

from .item import ABSENT, HeapItem, HeapNode
from .priority import (
    CheckPriorityMethod,
    ComparerPriority,
    GreaterPriority,
    LessPriority,
    PriorityStrategy,
    make_strategy,
)
from .heap import Heap
from .benchmark import benchmark

from loguru import logger

# silent unless the application calls logger.enable("prioheap")
logger.disable("prioheap")
