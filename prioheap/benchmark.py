import random
import statistics
import timeit

from .heap import Heap
from .item import HeapNode
from .priority import CheckPriorityMethod


class Job(HeapNode):
    def __init__(self, priority: int):
        super().__init__()
        self.priority = priority

    def __repr__(self) -> str:
        return f"Job({self.priority}, position={self.position}, seq={self.arrival_sequence})"


def benchmark(
    n_items: int = 10000,
    n_warmup: int = 2,
    n_step: int = 10,
    method: CheckPriorityMethod | str = CheckPriorityMethod.GREATER,
    seed: int = 0,
) -> tuple[float, float]:
    """
    Time one round of: enqueue `n_items` jobs, re-prioritise a quarter of them, remove
    another quarter, then drain the heap.
    """
    method = CheckPriorityMethod.parse(method)
    rng = random.Random(seed)
    priorities = [rng.randrange(n_items) for _ in range(n_items)]
    updates = [rng.randrange(n_items) for _ in range(n_items // 4)]

    def comparer(a: Job, b: Job) -> int:
        return a.priority - b.priority

    def run():
        if method is CheckPriorityMethod.CUSTOM:
            heap: Heap[Job] = Heap(method, comparer=comparer)
        else:
            heap = Heap(method, key=lambda job: job.priority)
        jobs = [Job(p) for p in priorities]
        for job in jobs:
            heap.enqueue(job)
        for i, p in enumerate(updates):
            jobs[i].priority = p
            heap.enqueue(jobs[i])
        for job in jobs[len(updates) : 2 * len(updates)]:
            heap.remove(job)
        while heap.dequeue() is not None:
            pass

    for _ in range(n_warmup):
        run()

    times = timeit.repeat(run, number=1, repeat=n_step)
    mean = statistics.mean(times)
    std = statistics.stdev(times) if n_step > 1 else 0.0

    return mean, std
