import pytest
from ..item import HeapNode
from ..priority import (
    CheckPriorityMethod,
    ComparerPriority,
    GreaterPriority,
    LessPriority,
    make_strategy,
)


class Task(HeapNode):
    def __init__(self, priority: int, sequence: int):
        super().__init__()
        self.priority = priority
        self.arrival_sequence = sequence


def by_priority(task: Task) -> int:
    return task.priority


def test_greater():
    strategy = GreaterPriority(key=by_priority)
    assert strategy.has_higher_priority(Task(5, 2), Task(3, 1))
    assert not strategy.has_higher_priority(Task(3, 1), Task(5, 2))


def test_less():
    strategy = LessPriority(key=by_priority)
    assert strategy.has_higher_priority(Task(3, 2), Task(5, 1))
    assert not strategy.has_higher_priority(Task(5, 1), Task(3, 2))


def test_comparer():
    strategy = ComparerPriority(lambda a, b: b.priority - a.priority)
    assert strategy.has_higher_priority(Task(1, 2), Task(7, 1))
    assert not strategy.has_higher_priority(Task(7, 1), Task(1, 2))


@pytest.mark.parametrize(
    "strategy",
    [
        GreaterPriority(key=by_priority),
        LessPriority(key=by_priority),
        ComparerPriority(lambda a, b: 0),
    ],
)
def test_tie_break_by_arrival(strategy):
    early, late = Task(4, 1), Task(4, 2)
    assert strategy.has_higher_priority(early, late)
    assert not strategy.has_higher_priority(late, early)
    assert not strategy.has_higher_priority(early, early)


@pytest.mark.parametrize(
    "method, expected",
    [
        (CheckPriorityMethod.LESS, CheckPriorityMethod.LESS),
        (1, CheckPriorityMethod.CUSTOM),
        (2, CheckPriorityMethod.GREATER),
        ("less", CheckPriorityMethod.LESS),
        ("Greater", CheckPriorityMethod.GREATER),
    ],
)
def test_parse_method(method, expected):
    assert CheckPriorityMethod.parse(method) is expected


@pytest.mark.parametrize("method", [0, 4, "max", ""])
def test_parse_unknown_method(method):
    with pytest.raises(ValueError):
        CheckPriorityMethod.parse(method)


def test_make_strategy():
    assert isinstance(make_strategy(), GreaterPriority)
    assert isinstance(make_strategy("less"), LessPriority)
    comparer = lambda a, b: 0  # noqa: E731
    strategy = make_strategy(CheckPriorityMethod.CUSTOM, comparer)
    assert isinstance(strategy, ComparerPriority)
    assert strategy.comparer is comparer
    assert strategy.method is CheckPriorityMethod.CUSTOM


def test_custom_requires_comparer():
    with pytest.raises(ValueError):
        make_strategy(CheckPriorityMethod.CUSTOM)


def test_ignored_comparer_warns(log_messages):
    strategy = make_strategy(CheckPriorityMethod.LESS, comparer=lambda a, b: 0)
    assert isinstance(strategy, LessPriority)
    assert len(log_messages) == 1
    assert "comparer is ignored" in log_messages[0]


if __name__ == "__main__":
    test_tie_break_by_arrival(GreaterPriority(key=by_priority))
