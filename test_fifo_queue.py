import pytest

from errors import PolicyStructuralViolation
from fifo_queue import FifoOrderQueue, FifoRecord


def test_dequeues_in_load_order():
    queue = FifoOrderQueue(3)
    for page in (4, 7, 1):
        queue.enqueue(FifoRecord(page, page % 3))
    assert queue.is_full()
    assert [queue.dequeue().page for _ in range(3)] == [4, 7, 1]
    assert queue.is_empty()


def test_wraps_around():
    queue = FifoOrderQueue(2)
    queue.enqueue(FifoRecord(1, 0))
    queue.enqueue(FifoRecord(2, 1))
    assert queue.dequeue() == FifoRecord(1, 0)
    queue.enqueue(FifoRecord(3, 0))
    assert list(queue) == [FifoRecord(2, 1), FifoRecord(3, 0)]
    assert len(queue) == 2


def test_enqueue_when_full_raises():
    queue = FifoOrderQueue(1)
    queue.enqueue(FifoRecord(1, 0))
    with pytest.raises(PolicyStructuralViolation):
        queue.enqueue(FifoRecord(2, 0))
    assert list(queue) == [FifoRecord(1, 0)]


def test_dequeue_when_empty_raises():
    with pytest.raises(PolicyStructuralViolation):
        FifoOrderQueue(2).dequeue()


def test_zero_capacity():
    queue = FifoOrderQueue(0)
    assert queue.is_empty()
    assert queue.is_full()
    with pytest.raises(PolicyStructuralViolation):
        queue.enqueue(FifoRecord(0, 0))
