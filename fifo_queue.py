from collections import namedtuple

from errors import PolicyStructuralViolation

FifoRecord = namedtuple('FifoRecord', ['page', 'frame'])


class FifoOrderQueue:
    """Bounded first-in first-out queue of page loads.

    Backed by a fixed ring of ``capacity`` slots; callers only see
    enqueue/dequeue/is_empty/is_full.  Overflowing or draining past empty
    raises PolicyStructuralViolation instead of dropping or inventing
    records.
    """

    def __init__(self, capacity):
        self.capacity = capacity
        self._slots = [None] * capacity
        self._head = 0
        self._size = 0

    def __len__(self):
        return self._size

    def __iter__(self):
        for i in range(self._size):
            yield self._slots[(self._head + i) % self.capacity]

    def is_empty(self):
        return self._size == 0

    def is_full(self):
        return self._size == self.capacity

    def enqueue(self, record):
        if self.is_full():
            raise PolicyStructuralViolation(
                f"FIFO queue is full ({self.capacity} records), cannot enqueue {record}"
            )
        tail = (self._head + self._size) % self.capacity
        self._slots[tail] = record
        self._size += 1

    def dequeue(self):
        if self.is_empty():
            raise PolicyStructuralViolation("Dequeue from an empty FIFO queue")
        record = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._size -= 1
        return record
