from enum import Enum

from errors import PolicyStructuralViolation, UnsupportedPolicy
from fifo_queue import FifoOrderQueue, FifoRecord
from memory_manager import AccessCounters


class ReplacementAlgorithm(Enum):
    FIFO = 'FIFO'
    LRU = 'LRU'
    MFU = 'MFU'

    @classmethod
    def from_name(cls, algorithm):
        if isinstance(algorithm, cls):
            return algorithm
        if isinstance(algorithm, str):
            try:
                return cls[algorithm.strip().upper()]
            except KeyError:
                pass
        raise UnsupportedPolicy(f"Unknown algorithm: {algorithm!r}")


ALGORITHMS = [algorithm.value for algorithm in ReplacementAlgorithm]


class FifoPolicy:
    """Evict the resident page that was loaded earliest."""

    algorithm = ReplacementAlgorithm.FIFO

    def __init__(self, frame_count):
        self.queue = FifoOrderQueue(frame_count)

    def on_load(self, page_num, frame_num):
        self.queue.enqueue(FifoRecord(page_num, frame_num))

    def on_hit(self, frame_num):
        pass

    def select_victim(self, page_table, physical_memory):
        record = self.queue.dequeue()
        # Resolve the frame from the page's current entry, not the record
        entry = page_table.entries[record.page]
        if not entry.resident:
            raise PolicyStructuralViolation(
                f"FIFO queue named page {record.page} which is not resident"
            )
        return entry.frame_number


class CounterPolicy:
    """Base for policies that pick a victim from per-frame access counters."""

    algorithm = None

    def __init__(self, frame_count):
        self.counters = AccessCounters(frame_count)

    def on_load(self, page_num, frame_num):
        self.counters.record_load(frame_num)

    def on_hit(self, frame_num):
        self.counters.record_hit(frame_num)

    def select_victim(self, page_table, physical_memory):
        if self.counters is None or len(self.counters) != physical_memory.num_frames:
            raise PolicyStructuralViolation(
                f"{self.algorithm.value} counters do not cover all {physical_memory.num_frames} frames"
            )
        return self.pick(self.counters)

    def pick(self, counters):
        raise NotImplementedError


class LruPolicy(CounterPolicy):
    """Evict the frame touched the fewest times since its page was loaded.

    Counters never decay, so an old but busy page outranks a recent but
    idle one.  This is not a recency stack.
    """

    algorithm = ReplacementAlgorithm.LRU

    def pick(self, counters):
        return counters.least_used()


class MfuPolicy(CounterPolicy):
    """Evict the frame touched the most times since its page was loaded."""

    algorithm = ReplacementAlgorithm.MFU

    def pick(self, counters):
        return counters.most_used()


def make_policy(algorithm, frame_count):
    algorithm = ReplacementAlgorithm.from_name(algorithm)
    if algorithm == ReplacementAlgorithm.FIFO:
        return FifoPolicy(frame_count)
    elif algorithm == ReplacementAlgorithm.LRU:
        return LruPolicy(frame_count)
    return MfuPolicy(frame_count)
