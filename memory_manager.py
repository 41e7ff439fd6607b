from errors import PolicyStructuralViolation
from page_table import EMPTY


class PhysicalMemory:
    def __init__(self, num_frames):
        self.num_frames = num_frames
        # Each frame stores a page number or EMPTY if free
        self.frames = [EMPTY] * num_frames

    def find_free_frame(self):
        for i, page in enumerate(self.frames):
            if page is EMPTY:
                return i
        return None

    def allocate_frame(self, frame_num, page_num):
        self.frames[frame_num] = page_num

    def free_frame(self, frame_num):
        self.frames[frame_num] = EMPTY

    def get_frame_info(self, frame_num):
        return self.frames[frame_num]

    def occupied_frames(self):
        return [i for i, page in enumerate(self.frames) if page is not EMPTY]

    def is_full(self):
        return self.find_free_frame() is None


class AccessCounters:
    """Per-frame touch counts, restarted each time a frame is reloaded."""

    def __init__(self, num_frames):
        self.counts = [0] * num_frames

    def __len__(self):
        return len(self.counts)

    def __getitem__(self, frame_num):
        return self.counts[frame_num]

    def record_load(self, frame_num):
        # The load itself counts as the first access
        self.counts[frame_num] = 1

    def record_hit(self, frame_num):
        self.counts[frame_num] += 1

    def _select(self, better):
        if not self.counts:
            raise PolicyStructuralViolation("No access counters to select a victim from")
        victim_frame = 0
        for frame_num in range(1, len(self.counts)):
            # Strict comparison keeps the lowest frame on ties
            if better(self.counts[frame_num], self.counts[victim_frame]):
                victim_frame = frame_num
        return victim_frame

    def least_used(self):
        return self._select(lambda count, best: count < best)

    def most_used(self):
        return self._select(lambda count, best: count > best)


class Statistics:
    def __init__(self):
        self.page_faults = 0
        self.hits = 0
        self.evictions = 0

    def record_page_fault(self, evicted=False):
        self.page_faults += 1
        if evicted:
            self.evictions += 1

    def record_hit(self):
        self.hits += 1

    @property
    def references(self):
        return self.page_faults + self.hits

    def __str__(self):
        return (f"References: {self.references}\n"
                f"Page Faults: {self.page_faults}\n"
                f"Page Hits: {self.hits}\n"
                f"Evictions: {self.evictions}")
