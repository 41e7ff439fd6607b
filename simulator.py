import sys

from data_loader import load_test_data
from errors import InvalidConfiguration, PolicyStructuralViolation, UnsupportedPolicy
from memory_manager import PhysicalMemory, Statistics
from page_table import PageTable
from replacement import ALGORITHMS, FifoPolicy, ReplacementAlgorithm, make_policy


def _check_count(value, what):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(f"{what} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidConfiguration(f"{what} must be non-negative, got {value}")


class PageTableEngine:

    def __init__(self, page_count, frame_count, algorithm='FIFO', verbose=False):
        _check_count(page_count, 'page_count')
        _check_count(frame_count, 'frame_count')
        self.page_count = page_count
        self.frame_count = frame_count
        self.policy = make_policy(algorithm, frame_count)
        self.page_table = PageTable(page_count)
        self.physical_memory = PhysicalMemory(frame_count)
        self.stats = Statistics()

        if verbose:
            print(f"Created page_table{{page_count={page_count}, frame_count={frame_count}, "
                  f"replacement_algorithm={self.algorithm_name}}}")

    @property
    def algorithm(self):
        return self.policy.algorithm

    @property
    def algorithm_name(self):
        return self.policy.algorithm.value

    @property
    def fault_count(self):
        return self.stats.page_faults

    def access(self, page_num):
        """Reference one page; returns True on a hit, False on a page fault."""
        entry = self.page_table.get_entry(page_num)

        if entry.resident:
            self.policy.on_hit(entry.frame_number)
            self.stats.record_hit()
            return True

        self.handle_page_fault(page_num)
        return False

    def handle_page_fault(self, page_num):
        if self.frame_count == 0:
            # Nowhere to put the page: every reference faults
            self.stats.record_page_fault()
            return

        evicted = self.physical_memory.is_full()
        if evicted:
            frame_num = self.select_victim_page()
            self.evict_page(frame_num)
        else:
            frame_num = self.physical_memory.find_free_frame()

        self.place_page(page_num, frame_num)
        self.stats.record_page_fault(evicted=evicted)

    def select_victim_page(self):
        frame_num = self.policy.select_victim(self.page_table, self.physical_memory)
        if not 0 <= frame_num < self.frame_count:
            raise PolicyStructuralViolation(
                f"{self.algorithm_name} picked frame {frame_num} outside 0 .. {self.frame_count - 1}"
            )
        return frame_num

    def evict_page(self, frame_num):
        victim_page = self.physical_memory.get_frame_info(frame_num)
        if victim_page is None:
            raise PolicyStructuralViolation(f"Victim frame {frame_num} holds no page")
        self.page_table.entries[victim_page].invalidate()
        self.physical_memory.free_frame(frame_num)
        return victim_page

    def place_page(self, page_num, frame_num):
        # Policy hook runs before either table is written
        self.policy.on_load(page_num, frame_num)
        self.physical_memory.allocate_frame(frame_num, page_num)
        self.page_table.entries[page_num].load(frame_num)

    def run(self, reference):
        for page_num in reference:
            self.access(page_num)
        return self.stats

    # Read-only queries

    def is_resident(self, page_num):
        return self.page_table.get_entry(page_num).resident

    def frame_of(self, page_num):
        return self.page_table.get_entry(page_num).frame_number

    def last_frame_of(self, page_num):
        return self.page_table.get_entry(page_num).last_frame

    def occupant(self, frame_num):
        if not 0 <= frame_num < self.frame_count:
            raise InvalidConfiguration(
                f"Frame number {frame_num} out of range (0 .. {self.frame_count - 1})"
            )
        return self.physical_memory.get_frame_info(frame_num)

    def resident_pages(self):
        return self.page_table.resident_pages()

    def rows(self):
        """(page, last frame or -1, valid bit) for every page."""
        rows = []
        for entry in self.page_table.entries:
            frame = -1 if entry.last_frame is None else entry.last_frame
            rows.append((entry.page_number, frame, int(entry.resident)))
        return rows

    def check_invariants(self):
        """Raise PolicyStructuralViolation if the page and frame tables disagree."""
        resident = 0
        for entry in self.page_table.entries:
            if not entry.resident:
                continue
            resident += 1
            frame_num = entry.frame_number
            if not 0 <= frame_num < self.frame_count:
                raise PolicyStructuralViolation(
                    f"Page {entry.page_number} maps to missing frame {frame_num}"
                )
            if self.physical_memory.get_frame_info(frame_num) != entry.page_number:
                raise PolicyStructuralViolation(
                    f"Page {entry.page_number} maps to frame {frame_num}, "
                    f"which holds {self.physical_memory.get_frame_info(frame_num)}"
                )
        occupied = self.physical_memory.occupied_frames()
        if len(occupied) != resident:
            raise PolicyStructuralViolation(
                f"{resident} resident pages but {len(occupied)} occupied frames"
            )
        if resident > self.frame_count:
            raise PolicyStructuralViolation(
                f"{resident} resident pages exceed {self.frame_count} frames"
            )
        if isinstance(self.policy, FifoPolicy):
            self._check_fifo_queue()

    def _check_fifo_queue(self):
        queued = [record.page for record in self.policy.queue]
        for page_num in queued:
            if not self.page_table.entries[page_num].resident:
                raise PolicyStructuralViolation(f"FIFO queue holds non-resident page {page_num}")
        if len(queued) > self.frame_count or sorted(queued) != self.resident_pages():
            raise PolicyStructuralViolation(
                f"FIFO queue {queued} does not match resident pages {self.resident_pages()}"
            )

    def fifo_order(self):
        """Resident pages in load order (FIFO engines only)."""
        if not isinstance(self.policy, FifoPolicy):
            raise UnsupportedPolicy(f"{self.algorithm_name} keeps no load order")
        return [record.page for record in self.policy.queue]

    # Reporting

    def format_contents(self):
        lines = ["page frame | valid"]
        for page, frame, valid in self.rows():
            lines.append(f"{page:4d} {frame:5d} | {valid:5d}")
        return "\n".join(lines)

    def format_table(self):
        return (f"====== page table ======\n"
                f"Mode : {self.algorithm_name}\n"
                f"Page Faults : {self.fault_count}\n"
                f"{self.format_contents()}")

    def display(self):
        print(self.format_table())

    def display_contents(self):
        print(self.format_contents())


def run_scenario(scenario, algorithm='FIFO', verbose=False):
    engine = PageTableEngine(scenario.page_count, scenario.frame_count,
                             algorithm=algorithm, verbose=verbose)
    engine.run(scenario.reference)
    return engine


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print(f"usage: simulator.py <scenario-file> [{'|'.join(ALGORITHMS)} ...]", file=sys.stderr)
        return 2

    filename = argv[0]
    try:
        algorithms = [ReplacementAlgorithm.from_name(name) for name in argv[1:]] \
            or list(ReplacementAlgorithm)
        scenario = load_test_data(filename)
    except (InvalidConfiguration, UnsupportedPolicy) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    results = {}
    for algorithm in algorithms:
        print(f"\n{'='*60}")
        print(f"Running {algorithm.value} algorithm on {filename}")
        print(f"{'='*60}")
        engine = run_scenario(scenario, algorithm, verbose=True)
        engine.display()
        print(f"\nResults:")
        print(engine.stats)
        results[algorithm.value] = engine.stats

    print("\n" + "="*60)
    print("SUMMARY OF ALL RESULTS")
    print("="*60)
    print(f"{'Algorithm':<10} {'Page Faults':<15} {'Page Hits':<15} {'Evictions':<15}")
    print("-" * 60)
    for name, stats in results.items():
        print(f"{name:<10} {stats.page_faults:<15} {stats.hits:<15} {stats.evictions:<15}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
