import pytest

from errors import InvalidConfiguration, PolicyStructuralViolation
from memory_manager import AccessCounters, PhysicalMemory, Statistics
from page_table import EMPTY, PageTable


class TestPageTable:

    def test_entries_start_non_resident(self):
        table = PageTable(4)
        for entry in table.entries:
            assert not entry.resident
            assert entry.frame_number is EMPTY
            assert entry.last_frame is EMPTY

    def test_load_and_invalidate(self):
        table = PageTable(4)
        entry = table.get_entry(2)
        entry.load(1)
        assert entry.resident
        assert table.resident_pages() == [2]
        entry.invalidate()
        assert not entry.resident
        assert entry.last_frame == 1

    @pytest.mark.parametrize('page', [-1, 4, 10])
    def test_out_of_range_page(self, page):
        with pytest.raises(InvalidConfiguration):
            PageTable(4).get_entry(page)

    @pytest.mark.parametrize('page', ['1', 1.0, True, None])
    def test_non_integer_page(self, page):
        with pytest.raises(InvalidConfiguration):
            PageTable(4).get_entry(page)

    def test_empty_table_rejects_everything(self):
        with pytest.raises(InvalidConfiguration):
            PageTable(0).get_entry(0)


class TestPhysicalMemory:

    def test_find_free_frame_scans_left_to_right(self):
        memory = PhysicalMemory(3)
        assert memory.find_free_frame() == 0
        memory.allocate_frame(0, 7)
        memory.allocate_frame(2, 8)
        assert memory.find_free_frame() == 1
        memory.allocate_frame(1, 9)
        assert memory.find_free_frame() is None
        assert memory.is_full()

    def test_free_frame(self):
        memory = PhysicalMemory(2)
        memory.allocate_frame(1, 5)
        assert memory.occupied_frames() == [1]
        memory.free_frame(1)
        assert memory.get_frame_info(1) is EMPTY
        assert memory.occupied_frames() == []

    def test_zero_frames_is_always_full(self):
        assert PhysicalMemory(0).is_full()


class TestAccessCounters:

    def test_load_restarts_count(self):
        counters = AccessCounters(2)
        counters.record_load(0)
        counters.record_hit(0)
        counters.record_hit(0)
        assert counters[0] == 3
        counters.record_load(0)
        assert counters[0] == 1

    def test_least_used_breaks_ties_low(self):
        counters = AccessCounters(3)
        for frame in range(3):
            counters.record_load(frame)
        assert counters.least_used() == 0
        counters.record_hit(0)
        assert counters.least_used() == 1

    def test_most_used_breaks_ties_low(self):
        counters = AccessCounters(3)
        for frame in range(3):
            counters.record_load(frame)
        assert counters.most_used() == 0
        counters.record_hit(2)
        assert counters.most_used() == 2

    def test_no_counters(self):
        with pytest.raises(PolicyStructuralViolation):
            AccessCounters(0).least_used()


def test_statistics():
    stats = Statistics()
    stats.record_page_fault()
    stats.record_page_fault(evicted=True)
    stats.record_hit()
    assert stats.page_faults == 2
    assert stats.evictions == 1
    assert stats.hits == 1
    assert stats.references == 3
    assert str(stats) == "References: 3\nPage Faults: 2\nPage Hits: 1\nEvictions: 1"
