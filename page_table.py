from errors import InvalidConfiguration

EMPTY = None


class PageTableEntry:
    def __init__(self, page_number):
        self.page_number = page_number
        self.frame_number = EMPTY  # EMPTY means not in memory
        self.last_frame = EMPTY  # Kept after eviction for display

    @property
    def resident(self):
        return self.frame_number is not EMPTY

    def load(self, frame_number):
        self.frame_number = frame_number
        self.last_frame = frame_number

    def invalidate(self):
        self.frame_number = EMPTY


class PageTable:
    def __init__(self, page_count):
        self.page_count = page_count
        self.entries = [PageTableEntry(i) for i in range(page_count)]

    def check_page(self, page_number):
        if isinstance(page_number, bool) or not isinstance(page_number, int):
            raise InvalidConfiguration(f"Page number must be an integer, got {page_number!r}")
        if page_number < 0 or page_number >= self.page_count:
            raise InvalidConfiguration(
                f"Page number {page_number} out of range (0 .. {self.page_count - 1})"
            )

    def get_entry(self, page_number):
        self.check_page(page_number)
        return self.entries[page_number]

    def resident_pages(self):
        return [entry.page_number for entry in self.entries if entry.resident]
