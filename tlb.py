TLB_SIZE = 16


class TLBEntry:
    def __init__(self, logical_page=0, frame_num=0):
        self.logical_page = logical_page
        self.frame_num = frame_num


class TLB:
    """
    Translation lookaside buffer kept as a circular array. The oldest entry
    is overwritten once more than `size` insertions have been made.

    Entries are never invalidated when a frame is reused; a stale mapping
    stays visible until it is overwritten.
    """

    def __init__(self, size=TLB_SIZE):
        self.size = size
        self.entries = [TLBEntry() for _ in range(size)]
        self.insert_count = 0

    def lookup(self, logical_page):
        # Scan valid slots from oldest to newest, first match wins
        for i in range(max(self.insert_count - self.size, 0), self.insert_count):
            entry = self.entries[i % self.size]
            if entry.logical_page == logical_page:
                return entry.frame_num
        return None

    def insert(self, logical_page, frame_num):
        entry = self.entries[self.insert_count % self.size]
        entry.logical_page = logical_page
        entry.frame_num = frame_num
        self.insert_count += 1

    def __len__(self):
        return min(self.insert_count, self.size)
