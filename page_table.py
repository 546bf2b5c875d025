PAGES = 256


class PageTableEntry:
    def __init__(self, virtual_page_num):
        self.virtual_page_num = virtual_page_num
        self.physical_page_num = None  # None means not in memory

    def is_valid(self):
        return self.physical_page_num is not None


class PageTable:
    def __init__(self, num_pages=PAGES):
        self.entries = [PageTableEntry(i) for i in range(num_pages)]

    def get_entry(self, virtual_page_num):
        return self.entries[virtual_page_num]

    def get(self, virtual_page_num):
        return self.entries[virtual_page_num].physical_page_num

    def map(self, virtual_page_num, frame_num):
        self.entries[virtual_page_num].physical_page_num = frame_num

    def unmap_frame(self, frame_num):
        """Clear whichever page currently owns frame_num. Returns that page or None."""
        for entry in self.entries:
            if entry.physical_page_num == frame_num:
                entry.physical_page_num = None
                return entry.virtual_page_num
        return None

    def mapped_pages(self):
        return {entry.virtual_page_num: entry.physical_page_num
                for entry in self.entries if entry.is_valid()}
