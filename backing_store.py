from errors import BackingStoreUnavailable

PAGE_SIZE = 256
PAGES = 256
LOGICAL_MEMORY_SIZE = PAGES * PAGE_SIZE


class BackingStore:
    def __init__(self, data, page_size=PAGE_SIZE, num_pages=PAGES):
        self.page_size = page_size
        self.num_pages = num_pages
        if len(data) < page_size * num_pages:
            raise BackingStoreUnavailable(
                f"Backing store holds {len(data)} bytes, "
                f"expected {page_size * num_pages}")
        self.store = bytes(data[:page_size * num_pages])

    @classmethod
    def from_file(cls, filename, page_size=PAGE_SIZE, num_pages=PAGES):
        try:
            with open(filename, 'rb') as f:
                data = f.read(page_size * num_pages)
        except OSError as e:
            raise BackingStoreUnavailable(
                f"Cannot read backing store {filename}: {e}") from e
        return cls(data, page_size=page_size, num_pages=num_pages)

    def read_page(self, page_num):
        # 256 byte page starting at page_num * 256
        start = page_num * self.page_size
        return self.store[start:start + self.page_size]
