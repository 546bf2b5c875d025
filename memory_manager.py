from replacement import FRAMES


class FrameStore:
    def __init__(self, backing_store, page_table, policy, num_frames=FRAMES):
        self.num_frames = num_frames
        self.page_size = backing_store.page_size
        self.backing_store = backing_store
        self.page_table = page_table
        self.policy = policy
        # Physical memory as one flat buffer, frame n starts at n * page_size
        self.memory = bytearray(num_frames * self.page_size)
        self.next_free = 0
        self.evictions = 0

    def has_free_frame(self):
        return self.next_free < self.num_frames

    def load(self, logical_page):
        """Bring logical_page into a frame on a page fault and return the frame."""
        if self.has_free_frame():
            frame_num = self.next_free
            self.next_free += 1
        else:
            frame_num = self.policy.select_victim()
            # The old owner loses its mapping before the frame is reused
            self.page_table.unmap_frame(frame_num)
            self.evictions += 1
        self.policy.on_allocate(frame_num)

        start = frame_num * self.page_size
        self.memory[start:start + self.page_size] = \
            self.backing_store.read_page(logical_page)
        self.page_table.map(logical_page, frame_num)
        return frame_num

    def read_byte(self, frame_num, offset):
        byte = self.memory[frame_num * self.page_size + offset]
        return byte - 256 if byte > 127 else byte

    def get_frame(self, frame_num):
        start = frame_num * self.page_size
        return bytes(self.memory[start:start + self.page_size])


class RunStats:
    def __init__(self):
        self.total_addresses = 0
        self.tlb_hits = 0
        self.page_faults = 0

    def record_tlb_hit(self):
        self.tlb_hits += 1

    def record_page_fault(self):
        self.page_faults += 1

    def record_address(self):
        self.total_addresses += 1

    @property
    def page_fault_rate(self):
        if self.total_addresses == 0:
            return 0.0
        return self.page_faults / self.total_addresses

    @property
    def tlb_hit_rate(self):
        if self.total_addresses == 0:
            return 0.0
        return self.tlb_hits / self.total_addresses

    def __str__(self):
        return (f"Number of Translated Addresses = {self.total_addresses}\n"
                f"Page Faults = {self.page_faults}\n"
                f"Page Fault Rate = {self.page_fault_rate:.3f}\n"
                f"TLB Hits = {self.tlb_hits}\n"
                f"TLB Hit Rate = {self.tlb_hit_rate:.3f}")
