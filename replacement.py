FRAMES = 64


class ReplacementPolicy:
    """
    Decides which frame to reclaim once every frame is occupied.

    The frame store calls on_allocate when a frame is handed to a page and
    the simulator calls on_access every time a frame is the target of a
    translation.
    """

    name = None

    def __init__(self, num_frames=FRAMES):
        self.num_frames = num_frames

    def on_allocate(self, frame_num):
        pass

    def on_access(self, frame_num, clock):
        pass

    def select_victim(self):
        raise NotImplementedError


class FIFOPolicy(ReplacementPolicy):
    name = 'FIFO'

    def __init__(self, num_frames=FRAMES):
        super().__init__(num_frames)
        self.queue = [0] * num_frames
        self.head = 0
        self.tail = num_frames - 1
        self.size = 0

    def on_allocate(self, frame_num):
        if self.size == self.num_frames:
            raise RuntimeError("FIFO queue is full")
        self.tail = (self.tail + 1) % self.num_frames
        self.queue[self.tail] = frame_num
        self.size += 1

    def select_victim(self):
        if self.size == 0:
            raise RuntimeError("No frames to evict")
        frame_num = self.queue[self.head]
        self.head = (self.head + 1) % self.num_frames
        self.size -= 1
        return frame_num

    def resident_order(self):
        """Frames from oldest to newest allocation."""
        return [self.queue[(self.head + i) % self.num_frames]
                for i in range(self.size)]


class LRUPolicy(ReplacementPolicy):
    name = 'LRU'

    def __init__(self, num_frames=FRAMES):
        super().__init__(num_frames)
        self.last_used = [-1] * num_frames

    def on_access(self, frame_num, clock):
        self.last_used[frame_num] = clock

    def select_victim(self):
        victim_frame = 0
        lru_time = self.last_used[0]
        # Strict comparison keeps the lowest frame number on ties
        for frame_num in range(1, self.num_frames):
            if self.last_used[frame_num] < lru_time:
                lru_time = self.last_used[frame_num]
                victim_frame = frame_num
        return victim_frame


POLICIES = {
    'FIFO': FIFOPolicy,
    'LRU': LRUPolicy,
    # numeric codes accepted by the original command line
    '0': FIFOPolicy,
    '1': LRUPolicy,
}


def make_policy(algorithm, num_frames=FRAMES):
    try:
        policy_class = POLICIES[str(algorithm).upper()]
    except KeyError:
        raise ValueError(f"Unknown algorithm: {algorithm}") from None
    return policy_class(num_frames)
