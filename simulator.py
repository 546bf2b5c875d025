from argparse import ArgumentParser
from collections import namedtuple
from enum import Enum
import sys

from backing_store import BackingStore
from errors import InputUnavailable, InvalidAddress, SimulatorError
from memory_manager import FrameStore, RunStats
from page_table import PageTable
from replacement import FRAMES, make_policy
from tlb import TLB, TLB_SIZE

OFFSET_BITS = 8
OFFSET_MASK = 0xFF
PAGE_MASK = 0xFF


class Outcome(Enum):
    TLB_HIT = 'TLB hit'
    PAGE_HIT = 'TLB miss, page table hit'
    PAGE_FAULT = 'page fault'


Translation = namedtuple(
    'Translation', ['logical_address', 'physical_address', 'value', 'outcome'])


class VirtualMemorySimulator:

    def __init__(self, backing_store, algorithm='FIFO', num_frames=FRAMES,
                 tlb_size=TLB_SIZE):
        self.policy = make_policy(algorithm, num_frames)
        self.algorithm = self.policy.name
        self.page_table = PageTable()
        self.tlb = TLB(size=tlb_size)
        self.frame_store = FrameStore(backing_store, self.page_table,
                                      self.policy, num_frames=num_frames)
        self.stats = RunStats()
        self.clock = 0

    def parse_address(self, address):
        page_num = (address >> OFFSET_BITS) & PAGE_MASK  # bits 8-15
        offset = address & OFFSET_MASK  # lower 8 bits
        return page_num, offset

    def translate(self, address):
        if address < 0:
            raise InvalidAddress(f"Negative logical address: {address}")

        page_num, offset = self.parse_address(address)

        frame_num = self.tlb.lookup(page_num)
        if frame_num is not None:
            self.stats.record_tlb_hit()
            outcome = Outcome.TLB_HIT
        else:
            frame_num = self.page_table.get(page_num)
            if frame_num is not None:
                outcome = Outcome.PAGE_HIT
            else:
                frame_num = self.handle_page_fault(page_num)
                outcome = Outcome.PAGE_FAULT
            self.tlb.insert(page_num, frame_num)

        self.policy.on_access(frame_num, self.clock)
        self.clock += 1

        physical_address = (frame_num << OFFSET_BITS) | offset
        value = self.frame_store.read_byte(frame_num, offset)
        self.stats.record_address()
        return Translation(address, physical_address, value, outcome)

    def handle_page_fault(self, page_num):
        self.stats.record_page_fault()
        return self.frame_store.load(page_num)

    def run(self, addresses):
        for address in addresses:
            yield self.translate(address)

    def run_simulation(self, filename, verbose=True):
        addresses = read_addresses(filename)

        print(f"\n{'='*60}")
        print(f"Running {self.algorithm} algorithm on {filename}")
        print(f"{'='*60}")

        for result in self.run(addresses):
            if verbose:
                print(f"Virtual address: {result.logical_address} "
                      f"Physical address: {result.physical_address} "
                      f"Value: {result.value}")

        print(f"\nResults:")
        print(self.stats)
        print(f"{'='*60}\n")

        return self.stats


def read_addresses(filename):
    """
    Open filename and return a lazy iterator over its addresses, one per
    non-blank line. The file is opened immediately so a missing input fails
    before any address is translated.
    """
    try:
        f = open(filename, 'r')
    except OSError as e:
        raise InputUnavailable(f"Cannot open input file {filename}: {e}") from e
    return _parse_addresses(f, filename)


def _parse_addresses(f, filename):
    with f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                address = int(line)
            except ValueError:
                raise InvalidAddress(
                    f"{filename}:{line_num}: not an address: {line!r}") from None
            if address < 0:
                raise InvalidAddress(
                    f"{filename}:{line_num}: negative address {address}")
            yield address


parser = ArgumentParser(
    prog='virtmem',
    description='Translate logical addresses through a TLB and page table')
parser.add_argument('backing_store', help='binary file with the page contents')
parser.add_argument('input', help='text file of logical addresses, one per line')
parser.add_argument(
    '-p', '--policy', required=True,
    help='page replacement policy: FIFO (0) or LRU (1)')
parser.add_argument(
    '-q', '--quiet', action='store_true',
    help='only print the final statistics')


def main(argv=None):
    args = parser.parse_args(argv)

    try:
        backing_store = BackingStore.from_file(args.backing_store)
        simulator = VirtualMemorySimulator(backing_store, algorithm=args.policy)
        simulator.run_simulation(args.input, verbose=not args.quiet)
    except (SimulatorError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
