import logging as log
from collections import namedtuple
from enum import Enum
from typing import Iterable, Iterator

from BackingStore import BackingStore
from PageTable import PageTable
from PhysicalMemory import PhysicalMemory, NUMBER_OF_PAGES, NUM_FRAMES, split_address, physical_address
from ReplacementPolicy import ReplacementPolicy, make_policy, Policy
from SimulatorError import EmptyInput
from TranslationLookasideBuffer import TranslationLookasideBuffer, TLB_SIZE


class Classification(Enum):
    TLB_HIT = "tlb hit"
    PAGE_HIT = "tlb miss, page hit"
    PAGE_FAULT = "tlb miss, page fault"


TranslationResult = namedtuple('TranslationResult', [
    'virtual_address', 'page_number', 'offset', 'classification', 'tlb_slot', 'frame_number', 'physical_address',
    'value'])


class Statistics:

    def __init__(self):
        self.total = 0
        self.page_faults = 0
        self.tlb_hits = 0

    @property
    def tlb_misses(self) -> int:
        return self.total - self.tlb_hits

    @property
    def page_hits(self) -> int:
        return self.tlb_misses - self.page_faults

    @property
    def page_fault_rate(self) -> float:
        if self.total == 0:
            raise EmptyInput()
        return self.page_faults / self.total

    @property
    def tlb_hit_rate(self) -> float:
        if self.total == 0:
            raise EmptyInput()
        return self.tlb_hits / self.total


class Translator:
    """Translates logical addresses one at a time through the TLB, the page table and, on a fault, the backing
    store. Owns every piece of simulated state; nothing is shared between translators.

    With strict_tlb the TLB entry of a page evicted from the page table is invalidated too. Without it (the
    default) the entry survives, and a later lookup of that page hits the TLB and reads whatever page now occupies
    the frame."""

    def __init__(self, backing_store: BackingStore, policy=Policy.FIFO, num_frames: int = NUM_FRAMES,
                 tlb_size: int = TLB_SIZE, strict_tlb: bool = False):
        self.backing_store = backing_store
        self.memory = PhysicalMemory(num_frames)
        self.page_table = PageTable(NUMBER_OF_PAGES, num_frames)
        self.tlb = TranslationLookasideBuffer(tlb_size)
        if isinstance(policy, ReplacementPolicy):
            self.policy = policy
        else:
            self.policy = make_policy(policy, num_frames)
        self.strict_tlb = strict_tlb
        self.stats = Statistics()

    @property
    def statistics(self) -> Statistics:
        return self.stats

    def translate(self, address: int) -> TranslationResult:
        va, page_number, offset = split_address(address)

        tlb_slot = self.tlb.index_of_page_in_table(page_number)
        if tlb_slot != -1:  # hit
            classification = Classification.TLB_HIT
            frame_number = self.tlb.get_frame_number(tlb_slot)
            self.stats.tlb_hits += 1
        else:  # miss
            frame_number = self.page_table.lookup(page_number)
            if frame_number is not None:
                classification = Classification.PAGE_HIT
            else:
                classification = Classification.PAGE_FAULT
                frame_number = self.handle_page_fault(page_number)
                self.stats.page_faults += 1
            tlb_slot = self.tlb.insert(page_number, frame_number)
            log.debug(f"tlb[{tlb_slot}] = page {page_number} -> frame {frame_number}")

        self.policy.access(self.memory, frame_number)
        self.stats.total += 1
        return TranslationResult(va, page_number, offset, classification, tlb_slot, frame_number,
                                 physical_address(frame_number, offset), self.memory.read(frame_number, offset))

    def handle_page_fault(self, page_number: int) -> int:
        """loads 'page_number' into a victim frame and maps it; returns the frame number"""
        data = self.backing_store.load(page_number)
        victim_frame = self.policy.select_victim(self.memory)
        evicted_page = self.page_table.map(page_number, victim_frame)
        self.memory.write(victim_frame, data)
        if evicted_page is not None:
            log.debug(f"page fault on page {page_number}: evicted page {evicted_page} from frame {victim_frame}")
            if self.strict_tlb:
                self.tlb.invalidate(evicted_page)
        else:
            log.debug(f"page fault on page {page_number}: loaded into frame {victim_frame}")
        return victim_frame

    def translate_all(self, addresses: Iterable[int]) -> Iterator[TranslationResult]:
        for address in addresses:
            yield self.translate(address)
