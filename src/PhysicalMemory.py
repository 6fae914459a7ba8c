from collections import namedtuple

from bitarray import bitarray

from SimulatorError import InvalidAddress

PAGE_SIZE = 256  # bytes
FRAME_SIZE = PAGE_SIZE  # bytes
NUM_FRAMES = 128
NUMBER_OF_PAGES = 256
PHYSICAL_MEMORY_SIZE = NUM_FRAMES * FRAME_SIZE  # = 32768 bytes
VIRTUAL_ADDRESS_SIZE = 16  # bits
PAGE_NUMBER_BITS = 8  # bits
OFFSET_BITS = 8  # bits
MAX_VIRTUAL_ADDRESS = (1 << VIRTUAL_ADDRESS_SIZE) - 1

LogicalAddress = namedtuple('LogicalAddress', ['virtual_address', 'page_number', 'offset'])


class PhysicalMemory:

    def __init__(self, num_frames: int = NUM_FRAMES):
        if not 1 <= num_frames <= NUMBER_OF_PAGES:
            raise ValueError(f"number of frames must be between 1 and {NUMBER_OF_PAGES}, got {num_frames}")
        self.PM = [bytearray(FRAME_SIZE) for _ in range(num_frames)]
        self.BM = bitarray(num_frames)
        self.BM.setall(0)
        self.LRU = [0] * num_frames

    @property
    def num_frames(self) -> int:
        return len(self.PM)

    def read(self, frame_number: int, offset: int) -> int:
        """returns the byte stored at 'offset' of frame 'frame_number' as a signed 8 bit value"""
        return to_signed_byte(self.PM[frame_number][offset])

    def write(self, frame_number: int, data: bytes) -> None:
        """replaces the whole content of the frame with 'data' and marks the frame as occupied"""
        if len(data) != FRAME_SIZE:
            raise ValueError(f"frame {frame_number} expects {FRAME_SIZE} bytes, got {len(data)}")
        self.PM[frame_number][:] = data
        self.BM[frame_number] = True

    def touch(self, frame_number: int, time: int) -> None:
        self.LRU[frame_number] = time

    def last_used(self, frame_number: int) -> int:
        return self.LRU[frame_number]

    def is_occupied(self, frame_number: int) -> bool:
        return bool(self.BM[frame_number])

    def occupied_frames(self) -> int:
        return self.BM.count(1)

    def frame_data(self, frame_number: int) -> bytes:
        return bytes(self.PM[frame_number])


def to_signed_byte(value: int) -> int:
    return value - 256 if value > 127 else value


def frame_number_to_physical_address(frame_number: int) -> int:
    """converts frame number to the physical address of the first byte of the frame"""
    return frame_number << OFFSET_BITS


def physical_address(frame_number: int, offset: int) -> int:
    return frame_number_to_physical_address(frame_number) | offset


def extract(value: int, begin: int, end: int) -> int:
    """extracts [begin, end) bits from value"""
    mask = (1 << (end - begin)) - 1
    return (value >> begin) & mask


def va_to_page_and_offset(va: int) -> (int, int):
    """returns a tuple of (p, w) where p: page number taken from the high byte of the virtual address,
	w: offset in page"""
    w = extract(va, 0, OFFSET_BITS)
    p = extract(va, OFFSET_BITS, OFFSET_BITS + PAGE_NUMBER_BITS)
    return p, w


def split_address(va: int) -> LogicalAddress:
    """raises InvalidAddress for values outside 0..MAX_VIRTUAL_ADDRESS instead of masking them"""
    if not 0 <= va <= MAX_VIRTUAL_ADDRESS:
        raise InvalidAddress(str(va))
    page_number, offset = va_to_page_and_offset(va)
    return LogicalAddress(va, page_number, offset)
