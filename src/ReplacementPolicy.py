from enum import Enum

from PhysicalMemory import PhysicalMemory
from SimulatorError import UnknownPolicy


class Policy(Enum):
    FIFO = "fifo"
    LRU = "lru"

    @classmethod
    def parse(cls, name: str) -> 'Policy':
        try:
            return cls(name.strip().lower())
        except (ValueError, AttributeError):
            raise UnknownPolicy(name) from None


class ReplacementPolicy:
    """Chooses which frame a faulting page is loaded into. The policy only decides on frames; installing and
    clearing page table entries is left to the caller."""

    def __init__(self, num_frames: int):
        self.num_frames = num_frames
        self.clock = 0

    def access(self, memory: PhysicalMemory, frame_number: int) -> int:
        """advances the logical clock and stamps 'frame_number' with it; called once per resolved address"""
        self.clock += 1
        memory.touch(frame_number, self.clock)
        return self.clock

    def select_victim(self, memory: PhysicalMemory) -> int:
        raise NotImplementedError


class FifoReplacement(ReplacementPolicy):

    def __init__(self, num_frames: int):
        super().__init__(num_frames)
        self.next_victim_frame = 0

    def select_victim(self, memory: PhysicalMemory) -> int:
        victim = self.next_victim_frame
        self.next_victim_frame = (self.next_victim_frame + 1) % self.num_frames
        return victim


class LruReplacement(ReplacementPolicy):

    def select_victim(self, memory: PhysicalMemory) -> int:
        # strict < keeps the lowest frame number on ties
        victim = 0
        for frame_number in range(1, self.num_frames):
            if memory.last_used(frame_number) < memory.last_used(victim):
                victim = frame_number
        return victim


POLICIES = {
    Policy.FIFO: FifoReplacement,
    Policy.LRU: LruReplacement,
}


def make_policy(policy, num_frames: int) -> ReplacementPolicy:
    """builds the replacement policy for 'policy', given either as a Policy or by name"""
    if not isinstance(policy, Policy):
        policy = Policy.parse(policy)
    return POLICIES[policy](num_frames)
