import logging as log

from PhysicalMemory import PAGE_SIZE, NUMBER_OF_PAGES
from SimulatorError import BackingStoreUnavailable, ShortRead

BACKING_STORE_FILE_NAME = "BACKING_STORE.bin"


class BackingStore:
    """Read-only view of the backing store: NUMBER_OF_PAGES pages of PAGE_SIZE bytes laid end to end, page p at
    offset p * PAGE_SIZE. The file is opened once and kept open until close()."""

    def __init__(self, path: str = BACKING_STORE_FILE_NAME, page_size: int = PAGE_SIZE):
        self.path = path
        self.page_size = page_size
        self.file = None

    def open(self) -> 'BackingStore':
        if self.file is None:
            try:
                self.file = open(self.path, 'rb')
            except OSError as e:
                raise BackingStoreUnavailable(self.path, e.strerror or str(e)) from e
            log.debug(f"opened backing store {self.path}")
        return self

    def close(self) -> None:
        if self.file is not None:
            self.file.close()
            self.file = None

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def load(self, page_number: int) -> bytes:
        """returns the PAGE_SIZE bytes of 'page_number'; raises ShortRead when the store ends before the page does"""
        if not 0 <= page_number < NUMBER_OF_PAGES:
            raise ValueError(f"page number {page_number} is outside 0..{NUMBER_OF_PAGES - 1}")
        self.open()
        self.file.seek(page_number * self.page_size)
        data = self.file.read(self.page_size)
        if len(data) != self.page_size:
            raise ShortRead(self.path, page_number, len(data), self.page_size)
        return data
