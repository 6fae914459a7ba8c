import pytest

from PhysicalMemory import PAGE_SIZE, NUMBER_OF_PAGES


def page_pattern(page_number: int) -> bytes:
    # every byte of page p holds p, so a value read back names the page it came from
    return bytes([page_number]) * PAGE_SIZE


@pytest.fixture
def backing_store_path(tmp_path):
    path = tmp_path / "BACKING_STORE.bin"
    path.write_bytes(b''.join(page_pattern(p) for p in range(NUMBER_OF_PAGES)))
    return str(path)


@pytest.fixture
def address_file(tmp_path):
    def write(lines):
        path = tmp_path / "addresses.txt"
        path.write_text(''.join(f"{line}\n" for line in lines))
        return str(path)
    return write
