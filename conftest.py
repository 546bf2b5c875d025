import pytest

from backing_store import BackingStore, LOGICAL_MEMORY_SIZE, PAGE_SIZE


def pattern_bytes():
    # Byte at (page, offset) is (3 * page + offset) % 256 so pages differ
    return bytes((3 * (i // PAGE_SIZE) + i % PAGE_SIZE) % 256
                 for i in range(LOGICAL_MEMORY_SIZE))


@pytest.fixture
def backing_store():
    return BackingStore(pattern_bytes())


@pytest.fixture
def backing_file(tmp_path):
    path = tmp_path / 'BACKING_STORE.bin'
    path.write_bytes(pattern_bytes())
    return path


@pytest.fixture
def write_addresses(tmp_path):
    def write(addresses, name='addresses.txt'):
        path = tmp_path / name
        path.write_text(''.join(f'{a}\n' for a in addresses))
        return path
    return write
