import pytest

from cidstore.cas import MemoryBlockStore
from cidstore.core.cid import MultiformatsCodec


@pytest.fixture()
def codec():
    return MultiformatsCodec()


@pytest.fixture()
def store():
    # Fresh empty store per test
    return MemoryBlockStore()
