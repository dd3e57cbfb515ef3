from typing import Any, Optional

from cidstore.cas import MemoryBlockStore
from cidstore.core.cid import BytesLike


class AsyncMemoryBlockStore:
    """Coroutine interface over MemoryBlockStore.

    Mirrors the call shape of a networked block store. Nothing here awaits,
    so every call completes before its coroutine first yields.
    """

    def __init__(self, store: Optional[MemoryBlockStore] = None):
        self.store = store or MemoryBlockStore()

    async def put(self, payload: BytesLike, codec: int) -> bytes:
        return self.store.put(payload, codec)

    async def get(self, cid: BytesLike) -> Optional[bytes]:
        return self.store.get(cid)

    async def put_serializable(self, value: Any) -> bytes:
        return self.store.put_serializable(value)

    async def get_deserializable(self, cid: BytesLike) -> Any:
        return self.store.get_deserializable(cid)
