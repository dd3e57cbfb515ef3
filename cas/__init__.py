import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from cidstore.core import dagcbor
from cidstore.core.cid import BytesLike, ContentId, IdentifierCodec, MultiformatsCodec
from cidstore.core.enums import CID_VERSION, Multicodec
from cidstore.core.errors import BlockNotFound, MaximumBlockSizeExceeded
from cidstore.core.hashing import Hasher, Sha256Hasher


# 256 KiB, the usual IPFS block cap; opt-in
MAX_BLOCK_SIZE = 256 * 1024

logger = logging.getLogger("cidstore")


class BlockStoreBase(ABC):
    @abstractmethod
    def put(self, payload: BytesLike, codec: int) -> bytes:
        raise NotImplementedError

    @abstractmethod
    def get(self, cid: BytesLike) -> Optional[bytes]:
        raise NotImplementedError

    @property
    @abstractmethod
    def codec(self) -> IdentifierCodec:
        raise NotImplementedError

    def put_serializable(self, value: Any) -> bytes:
        return self.put(dagcbor.dumps(value), Multicodec.DAG_CBOR)

    @abstractmethod
    def _load(self, ref: ContentId) -> Optional[bytes]:
        raise NotImplementedError

    def get_deserializable(self, cid: BytesLike) -> Any:
        ref = self.codec.decode(cid)
        data = self._load(ref)
        if data is None:
            raise BlockNotFound(ref.text)
        return dagcbor.loads(data, self.codec)


class MemoryBlockStore(BlockStoreBase):
    """In-memory block store standing in for IPFS.

    Blocks are keyed by the canonical text form of their CID; the store
    computes every key itself from the payload, so entries are only ever
    added or overwritten with identical bytes.
    """

    def __init__(
        self,
        hasher: Optional[Hasher] = None,
        codec: Optional[IdentifierCodec] = None,
        max_block_size: Optional[int] = None,
    ):
        self.hasher = hasher or Sha256Hasher()
        self._codec = codec or MultiformatsCodec()
        self.max_block_size = max_block_size
        self._blocks: Dict[str, bytes] = {}
        self._lock = threading.Lock()

    @property
    def codec(self) -> IdentifierCodec:
        return self._codec

    def put_cid(self, payload: BytesLike, codec: int) -> ContentId:
        if not isinstance(payload, (bytes, bytearray, memoryview)):
            raise TypeError("payload must be bytes-like")
        data = bytes(payload)
        if self.max_block_size is not None and len(data) > self.max_block_size:
            raise MaximumBlockSizeExceeded(len(data), self.max_block_size)
        cid = self._codec.encode(CID_VERSION, codec, self.hasher.multihash(data))
        with self._lock:
            self._blocks[cid.text] = data
        logger.debug("block_put cid=%s size=%d", cid.text, len(data))
        return cid

    def get_cid(self, cid: ContentId) -> Optional[bytes]:
        return self.get(cid.binary)

    def put(self, payload: BytesLike, codec: int) -> bytes:
        return self.put_cid(payload, codec).binary

    def get(self, cid: BytesLike) -> Optional[bytes]:
        return self._load(self._codec.decode(cid))

    def _load(self, ref: ContentId) -> Optional[bytes]:
        with self._lock:
            data = self._blocks.get(ref.text)
        if data is None:
            logger.debug("block_miss cid=%s", ref.text)
        return data
