from cidstore.core import (
    CID_VERSION,
    Multicodec,
    BlockStoreError,
    DecodeError,
    EncodeError,
    MaximumBlockSizeExceeded,
    BlockNotFound,
    Hasher,
    Sha256Hasher,
    Sha512Hasher,
    Sha3_256Hasher,
    get_hasher,
    ContentId,
    IdentifierCodec,
    MultiformatsCodec,
)
from cidstore.core import dagcbor
from cidstore.cas import BlockStoreBase, MemoryBlockStore, MAX_BLOCK_SIZE
from cidstore.cas.aio import AsyncMemoryBlockStore
from cidstore.config import (
    StoreConfig,
    parse_store_config,
    load_store_config,
    get_store_config_from_env,
    build_store,
)

__all__ = [
    "CID_VERSION",
    "Multicodec",
    "BlockStoreError",
    "DecodeError",
    "EncodeError",
    "MaximumBlockSizeExceeded",
    "BlockNotFound",
    "Hasher",
    "Sha256Hasher",
    "Sha512Hasher",
    "Sha3_256Hasher",
    "get_hasher",
    "ContentId",
    "IdentifierCodec",
    "MultiformatsCodec",
    "dagcbor",
    "BlockStoreBase",
    "MemoryBlockStore",
    "MAX_BLOCK_SIZE",
    "AsyncMemoryBlockStore",
    "StoreConfig",
    "parse_store_config",
    "load_store_config",
    "get_store_config_from_env",
    "build_store",
]
