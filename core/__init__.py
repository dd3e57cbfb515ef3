from cidstore.core.enums import CID_VERSION, Multicodec
from cidstore.core.errors import (
    BlockStoreError,
    DecodeError,
    EncodeError,
    MaximumBlockSizeExceeded,
    BlockNotFound,
)
from cidstore.core.hashing import Hasher, Sha256Hasher, Sha512Hasher, Sha3_256Hasher, get_hasher
from cidstore.core.cid import ContentId, IdentifierCodec, MultiformatsCodec

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
]
