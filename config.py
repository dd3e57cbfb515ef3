import os
import tomllib

from dataclasses import dataclass
from typing import Optional

from cidstore.cas import MemoryBlockStore
from cidstore.core.cid import MultiformatsCodec
from cidstore.core.hashing import get_hasher, hasher_names


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class StoreConfig:
    hash: str = "sha2-256"
    base: str = "base32"
    max_block_size: Optional[int] = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        self.hash = self.hash.lower().strip()
        self.base = self.base.strip()
        self.log_level = self.log_level.upper().strip()
        if self.hash not in hasher_names():
            raise ValueError("unknown_hash")
        MultiformatsCodec(self.base)
        if self.log_level not in _LOG_LEVELS:
            raise ValueError("unknown_log_level")
        if self.max_block_size is not None:
            if self.max_block_size < 0:
                raise ValueError("max_block_size must be non-negative")
            if self.max_block_size == 0:
                self.max_block_size = None


def parse_store_config(data: bytes) -> StoreConfig:
    cfg = tomllib.loads(data.decode("utf-8"))
    s = cfg.get("store", {})
    limit = s.get("max_block_size")
    return StoreConfig(
        hash=str(s.get("hash", "sha2-256")),
        base=str(s.get("base", "base32")),
        max_block_size=int(limit) if limit is not None else None,
        log_level=str(s.get("log_level", "INFO")),
    )


def load_store_config(path: str) -> StoreConfig:
    with open(path, "rb") as f:
        return parse_store_config(f.read())


def get_store_config_from_env() -> StoreConfig:
    limit = os.environ.get("CIDSTORE_MAX_BLOCK_SIZE")
    return StoreConfig(
        hash=os.environ.get("CIDSTORE_HASH", "sha2-256"),
        base=os.environ.get("CIDSTORE_BASE", "base32"),
        max_block_size=int(limit) if limit else None,
        log_level=os.environ.get("CIDSTORE_LOG_LEVEL", "INFO"),
    )


def build_store(cfg: StoreConfig) -> MemoryBlockStore:
    return MemoryBlockStore(
        hasher=get_hasher(cfg.hash),
        codec=MultiformatsCodec(cfg.base),
        max_block_size=cfg.max_block_size,
    )
