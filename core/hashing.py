from abc import ABC, abstractmethod
from typing import Callable, Dict, List

from cryptography.hazmat.primitives import hashes
from multiformats import multihash


class Hasher(ABC):
    """Deterministic digest function named by its multihash code name."""

    name: str = ""
    size: int = 0

    @abstractmethod
    def digest(self, data: bytes) -> bytes:
        raise NotImplementedError

    def multihash(self, data: bytes) -> bytes:
        # varint(code) || varint(len) || digest
        return multihash.wrap(self.digest(data), self.name)


class _CryptographyHasher(Hasher):
    algorithm: Callable[[], hashes.HashAlgorithm]

    def digest(self, data: bytes) -> bytes:
        h = hashes.Hash(self.algorithm())
        h.update(bytes(data))
        return h.finalize()


class Sha256Hasher(_CryptographyHasher):
    name = "sha2-256"
    size = 32
    algorithm = hashes.SHA256


class Sha512Hasher(_CryptographyHasher):
    name = "sha2-512"
    size = 64
    algorithm = hashes.SHA512


class Sha3_256Hasher(_CryptographyHasher):
    name = "sha3-256"
    size = 32
    algorithm = hashes.SHA3_256


_HASHERS: Dict[str, Callable[[], Hasher]] = {
    Sha256Hasher.name: Sha256Hasher,
    Sha512Hasher.name: Sha512Hasher,
    Sha3_256Hasher.name: Sha3_256Hasher,
}


def get_hasher(name: str) -> Hasher:
    factory = _HASHERS.get(name.lower().strip())
    if factory is None:
        raise ValueError("unknown_hash")
    return factory()


def hasher_names() -> List[str]:
    return sorted(_HASHERS)
