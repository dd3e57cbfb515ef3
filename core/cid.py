from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Union

from multiformats import CID, multibase, multihash

from cidstore.core.enums import CID_VERSION
from cidstore.core.errors import DecodeError, EncodeError


BytesLike = Union[bytes, bytearray, memoryview]

# exception types multiformats raises for bad components or malformed input
_COLLABORATOR_ERRORS = (ValueError, KeyError, TypeError, IndexError)


@dataclass(frozen=True)
class ContentId:
    """Content identifier: version, content-type code and multihash digest.

    Equality and hashing only look at the three components; the canonical
    binary and text forms ride along so callers never re-encode.
    """

    version: int
    codec: int
    digest: bytes
    binary: bytes = field(compare=False, repr=False)
    text: str = field(compare=False)
    hash_code: int = field(default=0, compare=False, repr=False)
    raw_digest: bytes = field(default=b"", compare=False, repr=False)

    def __bytes__(self) -> bytes:
        return self.binary

    def __str__(self) -> str:
        return self.text


class IdentifierCodec(ABC):
    @abstractmethod
    def encode(self, version: int, codec: int, digest: bytes) -> ContentId:
        raise NotImplementedError

    @abstractmethod
    def decode(self, binary: BytesLike) -> ContentId:
        raise NotImplementedError

    @abstractmethod
    def parse(self, text: str) -> ContentId:
        raise NotImplementedError


# all-zero sha2-256 raw cid, encoded once to prove a multibase can render cids
_SAMPLE_CID = bytes([0x01, 0x55, 0x12, 0x20]) + bytes(32)


class MultiformatsCodec(IdentifierCodec):
    def __init__(self, base: str = "base32"):
        try:
            multibase.get(base)
            CID.decode(_SAMPLE_CID).encode(base)
        except _COLLABORATOR_ERRORS as err:
            raise ValueError("unknown_multibase") from err
        self.base = base

    def encode(self, version: int, codec: int, digest: bytes) -> ContentId:
        if isinstance(version, bool) or version != CID_VERSION:
            raise EncodeError("unsupported_cid_version")
        if isinstance(codec, bool) or not isinstance(codec, int) or codec < 0:
            raise EncodeError("invalid_codec")
        try:
            multihash.unwrap(bytes(digest))
            cid = CID(self.base, version, int(codec), bytes(digest))
        except _COLLABORATOR_ERRORS as err:
            raise EncodeError("invalid_cid_components") from err
        return self._content_id(cid)

    def decode(self, binary: BytesLike) -> ContentId:
        if not isinstance(binary, (bytes, bytearray, memoryview)):
            raise DecodeError("malformed_cid")
        data = bytes(binary)
        if not data:
            raise DecodeError("malformed_cid")
        try:
            cid = CID.decode(data)
            multihash.unwrap(bytes(cid.digest))
        except _COLLABORATOR_ERRORS as err:
            raise DecodeError("malformed_cid") from err
        if bytes(cid) != data:
            raise DecodeError("malformed_cid")
        return self._checked(cid)

    def parse(self, text: str) -> ContentId:
        if not isinstance(text, str) or not text:
            raise DecodeError("malformed_cid")
        try:
            cid = CID.decode(text)
        except _COLLABORATOR_ERRORS as err:
            raise DecodeError("malformed_cid") from err
        return self._checked(cid)

    def _checked(self, cid: CID) -> ContentId:
        # v0 ids carry an implicit dag-pb/sha2-256 and a different text form
        if cid.version != CID_VERSION:
            raise DecodeError("unsupported_cid_version")
        return self._content_id(cid)

    def _content_id(self, cid: CID) -> ContentId:
        try:
            text = cid.encode(self.base)
        except _COLLABORATOR_ERRORS as err:
            raise EncodeError("unusable_multibase") from err
        return ContentId(
            version=cid.version,
            codec=cid.codec.code,
            digest=bytes(cid.digest),
            binary=bytes(cid),
            text=text,
            hash_code=cid.hashfun.code,
            raw_digest=bytes(cid.raw_digest),
        )
