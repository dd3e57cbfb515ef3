import math
import struct
from typing import Any, Dict, List, Optional, Tuple

from cidstore.core.cid import ContentId, IdentifierCodec, MultiformatsCodec
from cidstore.core.errors import DecodeError, EncodeError


CID_TAG = 42
# containers nested deeper than this are rejected both ways
MAX_DEPTH = 256
_UINT64_MAX = 0xFFFFFFFFFFFFFFFF


def _encode_head(major: int, n: int) -> bytes:
    if n < 0 or n > _UINT64_MAX:
        raise EncodeError("integer out of range")
    mt = (major & 0x7) << 5
    if n <= 23:
        return bytes([mt | n])
    if n <= 0xFF:
        return bytes([mt | 24, n])
    if n <= 0xFFFF:
        return bytes([mt | 25]) + n.to_bytes(2, "big")
    if n <= 0xFFFFFFFF:
        return bytes([mt | 26]) + n.to_bytes(4, "big")
    return bytes([mt | 27]) + n.to_bytes(8, "big")


def _encode_int(n: int) -> bytes:
    if n >= 0:
        return _encode_head(0, n)
    return _encode_head(1, -1 - n)


def _encode_float(f: float) -> bytes:
    if math.isnan(f) or math.isinf(f):
        raise EncodeError("non-finite float")
    return bytes([0xFB]) + struct.pack(">d", f)


def _encode_bstr(b: bytes) -> bytes:
    return _encode_head(2, len(b)) + b


def _encode_tstr(s: str) -> bytes:
    b = s.encode("utf-8")
    return _encode_head(3, len(b)) + b


def _encode_link(cid: ContentId) -> bytes:
    # identity multibase prefix in front of the binary cid
    return _encode_head(6, CID_TAG) + _encode_bstr(b"\x00" + cid.binary)


def _encode_array(items: List[Any], depth: int) -> bytes:
    buf = bytearray(_encode_head(4, len(items)))
    for item in items:
        buf.extend(encode(item, depth + 1))
    return bytes(buf)


def _encode_map(m: Dict[Any, Any], depth: int) -> bytes:
    encoded_pairs: List[Tuple[bytes, bytes]] = []
    for key, value in m.items():
        if not isinstance(key, str):
            raise EncodeError("map keys must be strings")
        encoded_pairs.append((_encode_tstr(key), encode(value, depth + 1)))
    # sorting encoded keys bytewise is length-first ordering for text keys
    encoded_pairs.sort(key=lambda p: p[0])
    buf = bytearray(_encode_head(5, len(encoded_pairs)))
    for ek, ev in encoded_pairs:
        buf.extend(ek)
        buf.extend(ev)
    return bytes(buf)


def encode(value: Any, depth: int = 0) -> bytes:
    if depth > MAX_DEPTH:
        raise EncodeError("nesting too deep")
    if value is False:
        return bytes([0xF4])
    if value is True:
        return bytes([0xF5])
    if value is None:
        return bytes([0xF6])
    if isinstance(value, int):
        return _encode_int(value)
    if isinstance(value, float):
        return _encode_float(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _encode_bstr(bytes(value))
    if isinstance(value, str):
        return _encode_tstr(value)
    if isinstance(value, ContentId):
        return _encode_link(value)
    if isinstance(value, (list, tuple)):
        return _encode_array(list(value), depth)
    if isinstance(value, dict):
        return _encode_map(value, depth)
    raise EncodeError(f"unsupported type for dag-cbor: {type(value).__name__}")


def dumps(value: Any) -> bytes:
    return encode(value)


class _Decoder:
    def __init__(self, data: bytes, codec: IdentifierCodec):
        self.data = data
        self.codec = codec

    def _take(self, offset: int, n: int) -> Tuple[bytes, int]:
        end = offset + n
        if end > len(self.data):
            raise DecodeError("truncated")
        return self.data[offset:end], end

    def _read_len(self, offset: int, ai: int) -> Tuple[int, int]:
        if ai <= 23:
            return ai, offset
        if ai == 24:
            raw, offset = self._take(offset, 1)
            floor = 24
        elif ai == 25:
            raw, offset = self._take(offset, 2)
            floor = 0x100
        elif ai == 26:
            raw, offset = self._take(offset, 4)
            floor = 0x10000
        elif ai == 27:
            raw, offset = self._take(offset, 8)
            floor = 0x100000000
        else:
            raise DecodeError("indefinite length not allowed")
        n = int.from_bytes(raw, "big")
        if n < floor:
            raise DecodeError("non-minimal length")
        return n, offset

    def item(self, offset: int, depth: int = 0) -> Tuple[Any, int]:
        if depth > MAX_DEPTH:
            raise DecodeError("nesting too deep")
        if offset >= len(self.data):
            raise DecodeError("truncated")
        ib = self.data[offset]
        offset += 1
        mt = (ib >> 5) & 0x7
        ai = ib & 0x1F
        if mt == 7:
            return self._simple(offset, ai)
        n, offset = self._read_len(offset, ai)
        if mt == 0:
            return n, offset
        if mt == 1:
            return -1 - n, offset
        if mt == 2:
            raw, offset = self._take(offset, n)
            return bytes(raw), offset
        if mt == 3:
            raw, offset = self._take(offset, n)
            try:
                return raw.decode("utf-8"), offset
            except UnicodeDecodeError as err:
                raise DecodeError("invalid utf-8") from err
        if mt == 4:
            out: List[Any] = []
            for _ in range(n):
                v, offset = self.item(offset, depth + 1)
                out.append(v)
            return out, offset
        if mt == 5:
            return self._map(offset, n, depth)
        return self._tag(offset, n, depth)

    def _map(self, offset: int, n: int, depth: int) -> Tuple[Dict[str, Any], int]:
        out_map: Dict[str, Any] = {}
        for _ in range(n):
            k, offset = self.item(offset, depth + 1)
            if not isinstance(k, str):
                raise DecodeError("map keys must be strings")
            if k in out_map:
                raise DecodeError("duplicate map key")
            v, offset = self.item(offset, depth + 1)
            out_map[k] = v
        return out_map, offset

    def _tag(self, offset: int, tag: int, depth: int) -> Tuple[ContentId, int]:
        if tag != CID_TAG:
            raise DecodeError("unsupported tag")
        raw, offset = self.item(offset, depth + 1)
        if not isinstance(raw, bytes) or not raw.startswith(b"\x00"):
            raise DecodeError("malformed cid link")
        return self.codec.decode(raw[1:]), offset

    def _simple(self, offset: int, ai: int) -> Tuple[Any, int]:
        if ai == 20:
            return False, offset
        if ai == 21:
            return True, offset
        if ai == 22:
            return None, offset
        if ai == 27:
            raw, offset = self._take(offset, 8)
            f = struct.unpack(">d", raw)[0]
            if math.isnan(f) or math.isinf(f):
                raise DecodeError("non-finite float")
            return f, offset
        raise DecodeError("unsupported simple value")


def loads(data: bytes, codec: Optional[IdentifierCodec] = None) -> Any:
    dec = _Decoder(bytes(data), codec or MultiformatsCodec())
    v, off = dec.item(0)
    if off != len(dec.data):
        raise DecodeError("extra bytes after value")
    return v
