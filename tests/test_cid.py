"""Tests for the content identifier codec"""

import hashlib

import pytest

from cidstore.core.cid import ContentId, MultiformatsCodec
from cidstore.core.enums import Multicodec
from cidstore.core.errors import DecodeError, EncodeError
from cidstore.core.hashing import Sha256Hasher


def _mh(data: bytes) -> bytes:
    return bytes([0x12, 0x20]) + hashlib.sha256(data).digest()


class TestEncode:
    def test_components(self, codec: MultiformatsCodec):
        cid = codec.encode(1, Multicodec.RAW, _mh(b"hello"))
        assert cid.version == 1
        assert cid.codec == 0x55
        assert cid.digest == _mh(b"hello")
        assert cid.hash_code == 0x12
        assert cid.raw_digest == hashlib.sha256(b"hello").digest()

    def test_binary_form(self, codec: MultiformatsCodec):
        cid = codec.encode(1, 0x55, _mh(b"hello"))
        assert cid.binary == bytes([0x01, 0x55]) + _mh(b"hello")
        assert bytes(cid) == cid.binary

    def test_text_form_is_base32(self, codec: MultiformatsCodec):
        cid = codec.encode(1, 0x55, _mh(b"hello"))
        assert cid.text.startswith("bafkrei")
        assert str(cid) == cid.text

    def test_equal_components_equal_text(self, codec: MultiformatsCodec):
        a = codec.encode(1, 0x71, _mh(b"x"))
        b = codec.encode(1, 0x71, _mh(b"x"))
        assert a == b
        assert a.text == b.text
        assert hash(a) == hash(b)

    def test_codec_changes_identity(self, codec: MultiformatsCodec):
        a = codec.encode(1, Multicodec.RAW, _mh(b"x"))
        b = codec.encode(1, Multicodec.DAG_CBOR, _mh(b"x"))
        assert a != b
        assert a.text != b.text

    def test_other_base(self):
        cid = MultiformatsCodec("base58btc").encode(1, 0x55, _mh(b"hello"))
        assert cid.text.startswith("z")

    def test_unknown_base(self):
        with pytest.raises(ValueError, match="unknown_multibase"):
            MultiformatsCodec("base999")

    @pytest.mark.parametrize("version", [0, 2])
    def test_only_version_one(self, codec: MultiformatsCodec, version):
        with pytest.raises(EncodeError):
            codec.encode(version, 0x55, _mh(b"x"))

    @pytest.mark.parametrize("bad", [-1, "raw", None, True, 1.5])
    def test_rejects_bad_codec(self, codec: MultiformatsCodec, bad):
        with pytest.raises(EncodeError):
            codec.encode(1, bad, _mh(b"x"))

    def test_rejects_bad_digest(self, codec: MultiformatsCodec):
        with pytest.raises(EncodeError):
            codec.encode(1, 0x55, bytes([0x12, 0x20]) + b"short")


class TestDecode:
    def test_roundtrip(self, codec: MultiformatsCodec):
        cid = codec.encode(1, 0x55, _mh(b"hello"))
        back = codec.decode(cid.binary)
        assert back == cid
        assert back.text == cid.text
        assert back.binary == cid.binary

    def test_accepts_bytearray(self, codec: MultiformatsCodec):
        cid = codec.encode(1, 0x55, _mh(b"hello"))
        assert codec.decode(bytearray(cid.binary)) == cid

    def test_text_uses_codec_base(self):
        b32 = MultiformatsCodec("base32")
        b58 = MultiformatsCodec("base58btc")
        cid = b32.encode(1, 0x55, _mh(b"hello"))
        assert b58.decode(cid.binary).text.startswith("z")
        assert b58.decode(cid.binary) == cid

    def test_parse_text(self, codec: MultiformatsCodec):
        cid = codec.encode(1, 0x71, _mh(b"node"))
        assert codec.parse(cid.text) == cid

    def test_empty(self, codec: MultiformatsCodec):
        with pytest.raises(DecodeError):
            codec.decode(b"")

    def test_not_bytes(self, codec: MultiformatsCodec):
        with pytest.raises(DecodeError):
            codec.decode("bafkreiexample")

    def test_truncated_digest(self, codec: MultiformatsCodec):
        cid = codec.encode(1, 0x55, _mh(b"hello"))
        with pytest.raises(DecodeError):
            codec.decode(cid.binary[:-1])

    def test_trailing_bytes(self, codec: MultiformatsCodec):
        cid = codec.encode(1, 0x55, _mh(b"hello"))
        with pytest.raises(DecodeError):
            codec.decode(cid.binary + b"\x00")

    def test_missing_multihash(self, codec: MultiformatsCodec):
        with pytest.raises(DecodeError):
            codec.decode(bytes([0x01, 0x55]))

    def test_cid_v0_rejected(self, codec: MultiformatsCodec):
        with pytest.raises(DecodeError, match="unsupported_cid_version"):
            codec.decode(_mh(b"hello"))

    def test_decode_error_is_value_error(self, codec: MultiformatsCodec):
        with pytest.raises(ValueError):
            codec.decode(b"\xff")

    def test_parse_empty(self, codec: MultiformatsCodec):
        with pytest.raises(DecodeError):
            codec.parse("")


class TestContentId:
    def test_equality_ignores_forms(self):
        a = ContentId(1, 0x55, b"d", binary=b"one", text="one")
        b = ContentId(1, 0x55, b"d", binary=b"two", text="two")
        assert a == b

    def test_frozen(self):
        cid = ContentId(1, 0x55, b"d", binary=b"b", text="t")
        with pytest.raises(AttributeError):
            cid.codec = 0x71

    def test_hasher_digest_encodes(self, codec: MultiformatsCodec):
        cid = codec.encode(1, 0x55, Sha256Hasher().multihash(b"hello"))
        assert cid.digest == _mh(b"hello")


class TestBaseValidation:
    @pytest.mark.parametrize("base", ["identity", "base256emoji"])
    def test_unusable_bases_rejected(self, base):
        with pytest.raises(ValueError, match="unknown_multibase"):
            MultiformatsCodec(base)

    @pytest.mark.parametrize("base", ["base32", "base58btc", "base36", "base64"])
    def test_usable_bases_accepted(self, base):
        cid = MultiformatsCodec(base).encode(1, 0x55, _mh(b"hello"))
        assert cid.binary == bytes([0x01, 0x55]) + _mh(b"hello")
        assert MultiformatsCodec(base).parse(cid.text) == cid


class TestVersionType:
    def test_bool_version_rejected(self, codec: MultiformatsCodec):
        with pytest.raises(EncodeError, match="unsupported_cid_version"):
            codec.encode(True, 0x55, _mh(b"x"))
