"""Tests for the hasher capability"""

import hashlib

import pytest

from cidstore.core.hashing import (
    Sha256Hasher,
    Sha3_256Hasher,
    Sha512Hasher,
    get_hasher,
    hasher_names,
)


class TestHashers:
    @pytest.mark.parametrize(
        "hasher,reference",
        [
            (Sha256Hasher(), hashlib.sha256),
            (Sha512Hasher(), hashlib.sha512),
            (Sha3_256Hasher(), hashlib.sha3_256),
        ],
    )
    def test_digest_matches_reference(self, hasher, reference):
        data = b"some block payload"
        assert hasher.digest(data) == reference(data).digest()
        assert len(hasher.digest(data)) == hasher.size

    def test_digest_is_deterministic(self):
        h = Sha256Hasher()
        assert h.digest(b"abc") == h.digest(b"abc")
        assert h.digest(b"abc") != h.digest(b"abd")

    def test_empty_input(self):
        assert Sha256Hasher().digest(b"") == hashlib.sha256(b"").digest()

    def test_accepts_bytearray_and_memoryview(self):
        h = Sha256Hasher()
        expected = h.digest(b"xyz")
        assert h.digest(bytearray(b"xyz")) == expected
        assert h.digest(memoryview(b"xyz")) == expected

    def test_multihash_prefix(self):
        data = b"hello"
        mh = Sha256Hasher().multihash(data)
        # sha2-256 code 0x12, length 0x20
        assert mh == bytes([0x12, 0x20]) + hashlib.sha256(data).digest()

    def test_multihash_prefix_sha512(self):
        mh = Sha512Hasher().multihash(b"hello")
        assert mh[:2] == bytes([0x13, 0x40])
        assert len(mh) == 66


class TestGetHasher:
    def test_known_names(self):
        assert isinstance(get_hasher("sha2-256"), Sha256Hasher)
        assert isinstance(get_hasher(" SHA2-512 "), Sha512Hasher)
        assert isinstance(get_hasher("sha3-256"), Sha3_256Hasher)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="unknown_hash"):
            get_hasher("md5")

    def test_names_listed(self):
        assert hasher_names() == ["sha2-256", "sha2-512", "sha3-256"]
