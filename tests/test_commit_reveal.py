"""Unit tests for the HMAC commit-reveal primitives.

Covers:
- Canonical encoding of committed values
- Proof construction against a known HMAC
- Verification of genuine and tampered reveals
"""

import hashlib
import hmac

import pytest
from fairdice.utils.commit_reveal import (
    canonical_encoding,
    decode_key,
    make_proof,
    verify_commitment,
)

KEY = bytes(range(32))


class TestCanonicalEncoding:
    """Test the message bytes that get committed."""

    def test_integer(self):
        """Integers encode as their decimal string."""
        assert canonical_encoding(4) == b"4"
        assert canonical_encoding(-12) == b"-12"

    def test_string(self):
        """Strings encode as themselves."""
        assert canonical_encoding("USER") == b"USER"

    def test_bool_rejected(self):
        """Booleans are not valid committed values."""
        with pytest.raises(TypeError):
            canonical_encoding(True)

    def test_float_rejected(self):
        """Only ints and strings can be committed."""
        with pytest.raises(TypeError):
            canonical_encoding(1.5)


class TestMakeProof:
    """Test proof construction."""

    def test_matches_hmac_sha256(self):
        """Proof is the hex HMAC-SHA256 of the canonical value."""
        expected = hmac.new(KEY, b"6", hashlib.sha256).hexdigest()
        assert make_proof(KEY, 6) == expected

    def test_proof_is_64_hex_chars(self):
        """Proof has fixed length."""
        proof = make_proof(KEY, 1)
        assert len(proof) == 64
        int(proof, 16)

    def test_different_values_differ(self):
        """Different values produce different proofs under one key."""
        assert make_proof(KEY, 1) != make_proof(KEY, 2)


class TestVerifyCommitment:
    """Test verification of revealed commitments."""

    def test_genuine_bytes_key(self):
        """A genuine reveal verifies with the raw key."""
        proof = make_proof(KEY, 3)
        assert verify_commitment(3, proof, KEY)

    def test_genuine_hex_key(self):
        """A genuine reveal verifies with the hex key players see."""
        proof = make_proof(KEY, 3)
        assert verify_commitment(3, proof, KEY.hex())

    def test_value_as_string(self):
        """A roll typed back as text still verifies."""
        proof = make_proof(KEY, 3)
        assert verify_commitment("3", proof, KEY)

    def test_uppercase_proof(self):
        """Proof comparison ignores hex case."""
        proof = make_proof(KEY, 3)
        assert verify_commitment(3, proof.upper(), KEY)

    def test_tampered_value(self):
        """Changing the value breaks verification."""
        proof = make_proof(KEY, 3)
        assert not verify_commitment(4, proof, KEY)

    @pytest.mark.parametrize("bit", [0, 7, 100, 255])
    def test_single_key_bit_flip(self, bit):
        """Flipping one bit of the key breaks verification."""
        proof = make_proof(KEY, 3)
        tampered = bytearray(KEY)
        tampered[bit // 8] ^= 1 << (bit % 8)
        assert not verify_commitment(3, proof, bytes(tampered))

    def test_tampered_proof(self):
        """Changing one proof character breaks verification."""
        proof = make_proof(KEY, 3)
        flipped = ("0" if proof[0] != "0" else "1") + proof[1:]
        assert not verify_commitment(3, flipped, KEY)

    def test_bad_hex_key(self):
        """A key that is not hex is rejected, not raised."""
        assert not verify_commitment(3, make_proof(KEY, 3), "zz-not-hex")

    def test_non_ascii_proof(self):
        """A non-ASCII proof is rejected, not raised."""
        assert not verify_commitment(3, "é" * 64, KEY)

    def test_non_string_proof(self):
        """A proof of the wrong type is rejected, not raised."""
        assert not verify_commitment(3, None, KEY)
        assert not verify_commitment(3, 12345, KEY)


class TestDecodeKey:
    """Test key decoding."""

    def test_hex_roundtrip(self):
        assert decode_key(KEY.hex()) == KEY

    def test_bytes_passthrough(self):
        assert decode_key(KEY) == KEY
