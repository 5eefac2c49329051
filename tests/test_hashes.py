import pytest
from cryptography.hazmat.primitives import hashes

from totp_lite import HashKind, HashStrategy, UnsupportedHashError, hotp
from totp_lite.crypto import compute_hmac
from totp_lite.hashes import resolve_hash
from totp_lite.exceptions import CounterRangeError

# RFC 2202 / RFC 4231 test case 1: the message "Hi There" is 8 bytes long,
# the size of an HOTP counter.
HMAC_KEY = b"\x0b" * 20
HMAC_MESSAGE = b"Hi There"


class TestHashKind:
    """Test the built-in hash variants."""

    @pytest.mark.parametrize("kind, block_size, output_size", [
        (HashKind.SHA1, 64, 20),
        (HashKind.SHA256, 64, 32),
        (HashKind.SHA512, 128, 64),
    ])
    def test_sizes(self, kind, block_size, output_size):
        """Each variant carries its block and output sizes."""
        assert kind.block_size == block_size
        assert kind.output_size == output_size

    def test_sha1_digest(self):
        """FIPS 180 'abc' vector for SHA-1."""
        assert HashKind.SHA1.hash(b"abc").hex() == (
            "a9993e364706816aba3e25717850c26c9cd0d89d"
        )

    def test_sha256_digest(self):
        """FIPS 180 'abc' vector for SHA-256."""
        assert HashKind.SHA256.hash(b"abc").hex() == (
            "ba7816bf8f01cfea414140de5dae2223"
            "b00361a396177a9cb410ff61f20015ad"
        )


class TestResolveHash:
    """Test hash selection by kind, strategy or name."""

    @pytest.mark.parametrize("name", ["sha1", "SHA1", "sha-1", "Sha_1"])
    def test_names(self, name):
        """Names are matched case-insensitively, ignoring separators."""
        assert resolve_hash(name) is HashKind.SHA1.strategy

    def test_kind_and_strategy(self):
        """HashKind and HashStrategy resolve to a strategy."""
        assert resolve_hash(HashKind.SHA512) is HashKind.SHA512.strategy
        strategy = HashKind.SHA256.strategy
        assert resolve_hash(strategy) is strategy

    def test_unknown_name(self):
        """Unknown names raise UnsupportedHashError."""
        with pytest.raises(UnsupportedHashError):
            resolve_hash("md5")

    def test_wrong_type(self):
        """Other selector types are a programming error."""
        with pytest.raises(TypeError):
            resolve_hash(256)


class TestHmacEngine:
    """Test HMAC computation over counter bytes."""

    @pytest.mark.parametrize("kind, expected", [
        (HashKind.SHA1, "b617318655057264e28bc0b6fb378c8ef146be00"),
        (
            HashKind.SHA256,
            "b0344c61d8db38535ca8afceaf0bf12b"
            "881dc200c9833da726e9376c2e32cff7",
        ),
        (
            HashKind.SHA512,
            "87aa7cdea5ef619d4ff0b4241a1d6cb0"
            "2379f4e2ce4ec2787ad0b30545e17cde"
            "daa833b7d6b8a702038b274eaea3f4e4"
            "be9d914eeb61f1702e696c203a126854",
        ),
    ])
    def test_rfc_vectors(self, kind, expected):
        """HMAC output matches the published test case."""
        assert compute_hmac(kind, HMAC_KEY, HMAC_MESSAGE).hex() == expected

    def test_rfc4226_intermediate_hmac(self):
        """HMAC-SHA1 for counter 0 matches RFC 4226 appendix D."""
        digest = compute_hmac(
            HashKind.SHA1, b"12345678901234567890", bytes(8)
        )
        assert digest.hex() == "cc93cf18508d94934c64b65d8ba7667fb7cde4b0"

    def test_long_key_is_hashed(self):
        """Keys longer than the block size are accepted."""
        digest = compute_hmac(HashKind.SHA1, b"k" * 200, bytes(8))
        assert len(digest) == 20

    @pytest.mark.parametrize("size", [0, 7, 9])
    def test_counter_must_be_eight_bytes(self, size):
        """Counter byte strings of the wrong length are refused."""
        with pytest.raises(CounterRangeError):
            compute_hmac(HashKind.SHA1, HMAC_KEY, bytes(size))

    def test_key_not_logged(self, caplog):
        """Debug logging never carries the key."""
        key = b"do-not-log-this-key!"
        with caplog.at_level("DEBUG"):
            hotp(key, 3)
        assert "do-not-log-this-key" not in caplog.text
        assert key.hex() not in caplog.text


class TestCustomStrategy:
    """Test plugging in hash strategies beyond HashKind."""

    def test_extra_strategy_plugs_in(self):
        """A new HashStrategy works without touching truncation."""
        sha384 = HashStrategy("SHA384", hashes.SHA384)
        assert sha384.output_size == 48
        code = hotp(b"12345678901234567890", 0, sha384, 8)
        assert len(code) == 8
        assert code == hotp(b"12345678901234567890", 0, sha384, 8)

    def test_strategy_equality(self):
        """Strategies with the same name and algorithm are equal."""
        assert HashStrategy("SHA1", hashes.SHA1) == HashKind.SHA1.strategy
        assert hash(HashStrategy("SHA1", hashes.SHA1)) == hash(
            HashKind.SHA1.strategy
        )

    def test_same_name_different_algorithm(self):
        """A strategy reusing a name with another algorithm is distinct."""
        mislabelled = HashStrategy("SHA1", hashes.SHA256)
        assert mislabelled != HashKind.SHA1.strategy
