"""Hash strategies available to the HMAC engine.

A strategy bundles a ``cryptography`` hash algorithm with the sizes HMAC
needs. The three RFC 6238 algorithms are exposed through :class:`HashKind`;
any other :class:`HashStrategy` instance can be handed to the public API
as-is.
"""

from enum import Enum
from typing import Callable, Union

from cryptography.hazmat.primitives import hashes

from totp_lite.exceptions import UnsupportedHashError


class HashStrategy:
    """Hash function used as the basis for HMAC.

    Args:
        name: Canonical algorithm name, e.g. ``"SHA1"``.
        factory: Callable returning a new ``cryptography`` hash algorithm.
    """

    def __init__(
        self, name: str, factory: Callable[[], hashes.HashAlgorithm]
    ) -> None:
        self._name = name
        self._factory = factory

    @property
    def name(self) -> str:
        return self._name

    @property
    def block_size(self) -> int:
        """Internal block size in bytes (HMAC pads the key to this)."""
        return self._factory().block_size

    @property
    def output_size(self) -> int:
        """Digest length in bytes."""
        return self._factory().digest_size

    def algorithm(self) -> hashes.HashAlgorithm:
        """Return a fresh algorithm instance for a single computation."""
        return self._factory()

    def hash(self, data: bytes) -> bytes:
        """Hash ``data`` in one shot.

        Args:
            data: Message to hash.

        Returns:
            Raw digest, ``output_size`` bytes long.
        """
        digest = hashes.Hash(self._factory())
        digest.update(data)
        return digest.finalize()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashStrategy):
            return NotImplemented
        return (self._name, self._factory) == (other._name, other._factory)

    def __hash__(self) -> int:
        return hash((self._name, self._factory))

    def __repr__(self) -> str:
        return f"HashStrategy({self._name!r})"


class HashKind(Enum):
    """The hash algorithms required by RFC 6238."""

    SHA1 = HashStrategy("SHA1", hashes.SHA1)
    SHA256 = HashStrategy("SHA256", hashes.SHA256)
    SHA512 = HashStrategy("SHA512", hashes.SHA512)

    @property
    def strategy(self) -> HashStrategy:
        return self.value

    @property
    def block_size(self) -> int:
        return self.value.block_size

    @property
    def output_size(self) -> int:
        return self.value.output_size

    def hash(self, data: bytes) -> bytes:
        return self.value.hash(data)


HashLike = Union[HashKind, HashStrategy, str]


def resolve_hash(value: HashLike) -> HashStrategy:
    """Turn a hash selector into a strategy.

    Args:
        value: A :class:`HashKind`, a :class:`HashStrategy` or an algorithm
               name such as ``"sha256"`` or ``"SHA-512"``.

    Returns:
        The matching strategy.

    Raises:
        UnsupportedHashError: if a name does not match any HashKind.
    """
    if isinstance(value, HashKind):
        return value.strategy
    if isinstance(value, HashStrategy):
        return value
    if isinstance(value, str):
        key = value.upper().replace("-", "").replace("_", "")
        try:
            return HashKind[key].strategy
        except KeyError:
            supported = ", ".join(kind.name for kind in HashKind)
            raise UnsupportedHashError(
                f"unsupported hash algorithm {value!r} "
                f"(expected one of {supported})"
            ) from None
    raise TypeError(
        f"hash selector must be HashKind, HashStrategy or str, "
        f"not {type(value).__name__}"
    )
