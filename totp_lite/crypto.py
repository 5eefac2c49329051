import logging as log

from cryptography.hazmat.primitives import hmac

from totp_lite.exceptions import CounterRangeError
from totp_lite.hashes import HashLike, resolve_hash

COUNTER_SIZE = 8

logger = log.getLogger(__name__)


def compute_hmac(hash_kind: HashLike, key: bytes, counter_bytes: bytes) -> bytes:
    """Compute HMAC (RFC 2104) of an 8-byte counter.

    Args:
        hash_kind: Hash algorithm selector (see ``resolve_hash``).
        key: Shared secret, any length.
        counter_bytes: Big-endian counter, exactly 8 bytes.

    Returns:
        Raw digest bytes, as long as the hash output size.
    """
    strategy = resolve_hash(hash_kind)

    if len(counter_bytes) != COUNTER_SIZE:
        raise CounterRangeError(
            f"counter must be {COUNTER_SIZE} bytes, got {len(counter_bytes)}"
        )

    mac = hmac.HMAC(bytes(key), strategy.algorithm())
    mac.update(bytes(counter_bytes))
    digest = mac.finalize()

    logger.debug(f"HMAC-{strategy.name} over counter {counter_bytes.hex()}")

    return digest
