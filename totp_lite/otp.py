import logging as log

from totp_lite.config import (
    DEFAULT_DIGITS,
    DEFAULT_EPOCH,
    DEFAULT_STEP,
    TimeConfig,
    remaining_seconds,
    time_counter,
    validate_digits,
)
from totp_lite.crypto import COUNTER_SIZE, compute_hmac
from totp_lite.exceptions import CounterRangeError
from totp_lite.hashes import HashKind, HashLike, resolve_hash

HOTP_DIGITS = 6
MIN_DIGEST_SIZE = 20

logger = log.getLogger(__name__)

__all__ = [
    "counter_to_bytes",
    "dynamic_truncation",
    "format_code",
    "hotp",
    "remaining_seconds",
    "time_counter",
    "totp",
    "totp_custom",
]


def counter_to_bytes(counter: int) -> bytes:
    """Encode a counter as the 8-byte big-endian HOTP moving factor.

    Args:
        counter: Unsigned 64-bit counter value.

    Returns:
        The counter as 8 bytes, most significant first.
    """
    if isinstance(counter, bool) or not isinstance(counter, int):
        raise TypeError(
            f"counter must be an integer, not {type(counter).__name__}"
        )
    if not 0 <= counter < 1 << (8 * COUNTER_SIZE):
        raise CounterRangeError(
            f"counter {counter} does not fit in an unsigned 64-bit integer"
        )

    return counter.to_bytes(COUNTER_SIZE, byteorder="big")


def dynamic_truncation(hmac_bytes: bytes) -> int:
    """Extract a 31-bit integer from an HMAC digest via dynamic truncation.

    The low nibble of the last byte selects an offset in [0, 15]; the four
    bytes starting there are read big-endian and the sign bit is cleared.

    Args:
        hmac_bytes: Raw HMAC digest bytes (20, 32 or 64 bytes).

    Returns:
        31-bit truncated integer derived from the HMAC digest.
    """
    if len(hmac_bytes) < MIN_DIGEST_SIZE:
        raise ValueError(
            f"digest must be at least {MIN_DIGEST_SIZE} bytes, "
            f"got {len(hmac_bytes)}"
        )

    offset = hmac_bytes[-1] & 0x0F

    four_bytes = hmac_bytes[offset:offset+4]

    code_32bits = int.from_bytes(four_bytes, byteorder="big")

    code_31bits = code_32bits & 0x7FFFFFFF

    return code_31bits


def format_code(value: int, digits: int) -> str:
    """Reduce a truncated value modulo 10**digits and zero-pad it."""
    validate_digits(digits)
    return str(value % 10 ** digits).zfill(digits)


def hotp(
    secret: bytes,
    counter: int,
    hash_kind: HashLike = HashKind.SHA1,
    digits: int = HOTP_DIGITS,
) -> str:
    """Generate an HMAC-based one-time password (RFC 4226).

    Args:
        secret: Shared secret as raw bytes.
        counter: Moving factor, unsigned 64-bit.
        hash_kind: Hash algorithm for the HMAC.
        digits: Length of the returned code.

    Returns:
        Zero-padded decimal code of exactly ``digits`` characters.
    """
    validate_digits(digits)
    strategy = resolve_hash(hash_kind)

    counter_bytes = counter_to_bytes(counter)
    hmac_bytes = compute_hmac(strategy, secret, counter_bytes)
    code = dynamic_truncation(hmac_bytes)

    logger.debug(f"HOTP counter={counter} hash={strategy.name} digits={digits}")

    return format_code(code, digits)


def totp_custom(
    secret: bytes,
    now_seconds: int,
    hash_kind: HashLike,
    digits: int,
    epoch: int,
    step: int,
) -> str:
    """Generate a time-based one-time password (RFC 6238) with full control.

    Args:
        secret: Shared secret as raw bytes.
        now_seconds: Current time in seconds since the Unix epoch.
        hash_kind: Hash algorithm for the HMAC.
        digits: Length of the returned code.
        epoch: Reference time T0 in seconds.
        step: Time step X in seconds.

    Returns:
        Zero-padded decimal code of exactly ``digits`` characters.

    Raises:
        ConfigurationError: if ``step``, ``epoch`` or ``digits`` is invalid.
        TimeBeforeEpochError: if ``now_seconds`` is before ``epoch``.
    """
    config = TimeConfig(epoch=epoch, step=step, digits=digits)
    counter = config.counter(now_seconds)

    return hotp(secret, counter, hash_kind, config.digits)


def totp(secret: bytes, now_seconds: int, hash_kind: HashLike) -> str:
    """Generate an 8-digit TOTP code with a 30 second step from T0 = 0."""
    return totp_custom(
        secret,
        now_seconds,
        hash_kind,
        DEFAULT_DIGITS,
        DEFAULT_EPOCH,
        DEFAULT_STEP,
    )
