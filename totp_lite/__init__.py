"""Time-based one-time passwords (RFC 6238) and HOTP (RFC 4226)."""

from totp_lite.config import (
    DEFAULT_DIGITS,
    DEFAULT_EPOCH,
    DEFAULT_STEP,
    MAX_DIGITS,
    MIN_DIGITS,
    TimeConfig,
)
from totp_lite.exceptions import (
    ConfigurationError,
    CounterRangeError,
    TimeBeforeEpochError,
    TotpError,
    UnsupportedHashError,
)
from totp_lite.hashes import HashKind, HashStrategy, resolve_hash
from totp_lite.otp import (
    counter_to_bytes,
    dynamic_truncation,
    format_code,
    hotp,
    remaining_seconds,
    time_counter,
    totp,
    totp_custom,
)

__all__ = [
    "DEFAULT_DIGITS",
    "DEFAULT_EPOCH",
    "DEFAULT_STEP",
    "MAX_DIGITS",
    "MIN_DIGITS",
    "ConfigurationError",
    "CounterRangeError",
    "HashKind",
    "HashStrategy",
    "TimeBeforeEpochError",
    "TimeConfig",
    "TotpError",
    "UnsupportedHashError",
    "counter_to_bytes",
    "dynamic_truncation",
    "format_code",
    "hotp",
    "remaining_seconds",
    "resolve_hash",
    "time_counter",
    "totp",
    "totp_custom",
]
