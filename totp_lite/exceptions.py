"""Exception types raised by totp_lite.

Messages only ever describe configuration values, never secret material.
"""


class TotpError(Exception):
    """Base class for every error raised by totp_lite."""


class ConfigurationError(TotpError, ValueError):
    """Invalid step, epoch or digit count."""


class TimeBeforeEpochError(TotpError, ValueError):
    """The supplied time lies before the configured epoch."""


class CounterRangeError(TotpError, ValueError):
    """Counter does not fit in an unsigned 64-bit big-endian integer."""


class UnsupportedHashError(TotpError, ValueError):
    """Unknown hash algorithm name."""
