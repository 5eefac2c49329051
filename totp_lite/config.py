"""Time and digit configuration shared by the TOTP entry points."""

from dataclasses import dataclass

from totp_lite.exceptions import ConfigurationError, TimeBeforeEpochError

DEFAULT_STEP = 30
DEFAULT_EPOCH = 0
DEFAULT_DIGITS = 8

# RFC 4226 R4 asks for at least 6 digits. The truncated value is 31 bits
# wide, so beyond 10 digits most codes become unreachable.
MIN_DIGITS = 6
MAX_DIGITS = 10


def _is_int(value: object) -> bool:
    """Return True for real integers, excluding bool."""
    return isinstance(value, int) and not isinstance(value, bool)


def validate_digits(digits: int) -> int:
    """Check that ``digits`` is within [MIN_DIGITS, MAX_DIGITS].

    Codes of 9 or 10 digits are accepted but are not uniformly
    distributed, since 10**digits exceeds or approaches 2**31.

    Raises:
        ConfigurationError: if the digit count is unsupported.
    """
    if not _is_int(digits) or not MIN_DIGITS <= digits <= MAX_DIGITS:
        raise ConfigurationError(
            f"digits must be an integer between {MIN_DIGITS} and "
            f"{MAX_DIGITS}, got {digits!r}"
        )
    return digits


def validate_step(step: int) -> int:
    """Check that ``step`` is a positive integer.

    Raises:
        ConfigurationError: if the step is zero, negative or not an integer.
    """
    if not _is_int(step) or step <= 0:
        raise ConfigurationError(
            f"step must be a positive integer, got {step!r}"
        )
    return step


def validate_epoch(epoch: int) -> int:
    """Check that ``epoch`` is a non-negative integer.

    Raises:
        ConfigurationError: if the epoch is negative or not an integer.
    """
    if not _is_int(epoch) or epoch < 0:
        raise ConfigurationError(
            f"epoch must be a non-negative integer, got {epoch!r}"
        )
    return epoch


def time_counter(
    now_seconds: int, epoch: int = DEFAULT_EPOCH, step: int = DEFAULT_STEP
) -> int:
    """Map a Unix timestamp to the TOTP counter ``(now - epoch) // step``.

    Args:
        now_seconds: Seconds since the Unix epoch.
        epoch: Reference time T0 in seconds.
        step: Time step X in seconds.

    Returns:
        Number of whole steps elapsed since ``epoch``.

    Raises:
        ConfigurationError: if ``step`` or ``epoch`` is invalid.
        TimeBeforeEpochError: if ``now_seconds`` is before ``epoch``.
    """
    validate_step(step)
    validate_epoch(epoch)

    if not _is_int(now_seconds):
        raise TypeError(
            f"now_seconds must be an integer, not {type(now_seconds).__name__}"
        )
    if now_seconds < epoch:
        raise TimeBeforeEpochError(
            f"time {now_seconds} is before epoch {epoch}"
        )

    return (now_seconds - epoch) // step


def remaining_seconds(
    now_seconds: int, epoch: int = DEFAULT_EPOCH, step: int = DEFAULT_STEP
) -> int:
    """Return how many seconds the code for ``now_seconds`` stays valid."""
    time_counter(now_seconds, epoch, step)
    return step - (now_seconds - epoch) % step


@dataclass(frozen=True)
class TimeConfig:
    """Validated TOTP parameters, reusable across calls.

    Construction fails with ``ConfigurationError`` when any field is out of
    range, so an instance always describes a usable configuration.
    """

    epoch: int = DEFAULT_EPOCH
    step: int = DEFAULT_STEP
    digits: int = DEFAULT_DIGITS

    def __post_init__(self) -> None:
        validate_epoch(self.epoch)
        validate_step(self.step)
        validate_digits(self.digits)

    def counter(self, now_seconds: int) -> int:
        return time_counter(now_seconds, self.epoch, self.step)

    def remaining(self, now_seconds: int) -> int:
        return remaining_seconds(now_seconds, self.epoch, self.step)
