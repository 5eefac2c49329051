import sys
import time
import logging as log
from getpass import getpass
from argparse import ArgumentParser, Namespace

from totp_lite.config import DEFAULT_DIGITS, DEFAULT_EPOCH, DEFAULT_STEP
from totp_lite.hashes import HashKind
from totp_lite.otp import hotp, totp_custom
from totp_lite.utils import SECRET_ENCODINGS, decode_secret

logger = log.getLogger(__name__)


def generate_code(args: Namespace) -> str:
    """Compute the requested HOTP or TOTP code from parsed arguments.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Zero-padded decimal code.
    """
    secret_text = args.secret
    if secret_text is None:
        secret_text = getpass("Enter your TOTP secret: ")

    secret = decode_secret(secret_text, args.encoding)

    if args.counter is not None:
        return hotp(secret, args.counter, args.algorithm, args.digits)

    now = args.time if args.time is not None else int(time.time())
    logger.debug(f"Computing TOTP at t={now}")

    return totp_custom(
        secret, now, args.algorithm, args.digits, args.epoch, args.step
    )


def validate_arg(parser: ArgumentParser, argv: list[str] | None) -> Namespace:
    """Define CLI arguments and parse them.

    Args:
        parser: ArgumentParser instance to configure.
        argv: Arguments to parse, defaults to ``sys.argv[1:]``.

    Returns:
        Parsed arguments as a Namespace object.
    """
    parser.add_argument(
        "secret",
        nargs="?",
        metavar="SECRET",
        help="Shared secret; prompted for when omitted."
    )
    parser.add_argument(
        "-e", "--encoding",
        choices=SECRET_ENCODINGS,
        default="base32",
        help="How SECRET is written (default: base32)."
    )
    parser.add_argument(
        "-a", "--algorithm",
        choices=[kind.name.lower() for kind in HashKind],
        default="sha1",
        help="HMAC hash algorithm (default: sha1)."
    )
    parser.add_argument(
        "-d", "--digits",
        type=int,
        default=DEFAULT_DIGITS,
        help=f"Code length (default: {DEFAULT_DIGITS})."
    )
    parser.add_argument(
        "-s", "--step",
        type=int,
        default=DEFAULT_STEP,
        help=f"Time step in seconds (default: {DEFAULT_STEP})."
    )
    parser.add_argument(
        "--epoch",
        type=int,
        default=DEFAULT_EPOCH,
        help=f"Start time T0 in Unix seconds (default: {DEFAULT_EPOCH})."
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-t", "--time",
        type=int,
        metavar="SECONDS",
        help="Unix time to compute the code for (default: now)."
    )
    group.add_argument(
        "-c", "--counter",
        type=int,
        help="Print the HOTP code for this counter instead."
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log each step on stderr."
    )

    args = parser.parse_args(argv)

    return args


def main(argv: list[str] | None = None) -> int:
    """Entry point for the TOTP generator CLI."""
    try:
        description = "Time-based one-time password (TOTP) generator"
        parser = ArgumentParser(prog="totp-lite", description=description)
        args = validate_arg(parser, argv)

        if args.verbose:
            log.basicConfig(
                stream=sys.stderr,
                level=log.DEBUG,
                format="{asctime} - {levelname} - {message}",
                style="{",
                datefmt="%Y-%m-%d %H:%M",
            )

        print(generate_code(args))

    except EOFError:
        print("EOFError: no secret provided")
        return 1

    except (OSError, ValueError) as e:
        print(f"{type(e).__name__}: {e}")
        return 1

    return 0
