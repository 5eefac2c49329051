import base64
import binascii
import string

SECRET_ENCODINGS = ("base32", "hex", "ascii")


def is_hexadecimal(text: str) -> bool:
    """Check whether a non-empty string contains only hexadecimal digits.

    Args:
        text: String to validate.

    Returns:
        True if every character is a hexadecimal digit.
    """
    return bool(text) and all(char in string.hexdigits for char in text)


def decode_base32(text: str) -> bytes:
    """Decode a Base32 secret as shown by authenticator apps.

    Spaces are ignored, case does not matter and missing ``=`` padding is
    restored.

    Args:
        text: Base32 secret, e.g. ``"JBSW Y3DP EHPK 3PXP"``.

    Returns:
        Raw secret bytes.
    """
    cleaned = "".join(text.split()).upper().rstrip("=")
    padded = cleaned + "=" * (-len(cleaned) % 8)
    try:
        secret = base64.b32decode(padded)
    except binascii.Error:
        raise ValueError("secret is not valid Base32") from None

    if not secret:
        raise ValueError("secret is empty")

    return secret


def decode_secret(text: str, encoding: str = "base32") -> bytes:
    """Convert a textual secret into the raw bytes used as the HMAC key.

    Args:
        text: Secret as typed by the user.
        encoding: One of ``"base32"``, ``"hex"`` or ``"ascii"``.

    Returns:
        Raw secret bytes.
    """
    text = text.strip()

    if encoding == "base32":
        return decode_base32(text)

    if encoding == "hex":
        if not is_hexadecimal(text) or len(text) % 2:
            raise ValueError(
                "secret must be an even number of hexadecimal characters"
            )
        return bytes.fromhex(text)

    if encoding == "ascii":
        if not text:
            raise ValueError("secret is empty")
        try:
            return text.encode("ascii")
        except UnicodeEncodeError:
            raise ValueError("secret contains non-ASCII characters") from None

    raise ValueError(
        f"unknown secret encoding {encoding!r} "
        f"(expected one of {', '.join(SECRET_ENCODINGS)})"
    )
