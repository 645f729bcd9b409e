"""URL-safe base64 without padding, as used in PASETO token fields."""

import base64
import binascii
import re

from .types import FormatError


_ALPHABET = re.compile(r"\A[A-Za-z0-9_-]*\Z")


def b64encode(data: bytes) -> str:
    """Encode bytes as unpadded base64url."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64decode(data: str) -> bytes:
    """
    Decode an unpadded base64url string.

    Only the canonical encoding is accepted: padding characters, characters
    outside the URL-safe alphabet, impossible lengths and non-zero trailing
    bits are all rejected.

    Args:
        data: Encoded field from a token

    Returns:
        Decoded bytes

    Raises:
        FormatError: If the field is not canonical unpadded base64url
    """
    if "=" in data:
        raise FormatError("Base64url field must not be padded")

    if not _ALPHABET.match(data):
        raise FormatError("Base64url field contains invalid characters")

    if len(data) % 4 == 1:
        raise FormatError(f"Invalid base64url length: {len(data)}")

    padded = data + "=" * (-len(data) % 4)
    try:
        decoded = base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as e:
        raise FormatError(f"Invalid base64url field: {e}") from e

    if b64encode(decoded) != data:
        raise FormatError("Base64url field is not canonically encoded")

    return decoded
