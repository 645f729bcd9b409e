"""Token string encoding and decoding."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from .encoding import b64encode, b64decode
from .types import (
    FormatError,
    Purpose,
    UnsupportedPurposeError,
    UnsupportedVersionError,
    Version,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenParts:
    """Decoded but unverified fields of a token string."""
    version: Version
    purpose: Purpose
    body: bytes  # ciphertext (local) or message + signature (public)
    footer: Optional[bytes]  # None when the token has no footer field


def header(version: Version, purpose: Purpose) -> bytes:
    """Return the header that prefixes every PAE, e.g. ``b"v2.public."``."""
    return f"{version.value}.{purpose.value}.".encode("ascii")


def encode_token(version: Version, purpose: Purpose, body: bytes, footer: bytes = b"") -> str:
    """
    Serialize a token body and footer to the dotted wire format.

    Format:
        version "." purpose "." base64url(body) [ "." base64url(footer) ]

    The footer field is only written when the footer is non-empty.

    Args:
        version: Token version
        purpose: Token purpose
        body: Ciphertext or signed message
        footer: Authenticated footer bytes

    Returns:
        The token string
    """
    token = header(version, purpose).decode("ascii") + b64encode(body)
    if footer:
        token += "." + b64encode(footer)
    return token


def _split(token: Union[str, bytes]) -> List[str]:
    if isinstance(token, (bytes, bytearray)):
        try:
            token = bytes(token).decode("ascii")
        except UnicodeDecodeError as e:
            raise FormatError("Token must be ASCII") from e
    elif not isinstance(token, str):
        raise TypeError(f"Token must be str or bytes, got {type(token).__name__}")

    fields = token.split(".")
    if len(fields) not in (3, 4):
        logger.debug("Rejected token with %d fields", len(fields))
        raise FormatError(f"Token must have 3 or 4 fields, got {len(fields)}")
    return fields


def decode_token(token: Union[str, bytes]) -> TokenParts:
    """
    Parse a token string into its decoded fields.

    Version and purpose are checked before the base64 fields are decoded and
    before any key is looked at. Nothing is verified here.

    Args:
        token: Token string

    Returns:
        TokenParts with the decoded body and footer

    Raises:
        FormatError: On a wrong field count or invalid base64url
        UnsupportedVersionError: If the version is not v1 or v2
        UnsupportedPurposeError: If the purpose is not local or public
    """
    fields = _split(token)

    try:
        version = Version.from_string(fields[0])
        purpose = Purpose.from_string(fields[1])
    except (UnsupportedVersionError, UnsupportedPurposeError) as e:
        logger.debug("Rejected token header: %s", e)
        raise

    body = b64decode(fields[2])
    footer = b64decode(fields[3]) if len(fields) == 4 else None

    return TokenParts(version=version, purpose=purpose, body=body, footer=footer)


def extract_footer(token: Union[str, bytes]) -> Optional[bytes]:
    """
    Return the decoded footer of a token without verifying anything.

    Useful for reading a key identifier before choosing the key to parse
    with. The footer must not be trusted until the token has been parsed.
    """
    return decode_token(token).footer
