"""
pasetokit - Platform-Agnostic Security Tokens

Python implementation of PASETO v1 (AES-256-CTR + HMAC-SHA384, RSA-PSS) and
v2 (XChaCha20-Poly1305, Ed25519).
"""

from .encoding import b64encode, b64decode
from .pae import pre_auth_encode
from .wire import TokenParts, header, encode_token, decode_token, extract_footer
from .keys import LocalKey, KeyPair
from .types import (
    Version,
    Purpose,
    Token,
    ErrorKind,
    PasetoError,
    FormatError,
    UnsupportedVersionError,
    UnsupportedPurposeError,
    KeyFormatError,
    AuthenticationError,
)
from .paseto import (
    PasetoConfig,
    Paseto,
    generate_token,
    parse_token,
)

__version__ = "0.1.0"

__all__ = [
    # Codec
    "b64encode",
    "b64decode",
    "pre_auth_encode",
    # Wire format
    "TokenParts",
    "header",
    "encode_token",
    "decode_token",
    "extract_footer",
    # Keys
    "LocalKey",
    "KeyPair",
    # Types
    "Version",
    "Purpose",
    "Token",
    # Errors
    "ErrorKind",
    "PasetoError",
    "FormatError",
    "UnsupportedVersionError",
    "UnsupportedPurposeError",
    "KeyFormatError",
    "AuthenticationError",
    # Tokens
    "PasetoConfig",
    "Paseto",
    "generate_token",
    "parse_token",
]
