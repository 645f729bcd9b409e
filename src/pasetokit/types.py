"""Type definitions for pasetokit."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Category of a token error."""
    FORMAT = "format"
    UNSUPPORTED_VERSION = "unsupported_version"
    UNSUPPORTED_PURPOSE = "unsupported_purpose"
    KEY_FORMAT = "key_format"
    AUTHENTICATION = "authentication"


# Exception types
class PasetoError(Exception):
    """
    Base exception for pasetokit errors.

    Only subclasses are raised; each sets its own kind.
    """
    kind: Optional[ErrorKind] = None


class FormatError(PasetoError):
    """Malformed token string: wrong field count or invalid base64 framing."""
    kind = ErrorKind.FORMAT


class UnsupportedVersionError(PasetoError):
    """Token version is unknown or not allowed."""
    kind = ErrorKind.UNSUPPORTED_VERSION

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"Unsupported version: {version!r} (only v1 and v2 are supported)")


class UnsupportedPurposeError(PasetoError):
    """Token purpose is neither local nor public."""
    kind = ErrorKind.UNSUPPORTED_PURPOSE

    def __init__(self, purpose: str) -> None:
        self.purpose = purpose
        super().__init__(f"Unsupported purpose: {purpose!r} (expected 'local' or 'public')")


class KeyFormatError(PasetoError):
    """Key shape or size does not match the requested version and purpose."""
    kind = ErrorKind.KEY_FORMAT


class AuthenticationError(PasetoError):
    """Tag or signature verification failed."""
    kind = ErrorKind.AUTHENTICATION

    def __init__(self) -> None:
        super().__init__("Token authentication failed")


class Version(Enum):
    """PASETO protocol versions."""
    V1 = "v1"
    V2 = "v2"

    @classmethod
    def from_string(cls, value: str) -> "Version":
        """Parse a version name, ignoring case."""
        if not isinstance(value, str):
            raise UnsupportedVersionError(value)
        for version in cls:
            if version.value == value.lower():
                return version
        raise UnsupportedVersionError(value)


class Purpose(Enum):
    """PASETO token purposes."""
    LOCAL = "local"
    PUBLIC = "public"

    @classmethod
    def from_string(cls, value: str) -> "Purpose":
        """Parse a purpose name. Matching is case-sensitive."""
        if not isinstance(value, str):
            raise UnsupportedPurposeError(value)
        for purpose in cls:
            if purpose.value == value:
                return purpose
        raise UnsupportedPurposeError(value)


@dataclass(frozen=True)
class Token:
    """A verified (and, for local tokens, decrypted) token."""
    version: Version
    purpose: Purpose
    payload: bytes
    footer: Optional[bytes] = None

    @property
    def header(self) -> bytes:
        """The authenticated header, e.g. ``b"v2.local."``."""
        return f"{self.version.value}.{self.purpose.value}.".encode("ascii")


# Key sizes
LOCAL_KEY_SIZE = 32
ED25519_PUBLIC_KEY_SIZE = 32
ED25519_SEED_SIZE = 32
ED25519_SECRET_KEY_SIZE = 64
RSA_KEY_BITS = 2048
RSA_PUBLIC_EXPONENT = 65537

# v1 constants
V1_NONCE_SIZE = 32
V1_RANDOM_SIZE = 32
V1_TAG_SIZE = 48
V1_SIGNATURE_SIZE = 256
V1_PSS_SALT_SIZE = 48
V1_ENCRYPTION_KEY_INFO = b"paseto-encryption-key"
V1_AUTH_KEY_INFO = b"paseto-auth-key-for-aead"

# v2 constants
V2_NONCE_SIZE = 24
V2_TAG_SIZE = 16
V2_SIGNATURE_SIZE = 64
