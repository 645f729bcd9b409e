"""
Token generation and parsing.

The Paseto class routes each (version, purpose) pair to its engine:

    v1.local  -> AES-256-CTR + HMAC-SHA384
    v1.public -> RSA-PSS-SHA384
    v2.local  -> XChaCha20-Poly1305
    v2.public -> Ed25519
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, Optional, Tuple, Union

from . import v1, v2
from .keys import as_key_pair, as_local_key
from .types import Purpose, Token, UnsupportedVersionError, Version
from .wire import decode_token, encode_token

logger = logging.getLogger(__name__)

KeyCheck = Callable[[Any], Any]

# (version, purpose) -> (key check, engine function)
_GENERATORS: Dict[Tuple[Version, Purpose], Tuple[KeyCheck, Callable[..., bytes]]] = {
    (Version.V1, Purpose.LOCAL): (as_local_key, v1.encrypt),
    (Version.V1, Purpose.PUBLIC): (as_key_pair, v1.sign),
    (Version.V2, Purpose.LOCAL): (as_local_key, v2.encrypt),
    (Version.V2, Purpose.PUBLIC): (as_key_pair, v2.sign),
}

_PARSERS: Dict[Tuple[Version, Purpose], Tuple[KeyCheck, Callable[..., bytes]]] = {
    (Version.V1, Purpose.LOCAL): (as_local_key, v1.decrypt),
    (Version.V1, Purpose.PUBLIC): (as_key_pair, v1.verify),
    (Version.V2, Purpose.LOCAL): (as_local_key, v2.decrypt),
    (Version.V2, Purpose.PUBLIC): (as_key_pair, v2.verify),
}


@dataclass(frozen=True)
class PasetoConfig:
    """Configuration for a Paseto instance."""
    versions: FrozenSet[Version] = field(default_factory=lambda: frozenset(Version))


def _to_bytes(value: Union[str, bytes], name: str) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise TypeError(f"{name} must be str or bytes, got {type(value).__name__}")


class Paseto:
    """
    PASETO token codec.

    Example usage:
        ```python
        paseto = Paseto(PasetoConfig(versions=frozenset({Version.V2})))

        token = paseto.generate("v2", "local", b"hello world", key, footer="kid:1")
        parsed = paseto.parse(token, key)
        assert parsed.payload == b"hello world"
        ```

    Version and purpose are always validated before the key is inspected,
    and the key shape is validated before any cryptography runs.
    """

    def __init__(self, config: Optional[PasetoConfig] = None) -> None:
        self._config = config or PasetoConfig()

    @property
    def config(self) -> PasetoConfig:
        return self._config

    def _check_version(self, version: Version) -> None:
        if version not in self._config.versions:
            logger.debug("Version %s is not enabled", version.value)
            raise UnsupportedVersionError(version.value)

    def generate(
        self,
        version: Union[Version, str],
        purpose: Union[Purpose, str],
        payload: Union[str, bytes],
        key: Any,
        footer: Union[str, bytes] = b"",
    ) -> str:
        """
        Generate a token.

        Args:
            version: "v1" or "v2" (case-insensitive), or a Version
            purpose: "local" or "public", or a Purpose
            payload: Message to encrypt (local) or sign (public)
            key: LocalKey or 32 bytes for local; KeyPair with a secret key for public
            footer: Optional authenticated footer, e.g. a key id

        Returns:
            The token string

        Raises:
            UnsupportedVersionError: If the version is unknown or disabled
            UnsupportedPurposeError: If the purpose is unknown
            KeyFormatError: If the key does not fit the version and purpose
        """
        if not isinstance(version, Version):
            version = Version.from_string(version)
        if not isinstance(purpose, Purpose):
            purpose = Purpose.from_string(purpose)
        self._check_version(version)

        check_key, engine = _GENERATORS[(version, purpose)]
        checked_key = check_key(key)

        payload_bytes = _to_bytes(payload, "payload")
        footer_bytes = _to_bytes(footer, "footer")

        body = engine(payload_bytes, checked_key, footer_bytes)
        return encode_token(version, purpose, body, footer_bytes)

    def parse(self, token: Union[str, bytes], key: Any) -> Token:
        """
        Parse and verify a token.

        Args:
            token: Token string
            key: LocalKey or 32 bytes for local; KeyPair with a public key for public

        Returns:
            Token with the decrypted or verified payload

        Raises:
            FormatError: If the token is malformed
            UnsupportedVersionError: If the version is unknown or disabled
            UnsupportedPurposeError: If the purpose is unknown
            KeyFormatError: If the key does not fit the version and purpose
            AuthenticationError: If decryption or verification fails
        """
        parts = decode_token(token)
        self._check_version(parts.version)

        check_key, engine = _PARSERS[(parts.version, parts.purpose)]
        checked_key = check_key(key)

        payload = engine(parts.body, checked_key, parts.footer or b"")

        return Token(
            version=parts.version,
            purpose=parts.purpose,
            payload=payload,
            footer=parts.footer,
        )


_default = Paseto()


def generate_token(
    version: Union[Version, str],
    purpose: Union[Purpose, str],
    payload: Union[str, bytes],
    key: Any,
    footer: Union[str, bytes] = b"",
) -> str:
    """Generate a token with the default configuration. See Paseto.generate."""
    return _default.generate(version, purpose, payload, key, footer)


def parse_token(token: Union[str, bytes], key: Any) -> Token:
    """Parse a token with the default configuration. See Paseto.parse."""
    return _default.parse(token, key)
