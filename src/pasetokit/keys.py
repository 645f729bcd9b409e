"""Key shapes and per-version key loading for pasetokit."""

from dataclasses import dataclass
from typing import Any, Union

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey
from cryptography.hazmat.primitives.serialization import (
    load_pem_private_key,
    load_pem_public_key,
)

from .types import (
    KeyFormatError,
    ED25519_PUBLIC_KEY_SIZE,
    ED25519_SECRET_KEY_SIZE,
    ED25519_SEED_SIZE,
    LOCAL_KEY_SIZE,
    RSA_KEY_BITS,
    RSA_PUBLIC_EXPONENT,
)


@dataclass(frozen=True)
class LocalKey:
    """Symmetric key for local (encrypted) tokens. Always 32 bytes."""
    material: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.material, bytes):
            raise KeyFormatError(f"Local key must be bytes, got {type(self.material).__name__}")
        if len(self.material) != LOCAL_KEY_SIZE:
            raise KeyFormatError(
                f"Local key must be {LOCAL_KEY_SIZE} bytes, got {len(self.material)}"
            )

    def __repr__(self) -> str:
        return "LocalKey(<redacted>)"


@dataclass(frozen=True)
class KeyPair:
    """
    Asymmetric key pair for public (signed) tokens.

    Only the secret key is needed to generate a token and only the public key
    is needed to parse one, so either side may be None.

    Attributes:
        public_key: Ed25519 (v2) or RSA (v1) public key, as an object or bytes.
        secret_key: Ed25519 (v2) or RSA (v1) private key, as an object or bytes.
    """
    public_key: Any = None
    secret_key: Any = None

    def __repr__(self) -> str:
        secret = "<redacted>" if self.secret_key is not None else None
        return f"KeyPair(public_key={self.public_key!r}, secret_key={secret})"


def as_local_key(key: Union[LocalKey, bytes]) -> LocalKey:
    """
    Coerce a key argument to a LocalKey.

    Raises:
        KeyFormatError: If the key is a KeyPair, not bytes, or not 32 bytes
    """
    if isinstance(key, LocalKey):
        return key
    if isinstance(key, bytearray):
        key = bytes(key)
    if not isinstance(key, bytes):
        raise KeyFormatError(
            f"Local tokens need a {LOCAL_KEY_SIZE}-byte symmetric key, got {type(key).__name__}"
        )
    return LocalKey(key)


def as_key_pair(key: Any) -> KeyPair:
    """
    Check that a key argument is a KeyPair.

    Raises:
        KeyFormatError: If the key is anything else (e.g. a symmetric key)
    """
    if not isinstance(key, KeyPair):
        raise KeyFormatError(f"Public tokens need a KeyPair, got {type(key).__name__}")
    return key


def ed25519_public_key(key_pair: KeyPair) -> Ed25519PublicKey:
    """Load the v2 public key from a key pair (object or 32 raw bytes)."""
    key = key_pair.public_key
    if key is None:
        raise KeyFormatError("Key pair has no public key")
    if isinstance(key, Ed25519PublicKey):
        return key
    if not isinstance(key, bytes) or len(key) != ED25519_PUBLIC_KEY_SIZE:
        raise KeyFormatError(
            f"v2 public key must be an Ed25519 public key or {ED25519_PUBLIC_KEY_SIZE} bytes"
        )
    try:
        return Ed25519PublicKey.from_public_bytes(key)
    except ValueError as e:
        raise KeyFormatError(f"Invalid v2 public key: {e}") from e


def ed25519_secret_key(key_pair: KeyPair) -> Ed25519PrivateKey:
    """
    Load the v2 secret key from a key pair.

    Accepts an Ed25519PrivateKey, a 32-byte seed, or the 64-byte
    seed-and-public-key form used by libsodium. In the 64-byte form the
    trailing public key must match the one derived from the seed.
    """
    key = key_pair.secret_key
    if key is None:
        raise KeyFormatError("Key pair has no secret key")
    if isinstance(key, Ed25519PrivateKey):
        return key
    if not isinstance(key, bytes) or len(key) not in (ED25519_SEED_SIZE, ED25519_SECRET_KEY_SIZE):
        raise KeyFormatError(
            f"v2 secret key must be an Ed25519 private key, a {ED25519_SEED_SIZE}-byte seed "
            f"or {ED25519_SECRET_KEY_SIZE} bytes"
        )

    private_key = Ed25519PrivateKey.from_private_bytes(key[:ED25519_SEED_SIZE])
    if len(key) == ED25519_SECRET_KEY_SIZE:
        if private_key.public_key().public_bytes_raw() != key[ED25519_SEED_SIZE:]:
            raise KeyFormatError("v2 secret key does not match its embedded public key")
    return private_key


def _check_rsa_params(key: Union[RSAPrivateKey, RSAPublicKey]) -> None:
    if key.key_size != RSA_KEY_BITS:
        raise KeyFormatError(f"v1 keys must be RSA-{RSA_KEY_BITS}, got RSA-{key.key_size}")

    if isinstance(key, RSAPrivateKey):
        key = key.public_key()
    if key.public_numbers().e != RSA_PUBLIC_EXPONENT:
        raise KeyFormatError(f"v1 keys must use public exponent {RSA_PUBLIC_EXPONENT}")


def rsa_public_key(key_pair: KeyPair) -> RSAPublicKey:
    """Load the v1 public key from a key pair (object or PEM bytes)."""
    key = key_pair.public_key
    if key is None:
        raise KeyFormatError("Key pair has no public key")
    if isinstance(key, bytes):
        key = _load_pem(key, private=False)
    if not isinstance(key, RSAPublicKey):
        raise KeyFormatError(f"v1 public key must be an RSA public key, got {type(key).__name__}")
    _check_rsa_params(key)
    return key


def rsa_secret_key(key_pair: KeyPair) -> RSAPrivateKey:
    """Load the v1 secret key from a key pair (object or unencrypted PEM bytes)."""
    key = key_pair.secret_key
    if key is None:
        raise KeyFormatError("Key pair has no secret key")
    if isinstance(key, bytes):
        key = _load_pem(key, private=True)
    if not isinstance(key, RSAPrivateKey):
        raise KeyFormatError(f"v1 secret key must be an RSA private key, got {type(key).__name__}")
    _check_rsa_params(key)
    return key


def _load_pem(data: bytes, private: bool) -> Any:
    try:
        if private:
            return load_pem_private_key(data, password=None)
        return load_pem_public_key(data)
    except (ValueError, TypeError) as e:
        raise KeyFormatError(f"Could not load PEM key: {e}") from e
