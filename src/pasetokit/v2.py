"""
PASETO v2: XChaCha20-Poly1305 (local) and Ed25519 (public).

Local body:  nonce (24 bytes) || ciphertext || Poly1305 tag (16 bytes)
Public body: message || Ed25519 signature (64 bytes)
"""

import hashlib
import logging
import os

from cryptography.exceptions import InvalidSignature
from nacl.bindings import (
    crypto_aead_xchacha20poly1305_ietf_decrypt,
    crypto_aead_xchacha20poly1305_ietf_encrypt,
)
from nacl.exceptions import CryptoError

from .keys import KeyPair, LocalKey, ed25519_public_key, ed25519_secret_key
from .pae import pre_auth_encode
from .types import (
    AuthenticationError,
    Purpose,
    Version,
    V2_NONCE_SIZE,
    V2_SIGNATURE_SIZE,
    V2_TAG_SIZE,
)
from .wire import header

logger = logging.getLogger(__name__)

LOCAL_HEADER = header(Version.V2, Purpose.LOCAL)
PUBLIC_HEADER = header(Version.V2, Purpose.PUBLIC)


def _derive_nonce(payload: bytes, random_key: bytes) -> bytes:
    """Derive the AEAD nonce from the payload, keyed with fresh random bytes."""
    return hashlib.blake2b(payload, key=random_key, digest_size=V2_NONCE_SIZE).digest()


def encrypt(payload: bytes, key: LocalKey, footer: bytes = b"") -> bytes:
    """
    Encrypt a payload for a v2.local token.

    Args:
        payload: Plaintext
        key: 32-byte symmetric key
        footer: Authenticated, unencrypted footer

    Returns:
        Token body: nonce || ciphertext (with tag)
    """
    nonce = _derive_nonce(payload, os.urandom(V2_NONCE_SIZE))
    aad = pre_auth_encode([LOCAL_HEADER, nonce, footer])

    ciphertext = crypto_aead_xchacha20poly1305_ietf_encrypt(payload, aad, nonce, key.material)
    return nonce + ciphertext


def decrypt(body: bytes, key: LocalKey, footer: bytes = b"") -> bytes:
    """
    Decrypt the body of a v2.local token.

    Args:
        body: nonce || ciphertext (with tag)
        key: 32-byte symmetric key
        footer: Footer from the token (empty if absent)

    Returns:
        Plaintext payload

    Raises:
        AuthenticationError: If the body is truncated or the tag does not verify
    """
    if len(body) < V2_NONCE_SIZE + V2_TAG_SIZE:
        logger.debug("v2.local body too short: %d bytes", len(body))
        raise AuthenticationError()

    nonce = body[:V2_NONCE_SIZE]
    ciphertext = body[V2_NONCE_SIZE:]
    aad = pre_auth_encode([LOCAL_HEADER, nonce, footer])

    try:
        return crypto_aead_xchacha20poly1305_ietf_decrypt(ciphertext, aad, nonce, key.material)
    except CryptoError:
        logger.debug("v2.local authentication failed")
        raise AuthenticationError() from None


def sign(payload: bytes, key_pair: KeyPair, footer: bytes = b"") -> bytes:
    """
    Sign a payload for a v2.public token.

    Returns:
        Token body: payload || signature
    """
    secret_key = ed25519_secret_key(key_pair)
    signature = secret_key.sign(pre_auth_encode([PUBLIC_HEADER, payload, footer]))
    return payload + signature


def verify(body: bytes, key_pair: KeyPair, footer: bytes = b"") -> bytes:
    """
    Verify the body of a v2.public token.

    Returns:
        The signed payload

    Raises:
        AuthenticationError: If the body is truncated or the signature is invalid
    """
    public_key = ed25519_public_key(key_pair)

    if len(body) < V2_SIGNATURE_SIZE:
        logger.debug("v2.public body too short: %d bytes", len(body))
        raise AuthenticationError()

    payload = body[:-V2_SIGNATURE_SIZE]
    signature = body[-V2_SIGNATURE_SIZE:]

    try:
        public_key.verify(signature, pre_auth_encode([PUBLIC_HEADER, payload, footer]))
    except InvalidSignature:
        logger.debug("v2.public signature verification failed")
        raise AuthenticationError() from None

    return payload
