"""
PASETO v1: AES-256-CTR + HMAC-SHA384 (local) and RSA-PSS-SHA384 (public).

Local body:  nonce (32 bytes) || ciphertext || HMAC-SHA384 tag (48 bytes)
Public body: message || RSA-PSS signature (256 bytes)

The local nonce is split in two: the first half salts HKDF, the second half
is the AES-CTR counter block.
"""

import logging
import os
from typing import Tuple

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hmac
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.hashes import SHA384
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from .keys import KeyPair, LocalKey, rsa_public_key, rsa_secret_key
from .pae import pre_auth_encode
from .types import (
    AuthenticationError,
    Purpose,
    Version,
    LOCAL_KEY_SIZE,
    V1_AUTH_KEY_INFO,
    V1_ENCRYPTION_KEY_INFO,
    V1_NONCE_SIZE,
    V1_PSS_SALT_SIZE,
    V1_RANDOM_SIZE,
    V1_SIGNATURE_SIZE,
    V1_TAG_SIZE,
)
from .wire import header

logger = logging.getLogger(__name__)

LOCAL_HEADER = header(Version.V1, Purpose.LOCAL)
PUBLIC_HEADER = header(Version.V1, Purpose.PUBLIC)

_SALT_SIZE = V1_NONCE_SIZE // 2


def _hmac_sha384(key: bytes, data: bytes) -> hmac.HMAC:
    mac = hmac.HMAC(key, SHA384())
    mac.update(data)
    return mac


def _derive_nonce(payload: bytes, random_key: bytes) -> bytes:
    """Derive the 32-byte nonce from the payload, keyed with fresh random bytes."""
    return _hmac_sha384(random_key, payload).finalize()[:V1_NONCE_SIZE]


def _split_keys(key: LocalKey, nonce: bytes) -> Tuple[bytes, bytes]:
    """Derive the (encryption key, authentication key) pair for one nonce."""
    salt = nonce[:_SALT_SIZE]

    encryption_hkdf = HKDF(algorithm=SHA384(), length=LOCAL_KEY_SIZE, salt=salt, info=V1_ENCRYPTION_KEY_INFO)
    auth_hkdf = HKDF(algorithm=SHA384(), length=LOCAL_KEY_SIZE, salt=salt, info=V1_AUTH_KEY_INFO)

    return encryption_hkdf.derive(key.material), auth_hkdf.derive(key.material)


def _aes_ctr(key: bytes, nonce: bytes, data: bytes) -> bytes:
    cipher = Cipher(algorithms.AES(key), modes.CTR(nonce[_SALT_SIZE:]))
    # CTR mode is symmetric; the same transform encrypts and decrypts
    encryptor = cipher.encryptor()
    return encryptor.update(data) + encryptor.finalize()


def encrypt(payload: bytes, key: LocalKey, footer: bytes = b"") -> bytes:
    """
    Encrypt a payload for a v1.local token.

    Args:
        payload: Plaintext
        key: 32-byte symmetric key
        footer: Authenticated, unencrypted footer

    Returns:
        Token body: nonce || ciphertext || tag
    """
    nonce = _derive_nonce(payload, os.urandom(V1_RANDOM_SIZE))
    encryption_key, auth_key = _split_keys(key, nonce)

    ciphertext = _aes_ctr(encryption_key, nonce, payload)
    tag = _hmac_sha384(auth_key, pre_auth_encode([LOCAL_HEADER, nonce, ciphertext, footer])).finalize()

    return nonce + ciphertext + tag


def decrypt(body: bytes, key: LocalKey, footer: bytes = b"") -> bytes:
    """
    Decrypt the body of a v1.local token.

    The tag is checked in constant time before anything is decrypted.

    Args:
        body: nonce || ciphertext || tag
        key: 32-byte symmetric key
        footer: Footer from the token (empty if absent)

    Returns:
        Plaintext payload

    Raises:
        AuthenticationError: If the body is truncated or the tag does not verify
    """
    if len(body) < V1_NONCE_SIZE + V1_TAG_SIZE:
        logger.debug("v1.local body too short: %d bytes", len(body))
        raise AuthenticationError()

    nonce = body[:V1_NONCE_SIZE]
    ciphertext = body[V1_NONCE_SIZE:-V1_TAG_SIZE]
    tag = body[-V1_TAG_SIZE:]

    encryption_key, auth_key = _split_keys(key, nonce)

    mac = _hmac_sha384(auth_key, pre_auth_encode([LOCAL_HEADER, nonce, ciphertext, footer]))
    try:
        mac.verify(tag)
    except InvalidSignature:
        logger.debug("v1.local authentication failed")
        raise AuthenticationError() from None

    return _aes_ctr(encryption_key, nonce, ciphertext)


def _pss() -> padding.PSS:
    return padding.PSS(mgf=padding.MGF1(SHA384()), salt_length=V1_PSS_SALT_SIZE)


def sign(payload: bytes, key_pair: KeyPair, footer: bytes = b"") -> bytes:
    """
    Sign a payload for a v1.public token.

    Returns:
        Token body: payload || signature
    """
    secret_key = rsa_secret_key(key_pair)
    signature = secret_key.sign(pre_auth_encode([PUBLIC_HEADER, payload, footer]), _pss(), SHA384())
    return payload + signature


def verify(body: bytes, key_pair: KeyPair, footer: bytes = b"") -> bytes:
    """
    Verify the body of a v1.public token.

    Returns:
        The signed payload

    Raises:
        AuthenticationError: If the body is truncated or the signature is invalid
    """
    public_key = rsa_public_key(key_pair)

    if len(body) < V1_SIGNATURE_SIZE:
        logger.debug("v1.public body too short: %d bytes", len(body))
        raise AuthenticationError()

    payload = body[:-V1_SIGNATURE_SIZE]
    signature = body[-V1_SIGNATURE_SIZE:]

    try:
        public_key.verify(signature, pre_auth_encode([PUBLIC_HEADER, payload, footer]), _pss(), SHA384())
    except InvalidSignature:
        logger.debug("v1.public signature verification failed")
        raise AuthenticationError() from None

    return payload
