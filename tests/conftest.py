"""Shared fixtures for pasetokit tests."""

import pytest
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from pasetokit import KeyPair, LocalKey
from .test_vectors import ALICE_SEED_HEX, BOB_SEED_HEX, LOCAL_KEY_HEX, OTHER_LOCAL_KEY_HEX


@pytest.fixture
def local_key() -> LocalKey:
    """The reference 32-byte symmetric key."""
    return LocalKey(bytes.fromhex(LOCAL_KEY_HEX))


@pytest.fixture
def other_local_key() -> LocalKey:
    """An unrelated 32-byte symmetric key."""
    return LocalKey(bytes.fromhex(OTHER_LOCAL_KEY_HEX))


@pytest.fixture
def ed25519_keys() -> KeyPair:
    """Alice's Ed25519 key pair as raw bytes (32-byte public, 64-byte secret)."""
    seed = bytes.fromhex(ALICE_SEED_HEX)
    public = Ed25519PrivateKey.from_private_bytes(seed).public_key().public_bytes_raw()
    return KeyPair(public_key=public, secret_key=seed + public)


@pytest.fixture
def other_ed25519_keys() -> KeyPair:
    """Bob's Ed25519 key pair as key objects."""
    private_key = Ed25519PrivateKey.from_private_bytes(bytes.fromhex(BOB_SEED_HEX))
    return KeyPair(public_key=private_key.public_key(), secret_key=private_key)


@pytest.fixture(scope="session")
def rsa_keys() -> KeyPair:
    """An RSA-2048 key pair (generated once per session)."""
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    return KeyPair(public_key=private_key.public_key(), secret_key=private_key)


@pytest.fixture(scope="session")
def other_rsa_keys() -> KeyPair:
    """An unrelated RSA-2048 key pair."""
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    return KeyPair(public_key=private_key.public_key(), secret_key=private_key)
