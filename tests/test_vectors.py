"""Shared test data for pasetokit tests."""

# 32-byte symmetric key used in the PASETO reference test vectors
LOCAL_KEY_HEX = "707172737475767778797a7b7c7d7e7f808182838485868788898a8b8c8d8e8f"
OTHER_LOCAL_KEY_HEX = "0000000000000000000000000000000000000000000000000000000000000001"

# Ed25519 seeds
ALICE_SEED_HEX = "0000000000000000000000000000000000000000000000000000000000000001"
BOB_SEED_HEX = "0000000000000000000000000000000000000000000000000000000000000002"

# Payloads covering edge cases
TEST_PAYLOADS = {
    "empty": b"",
    "single_byte": b"X",
    "hello": b"hello world",
    "json": b'{"data":"this is a signed message","exp":"2039-01-01T00:00:00+00:00"}',
    "binary": bytes(range(256)),
    "dots": b"...v2.local...",
    "utf8": "Café résumé 你好".encode("utf-8"),
    "long": b"The quick brown fox jumps over the lazy dog. " * 40,
}

TEST_FOOTERS = {
    "none": b"",
    "kid": b"kid:1",
    "json": b'{"kid":"zVhMiPBP9fRf2snEcT7gFTioeA9COcNy9DfgL1W60haN"}',
    "binary": b"\x00\xff\x00",
}

# Fixed randomness and inputs for known-answer tests: os.urandom is patched
# to return a prefix of FIXED_RANDOM, and the expected body is rebuilt from
# the primitives directly.
FIXED_RANDOM_HEX = "000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f"
REFERENCE_PAYLOAD = b'{"data":"this is a secret message","exp":"2039-01-01T00:00:00+00:00"}'
REFERENCE_FOOTER = b'{"kid":"zVhMiPBP9fRf2snEcT7gFTioeA9COcNy9DfgL1W60haN"}'
