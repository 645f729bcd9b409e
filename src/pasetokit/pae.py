"""
Pre-Authentication Encoding (PAE).

PAE packs an ordered list of byte strings into a single byte string that is
used as associated data (local tokens) or as the signed message (public
tokens). Every part is length-prefixed, so no two different lists encode to
the same output:

    LE64(count) || LE64(len(p1)) || p1 || ... || LE64(len(pn)) || pn
"""

from typing import Sequence


def le64(n: int) -> bytes:
    """
    Encode an unsigned integer as 8 little-endian bytes.

    The most significant bit is always cleared, so the result is also a
    valid non-negative signed 64-bit integer.
    """
    if n < 0:
        raise ValueError(f"Length must be non-negative, got {n}")
    return (n & 0x7FFFFFFFFFFFFFFF).to_bytes(8, byteorder="little")


def pre_auth_encode(parts: Sequence[bytes]) -> bytes:
    """
    Encode parts with PAE.

    Args:
        parts: Byte strings, in order

    Returns:
        The encoded byte string

    Raises:
        TypeError: If any part is not bytes
    """
    output = bytearray(le64(len(parts)))
    for part in parts:
        if not isinstance(part, (bytes, bytearray)):
            raise TypeError(f"PAE parts must be bytes, got {type(part).__name__}")
        output += le64(len(part))
        output += part
    return bytes(output)
