"""SHA-224 and SHA-256 built on the shared Merkle-Damgård framing."""

from __future__ import annotations

import struct
from typing import Sequence

from edhash.mdhash import MDHash

_MASK32 = 0xFFFFFFFF

H224 = (
    0xC1059ED8, 0x367CD507, 0x3070DD17, 0xF70E5939,
    0xFFC00B31, 0x68581511, 0x64F98FA7, 0xBEFA4FA4,
)

H256 = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

K256 = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_BLOCK = struct.Struct(">16I")


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK32


def compress256(block: bytes, state: Sequence[int]) -> list[int]:
    """Apply the SHA-224/SHA-256 compression function to one 64-byte block.

    Returns the new chaining value as a list of eight 32-bit words.
    """
    if len(block) != _BLOCK.size:
        raise ValueError(f"block must be {_BLOCK.size} bytes, got {len(block)}")
    if len(state) != 8:
        raise ValueError(f"state must hold 8 words, got {len(state)}")

    w = list(_BLOCK.unpack(bytes(block)))
    for t in range(16, 64):
        x, y = w[t - 15], w[t - 2]
        s0 = _rotr(x, 7) ^ _rotr(x, 18) ^ (x >> 3)
        s1 = _rotr(y, 17) ^ _rotr(y, 19) ^ (y >> 10)
        w.append((s1 + w[t - 7] + s0 + w[t - 16]) & _MASK32)

    a, b, c, d, e, f, g, h = (word & _MASK32 for word in state)
    for k, wt in zip(K256, w):
        big1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        ch = ((f ^ g) & e) ^ g
        t1 = (h + big1 + ch + k + wt) & _MASK32
        big0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        maj = (b & c) | ((b | c) & a)
        t2 = (big0 + maj) & _MASK32
        h, g, f, e = g, f, e, (d + t1) & _MASK32
        d, c, b, a = c, b, a, (t1 + t2) & _MASK32

    return [(old + new) & _MASK32 for old, new in zip(state, (a, b, c, d, e, f, g, h))]


class Sha256(MDHash):
    """Streaming SHA-256."""

    name = "sha256"
    block_size = 64
    word_size = 4
    initial_state = H256
    output_words = 8

    def _compress(self, block: bytes, state: Sequence[int]) -> list[int]:
        return compress256(block, state)


class Sha224(Sha256):
    """Streaming SHA-224: SHA-256 with its own start value, cut to seven words."""

    name = "sha224"
    initial_state = H224
    output_words = 7


def sha224(message: bytes) -> bytes:
    """Return the SHA-224 digest of ``message``."""
    hasher = Sha224()
    hasher.update(message)
    return hasher.digest()


def sha256(message: bytes) -> bytes:
    """Return the SHA-256 digest of ``message``."""
    hasher = Sha256()
    hasher.update(message)
    return hasher.digest()