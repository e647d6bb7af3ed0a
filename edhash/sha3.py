"""SHA3-256, SHA3-384 and SHA3-512 on the Keccak-f[1600] permutation."""

from __future__ import annotations

import struct
from typing import ClassVar, Sequence

_MASK64 = (1 << 64) - 1
_LANES = 25
_ROUNDS = 24

ROTATIONS = (
    1, 3, 6, 10, 15, 21, 28, 36, 45, 55, 2, 14, 27, 41, 56, 8, 25, 43, 62,
    18, 39, 61, 20, 44,
)

PI_LANES = (
    10, 7, 11, 17, 18, 3, 5, 16, 8, 21, 24, 4, 15, 23, 19, 13, 12, 2, 20,
    14, 22, 9, 6, 1,
)


def _round_constants() -> tuple[int, ...]:
    """Derive the iota constants from the degree-8 LFSR of the Keccak spec."""
    register = 1
    constants = []
    for _ in range(_ROUNDS):
        constant = 0
        for j in range(7):
            if register & 1:
                constant |= 1 << ((1 << j) - 1)
            register <<= 1
            if register & 0x100:
                register ^= 0x171
        constants.append(constant)
    return tuple(constants)


ROUND_CONSTANTS = _round_constants()

_STATE = struct.Struct("<25Q")


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (64 - n))) & _MASK64


def keccak_f(state: Sequence[int]) -> list[int]:
    """Apply the 24-round Keccak-f[1600] permutation to 25 64-bit lanes.

    The input is left untouched; the permuted lanes are returned.
    """
    if len(state) != _LANES:
        raise ValueError(f"state must hold {_LANES} lanes, got {len(state)}")
    s = [lane & _MASK64 for lane in state]

    for rc in ROUND_CONSTANTS:
        # Theta
        columns = [s[i] ^ s[i + 5] ^ s[i + 10] ^ s[i + 15] ^ s[i + 20] for i in range(5)]
        for i in range(5):
            t = columns[(i + 4) % 5] ^ _rotl(columns[(i + 1) % 5], 1)
            for j in range(i, _LANES, 5):
                s[j] ^= t

        # Rho and Pi
        carried = s[1]
        for target, rotation in zip(PI_LANES, ROTATIONS):
            carried, s[target] = s[target], _rotl(carried, rotation)

        # Chi
        for row in range(0, _LANES, 5):
            lanes = s[row:row + 5]
            for i in range(5):
                s[row + i] = lanes[i] ^ ((~lanes[(i + 1) % 5] & _MASK64) & lanes[(i + 2) % 5])

        # Iota
        s[0] ^= rc

    return s


class Sha3:
    """Streaming SHA-3 with a 256, 384 or 512 bit output.

    ``finalize`` returns the digest and leaves the object reset, ready for a
    new message.
    """

    SUPPORTED_BITS: ClassVar[tuple[int, ...]] = (256, 384, 512)

    def __init__(self, bits: int = 256) -> None:
        if bits not in self.SUPPORTED_BITS:
            raise ValueError(f"unsupported SHA-3 output size {bits}; use one of {self.SUPPORTED_BITS}")
        self.bits = bits
        self._capacity_words = 2 * bits // 64
        self._state: list[int] = []
        self._buffer = bytearray()
        self.reset()

    @property
    def digest_size(self) -> int:
        """Length of the output in bytes."""
        return self.bits // 8

    @property
    def block_size(self) -> int:
        """Rate of the sponge in bytes."""
        return (_LANES - self._capacity_words) * 8

    def reset(self) -> None:
        """Forget all input and return to the all-zero sponge."""
        self._state = [0] * _LANES
        self._buffer = bytearray()

    def _absorb_block(self, block: bytes) -> None:
        words = struct.unpack(f"<{len(block) // 8}Q", block)
        for index, word in enumerate(words):
            self._state[index] ^= word
        self._state = keccak_f(self._state)

    def update(self, data: bytes) -> None:
        """Feed more message bytes."""
        self._buffer.extend(bytes(memoryview(data)))
        rate = self.block_size
        full = len(self._buffer) - len(self._buffer) % rate
        for offset in range(0, full, rate):
            self._absorb_block(bytes(self._buffer[offset:offset + rate]))
        del self._buffer[:full]

    def finalize(self) -> bytes:
        """Pad with the SHA-3 suffix, squeeze the digest and reset."""
        block = bytearray(self._buffer)
        block.append(0x06)
        block.extend(bytes(self.block_size - len(block)))
        block[-1] |= 0x80
        self._absorb_block(bytes(block))

        digest = _STATE.pack(*self._state)[: self.digest_size]
        self.reset()
        return digest


def _oneshot(bits: int, message: bytes) -> bytes:
    hasher = Sha3(bits)
    hasher.update(message)
    return hasher.finalize()


def sha3_256(message: bytes) -> bytes:
    """Return the SHA3-256 digest of ``message``."""
    return _oneshot(256, message)


def sha3_384(message: bytes) -> bytes:
    """Return the SHA3-384 digest of ``message``."""
    return _oneshot(384, message)


def sha3_512(message: bytes) -> bytes:
    """Return the SHA3-512 digest of ``message``."""
    return _oneshot(512, message)