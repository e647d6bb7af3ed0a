"""Merkle-Damgård framing shared by the SHA-2 family.

A concrete hash supplies its block size, word size, initial chaining
value, output length and a compression function.  This base class does the
buffering, the padding with the big-endian bit length and the final encoding.
"""

from __future__ import annotations

import copy as _copy
from abc import ABC, abstractmethod
from typing import ClassVar, Sequence

_MASK64 = (1 << 64) - 1


class MDHash(ABC):
    """Streaming Merkle-Damgård hash with big-endian length padding.

    Closing the hash (``digest`` or ``addbits_and_close``) returns the
    result and leaves the object reset, ready for a new message.
    """

    name: ClassVar[str] = "md"
    block_size: ClassVar[int] = 64
    word_size: ClassVar[int] = 4
    initial_state: ClassVar[tuple[int, ...]] = ()
    output_words: ClassVar[int] = 8

    def __init__(self) -> None:
        self._state: list[int] = []
        self._buffer = bytearray()
        self._count = 0
        self.reset()

    @abstractmethod
    def _compress(self, block: bytes, state: Sequence[int]) -> list[int]:
        """Return the chaining value after absorbing one full block."""

    @property
    def digest_size(self) -> int:
        """Length of the output in bytes."""
        return self.output_words * self.word_size

    @property
    def _length_size(self) -> int:
        return 2 * self.word_size

    def reset(self) -> None:
        """Forget all input and return to the initial chaining value."""
        self._state = list(self.initial_state)
        self._buffer = bytearray()
        self._count = 0

    def _absorb(self, data: bytes) -> None:
        size = self.block_size
        for offset in range(0, len(data), size):
            self._state = list(self._compress(bytes(data[offset:offset + size]), self._state))

    def update(self, data: bytes) -> None:
        """Feed more message bytes."""
        data = bytes(data)
        self._count = (self._count + len(data)) & _MASK64
        self._buffer.extend(data)
        full = len(self._buffer) - len(self._buffer) % self.block_size
        if full:
            self._absorb(bytes(self._buffer[:full]))
            del self._buffer[:full]

    def _close(self, bits: int, count: int) -> bytes:
        if not 0 <= count <= 7:
            raise ValueError(f"extra bit count must be between 0 and 7, got {count}")
        marker = 0x80 >> count
        pad_byte = ((bits & -marker) | marker) & 0xFF

        tail = bytearray(self._buffer)
        tail.append(pad_byte)
        length_size = self._length_size
        tail.extend(bytes((-(len(tail) + length_size)) % self.block_size))
        bit_length = (self._count * 8 + count) & ((1 << (8 * length_size)) - 1)
        tail.extend(bit_length.to_bytes(length_size, "big"))
        self._absorb(bytes(tail))

        result = b"".join(
            word.to_bytes(self.word_size, "big") for word in self._state[: self.output_words]
        )
        self.reset()
        return result

    def digest(self) -> bytes:
        """Finish the message, return the hash and reset."""
        return self._close(0, 0)

    def addbits_and_close(self, bits: int, count: int) -> bytes:
        """Append ``count`` (0..7) extra bits, taken from the top of ``bits``, then finish."""
        return self._close(bits, count)

    def copy(self) -> "MDHash":
        """Return an independent clone of the running computation."""
        clone = _copy.copy(self)
        clone._state = list(self._state)
        clone._buffer = bytearray(self._buffer)
        return clone