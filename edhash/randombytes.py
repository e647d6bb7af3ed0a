"""Cryptographically secure random bytes from the operating system."""

from __future__ import annotations

import os
from enum import Enum


class RandomBytesError(OSError):
    """Raised when random bytes could not be produced."""


class RandomSource(Enum):
    """Where random bytes are taken from."""

    RANDOM = "/dev/random"
    URANDOM = "/dev/urandom"
    SYSTEM = "system"


def read_device(path: str | os.PathLike[str], length: int) -> bytes:
    """Read exactly ``length`` bytes from ``path``, retrying short reads."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    chunks = bytearray()
    try:
        with open(path, "rb", buffering=0) as device:
            while len(chunks) < length:
                chunk = device.read(length - len(chunks))
                if not chunk:
                    raise RandomBytesError(
                        f"{path}: ended after {len(chunks)} of {length} bytes"
                    )
                chunks.extend(chunk)
    except RandomBytesError:
        raise
    except OSError as exc:
        raise RandomBytesError(f"cannot read random bytes from {path}: {exc}") from exc
    return bytes(chunks)


def randombytes(length: int, source: RandomSource = RandomSource.SYSTEM) -> bytes:
    """Return ``length`` random bytes from the chosen source."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if source is RandomSource.SYSTEM:
        try:
            return os.urandom(length)
        except (OSError, NotImplementedError) as exc:
            raise RandomBytesError(f"system random generator failed: {exc}") from exc
    return read_device(source.value, length)