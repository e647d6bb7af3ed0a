"""Pure-Python SHA-2 and SHA-3 hashes, random byte sources and test-vector helpers."""

__version__ = "0.1.0"
__all__ = ["mdhash", "randombytes", "testvectors", "sha256", "sha512", "sha3"]