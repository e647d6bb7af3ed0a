# edhash

Pure-Python implementations of the hash functions and helpers that an
Ed25519 signature implementation relies on:

- SHA-224 and SHA-256 (`edhash.sha256`)
- SHA-384 and SHA-512 (`edhash.sha512`)
- SHA3-256, SHA3-384 and SHA3-512 (`edhash.sha3`)
- random byte sources (`edhash.randombytes`)
- hex helpers and a parser for `sign.input`-style test vectors
  (`edhash.testvectors`)

No third-party packages are needed at run time.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Hashing

One-shot helpers return the digest as `bytes`:

```python
from edhash.sha256 import sha224, sha256
from edhash.sha512 import sha384, sha512
from edhash.sha3 import sha3_256, sha3_384, sha3_512

sha256(b"abc").hex()
sha512(b"abc").hex()
sha3_256(b"abc").hex()
```

Streaming use goes through the hash classes:

```python
from edhash.sha256 import Sha256

h = Sha256()
h.update(b"hello, ")
h.update(b"world")
digest = h.digest()      # the object is reset afterwards and can be reused
```

`Sha224`, `Sha256`, `Sha384` and `Sha512` derive from `MDHash` in
`edhash.mdhash`, which provides:

- `update(data)` to feed message bytes,
- `digest()` to finish, return the hash and reset,
- `addbits_and_close(bits, count)` to finish a message whose length is not a
  whole number of bytes: `count` (0 to 7) extra bits are taken from the top of
  `bits`; any other `count` raises `ValueError`,
- `copy()` to fork a running computation,
- `reset()` to discard input, and the `digest_size` property.

SHA-3 uses `Sha3(bits)` with `bits` of 256, 384 or 512 (any other value raises
`ValueError`):

```python
from edhash.sha3 import Sha3

h = Sha3(512)
h.update(b"abc")
digest = h.finalize()    # also resets the object
```

`Sha3` has `reset()`, `digest_size` and `block_size` (the sponge rate in bytes).

The raw building blocks are available too: `compress256(block, state)` and
`compress512(block, state)` return the new chaining value after one 64-byte or
128-byte block, and `keccak_f(state)` returns the 25 lanes after the
Keccak-f[1600] permutation, leaving its input untouched.

## Random bytes

```python
from edhash.randombytes import randombytes, RandomSource, RandomBytesError

nonce = randombytes(32)                         # the operating system's generator
more = randombytes(16, RandomSource.URANDOM)    # read from /dev/urandom
```

`RandomSource` has `SYSTEM` (the default, via `os.urandom`), `RANDOM`
(`/dev/random`) and `URANDOM` (`/dev/urandom`). `read_device(path, length)`
reads exactly `length` bytes from any device path, retrying short reads.
A failure to open or read, or a device that ends early, raises
`RandomBytesError` (a subclass of `OSError`); a negative length raises
`ValueError`.

## Test vectors

```python
from edhash.testvectors import parse_test_file, hex2bytes, bytes2hex

for case in parse_test_file("sign.input"):
    message = hex2bytes(case.message)
    print(case.privkey, case.pubkey, case.signature)
```

Each line has the form
`secretkey||publickey:publickey:message:signature||message:`, all hex encoded.
`parse_test_cases(lines)` does the same for any iterable of lines. Each result
is a `TestCase` with `privkey`, `pubkey`, `message` and `signature` fields.
A line whose two public keys differ, or whose first field is shorter than 64
hex digits, raises `ValueError`.

`hex2bytes` decodes two digits per byte (a trailing odd digit becomes a byte
of its own) and raises `ValueError` on non-hex input; `bytes2hex` encodes to
lower-case hex.

## What this package does not do

It does not create Ed25519 keys, sign messages or verify signatures. It reads
signature test vectors and supplies the hashes and randomness such code
needs, but the curve arithmetic itself is not part of it, and it has no
command-line program.