"""Hex helpers and the parser for ``sign.input``-style signature vectors."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable

_PRIVKEY_HEX = 64
_PUBKEY_HEX = 128
_SIGNATURE_HEX = 128


@dataclass
class TestCase:
    """One signature vector, every field hex encoded."""

    __test__ = False

    message: str = ""
    pubkey: str = ""
    privkey: str = ""
    signature: str = ""


def hex2bytes(text: str) -> bytes:
    """Decode hex, two digits per byte; a trailing odd digit forms its own byte."""
    try:
        return bytes(int(text[i:i + 2], 16) for i in range(0, len(text), 2))
    except ValueError as exc:
        raise ValueError(f"invalid hex string: {text!r}") from exc


def bytes2hex(data: bytes) -> str:
    """Encode bytes as lower-case hex."""
    return bytes(data).hex()


def _tokens(line: str) -> list[str]:
    tokens = line.split(":")
    if tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def parse_test_cases(lines: Iterable[str]) -> list[TestCase]:
    """Parse lines of ``secret+public:public:message:signature+message:``.

    Raises ValueError when the two public keys on a line disagree or the
    first field is too short.
    """
    cases = []
    for line in lines:
        case = TestCase()
        for index, token in enumerate(_tokens(line.rstrip("\n"))):
            if index == 0:
                if len(token) < _PRIVKEY_HEX:
                    raise ValueError(f"key field too short: {token!r}")
                case.privkey = token[:_PRIVKEY_HEX]
                case.pubkey = token[_PRIVKEY_HEX:_PRIVKEY_HEX + _PUBKEY_HEX]
            elif index == 1:
                if case.pubkey != token:
                    raise ValueError("pubkey for signing and for verifying are different")
            elif index == 2:
                case.message = token
            elif index == 3:
                case.signature = token[:_SIGNATURE_HEX]
        cases.append(case)
    return cases


def parse_test_file(path: str | os.PathLike[str]) -> list[TestCase]:
    """Parse a vector file from disk."""
    with open(path, encoding="ascii") as stream:
        return parse_test_cases(stream)