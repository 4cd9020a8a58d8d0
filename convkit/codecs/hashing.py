"""Message digests of UTF-8 text."""

import hashlib
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from Crypto.Hash import RIPEMD160, keccak

from convkit.errors import PreconditionError


@dataclass
class HashResult:
    algorithm: str
    hash: str


@dataclass(frozen=True)
class HashAlgorithm:
    id: str
    name: str
    digest: Callable[[bytes], str]


def _hashlib(name: str) -> Callable[[bytes], str]:
    return lambda data: hashlib.new(name, data).hexdigest()


def _keccak512(data: bytes) -> str:
    # "SHA-3" here is the original Keccak-512 (pre-FIPS padding), as most JS
    # hashing libraries implement it.
    return keccak.new(digest_bits=512, data=data).hexdigest()


def _ripemd160(data: bytes) -> str:
    return RIPEMD160.new(data).hexdigest()


ALGORITHMS: List[HashAlgorithm] = [
    HashAlgorithm("md5", "MD5", _hashlib("md5")),
    HashAlgorithm("sha1", "SHA-1", _hashlib("sha1")),
    HashAlgorithm("sha256", "SHA-256", _hashlib("sha256")),
    HashAlgorithm("sha512", "SHA-512", _hashlib("sha512")),
    HashAlgorithm("sha3", "SHA-3", _keccak512),
    HashAlgorithm("ripemd160", "RIPEMD160", _ripemd160),
]
_BY_ID: Dict[str, HashAlgorithm] = {algo.id: algo for algo in ALGORITHMS}

DEFAULT_ALGORITHMS = ("md5", "sha1", "sha256")


def generate_hashes(text: str, algorithms: Optional[Iterable[str]] = None) -> List[HashResult]:
    """Hash *text* with each selected algorithm, in catalogue order."""
    selected = set(DEFAULT_ALGORITHMS if algorithms is None else algorithms)
    unknown = selected - _BY_ID.keys()
    if unknown:
        raise PreconditionError(f"Unsupported hash algorithm(s): {', '.join(sorted(unknown))}")

    if not text or not text.strip():
        return []

    data = text.encode("utf-8")
    return [
        HashResult(algorithm=algo.name, hash=algo.digest(data))
        for algo in ALGORITHMS
        if algo.id in selected
    ]
