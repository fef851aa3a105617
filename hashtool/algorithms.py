"""Digest function table for the supported hash algorithms."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from hashtool.schemas import DIGEST_HEX_LENGTHS, Algorithm

DEFAULT_ALGORITHM = Algorithm.SHA256


@dataclass(frozen=True)
class AlgorithmSpec:
    """Digest function and expected output size for one algorithm."""

    algorithm: Algorithm
    digest: Callable[[bytes], str]
    hex_length: int


def _md5(data: bytes) -> str:
    return hashlib.md5(data).hexdigest()


def _sha256(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


# Read-only algorithm table
ALGORITHMS: Mapping[Algorithm, AlgorithmSpec] = MappingProxyType({
    Algorithm.MD5: AlgorithmSpec(
        algorithm=Algorithm.MD5,
        digest=_md5,
        hex_length=DIGEST_HEX_LENGTHS[Algorithm.MD5],
    ),
    Algorithm.SHA256: AlgorithmSpec(
        algorithm=Algorithm.SHA256,
        digest=_sha256,
        hex_length=DIGEST_HEX_LENGTHS[Algorithm.SHA256],
    ),
})


def get_algorithm(algorithm: Algorithm) -> AlgorithmSpec:
    """Get the table entry for an algorithm."""
    return ALGORITHMS[algorithm]


def supported_algorithms() -> list[str]:
    """Names of supported algorithms, sorted alphabetically."""
    return sorted(a.value for a in ALGORITHMS)


def lookup_algorithm(name: str) -> Algorithm | None:
    """Map an algorithm name to its enum value, or None if unsupported.

    Matching is exact: names are lowercase.
    """
    try:
        return Algorithm(name)
    except ValueError:
        return None


def compute_digest(algorithm: Algorithm, data: bytes) -> str:
    """Compute the lowercase hex digest of data."""
    return get_algorithm(algorithm).digest(data)
