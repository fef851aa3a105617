"""Command dispatcher: named inputs in, one serialized result line out."""

from __future__ import annotations

import hmac
import logging
from typing import Callable, Mapping

from pydantic import BaseModel, ValidationError

from hashtool.algorithms import (
    DEFAULT_ALGORITHM,
    compute_digest,
    lookup_algorithm,
    supported_algorithms,
)
from hashtool.schemas import Algorithm, CommandName, HashResult, VerifyResult

logger = logging.getLogger(__name__)

# Named input keys (environment variable names)
DATA_INPUT = "DATA"
ALGO_INPUT = "ALGO"
EXPECTED_INPUT = "EXPECTED"


class ToolError(Exception):
    """Base class for errors reported back to the orchestrator."""

    pass


class MissingDataError(ToolError):
    """Raised when a required input is empty or absent."""

    pass


class UnsupportedAlgorithmError(ToolError):
    """Raised when the requested algorithm is not in the supported set."""

    pass


class SerializationError(ToolError):
    """Raised when a result cannot be encoded."""

    pass


class InvalidDataError(ToolError):
    """Raised when an input cannot be encoded as UTF-8."""

    pass


class UnknownCommandError(ToolError):
    """Raised when no operation is registered under a command name."""

    pass


def _resolve_algorithm(name: str | None) -> Algorithm:
    """Resolve an algorithm name, defaulting to sha256 when empty."""
    if not name:
        return DEFAULT_ALGORITHM

    algorithm = lookup_algorithm(name)
    if algorithm is None:
        valid = ", ".join(supported_algorithms())
        raise UnsupportedAlgorithmError(f"Unsupported hash algorithm: {name!r} not in [{valid}]")
    return algorithm


def _encode(value: str, label: str) -> bytes:
    """UTF-8 encode an input, keeping surrogate-escaped environment bytes."""
    try:
        return value.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError as e:
        raise InvalidDataError(f"The {label} argument is not valid UTF-8 text: {e.reason}") from e


def hash_data(data: str | None, algorithm: str | None = "") -> HashResult:
    """Hash data with the given algorithm.

    Args:
        data: Text to hash; its UTF-8 bytes are digested (undecodable
            environment bytes pass through unchanged)
        algorithm: Algorithm name (defaults to sha256 when empty)

    Returns:
        HashResult with the algorithm and lowercase hex digest

    Raises:
        MissingDataError: If data is empty
        UnsupportedAlgorithmError: If the algorithm is not supported
        InvalidDataError: If data holds characters UTF-8 cannot encode
    """
    if not data:
        raise MissingDataError("A non-empty data argument must be provided")

    algo = _resolve_algorithm(algorithm)
    digest = compute_digest(algo, _encode(data, "data"))
    logger.debug(f"Computed {algo.value} digest over {len(data)} chars")

    return HashResult(algo=algo, hash=digest)


def verify_data(
    data: str | None,
    expected: str | None,
    algorithm: str | None = "",
) -> VerifyResult:
    """Check data against an expected digest.

    A mismatch is a normal result (match=False), not an error.
    """
    result = hash_data(data, algorithm)
    if not expected:
        raise MissingDataError("A non-empty expected hash argument must be provided")

    expected_hex = expected.strip().lower()
    match = hmac.compare_digest(
        result.hash.encode("utf-8"),
        _encode(expected_hex, "expected hash"),
    )
    if not match:
        logger.info(f"Digest mismatch for {result.algo.value}")

    return VerifyResult(
        algo=result.algo,
        hash=result.hash,
        expected=expected_hex,
        match=match,
    )


def _run_hash(inputs: Mapping[str, str]) -> BaseModel:
    return hash_data(inputs.get(DATA_INPUT, ""), inputs.get(ALGO_INPUT, ""))


def _run_verify(inputs: Mapping[str, str]) -> BaseModel:
    return verify_data(
        inputs.get(DATA_INPUT, ""),
        inputs.get(EXPECTED_INPUT, ""),
        inputs.get(ALGO_INPUT, ""),
    )


COMMANDS: dict[CommandName, Callable[[Mapping[str, str]], BaseModel]] = {
    CommandName.HASH: _run_hash,
    CommandName.VERIFY: _run_verify,
}


def serialize_result(result: BaseModel) -> str:
    """Encode a result as compact single-line JSON."""
    try:
        return result.model_dump_json()
    except (ValidationError, TypeError, ValueError) as e:
        raise SerializationError(f"Failed to encode result: {e}") from e


def dispatch(command: str, inputs: Mapping[str, str]) -> str:
    """Run a command against named inputs and return the output line.

    Args:
        command: Command name (e.g., "hash")
        inputs: Named string inputs, usually the process environment

    Returns:
        Serialized JSON result

    Raises:
        ToolError: On any validation or encoding failure
    """
    try:
        name = CommandName(command)
    except ValueError:
        valid = ", ".join(sorted(c.value for c in COMMANDS))
        raise UnknownCommandError(f"Unknown command: {command!r} not in [{valid}]") from None

    logger.info(f"Running command: {name.value}")
    result = COMMANDS[name](inputs)
    return serialize_result(result)
