"""Pydantic schemas for hashtool command and result contracts."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Algorithm(str, Enum):
    """Supported hash algorithms."""

    MD5 = "md5"
    SHA256 = "sha256"


class CommandName(str, Enum):
    """Commands the dispatcher knows how to run."""

    HASH = "hash"
    VERIFY = "verify"


# Hex digest length per algorithm
DIGEST_HEX_LENGTHS: dict[Algorithm, int] = {
    Algorithm.MD5: 32,
    Algorithm.SHA256: 64,
}


# --- Result Schemas ---


class HashResult(BaseModel):
    """Result of the hash command."""

    model_config = ConfigDict(frozen=True)

    algo: Algorithm
    hash: str = Field(..., pattern=r"^[a-f0-9]+$", description="Lowercase hex digest")

    @model_validator(mode="after")
    def _check_digest_length(self) -> HashResult:
        expected = DIGEST_HEX_LENGTHS[self.algo]
        if len(self.hash) != expected:
            raise ValueError(
                f"{self.algo.value} digest must be {expected} hex characters, got {len(self.hash)}"
            )
        return self


class VerifyResult(HashResult):
    """Result of the verify command."""

    expected: str = Field(..., description="Expected digest, lowercased")
    match: bool
