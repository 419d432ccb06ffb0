"""Fairness engine for fairdice.

This module produces committed random selections:
- Bias-free index selection from a secure random source
- Independent 256-bit (or longer) reveal keys
- HMAC-SHA256 proofs binding the selection before it is shown

The random source is injected so tests can substitute a deterministic one.
Production code always uses the OS CSPRNG via ``secrets``.
"""

import secrets
from typing import Optional, Protocol, Sequence

from fairdice.config import settings
from fairdice.constants import MIN_KEY_BYTES
from fairdice.errors import EntropySourceError, InvalidInputError
from fairdice.models.fairness import CommitmentRecord
from fairdice.utils.commit_reveal import make_proof


class RandomProvider(Protocol):
    """Secure random capability consumed by FairnessEngine."""

    def randbelow(self, n: int) -> int: ...

    def token_bytes(self, n: int) -> bytes: ...


class SecretsProvider:
    """RandomProvider backed by the operating system CSPRNG."""

    def randbelow(self, n: int) -> int:
        # secrets.randbelow rejection-samples, so there is no modulo bias
        return secrets.randbelow(n)

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)


class FairnessEngine:
    """Commit to a uniformly random candidate and reveal it verifiably."""

    def __init__(self, provider: Optional[RandomProvider] = None, key_bytes: Optional[int] = None):
        self.provider = provider if provider is not None else SecretsProvider()
        self.key_bytes = key_bytes if key_bytes is not None else settings.reveal_key_bytes
        if self.key_bytes < MIN_KEY_BYTES:
            raise InvalidInputError(f"reveal keys must be at least {MIN_KEY_BYTES} bytes")

    def commit_and_reveal(self, candidates: Sequence) -> CommitmentRecord:
        """Select one candidate and commit to it.

        Args:
            candidates: Non-empty ordered sequence to choose from

        Returns:
            CommitmentRecord holding the selection, its proof and the key.
            Callers must publish ``proof`` before ``reveal_key``.

        Raises:
            InvalidInputError: candidates is empty
            EntropySourceError: the random source failed or returned bad data
        """
        n = len(candidates)
        if n == 0:
            raise InvalidInputError("cannot select from an empty candidate set")

        try:
            index = self.provider.randbelow(n)
            key = self.provider.token_bytes(self.key_bytes)
        except (OSError, NotImplementedError) as e:
            raise EntropySourceError(f"secure random source unavailable: {e}") from e

        if not isinstance(index, int) or not 0 <= index < n:
            raise EntropySourceError(f"random source returned index {index!r} outside [0, {n})")
        if not isinstance(key, bytes) or len(key) < self.key_bytes:
            raise EntropySourceError("random source returned a short reveal key")

        selected = candidates[index]
        return CommitmentRecord(
            selected_value=selected,
            proof=make_proof(key, selected),
            reveal_key=key,
        )


# Engine used when callers do not inject their own
default_engine = FairnessEngine()
