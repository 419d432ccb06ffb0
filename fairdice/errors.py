"""fairdice exception hierarchy.

Kept dependency-free: imported by the core services, the CLI and the API.
"""


class FairDiceError(Exception):
    """Base exception for all fairdice errors."""


class InvalidInputError(FairDiceError):
    """Raised when a caller breaks an input contract (e.g. an empty candidate set)."""


class EntropySourceError(FairDiceError):
    """Raised when the secure random source is unavailable or misbehaves."""


class DiceParseError(InvalidInputError):
    """Raised for dice-set command-line arguments that cannot be parsed."""


class SessionStateError(FairDiceError):
    """Raised when a game session is asked for an illegal transition."""
