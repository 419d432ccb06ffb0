"""Fairness protocol records for fairdice.

All records are immutable once created and handed to the caller wholesale.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Tuple

from fairdice.constants import Mover, Verdict
from fairdice.errors import InvalidInputError
from fairdice.utils.commit_reveal import verify_commitment


@dataclass(frozen=True)
class CommitmentRecord:
    """A selected value, its HMAC proof and the key that opens it."""
    selected_value: Any
    proof: str
    reveal_key: bytes

    @property
    def key_hex(self) -> str:
        return self.reveal_key.hex()

    def verify(self) -> bool:
        """Recompute the proof from the revealed key and value."""
        return verify_commitment(self.selected_value, self.proof, self.reveal_key)

    def to_dict(self) -> dict:
        """Proof is listed before key: display order is commit, then reveal."""
        return {
            "value": self.selected_value,
            "proof": self.proof,
            "key": self.key_hex,
        }


@dataclass(frozen=True, eq=False)
class DiceSet:
    """The faces of one die.

    Compared by identity: two dice with the same faces are still two dice.
    """
    faces: Tuple[int, ...]

    def __post_init__(self):
        faces = tuple(self.faces)
        if not faces:
            raise InvalidInputError("a dice set needs at least one face")
        if any(isinstance(f, bool) or not isinstance(f, int) for f in faces):
            raise InvalidInputError("dice faces must be integers")
        object.__setattr__(self, "faces", faces)

    def __len__(self) -> int:
        return len(self.faces)

    def __iter__(self) -> Iterator[int]:
        return iter(self.faces)

    def __getitem__(self, index: int) -> int:
        return self.faces[index]

    def __str__(self) -> str:
        return ", ".join(str(f) for f in self.faces)


@dataclass(frozen=True)
class RollOutcome:
    """A resolved roll: the face that came up and its commitment."""
    die_face_value: int
    commitment: CommitmentRecord

    def to_dict(self) -> dict:
        return {"value": self.die_face_value, **self.commitment.to_dict()}


@dataclass(frozen=True)
class FirstMoverOutcome:
    """Who moves first, and the commitment proving the draw."""
    mover: Mover
    commitment: CommitmentRecord

    def to_dict(self) -> dict:
        return {"mover": self.mover, "commitment": self.commitment.to_dict()}


@dataclass(frozen=True)
class GameResult:
    """Everything a player needs to audit one finished session."""
    first_mover_outcome: CommitmentRecord
    user_outcome: RollOutcome
    opponent_outcome: RollOutcome
    verdict: Verdict

    def to_dict(self) -> dict:
        return {
            "first_mover": self.first_mover_outcome.to_dict(),
            "user_roll": self.user_outcome.to_dict(),
            "computer_roll": self.opponent_outcome.to_dict(),
            "verdict": self.verdict,
        }
