"""Game session models for fairdice."""

import asyncio
import random
import secrets
import time
from collections import OrderedDict
from typing import Optional, Sequence

from fairdice.constants import SessionStatus
from fairdice.errors import EntropySourceError, InvalidInputError, SessionStateError
from fairdice.models.fairness import DiceSet, FirstMoverOutcome, GameResult, RollOutcome
from fairdice.services.fairness_service import FairnessEngine
from fairdice.services import game_service


# In-memory session store for the HTTP API (never persisted)
sessions: "OrderedDict[str, GameSession]" = OrderedDict()
sessions_lock = asyncio.Lock()


class GameSession:
    """One game against the computer.

    Moves linearly through IDLE -> FIRST_MOVER_DECIDED -> DICE_CHOSEN ->
    ROLLS_RESOLVED -> VERDICT_DECLARED. ABORTED can be entered from any
    state before the verdict and ends the session without one.
    """

    def __init__(
        self,
        dice_sets: Sequence[DiceSet],
        engine: Optional[FairnessEngine] = None,
        rng: Optional[random.Random] = None,
    ):
        if not dice_sets:
            raise InvalidInputError("a game needs at least one dice set")
        self.session_id = secrets.token_hex(8)
        self.created_at = time.time()
        self.dice_sets = tuple(dice_sets)
        self.engine = engine
        self.rng = rng
        self.status: SessionStatus = "IDLE"

        self.first_mover: Optional[FirstMoverOutcome] = None
        self.user_dice: Optional[DiceSet] = None
        self.opponent_dice: Optional[DiceSet] = None
        self.user_outcome: Optional[RollOutcome] = None
        self.opponent_outcome: Optional[RollOutcome] = None
        self.result: Optional[GameResult] = None

    @property
    def finished(self) -> bool:
        return self.status in ("VERDICT_DECLARED", "ABORTED")

    def _expect(self, status: SessionStatus, action: str):
        if self.status != status:
            raise SessionStateError(f"cannot {action} while session is {self.status}")

    def decide_first_mover(self) -> FirstMoverOutcome:
        """Draw the first mover. Caller shows the proof, then the key."""
        self._expect("IDLE", "decide the first mover")
        try:
            self.first_mover = game_service.decide_first_mover(self.engine)
        except EntropySourceError:
            self.status = "ABORTED"
            raise
        self.status = "FIRST_MOVER_DECIDED"
        return self.first_mover

    def choose_dice(self, index: int) -> DiceSet:
        """Record the user's dice set and pick the computer's."""
        self._expect("FIRST_MOVER_DECIDED", "choose dice")
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self.dice_sets):
            raise InvalidInputError(f"dice index must be between 0 and {len(self.dice_sets) - 1}")
        self.user_dice = self.dice_sets[index]
        self.opponent_dice = game_service.pick_opponent_dice(self.dice_sets, self.user_dice, self.rng)
        self.status = "DICE_CHOSEN"
        return self.user_dice

    def resolve_rolls(self) -> tuple[RollOutcome, RollOutcome]:
        """Roll the user's die, then the computer's."""
        self._expect("DICE_CHOSEN", "resolve rolls")
        try:
            self.user_outcome = game_service.resolve_roll(self.user_dice, self.engine)
            self.opponent_outcome = game_service.resolve_roll(self.opponent_dice, self.engine)
        except EntropySourceError:
            # a failed draw is not retried
            self.status = "ABORTED"
            raise
        self.status = "ROLLS_RESOLVED"
        return self.user_outcome, self.opponent_outcome

    def declare(self) -> GameResult:
        """Compare the rolls and close the session."""
        self._expect("ROLLS_RESOLVED", "declare a verdict")
        self.result = game_service.build_result(
            self.first_mover.commitment, self.user_outcome, self.opponent_outcome
        )
        self.status = "VERDICT_DECLARED"
        return self.result

    def play(self, index: int) -> GameResult:
        """Choose dice, roll both and declare in one step."""
        self.choose_dice(index)
        self.resolve_rolls()
        return self.declare()

    def abort(self):
        """End the session without a verdict."""
        if self.finished:
            raise SessionStateError(f"cannot abort a session that is {self.status}")
        self.status = "ABORTED"

    def opponent_dice_index(self) -> Optional[int]:
        """Position of the computer's set among the game's dice sets."""
        if self.opponent_dice is None:
            return None
        for i, d in enumerate(self.dice_sets):
            if d is self.opponent_dice:
                return i
        return None

    def snapshot(self) -> dict:
        """Return the public state of the session."""
        data = {
            "session_id": self.session_id,
            "status": self.status,
            "dice": [list(d.faces) for d in self.dice_sets],
        }
        if self.first_mover:
            data["first_mover"] = self.first_mover.to_dict()
        if self.result:
            data["result"] = self.result.to_dict()
        return data
