"""Game resolution service for fairdice.

This module turns the fairness protocol into game decisions:
- Deciding who moves first
- Resolving each party's dice roll
- Picking the computer's dice set
- Declaring the winner
"""

import random
from typing import Optional, Sequence

from fairdice.constants import MOVERS, Verdict
from fairdice.errors import InvalidInputError
from fairdice.models.fairness import (
    CommitmentRecord,
    DiceSet,
    FirstMoverOutcome,
    GameResult,
    RollOutcome,
)
from fairdice.services.fairness_service import FairnessEngine, default_engine


def decide_first_mover(engine: Optional[FairnessEngine] = None) -> FirstMoverOutcome:
    """Draw the first mover with a single committed selection.

    Args:
        engine: Fairness engine to draw with (module default if omitted)

    Returns:
        FirstMoverOutcome; the committed value is the mover itself
    """
    engine = engine or default_engine
    commitment = engine.commit_and_reveal(MOVERS)
    return FirstMoverOutcome(mover=commitment.selected_value, commitment=commitment)


def resolve_roll(dice: DiceSet, engine: Optional[FairnessEngine] = None) -> RollOutcome:
    """Roll one die: commit to one of its faces.

    Args:
        dice: The die to roll
        engine: Fairness engine to draw with (module default if omitted)

    Returns:
        RollOutcome with the face and its commitment
    """
    engine = engine or default_engine
    commitment = engine.commit_and_reveal(dice.faces)
    return RollOutcome(die_face_value=commitment.selected_value, commitment=commitment)


def pick_opponent_dice(
    dice_sets: Sequence[DiceSet],
    user_choice: DiceSet,
    rng: Optional[random.Random] = None,
) -> DiceSet:
    """Pick the computer's dice set.

    No commitment is published for this step, so the ordinary PRNG is used.
    A draw that lands on the user's own set is redrawn once from the other
    sets. With a single set the computer plays the user's set.

    Args:
        dice_sets: All dice sets in the game
        user_choice: The set the user picked
        rng: Random generator (the module-level ``random`` if omitted)

    Returns:
        The computer's dice set
    """
    if not dice_sets:
        raise InvalidInputError("no dice sets to choose from")
    rng = rng or random

    picked = rng.choice(dice_sets)
    if picked is user_choice:
        remaining = [d for d in dice_sets if d is not user_choice]
        if remaining:
            picked = rng.choice(remaining)
    return picked


def compare_and_declare(user_outcome: RollOutcome, opponent_outcome: RollOutcome) -> Verdict:
    """Highest roll wins; equal faces tie."""
    if user_outcome.die_face_value > opponent_outcome.die_face_value:
        return "USER_WINS"
    if user_outcome.die_face_value < opponent_outcome.die_face_value:
        return "COMPUTER_WINS"
    return "TIE"


def build_result(
    first_mover: CommitmentRecord,
    user_outcome: RollOutcome,
    opponent_outcome: RollOutcome,
) -> GameResult:
    """Assemble the read-only result of a finished session."""
    return GameResult(
        first_mover_outcome=first_mover,
        user_outcome=user_outcome,
        opponent_outcome=opponent_outcome,
        verdict=compare_and_declare(user_outcome, opponent_outcome),
    )
