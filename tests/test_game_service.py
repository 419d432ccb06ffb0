"""Unit tests for game resolution.

Tests:
- First-mover draw and its fairness
- Roll resolution against a die's faces
- Computer dice-set selection and the redraw rule
- Verdict comparison
"""

import random
from collections import Counter

import pytest
from fairdice.errors import InvalidInputError
from fairdice.models.fairness import CommitmentRecord, DiceSet, RollOutcome
from fairdice.services.game_service import (
    build_result,
    compare_and_declare,
    decide_first_mover,
    pick_opponent_dice,
    resolve_roll,
)


def outcome(value):
    """RollOutcome with a placeholder commitment; comparison ignores it."""
    return RollOutcome(die_face_value=value, commitment=CommitmentRecord(value, "0" * 64, b"\x00" * 32))


class TestDecideFirstMover:
    """Test the first-mover draw."""

    def test_mover_is_committed_value(self):
        """The committed value is the mover."""
        first = decide_first_mover()
        assert first.mover in ("USER", "COMPUTER")
        assert first.commitment.selected_value == first.mover
        assert first.commitment.verify()

    def test_scripted_mover(self, fixed_engine):
        """Index 0 is the user, index 1 the computer."""
        assert decide_first_mover(fixed_engine(0)).mover == "USER"
        assert decide_first_mover(fixed_engine(1)).mover == "COMPUTER"

    def test_even_split(self):
        """1000 draws split close to 50/50."""
        counts = Counter(decide_first_mover().mover for _ in range(1000))
        # about 6 standard deviations
        assert abs(counts["USER"] - 500) < 100
        assert counts["USER"] + counts["COMPUTER"] == 1000


class TestResolveRoll:
    """Test roll resolution."""

    def test_face_from_die(self):
        """The rolled value is one of the die's faces."""
        dice = DiceSet((2, 2, 4, 4, 9, 9))
        for _ in range(50):
            roll = resolve_roll(dice)
            assert roll.die_face_value in dice.faces
            assert roll.commitment.selected_value == roll.die_face_value
            assert roll.commitment.verify()

    def test_scripted_face(self, fixed_engine):
        dice = DiceSet((6, 8, 1, 1, 8, 6))
        assert resolve_roll(dice, fixed_engine(1)).die_face_value == 8


class TestPickOpponentDice:
    """Test computer dice-set selection."""

    def test_never_user_set_with_two_or_more(self):
        """The computer never plays the user's set when another exists."""
        rng = random.Random(1234)
        for size in (2, 3, 5):
            dice_sets = [DiceSet((1, 2, 3)) for _ in range(size)]
            for user_choice in dice_sets:
                for _ in range(200):
                    assert pick_opponent_dice(dice_sets, user_choice, rng) is not user_choice

    def test_equal_faces_distinct_sets(self):
        """A set with the same faces as the user's is still a valid pick."""
        a = DiceSet((1, 2, 3))
        b = DiceSet((1, 2, 3))
        assert pick_opponent_dice([a, b], a, random.Random(0)) is b

    def test_single_set_may_repeat(self):
        """With one set the computer plays the user's set."""
        only = DiceSet((1, 6))
        assert pick_opponent_dice([only], only) is only

    def test_all_other_sets_reachable(self):
        """Every other set can be picked."""
        rng = random.Random(99)
        dice_sets = [DiceSet((i,)) for i in range(4)]
        picks = {id(pick_opponent_dice(dice_sets, dice_sets[0], rng)) for _ in range(500)}
        assert picks == {id(d) for d in dice_sets[1:]}

    def test_default_rng(self):
        """Works with the module-level generator."""
        dice_sets = [DiceSet((1,)), DiceSet((2,)), DiceSet((3,))]
        assert pick_opponent_dice(dice_sets, dice_sets[1]) in dice_sets

    def test_empty_sets(self):
        with pytest.raises(InvalidInputError):
            pick_opponent_dice([], DiceSet((1,)))


class TestCompareAndDeclare:
    """Test verdicts."""

    def test_user_wins(self):
        assert compare_and_declare(outcome(5), outcome(3)) == "USER_WINS"

    def test_computer_wins(self):
        assert compare_and_declare(outcome(2), outcome(7)) == "COMPUTER_WINS"

    def test_tie(self):
        assert compare_and_declare(outcome(4), outcome(4)) == "TIE"

    def test_negative_faces(self):
        """Comparison is plain integer ordering."""
        assert compare_and_declare(outcome(-1), outcome(-3)) == "USER_WINS"


class TestBuildResult:
    """Test result assembly."""

    def test_result_fields(self):
        first = decide_first_mover()
        result = build_result(first.commitment, outcome(1), outcome(6))
        assert result.verdict == "COMPUTER_WINS"
        assert result.first_mover_outcome is first.commitment
        data = result.to_dict()
        assert data["verdict"] == "COMPUTER_WINS"
        assert data["user_roll"]["value"] == 1
        assert data["computer_roll"]["value"] == 6
