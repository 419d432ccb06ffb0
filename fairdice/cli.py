"""Command-line dice game.

Usage: fairdice 2,2,4,4,9,9 6,8,1,1,8,6 7,5,3,7,5,3
"""

import argparse
import re
import sys
from typing import Callable, List, Optional, Sequence

from fairdice.config import settings
from fairdice.constants import HELP_LINES, MOVER_TEXT, USAGE_EXAMPLE, VERDICT_TEXT
from fairdice.errors import DiceParseError, FairDiceError
from fairdice.models.fairness import CommitmentRecord, DiceSet
from fairdice.models.game import GameSession
from fairdice.utils.commit_reveal import verify_commitment

EXIT_OK = 0
EXIT_ERROR = 1

NEGATIVE_DICE = re.compile(r"^-\d")


def parse_dice_args(args: Sequence[str], min_sets: Optional[int] = None) -> List[DiceSet]:
    """Turn ``"1,2,3"`` style arguments into dice sets.

    Raises:
        DiceParseError: too few sets, a non-integer face or an empty set
    """
    min_sets = settings.min_dice_sets if min_sets is None else min_sets
    if len(args) < min_sets:
        raise DiceParseError(
            f"❌ Please provide at least {min_sets} dice sets.\n👉 Example: {USAGE_EXAMPLE}"
        )

    dice_sets = []
    for index, arg in enumerate(args, start=1):
        faces = []
        for raw in arg.split(","):
            try:
                faces.append(int(raw.strip()))
            except ValueError:
                raise DiceParseError(
                    f"❌ Dice {index} includes non-integer values.\n👉 Use only numbers like: 1,2,3,4,5,6"
                ) from None
        if not faces:
            raise DiceParseError(f"❌ Dice {index} has no faces.")
        dice_sets.append(DiceSet(tuple(faces)))
    return dice_sets


def show_menu(dice_sets: Sequence[DiceSet]):
    print("\n🎲 Dice options:")
    for i, dice in enumerate(dice_sets):
        print(f"  [{i}] {dice}")
    print("  [H] Help\n  [X] Exit")


def show_help():
    print("\n📘 Instructions:")
    for line in HELP_LINES:
        print(line)


def show_commitment(commitment: CommitmentRecord, proof_label: str = "Proof", key_label: str = "Key"):
    # proof is always printed before the key
    print(f"🔐 {proof_label}: {commitment.proof}")
    print(f"🗝️ {key_label}: {commitment.key_hex}")


def prompt_choice(session: GameSession, read: Callable[[str], str]) -> Optional[int]:
    """Run the menu until the user picks a dice set or exits.

    Returns:
        The chosen dice index, or None if the user exits
    """
    while True:
        show_menu(session.dice_sets)
        try:
            choice = read("Your choice: ").strip().upper()
        except (EOFError, KeyboardInterrupt):
            return None

        if choice == "X":
            return None
        if choice == "H":
            show_help()
            continue
        try:
            index = int(choice)
        except ValueError:
            index = -1
        if not 0 <= index < len(session.dice_sets):
            print("⚠️ Invalid choice. Try again.")
            continue
        return index


def play_game(dice_sets: Sequence[DiceSet], read: Optional[Callable[[str], str]] = None) -> Optional[str]:
    """Play one session on the terminal.

    Returns:
        The verdict, or None if the user exited before rolling
    """
    read = read or input
    session = GameSession(dice_sets)

    print("\n🧮 Determining who goes first using HMAC...")
    first = session.decide_first_mover()
    show_commitment(first.commitment, "Commit Proof", "Reveal Key")
    print(f"{MOVER_TEXT[first.mover]}\n")

    index = prompt_choice(session, read)
    if index is None:
        session.abort()
        print("👋 Exiting. Bye!")
        return None

    session.choose_dice(index)
    user_roll, computer_roll = session.resolve_rolls()

    print(f"\n🧍 Your roll: {user_roll.die_face_value}")
    show_commitment(user_roll.commitment)
    print(f"\n💻 Computer roll: {computer_roll.die_face_value}")
    show_commitment(computer_roll.commitment)

    result = session.declare()
    print(f"\n{VERDICT_TEXT[result.verdict]}")
    return result.verdict


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fairdice",
        description="Provably fair dice game against the computer.",
        epilog=f"Example: {USAGE_EXAMPLE}",
    )
    parser.add_argument(
        "dice",
        nargs="*",
        help="Dice sets as comma-separated integer faces.",
    )
    parser.add_argument(
        "--verify",
        nargs=3,
        metavar=("VALUE", "PROOF", "KEY"),
        default=None,
        help="Check a revealed value and key against its proof, then exit.",
    )
    return parser


def _in_argv_order(argv: List[str], dice: List[str], negatives: List[str]) -> List[str]:
    dice, negatives = list(dice), list(negatives)
    ordered = []
    for token in argv:
        if negatives and token == negatives[0]:
            ordered.append(negatives.pop(0))
        elif dice and token == dice[0]:
            ordered.append(dice.pop(0))
    return ordered + dice + negatives


def parse_args(argv: List[str]) -> argparse.Namespace:
    """Parse the command line.

    argparse reads ``-1,2,3`` as an unknown option; such tokens are dice
    whose first face is negative, so they go back into ``dice`` in the order
    they were given.
    """
    parser = _build_parser()
    args, extras = parser.parse_known_intermixed_args(argv)
    stray = [token for token in extras if not NEGATIVE_DICE.match(token)]
    if stray:
        parser.error(f"unrecognized arguments: {' '.join(stray)}")
    if extras:
        args.dice = _in_argv_order(argv, args.dice or [], extras)
    return args


def cmd_verify(value: str, proof: str, key: str) -> int:
    if verify_commitment(value, proof, key):
        print("✅ Proof matches: the value was committed before it was revealed.")
        return EXIT_OK
    print("❌ Proof does not match.")
    return EXIT_ERROR


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = parse_args(list(sys.argv[1:] if argv is None else argv))
    except SystemExit as e:
        # argparse uses SystemExit for --help and parse errors.
        code = e.code
        return int(code) if isinstance(code, int) else EXIT_ERROR

    if args.verify:
        return cmd_verify(*args.verify)

    try:
        dice_sets = parse_dice_args(args.dice or [])
        play_game(dice_sets)
    except FairDiceError as e:
        print(str(e), file=sys.stderr)
        return EXIT_ERROR
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
