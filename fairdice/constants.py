"""Constants and type definitions for fairdice."""

from typing import Literal

# Type definitions
Mover = Literal["USER", "COMPUTER"]
Verdict = Literal["USER_WINS", "COMPUTER_WINS", "TIE"]
SessionStatus = Literal[
    "IDLE",
    "FIRST_MOVER_DECIDED",
    "DICE_CHOSEN",
    "ROLLS_RESOLVED",
    "VERDICT_DECLARED",
    "ABORTED",
]

# Candidate order for the first-mover draw
MOVERS: tuple = ("USER", "COMPUTER")

# Commit-reveal
MIN_KEY_BYTES = 32  # 256-bit HMAC key

# CLI text
MOVER_TEXT = {
    "USER": "🧍 You start!",
    "COMPUTER": "💻 Computer starts!",
}

VERDICT_TEXT = {
    "USER_WINS": "🏆 You win!",
    "COMPUTER_WINS": "❌ Computer wins!",
    "TIE": "🤝 It's a tie!",
}

HELP_LINES = [
    "- Select a dice using its number.",
    "- Rolls are proven fair with HMAC.",
    "- Highest roll wins.",
]

USAGE_EXAMPLE = "fairdice 2,2,4,4,9,9 6,8,1,1,8,6 7,5,3,7,5,3"
