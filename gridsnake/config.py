"""Tuning constants and process settings.

The weights were tuned by playing games, not derived; change them together.
"""
import os

from gridsnake.board import Direction

# ---------------------------------
# Move weights
# ---------------------------------
WEIGHTS = {
    "tail_food": -100,     # tail whose owner is next to food (it will not move)
    "hazard_factor": 10,   # multiplied by the ruleset's hazard damage
    "head_smaller": 20,    # next to a strictly shorter enemy head
    "head_bigger": -500,   # next to an equal or longer enemy head
    "food": 1,             # per food item lying in that direction
    "space_penalty": 10,   # per missing cell below SPACE_THRESHOLD
}

SPACE_THRESHOLD = 20
# snakes shorter than this keep their tail where it is next turn
SHORT_SNAKE_LENGTH = 3

FALLBACK_MOVE = Direction.UP

SNAKE_INFO = {
    "apiversion": "1",
    "author": os.environ.get("SNAKE_AUTHOR", ""),
    "color": os.environ.get("SNAKE_COLOR", "#888888"),
    "head": "default",
    "tail": "default",
    "version": "gridsnake-1.0",
}

# ---------------------------------
# Server
# ---------------------------------
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
