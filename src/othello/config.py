# src/othello/config.py

from __future__ import annotations

import os

SIZE = 8

# Undo depth (oldest snapshot is dropped beyond this)
HISTORY_LIMIT = 60

# Engine phase thresholds
OPENING_MAX_PLY = 8      # opening table is consulted while fewer moves are logged
ENDGAME_EMPTIES = 10     # exact search to the end at or below this many empties
MIDGAME_EMPTIES = 50     # fixed-depth search at or below this many empties
MIDGAME_DEPTH = 4

# Evaluation
CORNER_BONUS = 25
MOBILITY_WEIGHT = 5

# UI toggles
USE_COLOR = os.environ.get("NO_COLOR") is None
CLEAR_SCREEN = True
SHOW_HINTS = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 1  # short pause so CPU moves aren’t instant

LOG_LEVEL = os.environ.get("OTHELLO_LOG_LEVEL", "WARNING")
