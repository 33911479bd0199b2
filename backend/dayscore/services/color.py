"""Red-yellow-green display color derived from an entry score."""
from __future__ import annotations

from typing import Tuple

CHANNEL_MAX = 255


def score_to_rgb(score: float) -> Tuple[int, int, int]:
    s = max(0.0, min(100.0, float(score)))
    if s <= 50:
        red = CHANNEL_MAX
        green = round(CHANNEL_MAX * s / 50)
    else:
        red = round(CHANNEL_MAX * (100 - s) / 50)
        green = CHANNEL_MAX
    return red, green, 0


def score_to_color(score: float) -> str:
    r, g, b = score_to_rgb(score)
    return f"rgb({r}, {g}, {b})"
