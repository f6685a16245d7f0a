"""Small pointer/click helpers: mobile menu, hero cursor offset, card tilt."""

from __future__ import annotations

import math
from typing import Tuple

CURSOR_STRENGTH = 20
TILT_MAX_ANGLE = 10
TILT_GLARE_OPACITY = 0.3


class MenuState:
    """Mobile nav drawer; closed on load and after following a link."""

    def __init__(self, is_open: bool = False):
        self.is_open = is_open

    def toggle(self) -> bool:
        self.is_open = not self.is_open
        return self.is_open

    def close(self) -> None:
        self.is_open = False


def cursor_offset(client_x: float, client_y: float, width: float, height: float,
                  strength: float = CURSOR_STRENGTH) -> Tuple[float, float]:
    """Pointer position relative to viewport center, scaled to +/- strength/2."""
    if width <= 0 or height <= 0:
        return 0.0, 0.0
    return (
        (client_x / width - 0.5) * strength,
        (client_y / height - 0.5) * strength,
    )


def _clamp(v: float, limit: float) -> float:
    return max(-limit, min(limit, v))


def tilt_angles(x: float, y: float, width: float, height: float,
                max_angle: float = TILT_MAX_ANGLE) -> Tuple[float, float]:
    """
    (rotate_x, rotate_y) in degrees for a pointer at (x, y) inside a card.

    Card center -> (0, 0); right edge -> rotate_y = +max_angle;
    top edge -> rotate_x = +max_angle.
    """
    if width <= 0 or height <= 0:
        return 0.0, 0.0
    nx = x / width * 2 - 1
    ny = y / height * 2 - 1
    return _clamp(-ny * max_angle, max_angle), _clamp(nx * max_angle, max_angle)


def glare_at(x: float, y: float, width: float, height: float,
             max_opacity: float = TILT_GLARE_OPACITY) -> Tuple[float, float, float]:
    """
    (left %, top %, opacity) of the glare highlight for a pointer inside a card.

    The highlight sits under the pointer and brightens toward the edges,
    reaching `max_opacity` at the card's edge midpoints and beyond.
    """
    if width <= 0 or height <= 0:
        return 50.0, 50.0, 0.0
    nx = x / width * 2 - 1
    ny = y / height * 2 - 1
    left = max(0.0, min(100.0, x / width * 100))
    top = max(0.0, min(100.0, y / height * 100))
    return left, top, max_opacity * min(1.0, math.hypot(nx, ny))
