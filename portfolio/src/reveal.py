"""
One-shot reveal-on-view.

An element starts HIDDEN (shifted down, transparent) and flips to
VISIBLE the first time the visibility observer reports it intersecting
the viewport (shrunk by `margin` px). VISIBLE is terminal.

The observer is a capability (`ObservesVisibility`) so tests can drive
it deterministically; in the browser it is an IntersectionObserver.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Callable, List, Optional, Protocol, Tuple

log = logging.getLogger(__name__)

REVEAL_MARGIN = -75       # px; negative = fire after the element is 75px in
REVEAL_OFFSET = 75        # px the element starts below its natural position
REVEAL_DURATION = 0.5     # seconds

# CSS named timing functions as cubic-bezier control points
EASINGS = {
    "linear": (0.0, 0.0, 1.0, 1.0),
    "ease": (0.25, 0.1, 0.25, 1.0),
    "ease-in": (0.42, 0.0, 1.0, 1.0),
    "ease-out": (0.0, 0.0, 0.58, 1.0),
    "ease-in-out": (0.42, 0.0, 0.58, 1.0),
}


class ObservesVisibility(Protocol):
    def observe(
        self,
        element: Any,
        margin: float,
        callback: Callable[[bool], None],
    ) -> Callable[[], None]:
        """Start watching `element`; return a function that stops watching."""
        ...


class RevealState(enum.Enum):
    HIDDEN = "hidden"
    VISIBLE = "visible"


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Callable[[float], float]:
    """CSS timing function: progress in [0, 1] -> eased progress."""

    def _coord(t: float, a: float, b: float) -> float:
        # Bezier with P0 = 0 and P3 = 1
        return 3 * a * t * (1 - t) ** 2 + 3 * b * t ** 2 * (1 - t) + t ** 3

    def ease(p: float) -> float:
        if p <= 0:
            return 0.0
        if p >= 1:
            return 1.0
        lo, hi = 0.0, 1.0
        for _ in range(40):
            mid = (lo + hi) / 2
            if _coord(mid, x1, x2) < p:
                lo = mid
            else:
                hi = mid
        return _coord((lo + hi) / 2, y1, y2)

    return ease


class Transition:
    """Offset/opacity entrance animation: (0, offset_y) -> (1, 0)."""

    def __init__(self, duration: float = REVEAL_DURATION, delay: float = 0.0,
                 offset_y: float = REVEAL_OFFSET, easing: str = "ease-out"):
        if duration < 0 or delay < 0:
            raise ValueError("duration and delay must be non-negative")
        self.duration = duration
        self.delay = delay
        self.offset_y = offset_y
        self.easing = easing
        if easing not in EASINGS:
            raise ValueError(f"unknown easing: {easing!r}")
        self._ease = cubic_bezier(*EASINGS[easing])

    def frame(self, elapsed: float) -> Tuple[float, float]:
        """(opacity, y) at `elapsed` seconds after the trigger."""
        t = elapsed - self.delay
        if t <= 0:
            return 0.0, float(self.offset_y)
        if self.duration == 0 or t >= self.duration:
            return 1.0, 0.0
        p = self._ease(t / self.duration)
        return p, self.offset_y * (1 - p)

    def css(self) -> str:
        return (
            f"opacity {self.duration}s {self.easing} {self.delay}s, "
            f"transform {self.duration}s {self.easing} {self.delay}s"
        )

    def hidden_style(self) -> str:
        return f"opacity: 0; transform: translateY({self.offset_y}px); transition: {self.css()};"

    def visible_style(self) -> str:
        return f"opacity: 1; transform: translateY(0px); transition: {self.css()};"


class RevealOnView:
    """
    Latch for one element. attach() subscribes; the first intersecting
    notification makes it VISIBLE, unsubscribes, and fires on_reveal
    callbacks. An element that is never attached (None) stays HIDDEN.
    """

    def __init__(self, observer: ObservesVisibility, margin: float = REVEAL_MARGIN,
                 transition: Optional[Transition] = None):
        self.observer = observer
        self.margin = margin
        self.transition = transition or Transition()
        self.state = RevealState.HIDDEN
        self._unsubscribe: Optional[Callable[[], None]] = None
        self._listeners: List[Callable[["RevealOnView"], None]] = []

    @property
    def visible(self) -> bool:
        return self.state is RevealState.VISIBLE

    def on_reveal(self, fn: Callable[["RevealOnView"], None]) -> None:
        self._listeners.append(fn)

    def attach(self, element: Any) -> None:
        if element is None or self.visible or self._unsubscribe is not None:
            return
        unsubscribe = self.observer.observe(element, self.margin, self._notify)
        if self.visible:
            # observer reported synchronously from inside observe()
            unsubscribe()
            return
        self._unsubscribe = unsubscribe

    def detach(self) -> None:
        unsubscribe, self._unsubscribe = self._unsubscribe, None
        if unsubscribe is not None:
            unsubscribe()
            log.debug("reveal detached (state=%s)", self.state.value)

    def _notify(self, intersecting: bool) -> None:
        if not intersecting or self.visible:
            return
        self.state = RevealState.VISIBLE
        log.debug("reveal fired (delay=%ss)", self.transition.delay)
        self.detach()
        for fn in self._listeners:
            fn(self)

    def style(self) -> str:
        if self.visible:
            return self.transition.visible_style()
        return self.transition.hidden_style()
