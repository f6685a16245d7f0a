"""
Scroll spy for the single-page portfolio.

- Decides which section is "active" for nav highlighting.
- Tracks the navbar "scrolled" flag (cosmetic backdrop change).
- Geometry comes from an injected `locate(section_id) -> Rect | None`
  so the logic runs the same in tests and behind the browser script.

Rule: the first section (in SECTIONS order) whose rect straddles the
reference line wins; if none straddles it, the previous value stays.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Mapping, Optional, Sequence

log = logging.getLogger(__name__)

SECTIONS: tuple[str, ...] = ("home", "about", "skills", "projects", "contact")
REFERENCE_LINE = 100      # px from the top of the viewport
SCROLLED_THRESHOLD = 50   # px of page scroll before the navbar restyles

NAVBAR_SCROLLED = "navbar navbar--scrolled"
NAVBAR_TOP = "navbar navbar--top"


@dataclass(frozen=True)
class Rect:
    """Vertical extent of a section in viewport coordinates."""

    top: float
    bottom: float

    def straddles(self, line: float) -> bool:
        return self.top <= line <= self.bottom


@dataclass(frozen=True)
class ScrollUpdate:
    active: Optional[str]
    scrolled: bool


def is_scrolled(scroll_y: float, threshold: float = SCROLLED_THRESHOLD) -> bool:
    """True only once the offset is strictly past the threshold."""
    return scroll_y > threshold


def navbar_classes(scrolled: bool) -> str:
    return NAVBAR_SCROLLED if scrolled else NAVBAR_TOP


def find_active(
    rects: Mapping[str, Optional[Rect]],
    order: Sequence[str] = SECTIONS,
    reference: float = REFERENCE_LINE,
) -> Optional[str]:
    """
    Return the first id in `order` whose rect straddles `reference`.

    Ids missing from `rects` (or mapped to None) are skipped.
    Returns None when nothing straddles the line.
    """
    for section in order:
        rect = rects.get(section)
        if rect is None:
            continue
        if rect.straddles(reference):
            return section
    return None


class ActiveSectionCell:
    """Owned holder for the active section (one of `sections`, or None)."""

    def __init__(self, initial: Optional[str] = None,
                 sections: Sequence[str] = SECTIONS):
        self._sections = tuple(sections)
        self._initial = self._check(initial)
        self._value = self._initial

    def _check(self, section: Optional[str]) -> Optional[str]:
        if section is not None and section not in self._sections:
            raise ValueError(f"unknown section: {section!r}")
        return section

    @property
    def value(self) -> Optional[str]:
        return self._value

    @property
    def sections(self) -> tuple[str, ...]:
        return self._sections

    def set(self, section: Optional[str]) -> None:
        self._value = self._check(section)

    def reset(self) -> None:
        """Back to the initial value (page reload)."""
        self._value = self._initial


class ScrollSpy:
    """
    Recomputes the active section and scrolled flag on every scroll event.

    `locate` maps a section id to its current Rect, or None when the
    element is absent (that section is then never matched).
    `mount(events)` registers a "scroll" listener on any object exposing
    add_listener(name, fn) / remove_listener(name, fn).
    """

    def __init__(
        self,
        locate: Callable[[str], Optional[Rect]],
        cell: ActiveSectionCell | None = None,
        sections: Sequence[str] | None = None,
        reference_line: float = REFERENCE_LINE,
        scrolled_threshold: float = SCROLLED_THRESHOLD,
    ):
        self.cell = cell if cell is not None else ActiveSectionCell(
            sections=sections or SECTIONS
        )
        self.sections = tuple(sections) if sections else self.cell.sections
        unknown = set(self.sections) - set(self.cell.sections)
        if unknown:
            raise ValueError(f"sections not known to the cell: {sorted(unknown)}")
        self.locate = locate
        self.reference_line = reference_line
        self.scrolled_threshold = scrolled_threshold
        self.scrolled = False
        self._events = None

    @property
    def active(self) -> Optional[str]:
        return self.cell.value

    def _measure(self) -> dict[str, Optional[Rect]]:
        rects: dict[str, Optional[Rect]] = {}
        for section in self.sections:
            rect = self.locate(section)
            if rect is None:
                log.debug("section %r not found; skipped", section)
            rects[section] = rect
        return rects

    def on_scroll(self, scroll_y: float) -> ScrollUpdate:
        self.scrolled = is_scrolled(scroll_y, self.scrolled_threshold)
        current = find_active(self._measure(), self.sections, self.reference_line)
        if current is not None:
            self.cell.set(current)
        return ScrollUpdate(active=self.cell.value, scrolled=self.scrolled)

    # --------------- listener lifecycle ---------------

    @property
    def mounted(self) -> bool:
        return self._events is not None

    def mount(self, events) -> None:
        if self._events is not None:
            raise RuntimeError("ScrollSpy is already mounted")
        events.add_listener("scroll", self.on_scroll)
        self._events = events

    def unmount(self) -> None:
        if self._events is None:
            return
        events, self._events = self._events, None
        events.remove_listener("scroll", self.on_scroll)

    @contextmanager
    def listening(self, events) -> Iterator["ScrollSpy"]:
        """Scoped mount; the listener is released even if the body raises."""
        self.mount(events)
        try:
            yield self
        finally:
            self.unmount()
