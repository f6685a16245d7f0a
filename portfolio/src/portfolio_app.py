"""
Portfolio site Flask app (single page).

- Factory: create_app(config=None)
- Routes:
    GET /  and /index.html -> render index.html (all sections)
    GET /content.json      -> JSON snapshot of the page content
    anything else          -> {"ok": false, "error": "not found"}, 404
- Dependency Injection via app.config: CONTENT (callable -> content dict)
- Scroll spy / reveal constants live in config and are written into
  data-* attributes so static/js/portfolio.js uses the same numbers.
"""

from __future__ import annotations

import os
from typing import Any, Callable

from flask import Flask, jsonify, render_template
from jinja2 import ChainableUndefined

from .content import is_external, load_content
from .interaction import MenuState
from .reveal import RevealOnView, Transition
from .scroll_spy import SECTIONS, ActiveSectionCell, ScrollSpy, navbar_classes


DEFAULTS: dict[str, Any] = {
    "SITE_TITLE": "Yash Malik | Portfolio",
    "INITIAL_SECTION": "home",
    "SCROLL_REFERENCE_PX": 100,
    "SCROLLED_THRESHOLD_PX": 50,
    "REVEAL_MARGIN_PX": -75,
    "REVEAL_OFFSET_PX": 75,
    "REVEAL_DURATION_S": 0.5,
    "TILT_MAX_ANGLE": 10,
    "TILT_GLARE_OPACITY": 0.3,
    "CURSOR_STRENGTH": 20,
}

ENV_PREFIX = "PORTFOLIO_"

# value checks for env overrides; a failing value falls back to the default
VALID: dict[str, Callable[[Any], bool]] = {
    "INITIAL_SECTION": lambda v: v in SECTIONS,
    "REVEAL_DURATION_S": lambda v: v >= 0,
    "TILT_MAX_ANGLE": lambda v: v >= 0,
    "TILT_GLARE_OPACITY": lambda v: 0 <= v <= 1,
}


# ---------------- helpers ----------------

def _env_overrides(defaults: dict[str, Any], environ=None) -> tuple[dict, list[str]]:
    """
    Read PORTFOLIO_<KEY> for each default, cast to the default's type.
    Returns (overrides, bad_keys); unparsable or out-of-range values
    are left out.
    """
    environ = os.environ if environ is None else environ
    out: dict[str, Any] = {}
    bad: list[str] = []
    for key, default in defaults.items():
        raw = environ.get(ENV_PREFIX + key)
        if raw is None:
            continue
        try:
            value = type(default)(raw)
        except ValueError:
            bad.append(key)
            continue
        if key in VALID and not VALID[key](value):
            bad.append(key)
            continue
        out[key] = value
    return out, bad


class _NothingOnScreen:
    """Visibility observer for server-side rendering: nothing is visible yet."""

    def observe(self, element, margin, callback):
        return lambda: None


def _initial_nav_state(config) -> dict:
    """Navbar at page load: scroll offset 0, no section geometry known."""
    spy = ScrollSpy(
        locate=lambda _section: None,
        cell=ActiveSectionCell(initial=config["INITIAL_SECTION"]),
        reference_line=config["SCROLL_REFERENCE_PX"],
        scrolled_threshold=config["SCROLLED_THRESHOLD_PX"],
    )
    update = spy.on_scroll(0)
    return {
        "active": update.active,
        "navbar_class": navbar_classes(update.scrolled),
        "menu_open": MenuState().is_open,
    }


def _reveal_style_factory(config) -> Callable[[float], str]:
    def reveal_style(delay: float = 0) -> str:
        model = RevealOnView(
            _NothingOnScreen(),
            margin=config["REVEAL_MARGIN_PX"],
            transition=Transition(
                duration=config["REVEAL_DURATION_S"],
                delay=delay,
                offset_y=config["REVEAL_OFFSET_PX"],
            ),
        )
        model.attach(None)
        return model.style()
    return reveal_style


def _get_content(app: Flask) -> dict:
    content_fn: Callable[[], dict] | None = app.config.get("CONTENT")
    return content_fn() if content_fn else load_content()


# --------------- factory ---------------

def create_app(config: dict | None = None) -> Flask:
    app = Flask(__name__, template_folder="templates", static_folder="static")
    app.config.update(
        TESTING=False,
        CONTENT=None,   # () -> dict shaped like content.load_content()
        **DEFAULTS,
    )
    overrides, bad = _env_overrides(DEFAULTS)
    app.config.update(overrides)
    for key in bad:
        app.logger.warning("ignoring invalid %s%s; using %r",
                           ENV_PREFIX, key, DEFAULTS[key])
    if config:
        app.config.update(config)

    # fail at startup, not on first request
    ActiveSectionCell(initial=app.config["INITIAL_SECTION"])

    # missing content fields render as empty, nested ones included
    app.jinja_env.undefined = ChainableUndefined
    app.jinja_env.globals.update(
        reveal_style=_reveal_style_factory(app.config),
        is_external=is_external,
    )

    # --------------- routes ---------------

    @app.get("/")
    @app.get("/index.html")
    def index():
        """Render the whole page with the load-time navbar state."""
        content = _get_content(app)
        ctx = {
            "title": app.config["SITE_TITLE"],
            "sections": SECTIONS,
            "cfg": app.config,
            **_initial_nav_state(app.config),
            **content,
        }
        return render_template("index.html", **ctx)

    @app.get("/content.json")
    def content_json():
        """Content snapshot (same collections the page renders)."""
        return jsonify(_get_content(app)), 200

    @app.errorhandler(404)
    def not_found(_err):
        return jsonify({"ok": False, "error": "not found"}), 404

    content = _get_content(app)
    app.logger.info(
        "portfolio app ready: %d projects, %d skill categories, %d contact links",
        len(content.get("projects", [])),
        len(content.get("skill_categories", [])),
        len(content.get("contact", {}).get("links", [])),
    )
    return app


# Runs on 0.0.0.0:8080 by default. Start with: python -m portfolio.src.portfolio_app
if __name__ == "__main__":
    create_app().run(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
        debug=True,
    )
