import os, sys
import pytest
from bs4 import BeautifulSoup
# Ensure repo root is on sys.path so "portfolio.src" imports work when running from repo root
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))


@pytest.fixture
def app():
    from portfolio.src.portfolio_app import create_app
    return create_app({"TESTING": True})

@pytest.fixture
def client(app):
    return app.test_client()

@pytest.fixture
def soup():
    def _s(html: bytes | str):
        return BeautifulSoup(html, "lxml")
    return _s


class FakeVisibility:
    """Deterministic ObservesVisibility: tests call show()/hide() by hand."""

    def __init__(self):
        self.watching = {}     # element -> (margin, callback)
        self.unsubscribed = []

    def observe(self, element, margin, callback):
        self.watching[element] = (margin, callback)

        def _stop():
            self.watching.pop(element, None)
            self.unsubscribed.append(element)
        return _stop

    def _emit(self, element, intersecting):
        entry = self.watching.get(element)
        if entry:
            entry[1](intersecting)

    def show(self, element):
        self._emit(element, True)

    def hide(self, element):
        self._emit(element, False)


class FakeEvents:
    """Listener registry standing in for window.add/removeEventListener."""

    def __init__(self):
        self.listeners = {}

    def add_listener(self, name, fn):
        self.listeners.setdefault(name, []).append(fn)

    def remove_listener(self, name, fn):
        self.listeners.get(name, []).remove(fn)

    def fire(self, name, *args):
        for fn in list(self.listeners.get(name, [])):
            fn(*args)


@pytest.fixture
def visibility():
    return FakeVisibility()

@pytest.fixture
def events():
    return FakeEvents()
