"""Shared fixtures: a scripted browser engine backed by a stub DOM."""
import json
import re
from typing import Dict, List, Optional, Set

import pytest

from nflx_rotate.automation.locators import default_catalog
from nflx_rotate.config import RotateConfig


_XPATH = re.compile(r"document\.evaluate\((\".*?(?<!\\)\"), document")


class FakeEngine:
    """Records calls and answers DOM probes from a set of present XPaths.

    ``after_click`` maps a locator to the DOM (present XPaths and their texts)
    the page shows once that locator is clicked.
    """

    def __init__(self, present: Optional[Set[str]] = None, texts: Optional[Dict[str, str]] = None):
        self.present: Set[str] = set(present or ())
        self.texts: Dict[str, str] = dict(texts or {})
        self.after_click: Dict[str, tuple] = {}
        self.fail_on: Dict[str, Exception] = {}
        self.eval_error: Optional[Exception] = None
        self.calls: List[tuple] = []
        self.started = False
        self.start_error: Optional[Exception] = None
        self.user_data_dir: Optional[str] = None
        self.start_kwargs: dict = {}

    def _maybe_fail(self, name: str) -> None:
        if name in self.fail_on:
            raise self.fail_on[name]

    def start(self, headless=True, user_data_dir=None, executable_path=None, disable_gpu=True):
        self.calls.append(("start",))
        self.user_data_dir = user_data_dir
        self.start_kwargs = {
            "headless": headless,
            "executable_path": executable_path,
            "disable_gpu": disable_gpu,
        }
        if self.start_error is not None:
            raise self.start_error
        self.started = True

    def stop(self):
        self.calls.append(("stop",))
        self.started = False

    def goto(self, url, timeout_ms=30000):
        self.calls.append(("goto", url))
        self._maybe_fail(url)

    def wait_visible(self, selector, timeout_ms=30000):
        self.calls.append(("wait_visible", selector))
        self._maybe_fail(selector)

    def type(self, selector, value, clear=True):
        self.calls.append(("type", selector, value))
        self._maybe_fail(selector)

    def click(self, selector, timeout_ms=30000):
        self.calls.append(("click", selector))
        self._maybe_fail(selector)
        if selector in self.after_click:
            present, texts = self.after_click[selector]
            self.present = set(present)
            self.texts = dict(texts)

    def sleep(self, seconds):
        self.calls.append(("sleep", seconds))

    def evaluate(self, expression):
        self.calls.append(("evaluate", expression))
        if self.eval_error is not None:
            raise self.eval_error
        match = _XPATH.search(expression)
        assert match, expression
        xpath = json.loads(match.group(1))
        if expression.endswith("!== null"):
            return xpath in self.present
        if expression.endswith(".innerText"):
            if xpath not in self.present:
                raise RuntimeError("TypeError: Cannot read properties of null")
            return self.texts.get(xpath, "")
        raise AssertionError(f"unexpected script: {expression}")

    def call_names(self) -> List[str]:
        return [c[0] for c in self.calls]


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def engine():
    return FakeEngine()


@pytest.fixture
def config(tmp_path):
    return RotateConfig(work_dir=str(tmp_path), settle_seconds=0, wait_timeout_seconds=1)


def make_site(catalog, login_ok=True, update_ok=True, login_errors=None, update_errors=None) -> FakeEngine:
    """A FakeEngine that behaves like the site for one login and one update.

    ``login_errors`` / ``update_errors`` map error XPaths to the text the
    page shows when that stage is rejected.
    """
    engine = FakeEngine()
    if login_ok:
        engine.after_click[catalog.login.submit] = (set(), {})
    else:
        errors = dict(login_errors or {})
        engine.after_click[catalog.login.submit] = ({catalog.login.probe, *errors}, errors)
    if update_ok:
        engine.after_click[catalog.update.submit] = ({catalog.update.probe}, {})
    else:
        errors = dict(update_errors or {})
        engine.after_click[catalog.update.submit] = (set(errors), errors)
    return engine


@pytest.fixture
def site(catalog):
    def factory(**kwargs):
        return make_site(catalog, **kwargs)
    return factory
