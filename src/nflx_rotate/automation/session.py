"""Browser session lifecycle and step execution.

A :class:`BrowserSession` owns one temporary profile directory and one
started engine. Leaving the ``with`` block, by any path, stops the browser
and removes the profile.
"""
from __future__ import annotations

import logging
import shutil
import tempfile
from typing import Iterable, Optional

from ..config import RotateConfig
from ..errors import BrowserLaunchError, ExecutionError, SessionSetupError
from .types import ActionStep

logger = logging.getLogger("nflx_rotate")


def create_engine(name: str):
    """Instantiate the automation engine named on the command line."""
    if name == "playwright":
        from .playwright_engine import PlaywrightEngine
        return PlaywrightEngine()
    if name == "selenium":
        from .selenium_engine import SeleniumEngine, SELENIUM_AVAILABLE
        if not SELENIUM_AVAILABLE:
            raise BrowserLaunchError("Selenium not installed. Install extra: pip install .[automation-selenium]")
        return SeleniumEngine()
    raise BrowserLaunchError(f"Unknown automation engine: {name}")


def make_profile_dir(prefix: str, work_dir: Optional[str] = None) -> str:
    try:
        return tempfile.mkdtemp(prefix=prefix, dir=work_dir)
    except OSError as e:
        raise SessionSetupError("Unable to create a temporary directory", cause=e)


class BrowserSession:
    """Exclusive owner of the browser for one run."""

    def __init__(self, engine, config: RotateConfig):
        self.engine = engine
        self.config = config
        self.profile_dir: Optional[str] = None

    def __enter__(self) -> "BrowserSession":
        self.profile_dir = make_profile_dir(self.config.tmp_prefix, self.config.work_dir)
        logger.debug(f"[session] profile directory: {self.profile_dir}")
        try:
            self.engine.start(
                headless=self.config.headless,
                user_data_dir=self.profile_dir,
                executable_path=self.config.browser_path,
                disable_gpu=self.config.disable_gpu,
            )
        except Exception as e:
            self.close()
            raise BrowserLaunchError("Unable to start the browser", cause=e)
        logger.debug("[session] browser started")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Stop the browser and delete the profile. Safe to call twice."""
        try:
            # Stop even a half-started engine so no process is left behind.
            self.engine.stop()
        except Exception:
            logger.debug("[session] error while stopping the browser", exc_info=True)
        finally:
            if self.profile_dir:
                shutil.rmtree(self.profile_dir, ignore_errors=True)
                logger.debug(f"[session] removed profile directory: {self.profile_dir}")
                self.profile_dir = None

    def execute(self, steps: Iterable[ActionStep]) -> None:
        execute(self.engine, steps, timeout_ms=self.config.wait_timeout_ms)


def execute(engine, steps: Iterable[ActionStep], timeout_ms: int = 30000) -> None:
    """Apply ``steps`` in order; the first failure aborts the rest.

    Raises:
        ExecutionError: Carrying the failed step and the underlying error.
    """
    for index, step in enumerate(steps):
        logger.debug(f"[session] step {index}: {step!r}")
        try:
            step.apply(engine, timeout_ms)
        except Exception as e:
            raise ExecutionError(f"Browser execution failed at {step!r}", step=step, cause=e)
