import logging
from datetime import datetime
from typing import List, Optional

from ..config import RotateConfig
from ..core.models import Credentials
from ..errors import LoginRejected, RotateError, UpdateRejected
from .locators import LocatorCatalog, default_catalog
from .sequencer import build_login_actions, build_update_actions, login_params, update_params
from .session import BrowserSession
from .types import RotationResult, RunState, Stage
from .verifier import DomVerifier

logger = logging.getLogger("nflx_rotate")


class RotationRunner:
    """Drives one login-then-update run against a single browser session.

    States advance ``INIT -> SESSION_READY -> LOGGED_IN -> PASSWORD_UPDATED
    -> DONE``. Any failure moves to ``FAILED`` and re-raises the typed
    error; nothing is retried. The session is torn down on every path.
    """

    def __init__(self, engine, config: Optional[RotateConfig] = None, catalog: Optional[LocatorCatalog] = None):
        self.engine = engine
        self.config = config or RotateConfig()
        self.catalog = catalog or default_catalog()
        self.verifier = DomVerifier(self.catalog)
        self.state = RunState.INIT
        self.history: List[RunState] = [RunState.INIT]
        self.failure: Optional[RotateError] = None

    def _advance(self, state: RunState) -> None:
        logger.debug(f"[runner] {self.state.value} -> {state.value}")
        self.state = state
        self.history.append(state)

    def _require(self, state: RunState) -> None:
        if self.state != state:
            raise RuntimeError(f"Expected state {state.value}, runner is in {self.state.value}")

    def run(self, credentials: Credentials) -> RotationResult:
        self._require(RunState.INIT)
        logger.debug(f"[runner] starting run: {credentials.to_dict()}")
        try:
            with BrowserSession(self.engine, self.config) as session:
                self._advance(RunState.SESSION_READY)
                self.login(session, credentials)
                self.update(session, credentials)
        except RotateError as e:
            self.failure = e
            self._advance(RunState.FAILED)
            raise
        self._advance(RunState.DONE)
        logger.info(f"Password updated for {credentials.username}")
        return RotationResult(
            state=self.state,
            new_password=credentials.new_password,
            username=credentials.username,
            changed_at=datetime.utcnow(),
        )

    def login(self, session: BrowserSession, credentials: Credentials) -> None:
        self._require(RunState.SESSION_READY)
        logger.info(f"Logging in as {credentials.username}")
        params = login_params(self.catalog, credentials)
        session.execute(build_login_actions(params, self.config.settle_seconds))

        outcome = self.verifier.check(session.engine, Stage.LOGIN)
        if not outcome.succeeded:
            raise LoginRejected("Netflix login failed", reason=outcome.failure_text)
        self._advance(RunState.LOGGED_IN)

    def update(self, session: BrowserSession, credentials: Credentials) -> None:
        # The update form only exists in the post-login DOM.
        self._require(RunState.LOGGED_IN)
        logger.info("Updating the password")
        params = update_params(self.catalog, credentials, self.config.force_logout)
        session.execute(build_update_actions(params, self.config.settle_seconds))

        outcome = self.verifier.check(session.engine, Stage.UPDATE)
        if not outcome.succeeded:
            raise UpdateRejected("Password update failed", reason=outcome.failure_text)
        self._advance(RunState.PASSWORD_UPDATED)
