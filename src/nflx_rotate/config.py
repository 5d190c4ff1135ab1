from dataclasses import dataclass
from typing import Optional


DEFAULT_TMP_PREFIX = "nflx-passwd-rotate-tmpdir"
DEFAULT_SETTLE_SECONDS = 4.0
DEFAULT_WAIT_TIMEOUT_SECONDS = 30.0
ENV_PREFIX = "NFLX_ROTATE"


@dataclass(frozen=True)
class RotateConfig:
    """Settings for one rotation run.

    Built once by the command line from options and environment variables,
    then passed to the session, the engines and the orchestrator.
    """

    engine: str = "playwright"
    headless: bool = True
    disable_gpu: bool = True
    browser_path: Optional[str] = None
    work_dir: Optional[str] = None
    tmp_prefix: str = DEFAULT_TMP_PREFIX
    settle_seconds: float = DEFAULT_SETTLE_SECONDS
    wait_timeout_seconds: float = DEFAULT_WAIT_TIMEOUT_SECONDS
    force_logout: bool = True
    no_color: bool = False
    debug: bool = False

    @property
    def wait_timeout_ms(self) -> int:
        return int(self.wait_timeout_seconds * 1000)
