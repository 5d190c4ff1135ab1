from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union
from datetime import datetime


class Stage(str, Enum):
    LOGIN = "login"
    UPDATE = "update"


class RunState(str, Enum):
    INIT = "init"
    SESSION_READY = "session_ready"
    LOGGED_IN = "logged_in"
    PASSWORD_UPDATED = "password_updated"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class Navigate:
    url: str

    def apply(self, engine, timeout_ms: int) -> None:
        engine.goto(self.url, timeout_ms=timeout_ms)


@dataclass(frozen=True)
class WaitVisible:
    locator: str

    def apply(self, engine, timeout_ms: int) -> None:
        engine.wait_visible(self.locator, timeout_ms=timeout_ms)


@dataclass(frozen=True)
class TypeText:
    locator: str
    value: str = field(repr=False)

    def apply(self, engine, timeout_ms: int) -> None:
        engine.type(self.locator, self.value)


@dataclass(frozen=True)
class Click:
    locator: str

    def apply(self, engine, timeout_ms: int) -> None:
        engine.click(self.locator, timeout_ms=timeout_ms)


@dataclass(frozen=True)
class Sleep:
    seconds: float

    def apply(self, engine, timeout_ms: int) -> None:
        engine.sleep(self.seconds)


ActionStep = Union[Navigate, WaitVisible, TypeText, Click, Sleep]


@dataclass(frozen=True)
class VerificationOutcome:
    stage: Stage
    succeeded: bool
    failure_text: Optional[str] = None


@dataclass
class RotationResult:
    state: RunState
    new_password: str = field(repr=False)
    username: str = ""
    changed_at: Optional[datetime] = None
