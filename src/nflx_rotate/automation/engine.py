from typing import Protocol, Optional, Any


def is_xpath(selector: str) -> bool:
    return selector.startswith("/") or selector.startswith("(")


class AutomationEngine(Protocol):
    def start(
        self,
        headless: bool = True,
        user_data_dir: Optional[str] = None,
        executable_path: Optional[str] = None,
        disable_gpu: bool = True,
    ) -> None:
        ...

    def stop(self) -> None:
        ...

    def goto(self, url: str, timeout_ms: int = 30000) -> None:
        ...

    def wait_visible(self, selector: str, timeout_ms: int = 30000) -> None:
        ...

    def type(self, selector: str, value: str, clear: bool = True) -> None:
        ...

    def click(self, selector: str, timeout_ms: int = 30000) -> None:
        ...

    def sleep(self, seconds: float) -> None:
        ...

    def evaluate(self, expression: str) -> Any:
        ...
