from typing import Optional, Any, List

from playwright.sync_api import sync_playwright, Page, Browser, BrowserContext

from .engine import is_xpath


class PlaywrightEngine:
    def __init__(self):
        self._pw = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    @staticmethod
    def launch_args(disable_gpu: bool = True) -> List[str]:
        args = ["--no-first-run", "--no-default-browser-check"]
        if disable_gpu:
            args.append("--disable-gpu")
        return args

    def start(
        self,
        headless: bool = True,
        user_data_dir: Optional[str] = None,
        executable_path: Optional[str] = None,
        disable_gpu: bool = True,
    ) -> None:
        self._pw = sync_playwright().start()
        launch_args = {"headless": headless, "args": self.launch_args(disable_gpu)}
        # Without an explicit binary, Playwright resolves its own Chromium.
        if executable_path:
            launch_args["executable_path"] = executable_path
        if user_data_dir:
            self._context = self._pw.chromium.launch_persistent_context(user_data_dir, **launch_args)
            pages = self._context.pages
            self._page = pages[0] if pages else self._context.new_page()
        else:
            self._browser = self._pw.chromium.launch(**launch_args)
            self._context = self._browser.new_context()
            self._page = self._context.new_page()

    def stop(self) -> None:
        try:
            if self._context:
                self._context.close()
            if self._browser:
                self._browser.close()
        finally:
            if self._pw:
                self._pw.stop()
            self._page = None
            self._context = None
            self._browser = None
            self._pw = None

    @staticmethod
    def _selector(selector: str) -> str:
        return f"xpath={selector}" if is_xpath(selector) else selector

    def goto(self, url: str, timeout_ms: int = 30000) -> None:
        assert self._page is not None
        self._page.goto(url, wait_until="load", timeout=timeout_ms)

    def wait_visible(self, selector: str, timeout_ms: int = 30000) -> None:
        assert self._page is not None
        self._page.wait_for_selector(self._selector(selector), state="visible", timeout=timeout_ms)

    def type(self, selector: str, value: str, clear: bool = True) -> None:
        assert self._page is not None
        locator = self._page.locator(self._selector(selector))
        if clear:
            locator.fill("")
        locator.press_sequentially(value)

    def click(self, selector: str, timeout_ms: int = 30000) -> None:
        assert self._page is not None
        self._page.click(self._selector(selector), timeout=timeout_ms)

    def sleep(self, seconds: float) -> None:
        assert self._page is not None
        self._page.wait_for_timeout(seconds * 1000)

    def evaluate(self, expression: str) -> Any:
        assert self._page is not None
        return self._page.evaluate(expression)
