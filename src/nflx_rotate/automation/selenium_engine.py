import time
from typing import Optional, Any

try:
    from selenium import webdriver
    from selenium.webdriver.common.by import By
    from selenium.webdriver.chrome.options import Options as ChromeOptions
    from selenium.webdriver.support import expected_conditions as EC
    from selenium.webdriver.support.ui import WebDriverWait
    SELENIUM_AVAILABLE = True
except Exception:  # pragma: no cover - optional dependency
    SELENIUM_AVAILABLE = False

from .engine import is_xpath


class SeleniumEngine:
    def __init__(self):
        if not SELENIUM_AVAILABLE:
            raise RuntimeError("Selenium is not installed. Install with: pip install .[automation-selenium]")
        self._driver: Optional["webdriver.Chrome"] = None

    @staticmethod
    def _by(selector: str):
        return (By.XPATH, selector) if is_xpath(selector) else (By.CSS_SELECTOR, selector)

    def start(
        self,
        headless: bool = True,
        user_data_dir: Optional[str] = None,
        executable_path: Optional[str] = None,
        disable_gpu: bool = True,
    ) -> None:
        options = ChromeOptions()
        options.add_argument("--no-first-run")
        options.add_argument("--no-default-browser-check")
        if headless:
            options.add_argument("--headless=new")
        if disable_gpu:
            options.add_argument("--disable-gpu")
        if user_data_dir:
            options.add_argument(f"--user-data-dir={user_data_dir}")
        # Selenium Manager finds a browser when no binary is given.
        if executable_path:
            options.binary_location = executable_path
        self._driver = webdriver.Chrome(options=options)

    def stop(self) -> None:
        if self._driver:
            self._driver.quit()
            self._driver = None

    def goto(self, url: str, timeout_ms: int = 30000) -> None:
        assert self._driver is not None
        self._driver.set_page_load_timeout(timeout_ms / 1000.0)
        self._driver.get(url)

    def wait_visible(self, selector: str, timeout_ms: int = 30000) -> None:
        assert self._driver is not None
        WebDriverWait(self._driver, timeout_ms / 1000.0).until(
            EC.visibility_of_element_located(self._by(selector))
        )

    def type(self, selector: str, value: str, clear: bool = True) -> None:
        assert self._driver is not None
        elem = self._driver.find_element(*self._by(selector))
        if clear:
            elem.clear()
        elem.send_keys(value)

    def click(self, selector: str, timeout_ms: int = 30000) -> None:
        assert self._driver is not None
        elem = WebDriverWait(self._driver, timeout_ms / 1000.0).until(
            EC.element_to_be_clickable(self._by(selector))
        )
        elem.click()

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)

    def evaluate(self, expression: str) -> Any:
        assert self._driver is not None
        return self._driver.execute_script(f"return ({expression});")
