"""Engine adapters, exercised against mocked browser libraries."""
from unittest.mock import MagicMock, patch

import pytest

from nflx_rotate.automation import playwright_engine
from nflx_rotate.automation.engine import is_xpath
from nflx_rotate.automation.playwright_engine import PlaywrightEngine


def test_is_xpath():
    assert is_xpath('//*[@id="pw_new"]')
    assert is_xpath("(//button)[1]")
    assert not is_xpath("input#password")


@pytest.fixture
def playwright():
    pw = MagicMock()
    context = pw.chromium.launch_persistent_context.return_value
    page = MagicMock()
    context.pages = [page]
    with patch.object(playwright_engine, "sync_playwright") as factory:
        factory.return_value.start.return_value = pw
        yield pw, context, page


def test_playwright_persistent_profile(playwright):
    pw, context, page = playwright
    engine = PlaywrightEngine()

    engine.start(headless=True, user_data_dir="/tmp/profile", executable_path="/usr/bin/chromium")

    pw.chromium.launch_persistent_context.assert_called_once_with(
        "/tmp/profile",
        headless=True,
        args=["--no-first-run", "--no-default-browser-check", "--disable-gpu"],
        executable_path="/usr/bin/chromium",
    )
    engine.stop()
    context.close.assert_called_once()
    pw.stop.assert_called_once()


def test_playwright_auto_discovers_browser(playwright):
    pw, _, _ = playwright
    engine = PlaywrightEngine()

    engine.start(user_data_dir="/tmp/profile", disable_gpu=False)

    kwargs = pw.chromium.launch_persistent_context.call_args.kwargs
    assert "executable_path" not in kwargs
    assert "--disable-gpu" not in kwargs["args"]


def test_playwright_actions_use_xpath_engine(playwright):
    _, _, page = playwright
    engine = PlaywrightEngine()
    engine.start(user_data_dir="/tmp/profile")

    engine.wait_visible('//*[@id="id_password"]', timeout_ms=500)
    engine.click("button.submit", timeout_ms=500)
    engine.type('//*[@id="id_password"]', "secret1")
    engine.sleep(4)

    page.wait_for_selector.assert_called_once_with('xpath=//*[@id="id_password"]', state="visible", timeout=500)
    page.click.assert_called_once_with("button.submit", timeout=500)
    page.locator.return_value.press_sequentially.assert_called_once_with("secret1")
    page.wait_for_timeout.assert_called_once_with(4000)


def test_selenium_options():
    pytest.importorskip("selenium")
    from nflx_rotate.automation import selenium_engine

    with patch.object(selenium_engine.webdriver, "Chrome") as chrome:
        engine = selenium_engine.SeleniumEngine()
        engine.start(headless=True, user_data_dir="/tmp/profile", executable_path="/usr/bin/chromium")

    options = chrome.call_args.kwargs["options"]
    assert "--headless=new" in options.arguments
    assert "--disable-gpu" in options.arguments
    assert "--user-data-dir=/tmp/profile" in options.arguments
    assert options.binary_location == "/usr/bin/chromium"

    engine.evaluate("1 === 1")
    chrome.return_value.execute_script.assert_called_once_with("return (1 === 1);")
