"""Fixed element locators for the Netflix login and password pages.

All locators are XPath expressions. Most are relative to the page's mount
point; a few target stable element ids directly. They track the site's DOM
and must be updated when the site changes its markup.
"""
from dataclasses import dataclass
from typing import Tuple

from .types import Stage


LOGIN_ROUTE = "https://netflix.com/password"

MOUNT_POINT = '//*[@id="appMountPoint"]'


def under_mount(path: str, mount: str = MOUNT_POINT) -> str:
    """Compose the mount point locator with a relative path."""
    return f"{mount}/{path.lstrip('/')}"


@dataclass(frozen=True)
class LoginLocators:
    username: str
    password: str
    remember: str
    submit: str
    probe: str


@dataclass(frozen=True)
class UpdateLocators:
    old_password: str
    new_password: str
    confirm_password: str
    logout_devices: str
    submit: str
    probe: str


@dataclass(frozen=True)
class LocatorCatalog:
    login_route: str
    login: LoginLocators
    update: UpdateLocators
    # Ordered by specificity; the first present locator is reported.
    login_errors: Tuple[str, ...]
    update_errors: Tuple[str, ...]

    def errors_for(self, stage: Stage) -> Tuple[str, ...]:
        if stage == Stage.LOGIN:
            return self.login_errors
        if stage == Stage.UPDATE:
            return self.update_errors
        raise ValueError(f"Unknown stage: {stage}")

    def probe_for(self, stage: Stage) -> str:
        if stage == Stage.LOGIN:
            return self.login.probe
        if stage == Stage.UPDATE:
            return self.update.probe
        raise ValueError(f"Unknown stage: {stage}")


def default_catalog(mount: str = MOUNT_POINT, login_route: str = LOGIN_ROUTE) -> LocatorCatalog:
    """Build the catalog for the current Netflix markup."""
    login_form = "div/div[3]/div/div/div[1]"
    login_failure = under_mount(f"{login_form}/div/div[2]", mount)

    login = LoginLocators(
        username='//*[@id="id_userLoginId"]',
        password='//*[@id="id_password"]',
        remember=under_mount(f"{login_form}/form/div[3]/div/label", mount),
        submit=under_mount(f"{login_form}/form/button", mount),
        probe=login_failure,
    )

    update = UpdateLocators(
        old_password='//*[@id="password"]',
        new_password='//*[@id="pw_new"]',
        confirm_password='//*[@id="pw_confirm"]',
        logout_devices='//*[@id="bxid_signout_devices_signout_devices"]',
        submit=under_mount("div/div/div[2]/div/div/div/button[1]", mount),
        probe=under_mount("div/div/div[2]/div/div/div[1]/div/div[2]", mount),
    )

    return LocatorCatalog(
        login_route=login_route,
        login=login,
        update=update,
        login_errors=(
            under_mount(f"{login_form}/form/div[1]/div[2]", mount),
            under_mount(f"{login_form}/form/div[2]/div[2]", mount),
            login_failure,
        ),
        update_errors=(
            '//*[@id="lbl-password"]/div',
            '//*[@id="lbl-pw_new"]/div',
            '//*[@id="lbl-pw_confirm"]/div',
        ),
    )
