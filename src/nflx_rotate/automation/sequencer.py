"""Builds the ordered browser steps for each stage.

A sequence is fully materialized before it runs. Nothing in it branches on
the result of an earlier step; the driver applies it as one unit.
"""
from dataclasses import dataclass, field
from typing import Tuple

from ..config import DEFAULT_SETTLE_SECONDS
from ..core.models import Credentials
from .locators import LocatorCatalog
from .types import ActionStep, Click, Navigate, Sleep, TypeText, WaitVisible


@dataclass(frozen=True)
class LoginParams:
    login_route: str
    username: str
    password: str = field(repr=False)

    username_locator: str = ""
    password_locator: str = ""
    remember_locator: str = ""
    submit_locator: str = ""
    probe_locator: str = ""

    @classmethod
    def from_catalog(cls, catalog: LocatorCatalog, username: str, password: str) -> "LoginParams":
        return cls(
            login_route=catalog.login_route,
            username=username,
            password=password,
            username_locator=catalog.login.username,
            password_locator=catalog.login.password,
            remember_locator=catalog.login.remember,
            submit_locator=catalog.login.submit,
            probe_locator=catalog.login.probe,
        )


@dataclass(frozen=True)
class UpdateParams:
    old_password: str = field(repr=False)
    new_password: str = field(repr=False)

    # The "sign out of all devices" checkbox starts ticked. Forcing logout
    # means leaving it alone; not forcing it means clicking it off.
    force_logout_other_devices: bool = True

    old_password_locator: str = ""
    new_password_locator: str = ""
    confirm_password_locator: str = ""
    logout_locator: str = ""
    submit_locator: str = ""
    probe_locator: str = ""

    @property
    def clicks_logout_checkbox(self) -> bool:
        return not self.force_logout_other_devices

    @classmethod
    def from_catalog(
        cls,
        catalog: LocatorCatalog,
        old_password: str,
        new_password: str,
        force_logout_other_devices: bool = True,
    ) -> "UpdateParams":
        return cls(
            old_password=old_password,
            new_password=new_password,
            force_logout_other_devices=force_logout_other_devices,
            old_password_locator=catalog.update.old_password,
            new_password_locator=catalog.update.new_password,
            confirm_password_locator=catalog.update.confirm_password,
            logout_locator=catalog.update.logout_devices,
            submit_locator=catalog.update.submit,
            probe_locator=catalog.update.probe,
        )


def login_params(catalog: LocatorCatalog, credentials: Credentials) -> LoginParams:
    return LoginParams.from_catalog(catalog, credentials.username, credentials.old_password)


def update_params(catalog: LocatorCatalog, credentials: Credentials, force_logout: bool) -> UpdateParams:
    return UpdateParams.from_catalog(
        catalog, credentials.old_password, credentials.new_password, force_logout
    )


def build_login_actions(params: LoginParams, settle_seconds: float = DEFAULT_SETTLE_SECONDS) -> Tuple[ActionStep, ...]:
    """Return the steps that log into the site."""
    return (
        # Go to the page, wait for the input boxes to load,
        # and key in the login credentials.
        Navigate(params.login_route),
        WaitVisible(params.username_locator),
        WaitVisible(params.password_locator),
        TypeText(params.username_locator, params.username),
        TypeText(params.password_locator, params.password),

        Click(params.remember_locator),
        Click(params.submit_locator),

        # Let the post-submit navigation finish before verifying.
        Sleep(settle_seconds),
    )


def build_update_actions(params: UpdateParams, settle_seconds: float = DEFAULT_SETTLE_SECONDS) -> Tuple[ActionStep, ...]:
    """Return the steps that change the password on the settings page."""
    steps = [
        WaitVisible(params.old_password_locator),
        WaitVisible(params.new_password_locator),
        WaitVisible(params.confirm_password_locator),
        TypeText(params.old_password_locator, params.old_password),
        TypeText(params.new_password_locator, params.new_password),
        TypeText(params.confirm_password_locator, params.new_password),
    ]

    if params.clicks_logout_checkbox:
        steps.append(Click(params.logout_locator))

    steps.append(Click(params.submit_locator))
    steps.append(Sleep(settle_seconds))

    return tuple(steps)
