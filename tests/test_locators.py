from dataclasses import FrozenInstanceError

import pytest

from nflx_rotate.automation.locators import MOUNT_POINT, default_catalog, under_mount
from nflx_rotate.automation.types import Stage


def test_under_mount():
    assert under_mount("div/button") == f"{MOUNT_POINT}/div/button"
    assert under_mount("/div/button", mount="//main") == "//main/div/button"


def test_error_lists_are_ordered(catalog):
    assert len(catalog.errors_for(Stage.LOGIN)) == 3
    assert catalog.errors_for(Stage.UPDATE) == (
        '//*[@id="lbl-password"]/div',
        '//*[@id="lbl-pw_new"]/div',
        '//*[@id="lbl-pw_confirm"]/div',
    )
    # The generic banner is the least specific login error and also the probe.
    assert catalog.errors_for(Stage.LOGIN)[-1] == catalog.login.probe


def test_probes(catalog):
    assert catalog.probe_for(Stage.LOGIN) == catalog.login.probe
    assert catalog.probe_for(Stage.UPDATE) == catalog.update.probe
    assert catalog.login.probe.startswith(MOUNT_POINT)


def test_catalog_is_read_only(catalog):
    with pytest.raises(FrozenInstanceError):
        catalog.login_route = "https://example.test"


def test_custom_mount():
    catalog = default_catalog(mount="//main")
    assert catalog.login.submit.startswith("//main/")
    assert catalog.login.username == '//*[@id="id_userLoginId"]'
    assert catalog == default_catalog(mount="//main")
