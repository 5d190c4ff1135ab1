"""Browser automation for rotating a Netflix password.

This package holds the locator catalog, the per-stage action sequencer, the
session driver with its Playwright/Selenium engines, the DOM verifier, and the
runner that sequences login and update.
"""

from .types import ActionStep, RotationResult, RunState, Stage, VerificationOutcome
from .engine import AutomationEngine
from .locators import LocatorCatalog, default_catalog
from .runner import RotationRunner

__all__ = [
    'ActionStep',
    'AutomationEngine',
    'LocatorCatalog',
    'RotationResult',
    'RotationRunner',
    'RunState',
    'Stage',
    'VerificationOutcome',
    'default_catalog',
]
