"""Decides from the live DOM whether a stage worked, and why not.

Each stage has one probe element. :func:`interpret` is the single place
that maps the probe's presence to success for a stage: the login probe is
the login failure banner, so login succeeds when it is absent; the update
probe is the confirmation banner, so the update succeeds when it is present.
"""
from __future__ import annotations

import json
import logging
from typing import Optional

from ..errors import VerificationError
from .locators import LocatorCatalog
from .types import Stage, VerificationOutcome

logger = logging.getLogger("nflx_rotate")


NOT_AVAILABLE = "N/A."

# Which probe presence means success, per stage.
SUCCESS_WHEN_PRESENT = {
    Stage.LOGIN: False,
    Stage.UPDATE: True,
}


def _node_expression(xpath: str) -> str:
    return (
        "document.evaluate("
        f"{json.dumps(xpath)}, document, null, XPathResult.FIRST_ORDERED_NODE_TYPE, null"
        ").singleNodeValue"
    )


def presence_script(xpath: str) -> str:
    return f"{_node_expression(xpath)} !== null"


def text_script(xpath: str) -> str:
    return f"{_node_expression(xpath)}.innerText"


def verify(engine, probe_locator: str) -> bool:
    """Return whether ``probe_locator`` is present in the DOM.

    Raises:
        VerificationError: If the script fails or returns a non-boolean.
    """
    try:
        result = engine.evaluate(presence_script(probe_locator))
    except Exception as e:
        raise VerificationError("DOM probe failed to evaluate", cause=e)
    if not isinstance(result, bool):
        raise VerificationError(f"DOM probe returned {result!r} instead of a boolean")
    logger.debug(f"[verifier] probe {probe_locator} present={result}")
    return result


def interpret(stage: Stage, probe_present: bool, failure_text: Optional[str] = None) -> VerificationOutcome:
    succeeded = probe_present == SUCCESS_WHEN_PRESENT[stage]
    return VerificationOutcome(
        stage=stage,
        succeeded=succeeded,
        failure_text=None if succeeded else failure_text,
    )


def extract_text(engine, xpath: str) -> str:
    try:
        text = engine.evaluate(text_script(xpath))
    except Exception:
        logger.debug(f"[verifier] could not read text of {xpath}")
        return NOT_AVAILABLE
    if not isinstance(text, str):
        return NOT_AVAILABLE
    return text.strip() or NOT_AVAILABLE


def diagnose_failure(engine, catalog: LocatorCatalog, stage: Stage) -> Optional[str]:
    """Return the text of the first known error element on the page.

    Error locators are tried in the catalog's priority order and the first
    present one wins, even if others are present too. ``None`` means no known
    error is showing; it does not mean the stage succeeded.
    """
    for xpath in catalog.errors_for(stage):
        try:
            present = engine.evaluate(presence_script(xpath)) is True
        except Exception:
            present = False
        if present:
            logger.debug(f"[verifier] {stage.value} error element matched: {xpath}")
            return extract_text(engine, xpath)
    logger.debug(f"[verifier] no known {stage.value} error element present")
    return None


class DomVerifier:
    """Verifies stages against one catalog."""

    def __init__(self, catalog: LocatorCatalog):
        self.catalog = catalog

    def check(self, engine, stage: Stage) -> VerificationOutcome:
        present = verify(engine, self.catalog.probe_for(stage))
        outcome = interpret(stage, present)
        if outcome.succeeded:
            return outcome
        return interpret(stage, present, diagnose_failure(engine, self.catalog, stage))
