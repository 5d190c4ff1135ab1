"""
nflx-passwd-rotate CLI - input gathering and output for a rotation run.
"""
from typing import Optional
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from ..config import RotateConfig
from ..core.generator import PasswordPolicy, generate_password
from ..core.models import Credentials
from ..errors import InputError, OutputWriteError, RotateError

logger = logging.getLogger("nflx_rotate")


class RotateCLI:
    """Collects credentials before a run and reports the result after it."""

    def __init__(self, config: RotateConfig, console: Optional[Console] = None):
        self.config = config
        self.console = console or Console(no_color=config.no_color, highlight=False, emoji=False)
        self.debug = config.debug

    def info(self, message: str) -> None:
        self.console.print(f"[magenta]INF:[/] {escape(message)}")

    def warn(self, message: str) -> None:
        self.console.print(f"[yellow]WRN:[/] {escape(message)}")

    def ok(self, message: str) -> None:
        self.console.print(f"[green]✓[/] {escape(message)}")

    def error(self, err: RotateError) -> None:
        self.console.print(f"[red]ERR:[/] {escape(describe(err))}")
        if err.cause is not None:
            self.console.print(f"[red]ERR:[/] {escape(str(err.cause))}")
        if self.debug and err.cause is not None:
            logger.debug("Underlying error", exc_info=err.cause)

    def _prompt(self, text: str, hide_input: bool) -> str:
        try:
            return click.prompt(text, hide_input=hide_input, show_default=False)
        except click.Abort as e:
            raise InputError("Unable to read the input string", cause=e)

    def gather_credentials(
        self,
        username: Optional[str],
        old_password: Optional[str],
        new_password: Optional[str],
        auto_generate: bool = False,
        policy: Optional[PasswordPolicy] = None,
    ) -> Credentials:
        """Fill in whatever the options left out.

        Generation runs first, so a bad policy fails before any prompt or
        browser. A missing new password is asked twice and must match.
        """
        generated = False
        if auto_generate:
            if new_password:
                self.warn("Conflicting options -- `new-password' (non-empty) and `auto-generate'; choosing the latter.")
            new_password = generate_password(policy or PasswordPolicy())
            generated = True
            self.info(f'Generated Password: "{new_password}".')

        if not username:
            username = self._prompt("Netflix Username", hide_input=False).strip()
            if not username:
                raise InputError("A username is required")

        if not old_password:
            old_password = self._prompt(f"Netflix Password (for {username}, current)", hide_input=True)

        if not new_password:
            new_password = self._prompt(f"Netflix Password (for {username}, updated)", hide_input=True)
            confirm = self._prompt(f"Netflix Password (for {username}, confirm)", hide_input=True)
            if confirm != new_password:
                raise InputError("Passwords do not match")

        return Credentials(
            username=username,
            old_password=old_password,
            new_password=new_password,
            generated=generated,
        )

    def write_password(self, out_file: str, password: str) -> Path:
        """Write the password to ``out_file`` as a single line."""
        output_path = Path(out_file).expanduser()
        self.info(f'Writing the new password to: "{output_path}".')
        try:
            with output_path.open("w", encoding="utf-8") as f:
                f.write(password + "\n")
        except OSError as e:
            raise OutputWriteError("Unable to write password to file", cause=e)
        return output_path

    def copy_password(self, password: str) -> None:
        """Copy the password to the clipboard."""
        import pyperclip
        try:
            pyperclip.copy(password)
        except pyperclip.PyperclipException as e:
            # The password is already applied; a missing clipboard is not fatal.
            self.warn(f"Unable to copy the password to the clipboard: {e}")
            return
        self.ok("Copied the new password to the clipboard")


_MESSAGES = {
    "session_setup": "Unable to create a temporary directory.",
    "browser_launch": "Unable to start the browser.",
    "browser_execution": "Browser execution failed.",
    "verification": "Netflix verification failed.",
    "login_rejected": "Netflix login failed.",
    "update_rejected": "Password update failed.",
    "input": "Unable to read the input.",
    "generation": "Unable to auto-generate a new password.",
    "write": "Unable to write password to file.",
}


def describe(err: RotateError) -> str:
    """One human-readable line per error kind."""
    headline = _MESSAGES.get(err.kind, "Password rotation failed.")
    reason = getattr(err, "reason", None)
    if err.kind in ("login_rejected", "update_rejected"):
        return f"{headline} {reason or 'Unrecognized failure.'}"
    if err.kind in ("input", "generation"):
        return f"{headline} {err.message}."
    return headline
