"""
nflx-passwd-rotate - rotate a Netflix password by driving a real browser.
"""
import sys
import logging
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from . import RotateCLI
from ..config import (
    DEFAULT_SETTLE_SECONDS,
    DEFAULT_TMP_PREFIX,
    DEFAULT_WAIT_TIMEOUT_SECONDS,
    ENV_PREFIX,
    RotateConfig,
)
from ..core.generator import PasswordPolicy
from ..errors import InputError, RotateError
from ..automation.locators import default_catalog
from ..automation.runner import RotationRunner
from ..automation.session import create_engine

logger = logging.getLogger("nflx_rotate")


def configure_logging(console: Console, debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=debug)],
        force=True,
    )
    if debug:
        logger.debug("Debug mode enabled")


@click.command(context_settings={"auto_envvar_prefix": ENV_PREFIX})
@click.option("--username", default=None, help="Username to login with.")
@click.option("--old-password", default=None, help="Current password.")
@click.option("--new-password", default=None, help="Updated password.")
@click.option("--auto-generate", is_flag=True, default=False, help="Generate a new password.")
@click.option("--max-len", type=int, default=16, show_default=True, help="auto-generate: The maximum length of the password.")
@click.option("--num-digits", type=int, default=8, show_default=True, help="auto-generate: The number of digits the password should contain.")
@click.option("--num-symbols", type=int, default=8, show_default=True, help="auto-generate: The number of symbols the password should contain.")
@click.option("--no-upper", is_flag=True, default=False, help="auto-generate: Disable upper-case letters in the password.")
@click.option("--allow-repeat", is_flag=True, default=False, help="auto-generate: Allow repetitions in the password.")
@click.option("--tmp-dir", default=DEFAULT_TMP_PREFIX, show_default=True, help="Prefix of the temporary directory for user-data.")
@click.option(
    "--work-dir",
    type=click.Path(file_okay=False, dir_okay=True, writable=True),
    default=None,
    help="Parent directory for the temporary user-data directory",
)
@click.option("--browser-path", default=None, help="Browser executable to use instead of the auto-discovered one.")
@click.option("--engine", type=click.Choice(["playwright", "selenium"]), default="playwright", show_default=True)
@click.option("--headless/--no-headless", default=True, show_default=True, help="Run the browser without a window.")
@click.option("--dev-logout/--no-dev-logout", default=True, show_default=True, help="Force logout from all devices.")
@click.option("--settle", type=float, default=DEFAULT_SETTLE_SECONDS, show_default=True, help="Seconds to wait after submitting a form.")
@click.option("--timeout", type=float, default=DEFAULT_WAIT_TIMEOUT_SECONDS, show_default=True, help="Seconds to wait for page elements.")
@click.option("--out-file", type=click.Path(dir_okay=False), default=None, help="Write the new password to this file.")
@click.option("--copy", is_flag=True, default=False, help="Copy the new password to the clipboard.")
@click.option("--no-color", is_flag=True, default=False, help="Disable color output.")
@click.option("--debug/--no-debug", default=False, show_default=True, help="Enable debug output")
def cli(
    username: Optional[str],
    old_password: Optional[str],
    new_password: Optional[str],
    auto_generate: bool,
    max_len: int,
    num_digits: int,
    num_symbols: int,
    no_upper: bool,
    allow_repeat: bool,
    tmp_dir: str,
    work_dir: Optional[str],
    browser_path: Optional[str],
    engine: str,
    headless: bool,
    dev_logout: bool,
    settle: float,
    timeout: float,
    out_file: Optional[str],
    copy: bool,
    no_color: bool,
    debug: bool,
) -> None:
    """A CLI for rotating passwords on Netflix.

    Missing username or passwords are prompted for interactively.
    """
    config = RotateConfig(
        engine=engine,
        headless=headless,
        browser_path=browser_path,
        work_dir=work_dir,
        tmp_prefix=tmp_dir,
        settle_seconds=settle,
        wait_timeout_seconds=timeout,
        force_logout=dev_logout,
        no_color=no_color,
        debug=debug,
    )
    console = Console(no_color=no_color, highlight=False, emoji=False)
    configure_logging(console, debug)
    app = RotateCLI(config, console)

    policy = PasswordPolicy(
        max_len=max_len,
        num_digits=num_digits,
        num_symbols=num_symbols,
        no_upper=no_upper,
        allow_repeat=allow_repeat,
    )

    try:
        credentials = app.gather_credentials(
            username, old_password, new_password, auto_generate=auto_generate, policy=policy
        )
        runner = RotationRunner(create_engine(config.engine), config, default_catalog())
        result = runner.run(credentials)

        if out_file:
            app.write_password(out_file, result.new_password)
        if copy:
            app.copy_password(result.new_password)
    except RotateError as e:
        app.error(e)
        sys.exit(e.exit_code)

    app.ok("The password for Netflix was updated successfully!")


def main() -> None:
    """Entry point for the nflx-passwd-rotate CLI."""
    try:
        cli(standalone_mode=False)
    except click.UsageError as e:
        e.show()
        sys.exit(InputError.exit_code)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(InputError.exit_code)


if __name__ == "__main__":
    main()
