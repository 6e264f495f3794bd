"""Typer entry point for zoom-seat-swap.

Usage:
    zoom-seat-swap -k KEY -s SECRET                       # interactive menus
    zoom-seat-swap -k KEY -s SECRET -d a@x.com -r b@x.com  # non-interactive
"""

from __future__ import annotations

from typing import Optional

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console

from adapters.zoom_auth import require_credentials
from adapters.zoom_client import ZoomClient
from cli.logging_setup import configure_logging
from cli.ui_components import (
    build_error_panel,
    build_menu_table,
    build_result_table,
    print_banner,
)
from core.config import AppSettings, WaitMode
from core.domain.models import AccountUser
from core.errors import ConfigurationError, SwapError
from core.services.license_swap import SwapHooks, transfer_license
from core.services.user_selection import Menu

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Reassign a paid Zoom license from a donor user to a recipient user.",
)

_console = Console()
_err_console = Console(stderr=True)

EXIT_FAILURE = 1
EXIT_CONFIGURATION = 2


def build_zoom_client(api_key: str, api_secret: str, settings: AppSettings) -> ZoomClient:
    return ZoomClient(api_key, api_secret, settings)


def load_settings(wait_mode: WaitMode | None = None) -> AppSettings:
    """Read `ZOOM_SWAP_*` settings; invalid values become a ConfigurationError."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        problems = {
            ".".join(str(part) for part in error["loc"]): error["msg"] for error in exc.errors()
        }
        raise ConfigurationError("Invalid ZOOM_SWAP_* settings.", context=problems) from exc
    if wait_mode is not None:
        settings = settings.model_copy(update={"wait_mode": wait_mode})
    return settings


def _prompt_menu(menu: Menu) -> int:
    _console.print(build_menu_table(menu))
    return typer.prompt(menu.title, type=int)


def _confirm_swap(donor: AccountUser, recipient: AccountUser) -> bool:
    return typer.confirm(
        f"Move the license of {donor.email} to {recipient.email}?",
        default=False,
    )


def _fail(error: SwapError, code: int) -> typer.Exit:
    _err_console.print(build_error_panel(error))
    return typer.Exit(code=code)


@app.command()
def swap(
    secret: Optional[str] = typer.Option(
        None, "-s", "--secret", metavar="SECRET", help="Your Zoom API secret.", show_default=False
    ),
    key: Optional[str] = typer.Option(
        None, "-k", "--key", metavar="KEY", help="Your Zoom API key.", show_default=False
    ),
    donor: Optional[str] = typer.Option(
        None, "-d", "--donor", metavar="EMAIL", help="Email of the current license holder."
    ),
    recipient: Optional[str] = typer.Option(
        None, "-r", "--recipient", metavar="EMAIL", help="Email of the user receiving the license."
    ),
    wait_mode: Optional[WaitMode] = typer.Option(
        None,
        "--wait-mode",
        case_sensitive=False,
        help="fixed: pause 4s/3s between steps. poll: re-check with backoff.",
    ),
    yes: bool = typer.Option(False, "-y", "--yes", help="Skip the interactive confirmation."),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log every API call."),
) -> None:
    """Swap a license from DONOR to RECIPIENT and verify the result."""

    configure_logging(_err_console, verbose=verbose)

    try:
        api_key, api_secret = require_credentials(key, secret)
    except ConfigurationError as exc:
        raise _fail(exc, EXIT_CONFIGURATION) from exc

    try:
        settings = load_settings(wait_mode)
    except ConfigurationError as exc:
        raise _fail(exc, EXIT_CONFIGURATION) from exc

    interactive = not (donor and recipient)
    hooks = SwapHooks()
    if interactive:
        if donor or recipient:
            logger.warning("Both --donor and --recipient are required to skip the menus; ignoring the one given.")
        print_banner(_console)
        hooks = SwapHooks(
            prompt=_prompt_menu,
            echo=_console.print,
            confirm=None if yes else _confirm_swap,
        )

    try:
        with build_zoom_client(api_key, api_secret, settings) as client:
            result = transfer_license(
                client,
                donor_email=None if interactive else donor,
                recipient_email=None if interactive else recipient,
                settings=settings,
                hooks=hooks,
            )
    except ConfigurationError as exc:
        raise _fail(exc, EXIT_CONFIGURATION) from exc
    except SwapError as exc:
        raise _fail(exc, EXIT_FAILURE) from exc

    _console.print(build_result_table(result))
    _console.print("------------FIN--------------")


def run() -> None:
    """Console-script entry point."""

    app()


if __name__ == "__main__":
    run()
