"""CLI UI components (Rich).

Tables and panels shared by the swap command, kept apart from the command
logic itself.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import LicenseTier, SwapResult
from core.errors import SwapError
from core.services.user_selection import Menu


def print_banner(console: Console) -> None:
    """Print the welcome banner (interactive mode only)."""

    title = Text("ZOOM SEAT SWAP", style="bold cyan")
    subtitle = Text("Move a paid license from one user to another", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_menu_table(menu: Menu) -> Table:
    table = Table(title=menu.title)
    table.add_column("#", style="bright_green", justify="right", no_wrap=True)
    table.add_column("Email", style="white")
    table.add_column("Name", style="dim")
    table.add_column("License", style="cyan")
    for entry in menu.entries:
        table.add_row(
            str(entry.index),
            entry.user.email,
            entry.user.display_name,
            entry.user.tier.label(),
        )
    return table


def _tier_cell(observed: LicenseTier, expected: LicenseTier) -> Text:
    style = "green" if observed is expected else "bold red"
    return Text(observed.label(), style=style)


def build_result_table(result: SwapResult) -> Table:
    """Verification summary: one row per side of the swap."""

    table = Table(title="License swap")
    table.add_column("Role", style="bright_green", no_wrap=True)
    table.add_column("Email", style="white")
    table.add_column("Update accepted", style="white")
    table.add_column("License now", style="white")
    table.add_row(
        "donor",
        result.donor.email,
        "yes" if result.donor_updated else "no",
        _tier_cell(result.donor_tier, LicenseTier.BASIC),
    )
    table.add_row(
        "recipient",
        result.recipient.email,
        "yes" if result.recipient_updated else "no",
        _tier_cell(result.recipient_tier, LicenseTier.PRO),
    )
    return table


def build_error_panel(error: SwapError) -> Panel:
    body = Text(error.message + "\n", style="white")
    for key, value in error.context.items():
        body.append(f"\n{key}: ", style="bold")
        body.append(str(value))
    return Panel(body, title=Text(error.code, style="bold red"), border_style="red")
