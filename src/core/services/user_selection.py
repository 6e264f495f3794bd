"""Donor / recipient selection.

Resolves one user from the account snapshot, either by exact email match or
through a numbered menu answered by the operator. Printing and reading input
are left to the caller through the `prompt` and `echo` callbacks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Sequence

from loguru import logger

from core.domain.models import AccountUser, LicenseTier, SwapRole
from core.errors import (
    EligibilityError,
    EmptyUserListError,
    InvalidChoiceError,
    NoEligibleUsersError,
    SelectionError,
    UserNotFoundError,
)

_MENU_TITLES = {
    SwapRole.DONOR: "Select existing license holder",
    SwapRole.RECIPIENT: "Select license recipient",
}


@dataclass(frozen=True)
class MenuEntry:
    """One selectable line; `index` is the position in the unfiltered list."""

    index: int
    user: AccountUser


@dataclass
class Menu:
    """Role-filtered view of the user snapshot offered to the operator."""

    role: SwapRole
    entries: list[MenuEntry] = field(default_factory=list)

    @property
    def title(self) -> str:
        return _MENU_TITLES[self.role]

    @property
    def indices(self) -> set[int]:
        return {entry.index for entry in self.entries}

    def render(self) -> str:
        lines = [self.title]
        lines.extend(f"{entry.index}:  {entry.user.email}" for entry in self.entries)
        return "\n".join(lines) + "\n"


MenuPrompt = Callable[[Menu], int]


def build_menu(users: Sequence[AccountUser], role: SwapRole) -> Menu:
    """Keep only users whose tier suits `role`, numbered by original position."""

    entries = [
        MenuEntry(index=index, user=user)
        for index, user in enumerate(users)
        if role.accepts(user.tier)
    ]
    return Menu(role=role, entries=entries)


def find_by_email(users: Sequence[AccountUser], email: str) -> AccountUser | None:
    return next((user for user in users if user.email == email), None)


def _check_eligibility(user: AccountUser, role: SwapRole) -> None:
    if role.accepts(user.tier):
        return
    if user.tier is LicenseTier.OTHER:
        reason = f"cannot be a {role.value} as their user type is not managed by this tool"
    elif role is SwapRole.DONOR:
        reason = "cannot be a donor as they do not currently have a license assigned to their account"
    else:
        reason = "cannot be a recipient as they already have a license assigned to their account"
    raise EligibilityError(
        f"{user.email} {reason}",
        context={"email": user.email, "role": role.value, "tier": user.tier.label()},
    )


def select_user(
    users: Sequence[AccountUser],
    role: SwapRole,
    email_hint: str | None = None,
    *,
    prompt: MenuPrompt | None = None,
    echo: Callable[[str], None] | None = None,
) -> AccountUser:
    """Pick the user that will play `role` in the swap.

    With `email_hint` the first exact email match is returned after checking
    its tier against the role. Without it the operator answers a menu through
    `prompt`; the answer must be one of the indices the menu displayed.
    """

    if not users:
        raise EmptyUserListError()

    if email_hint is not None:
        selected = find_by_email(users, email_hint)
        if selected is None:
            raise UserNotFoundError(email_hint)
        _check_eligibility(selected, role)
        logger.debug("Resolved {} {} from email hint", role.value, selected.email)
        return selected

    menu = build_menu(users, role)
    if not menu.entries:
        raise NoEligibleUsersError(
            f"No user in the account is eligible to be a {role.value}.",
            context={"role": role.value},
        )
    if prompt is None:
        raise SelectionError(f"Interactive {role.value} selection needs a prompt.")

    choice = prompt(menu)
    if choice not in menu.indices:
        raise InvalidChoiceError(
            f"{choice} is not one of the listed {role.value} options.",
            context={"choice": choice, "allowed": sorted(menu.indices)},
        )

    selected = users[choice]
    if echo is not None:
        echo(f"You've selected {selected.email} as {role.value}")
    return selected
