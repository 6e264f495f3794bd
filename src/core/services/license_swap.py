"""License transfer orchestration.

Demotes the donor to Basic, promotes the recipient to Pro and re-reads both
users to confirm. Steps run strictly in order; a failure at any step stops
the run and nothing already applied is rolled back.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from loguru import logger

from core.config import AppSettings
from core.domain.models import AccountUser, LicenseTier, SwapResult, SwapRole
from core.errors import NullArgumentError, RemoteCallError, SelectionError, VerificationError
from core.interfaces.directory import AccountDirectory
from core.services.propagation import Sleep, SwapWaits, build_waits
from core.services.user_selection import MenuPrompt, select_user


class LicenseSwapper:
    """Moves one paid license from a donor to a recipient.

    The directory client is created once by the caller and passed in; this
    class never builds or closes it.
    """

    def __init__(
        self,
        client: AccountDirectory,
        settings: AppSettings | None = None,
        *,
        waits: SwapWaits | None = None,
        sleep: Sleep = time.sleep,
    ) -> None:
        self._client = client
        self._settings = settings or AppSettings()
        self._waits = waits or build_waits(self._settings, sleep=sleep)

    def check_status(self, user: AccountUser) -> LicenseTier:
        """Fetch the user's current tier from the API."""

        try:
            return self._client.get_user(user.id).tier
        except RemoteCallError as exc:
            logger.error("Failed to read license status of {}: {}", user.email, exc)
            raise

    def _set_tier(self, user: AccountUser, tier: LicenseTier, *, action: str) -> bool:
        try:
            applied = self._client.update_user(user.id, tier)
        except RemoteCallError as exc:
            logger.error("Failed to {} {}: {}", action, user.email, exc)
            raise
        if applied:
            logger.info("{} {}", action.capitalize(), user.email)
        else:
            logger.warning("Server did not apply: {} {}", action, user.email)
        return applied

    def swap(self, donor: AccountUser | None, recipient: AccountUser | None) -> SwapResult:
        """Run demote -> wait -> promote -> wait -> verify.

        Raises `VerificationError` unless the recipient ends up Pro and the
        donor ends up Basic.
        """

        if donor is None:
            raise NullArgumentError("donor")
        if recipient is None:
            raise NullArgumentError("recipient")
        if donor.id == recipient.id:
            raise SelectionError(
                f"{donor.email} cannot be both donor and recipient.",
                context={"user_id": donor.id},
            )

        donor_updated = self._set_tier(donor, LicenseTier.BASIC, action="remove license from donor")
        self._waits.after_donor.wait(
            lambda: self.check_status(donor) is LicenseTier.BASIC,
            label=f"{donor.email} to become Basic",
        )

        recipient_updated = self._set_tier(recipient, LicenseTier.PRO, action="add license to recipient")

        logger.info("Confirming license statuses, please wait")
        self._waits.before_verify.wait(
            lambda: self.check_status(recipient) is LicenseTier.PRO,
            label=f"{recipient.email} to become Pro",
        )
        recipient_tier = self.check_status(recipient)
        donor_tier = self.check_status(donor)
        logger.info("{} has {}", recipient.email, recipient_tier.label())
        logger.info("{} has {}", donor.email, donor_tier.label())

        result = SwapResult(
            donor=donor,
            recipient=recipient,
            donor_updated=donor_updated,
            recipient_updated=recipient_updated,
            donor_tier=donor_tier,
            recipient_tier=recipient_tier,
        )
        if not result.succeeded:
            raise VerificationError(
                "Failure to swap licenses",
                context={
                    "donor": donor.email,
                    "donor_tier": donor_tier.label(),
                    "recipient": recipient.email,
                    "recipient_tier": recipient_tier.label(),
                },
            )
        return result


@dataclass
class SwapHooks:
    """Optional callbacks for UI layers (menus, echo, confirmation)."""

    prompt: MenuPrompt | None = None
    echo: Callable[[str], None] | None = None
    confirm: Callable[[AccountUser, AccountUser], bool] | None = None


def transfer_license(
    client: AccountDirectory,
    *,
    donor_email: str | None = None,
    recipient_email: str | None = None,
    settings: AppSettings | None = None,
    hooks: SwapHooks | None = None,
    sleep: Sleep = time.sleep,
) -> SwapResult:
    """Fetch the account once, pick donor and recipient, then swap.

    Both selections use the same snapshot; nothing is re-fetched before the
    first mutation.
    """

    hooks = hooks or SwapHooks()
    users = client.list_users()
    logger.debug("Account snapshot holds {} user(s)", len(users))

    donor = select_user(users, SwapRole.DONOR, donor_email, prompt=hooks.prompt, echo=hooks.echo)
    recipient = select_user(
        users, SwapRole.RECIPIENT, recipient_email, prompt=hooks.prompt, echo=hooks.echo
    )

    if hooks.confirm is not None and not hooks.confirm(donor, recipient):
        raise SelectionError("Swap cancelled by operator.")

    return LicenseSwapper(client, settings, sleep=sleep).swap(donor, recipient)
