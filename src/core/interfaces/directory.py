"""Contract for the remote account directory.

Why a Protocol:
- Structural typing: `ZoomClient` satisfies it without a common base class.
- Tests use an in-memory directory with the same three methods.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import AccountUser, LicenseTier


@runtime_checkable
class AccountDirectory(Protocol):
    """Minimal set of calls the swap needs from the account API.

    Implementations raise `RemoteCallError` for transport, auth or protocol
    failures.
    """

    def list_users(self) -> list[AccountUser]:
        """Return every member of the account."""

        ...

    def get_user(self, user_id: str) -> AccountUser:
        """Return the current record of one member."""

        ...

    def update_user(self, user_id: str, tier: LicenseTier) -> bool:
        """Set the member's license tier; True when the server applied it."""

        ...
