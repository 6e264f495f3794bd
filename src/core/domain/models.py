"""Domain models (Pydantic v2).

These models describe *what* an account member and a swap are, not how they
are fetched.

Notes:
- The Zoom wire format leaks in only through field aliases (`type` for the
  license tier).
- User types outside Basic/Pro/Corporate are kept as `LicenseTier.OTHER`;
  no swap role accepts them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class LicenseTier(int, Enum):
    """Zoom user type, using the integers the API exchanges.

    `OTHER` stands for any type this tool does not manage ("None" = 99,
    values added later).
    """

    OTHER = 0
    BASIC = 1
    PRO = 2
    CORPORATE = 3

    @property
    def is_licensed(self) -> bool:
        return self in (LicenseTier.PRO, LicenseTier.CORPORATE)

    def label(self) -> str:
        """Human readable name used in menus and logs."""

        return self.name.capitalize()


class SwapRole(str, Enum):
    """Side of the transfer a user is being selected for."""

    DONOR = "donor"
    RECIPIENT = "recipient"

    @property
    def eligible_tiers(self) -> frozenset[LicenseTier]:
        if self is SwapRole.DONOR:
            return frozenset({LicenseTier.PRO, LicenseTier.CORPORATE})
        return frozenset({LicenseTier.BASIC})

    def accepts(self, tier: LicenseTier) -> bool:
        return tier in self.eligible_tiers


class AccountUser(BaseModel):
    """Read-only snapshot of one account member.

    Fetched once per run; the email is the operator-facing alias and is not
    checked for uniqueness.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Remote user identifier.",
    )
    email: str = Field(
        ...,
        min_length=1,
        description="Login email of the user.",
    )
    tier: LicenseTier = Field(
        ...,
        alias="type",
        description="Current license tier.",
    )
    first_name: str | None = Field(default=None)
    last_name: str | None = Field(default=None)
    status: str | None = Field(
        default=None,
        description="Account status reported by the API (active, pending...).",
    )

    @field_validator("tier", mode="before")
    @classmethod
    def _unmanaged_type_is_other(cls, value: Any) -> Any:
        # Only integers are widened; anything else goes through normal validation.
        if isinstance(value, int) and not isinstance(value, (bool, LicenseTier)):
            if value not in LicenseTier._value2member_map_:
                return LicenseTier.OTHER
        return value

    @property
    def display_name(self) -> str:
        name = " ".join(part for part in (self.first_name, self.last_name) if part)
        return name or self.email


class SwapResult(BaseModel):
    """Outcome of one donor -> recipient transfer, after verification."""

    donor: AccountUser
    recipient: AccountUser
    donor_updated: bool = Field(
        ...,
        description="Whether the API accepted the donor demotion.",
    )
    recipient_updated: bool = Field(
        ...,
        description="Whether the API accepted the recipient promotion.",
    )
    donor_tier: LicenseTier = Field(
        ...,
        description="Donor tier observed during verification.",
    )
    recipient_tier: LicenseTier = Field(
        ...,
        description="Recipient tier observed during verification.",
    )

    @property
    def succeeded(self) -> bool:
        return self.donor_tier is LicenseTier.BASIC and self.recipient_tier is LicenseTier.PRO
