"""Error taxonomy for the swap tool.

Rules:
- Services log and re-raise; nothing here is retried or compensated.
- Only the CLI turns these into printed panels and exit codes.
- `code` is stable and machine-readable; `context` carries the details.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class SwapError(Exception):
    """Base error: a machine-readable `code`, a message and optional context."""

    code = "swap_error"

    def __init__(self, message: str, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = dict(context) if context else {}


class ConfigurationError(SwapError):
    code = "configuration_error"


class SelectionError(SwapError):
    code = "selection_error"


class EmptyUserListError(SelectionError):
    code = "empty_user_list"

    def __init__(self) -> None:
        super().__init__("User list cannot be an empty collection.")


class UserNotFoundError(SelectionError):
    code = "user_not_found"

    def __init__(self, email: str) -> None:
        super().__init__(
            f"Unable to select user using provided email of {email}",
            context={"email": email},
        )


class EligibilityError(SelectionError):
    code = "constraint_violated"


class NoEligibleUsersError(SelectionError):
    code = "no_eligible_users"


class InvalidChoiceError(SelectionError):
    code = "invalid_choice"


class NullArgumentError(SwapError):
    code = "null_argument"

    def __init__(self, name: str) -> None:
        super().__init__(f"Argument '{name}' must not be None.", context={"argument": name})


class RemoteCallError(SwapError):
    """Any failure from the account API: transport, auth or unexpected status."""

    code = "remote_call_failed"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        context: dict[str, Any] = {}
        if status_code is not None:
            context["status_code"] = status_code
        if body:
            context["body"] = body
        super().__init__(message, context=context)
        self.status_code = status_code


class VerificationError(SwapError):
    code = "swap_verification_failed"
