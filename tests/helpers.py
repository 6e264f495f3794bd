"""In-memory stand-ins shared by the test modules."""

from __future__ import annotations

from core.domain.models import AccountUser, LicenseTier


def make_user(user_id: str, email: str, tier: LicenseTier) -> AccountUser:
    return AccountUser(id=user_id, email=email, tier=tier)


class FakeDirectory:
    """AccountDirectory backed by a dict; records every call in order.

    `update_results` forces the boolean returned for a user id (a False
    result leaves the stored tier untouched). `errors` makes calls for a
    user id raise.
    """

    def __init__(self, users: list[AccountUser]) -> None:
        self.users = {user.id: user for user in users}
        self.order = [user.id for user in users]
        self.calls: list[tuple] = []
        self.update_results: dict[str, bool] = {}
        self.errors: dict[str, Exception] = {}
        self.closed = False

    def __enter__(self) -> "FakeDirectory":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.closed = True

    def list_users(self) -> list[AccountUser]:
        self.calls.append(("list_users",))
        return [self.users[user_id] for user_id in self.order]

    def get_user(self, user_id: str) -> AccountUser:
        self.calls.append(("get_user", user_id))
        return self.users[user_id]

    def update_user(self, user_id: str, tier: LicenseTier) -> bool:
        self.calls.append(("update_user", user_id, tier))
        if user_id in self.errors:
            raise self.errors[user_id]
        applied = self.update_results.get(user_id, True)
        if applied:
            self.users[user_id] = self.users[user_id].model_copy(update={"tier": tier})
        return applied

    @property
    def updates(self) -> list[tuple]:
        return [call for call in self.calls if call[0] == "update_user"]
