# SPDX-License-Identifier: MIT

from typing import Optional

from timesheet.model.user import Account, User
from timesheet.repository.fixture import load_fixture_accounts


class UserRepository:
    def __init__(self) -> None:
        self._accounts: Optional[list[Account]] = None

    @property
    def accounts(self) -> list[Account]:
        if self._accounts is None:
            self._accounts = load_fixture_accounts()
        return self._accounts

    def get_accounts(self) -> list[Account]:
        return [Account(**account) for account in self.accounts]

    def get_all_users(self) -> list[User]:
        return [
            {
                "id": account["id"],
                "name": account["name"],
                "email": account["email"],
                "role": account["role"],
            }
            for account in self.accounts
        ]

    def get_employees(self) -> list[User]:
        return [user for user in self.get_all_users() if user["role"] == "employee"]

    def get_user(self, id: str) -> Optional[User]:
        for user in self.get_all_users():
            if user["id"] == id:
                return user
        return None


USER_REPO = UserRepository()
